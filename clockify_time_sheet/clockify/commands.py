import os
from datetime import datetime

import click

from clockify_time_sheet.common import MonthRange
from clockify_time_sheet.context import pass_time_sheet, TimeSheetContext
from clockify_time_sheet.errors import TimeSheetError
from .api import ClockifyAPI
from .writers import RawEntryWriter


def clockify_options(f):
    f = click.option('--project-id', help="Clockify Project ID", envvar='CLOCKIFY_PROJECT_ID')(f)
    f = click.option('--user-id', help="Clockify User ID", envvar='CLOCKIFY_USER_ID')(f)
    f = click.option('--workspace-id', help="Clockify Workspace ID", envvar='CLOCKIFY_WORKSPACE_ID')(f)
    f = click.option('--api-key', help="Clockify API Key", envvar='CLOCKIFY_API_KEY')(f)
    return f


def make_api(time_sheet: TimeSheetContext, api_key, workspace_id, user_id, project_id) -> ClockifyAPI:
    settings = time_sheet.clockify
    values = {
        'api-key': api_key or settings.api_key,
        'workspace-id': workspace_id or settings.workspace_id,
        'user-id': user_id or settings.user_id,
        'project-id': project_id or settings.project_id,
    }
    missing = [name for (name, value) in values.items() if not value]
    if missing:
        raise click.UsageError(f'missing Clockify settings: {", ".join("--" + name for name in missing)}')
    return ClockifyAPI(values['api-key'], values['workspace-id'], values['user-id'], values['project-id'])


pass_clockify_api = click.make_pass_decorator(ClockifyAPI)


@click.command()
@pass_clockify_api
def tasks(api: ClockifyAPI):
    try:
        for (task_id, name) in api.get_tasks().items():
            click.echo(f'{task_id}\t{name}')
    except TimeSheetError as e:
        raise click.ClickException(str(e)) from e


@click.option('--start-date', '-s', help="Start month in YYYY-mm format", required=True, default=datetime.now().strftime("%Y-%m"))
@click.option('--end-date', '-e', help="End month in YYYY-mm format", required=True, default=datetime.now().strftime("%Y-%m"))
@click.option('--output', '-o', help='Raw entries output path', required=True, default='reports/clockify', type=click.Path(exists=False, file_okay=False, dir_okay=True))
@click.command()
@pass_clockify_api
def fetch(api: ClockifyAPI, start_date, end_date, output):
    click.echo(f"fetching clockify entries for range: [{start_date}; {end_date}]")
    for (year, month) in MonthRange(start_date, end_date):
        click.echo(f'fetching: {year}-{month:02d}')
        try:
            entries = list(api.iterate_time_entries(year, month))
        except TimeSheetError as e:
            raise click.ClickException(f'{year}-{month:02d}: {e}') from e
        base_path = f'{output}/{year}'
        os.makedirs(base_path, exist_ok=True)
        with RawEntryWriter(f'{base_path}/{month:02d}.csv') as writer:
            for entry in entries:
                writer.write(entry)
    else:
        click.echo('fetching completed')


@click.group()
@clockify_options
@pass_time_sheet
@click.pass_context
def clockify(ctx, time_sheet, api_key, workspace_id, user_id, project_id):
    ctx.obj = make_api(time_sheet, api_key, workspace_id, user_id, project_id)


clockify.add_command(tasks)
clockify.add_command(fetch)
