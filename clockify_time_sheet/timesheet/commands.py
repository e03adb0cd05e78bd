import os
from datetime import datetime

import click

from clockify_time_sheet.clockify.api import ClockifyAPI
from clockify_time_sheet.clockify.commands import clockify_options, make_api
from clockify_time_sheet.common import MonthRange, validate_month
from clockify_time_sheet.context import pass_time_sheet
from clockify_time_sheet.errors import TimeSheetError
from .transform import consolidate
from .writers import TimeSheetWriter


class TimeSheetExporter:

    def __init__(self, api: ClockifyAPI, delimiter=',', split_days=True):
        self._api = api
        self._delimiter = delimiter
        self._split_days = split_days

    def get_rows(self, year: int, month: int):
        entries = validate_month(self._api.iterate_time_entries(year, month), year, month)
        return consolidate(entries, split_days=self._split_days)

    def export(self, year: int, month: int, path) -> int:
        # rows are complete before the file is opened, a failing month leaves no file behind
        rows = self.get_rows(year, month)
        with TimeSheetWriter(path, delimiter=self._delimiter) as writer:
            for row in rows:
                writer.write(row)
        return len(rows)


def validate_delimiter(ctx, param, value):
    if len(value) != 1:
        raise click.BadParameter(f'must be a single character, got {value!r}')
    return value


pass_exporter = click.make_pass_decorator(TimeSheetExporter)


@click.option('--start-date', '-s', help="Start month in YYYY-mm format", required=True, default=datetime.now().strftime("%Y-%m"))
@click.option('--end-date', '-e', help="End month in YYYY-mm format", required=True, default=datetime.now().strftime("%Y-%m"))
@click.option('--output', '-o', help='Time sheets output path, "-" for stdout', required=True, default='reports/timesheet', type=click.Path(exists=False, file_okay=False, dir_okay=True, allow_dash=True))
@click.command()
@pass_exporter
def export(exporter: TimeSheetExporter, start_date, end_date, output):
    for (year, month) in MonthRange(start_date, end_date):
        click.echo(f'exporting: {year}-{month:02d}', err=True)
        if output == '-':
            path = '-'
        else:
            os.makedirs(output, exist_ok=True)
            path = f'{output}/{year}-{month:02d}.csv'
        try:
            count = exporter.export(year, month, path)
        except TimeSheetError as e:
            raise click.ClickException(f'{year}-{month:02d}: {e}') from e
        click.echo(f'{count} rows written to {path}', err=True)


@click.group()
@clockify_options
@click.option('--delimiter', '-d', help='Field delimiter of the time sheet', default=',', show_default=True, callback=validate_delimiter)
@click.option('--split-days/--no-split-days', help='Never merge entries of different days', default=True, show_default=True)
@pass_time_sheet
@click.pass_context
def timesheet(ctx, time_sheet, api_key, workspace_id, user_id, project_id, delimiter, split_days):
    api = make_api(time_sheet, api_key, workspace_id, user_id, project_id)
    ctx.obj = TimeSheetExporter(api, delimiter=delimiter, split_days=split_days)


timesheet.add_command(export)
