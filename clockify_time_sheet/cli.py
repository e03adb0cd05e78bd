import os

import click
from yaml import load
try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader

from clockify_time_sheet.clockify.commands import clockify
from clockify_time_sheet.timesheet.commands import timesheet
from clockify_time_sheet.context import TimeSheetContext


@click.group(context_settings={'auto_envvar_prefix': 'CLOCKIFY_TIME_SHEET'})
@click.option('--config', default='config.yaml', type=click.Path())
@click.pass_context
def entry_point(ctx, config):
    settings = {}
    if os.path.exists(config):
        with open(config, 'r') as f:
            settings = load(f.read(), Loader=Loader) or {}
        ctx.default_map = settings
    ctx.obj = TimeSheetContext(settings)


entry_point.add_command(clockify)
entry_point.add_command(timesheet)


if __name__ == '__main__':
    entry_point()
