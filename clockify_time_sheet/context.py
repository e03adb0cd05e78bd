import click


class ClockifySettings:

    def __init__(self, config):
        self._config = config or {}

    @property
    def api_key(self) -> str or None:
        return self._config.get('api_key')

    @property
    def workspace_id(self) -> str or None:
        return self._config.get('workspace_id')

    @property
    def user_id(self) -> str or None:
        return self._config.get('user_id')

    @property
    def project_id(self) -> str or None:
        return self._config.get('project_id')


class TimeSheetContext:

    def __init__(self, config=None):
        self._config = config or {}
        self._clockify = ClockifySettings(self._config.get('clockify'))

    @property
    def clockify(self) -> ClockifySettings:
        return self._clockify


pass_time_sheet = click.make_pass_decorator(TimeSheetContext)
