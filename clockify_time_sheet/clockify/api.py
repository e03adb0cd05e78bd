import datetime

import click
import requests

from clockify_time_sheet.common import month_bounds
from clockify_time_sheet.errors import ClockifyError
from clockify_time_sheet.timesheet.model import RawEntry

CLOCKIFY_API_BASE = 'https://api.clockify.me/api/v1'


def parse_timestamp(value: str) -> datetime.datetime:
    if value.endswith('Z'):
        value = value[:-1] + '+00:00'
    return datetime.datetime.fromisoformat(value).astimezone()


def format_timestamp(value: datetime.datetime) -> str:
    return value.astimezone(datetime.timezone.utc).strftime('%Y-%m-%dT%H:%M:%SZ')


class ClockifyAPI:

    def __init__(self, api_key, workspace_id, user_id, project_id, base_url=CLOCKIFY_API_BASE, page_size=50, timeout=30):
        self.api_key = api_key
        self.workspace_id = workspace_id
        self.user_id = user_id
        self.project_id = project_id
        self.base_url = base_url.rstrip('/')
        self.page_size = page_size
        self.timeout = timeout

    def call_api(self, url, params=None):
        try:
            response = requests.get(f'{self.base_url}{url}',
                                    params=params,
                                    headers={
                                        'X-Api-Key': self.api_key,
                                        'User-Agent': 'clockify-time-sheet'
                                    },
                                    timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            raise ClockifyError(f'request to {url} failed with HTTP {e.response.status_code}: {e.response.text}',
                                status_code=e.response.status_code) from e
        except requests.RequestException as e:
            raise ClockifyError(f'request to {url} failed: {e}') from e
        return response.json()

    def iterate_pages(self, url, params=None):
        page = 1
        while page is not None:
            items = self.call_api(url, {**(params or {}), 'page': page, 'page-size': self.page_size})
            yield from items
            page = page + 1 if len(items) == self.page_size else None

    def get_tasks(self) -> dict[str, str]:
        url = f'/workspaces/{self.workspace_id}/projects/{self.project_id}/tasks'
        return {task['id']: task['name'] for task in self.iterate_pages(url)}

    def iterate_time_entries(self, year, month):
        start, end = month_bounds(year, month)
        tasks = self.get_tasks()
        url = f'/workspaces/{self.workspace_id}/user/{self.user_id}/time-entries'
        params = {'project': self.project_id, 'start': format_timestamp(start), 'end': format_timestamp(end)}

        entries = []
        for entry in self.iterate_pages(url, params):
            interval = entry['timeInterval']
            if not interval.get('end'):
                click.echo(f"skipping running time entry started at {interval['start']}", err=True)
                continue
            entry_start = parse_timestamp(interval['start'])
            entry_end = parse_timestamp(interval['end'])
            if entry_start == entry_end:
                click.echo(f"skipping empty time entry at {interval['start']}", err=True)
                continue
            task_id = entry.get('taskId')
            description = entry.get('description') or ''
            # entries without a task are grouped by their description
            entries.append(RawEntry(
                task_id=task_id or description,
                start=entry_start,
                end=entry_end,
                description=tasks.get(task_id, description) if task_id else description
            ))

        # Clockify lists the newest entry first
        yield from sorted(entries, key=lambda elem: elem.start)
