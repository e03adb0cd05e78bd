import datetime

from clockify_time_sheet.common import CsvWriter
from .model import ConsolidatedRow


def format_time(time: datetime.datetime) -> str:
    hour, minute = time.hour, time.minute
    if time.second >= 30:
        minute += 1
    if minute >= 60:
        minute -= 60
        hour += 1
    return f'{hour:02d}:{minute:02d}'


def format_break(duration: datetime.timedelta) -> str:
    seconds = int(duration.total_seconds())
    if seconds < 30:
        return ''
    minutes = (seconds + 30) // 60
    return f'{minutes // 60}:{minutes % 60:02d}'


class TimeSheetWriter(CsvWriter):

    def __init__(self, filepath, delimiter=','):
        super().__init__(filepath, header=[
            'date',
            'start',
            'end',
            'break',
            'description'
        ], delimiter=delimiter)
        self._last_day = None

    def write(self, row: ConsolidatedRow):
        day = row.start.strftime('%d.%m.%y')
        if day == self._last_day:
            day = ''
        else:
            self._last_day = day
        super().write([
            day,
            format_time(row.start),
            format_time(row.end),
            format_break(row.break_duration),
            row.description
        ])
