import calendar
import csv
import datetime
import os
import sys
import typing

from clockify_time_sheet.errors import OutOfMonthError


class MonthRange:

    def __init__(self, start, end):
        self._start = MonthRange.parse(start)
        self._end = MonthRange.parse(end)
        if self._start > self._end:
            raise ValueError(f'start month ({start}) is after end month ({end})')

    def __iter__(self):
        start_month = self._start.month
        end_month = self._end.month if self._start.year == self._end.year else 12
        for year in range(self._start.year, self._end.year + 1):
            for month in range(start_month, end_month + 1):
                yield year, month
            start_month = 1
            end_month = self._end.month if year == self._end.year - 1 else 12

    @staticmethod
    def parse(date_str) -> datetime.date:
        return datetime.datetime.strptime(date_str, "%Y-%m").date()


def month_bounds(year: int, month: int, tz: datetime.tzinfo = None) -> typing.Tuple[datetime.datetime, datetime.datetime]:
    num_days = calendar.monthrange(year, month)[1]
    start = datetime.datetime(year, month, 1)
    end = start + datetime.timedelta(days=num_days)
    if tz is None:
        return start.astimezone(), end.astimezone()
    return start.replace(tzinfo=tz), end.replace(tzinfo=tz)


def validate_month(entries, year: int, month: int) -> list:
    entries = list(entries)
    for entry in entries:
        if (entry.start.year, entry.start.month) != (year, month):
            raise OutOfMonthError(f'entry of task {entry.task_id} starting at {entry.start.isoformat()} '
                                  f'is outside of {year}-{month:02d}')
    return entries


class CsvWriter:

    def __init__(self, filepath, header=None, delimiter=','):
        self._filepath = filepath
        self._header = header
        self._delimiter = delimiter

    def __enter__(self):
        self._file = sys.stdout if self._filepath == '-' else open(self._filepath, 'w+', newline='')
        try:
            self._writer = csv.writer(self._file, delimiter=self._delimiter, lineterminator='\n')
            if self._header:
                self._writer.writerow(self._header)
        except (TypeError, csv.Error):
            if self._file is not sys.stdout:
                self._file.close()
                os.remove(self._filepath)
            raise
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._file is sys.stdout:
            self._file.flush()
        else:
            self._file.close()

    def write(self, row: list[str]):
        self._writer.writerow(row)
