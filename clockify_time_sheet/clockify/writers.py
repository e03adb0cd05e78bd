from clockify_time_sheet.common import CsvWriter
from clockify_time_sheet.timesheet.model import RawEntry


class RawEntryWriter(CsvWriter):

    def __init__(self, filepath, delimiter=','):
        super().__init__(filepath, header=[
            'date',
            'start',
            'end',
            'task',
            'description'
        ], delimiter=delimiter)

    def write(self, entry: RawEntry):
        super().write([
            entry.day.strftime('%Y-%m-%d'),
            entry.start.strftime('%H:%M:%S'),
            entry.end.strftime('%H:%M:%S'),
            entry.task_id,
            entry.description
        ])
