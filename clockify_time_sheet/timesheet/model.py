import datetime
from dataclasses import dataclass

from clockify_time_sheet.errors import InvalidEntryError


@dataclass(frozen=True)
class RawEntry:
    task_id: str
    start: datetime.datetime
    end: datetime.datetime
    description: str = ''

    def __post_init__(self):
        if not self.start < self.end:
            raise InvalidEntryError(f'entry of task {self.task_id} does not end after it starts '
                                    f'({self.start.isoformat()} - {self.end.isoformat()})')

    @property
    def day(self) -> datetime.date:
        return self.start.date()


@dataclass(frozen=True)
class ConsolidatedRow:
    task_id: str
    start: datetime.datetime
    end: datetime.datetime
    break_duration: datetime.timedelta = datetime.timedelta(0)
    description: str = ''

    @property
    def day(self) -> datetime.date:
        return self.start.date()

    @property
    def worked(self) -> datetime.timedelta:
        return self.end - self.start - self.break_duration

    @classmethod
    def from_entry(cls, entry: RawEntry):
        return cls(entry.task_id, entry.start, entry.end, description=entry.description)
