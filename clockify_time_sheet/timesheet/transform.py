import dataclasses
import datetime
import typing

from clockify_time_sheet.errors import UnsortedInputError, OverlappingEntryError
from .model import RawEntry, ConsolidatedRow


def consolidate(entries: typing.Iterable[RawEntry], split_days: bool = False) -> list[ConsolidatedRow]:
    """Merge runs of adjacent entries of the same task, counting the gaps between them as breaks."""
    rows = []
    run = None
    previous = None
    for index, entry in enumerate(entries):
        if previous is not None and entry.start < previous.start:
            raise UnsortedInputError(index, previous.start, entry.start)
        previous = entry

        if run is None or not _continues(run, entry, split_days):
            if run is not None:
                rows.append(run)
            run = ConsolidatedRow.from_entry(entry)
            continue

        gap = entry.start - run.end
        if gap < datetime.timedelta(0):
            raise OverlappingEntryError(entry, run.end)
        run = dataclasses.replace(run, end=entry.end, break_duration=run.break_duration + gap)

    if run is not None:
        rows.append(run)
    return rows


def _continues(run: ConsolidatedRow, entry: RawEntry, split_days: bool) -> bool:
    if run.task_id != entry.task_id:
        return False
    return not split_days or run.end.date() == entry.end.date()
