class TimeSheetError(Exception):
    pass


class ConsolidationError(TimeSheetError, ValueError):
    pass


class InvalidEntryError(ConsolidationError):
    pass


class UnsortedInputError(ConsolidationError):

    def __init__(self, index, previous_start, start):
        super().__init__(f'entry #{index} starts at {start.isoformat()}, '
                         f'before the previous entry ({previous_start.isoformat()})')
        self.index = index


class OverlappingEntryError(ConsolidationError):

    def __init__(self, entry, previous_end):
        super().__init__(f'entry of task {entry.task_id} starting at {entry.start.isoformat()} '
                         f'overlaps the previous one ending at {previous_end.isoformat()}')
        self.entry = entry
        self.previous_end = previous_end


class OutOfMonthError(TimeSheetError, ValueError):
    pass


class ClockifyError(TimeSheetError):

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code
