"""Errors raised by the tracker services."""


class TrackerError(Exception):
    """Base error for tracker operations."""


class NoDataFoundError(TrackerError):
    """The lookup succeeded but matched no foods."""

    def __init__(self, query: str) -> None:
        super().__init__(f"No nutrition data found for {query!r}")
        self.query = query


class LookupFailedError(TrackerError):
    """The lookup could not be completed or its response could not be read."""

    def __init__(self, query: str, reason: str) -> None:
        super().__init__(f"Nutrition lookup failed for {query!r}: {reason}")
        self.query = query
        self.reason = reason


class LookupInProgressError(TrackerError):
    """A lookup is already outstanding."""


class DayNotFoundError(TrackerError):
    """No day record exists for the requested index."""

    def __init__(self, day: int) -> None:
        super().__init__(f"Day {day} does not exist")
        self.day = day
