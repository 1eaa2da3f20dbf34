"""Exceptions raised by apparentsky."""

from __future__ import annotations

from datetime import datetime

__all__ = ["LeapSecondTableError", "RiseSetSearchError"]


class RiseSetSearchError(RuntimeError):
    """Raised when a rise or set search exhausts its day limit."""

    def __init__(self, event: str, start: datetime, max_days: int) -> None:
        super().__init__(
            f"no {event} found within {max_days} days of {start.isoformat()}"
        )
        self.event = event
        self.start = start
        self.max_days = max_days


class LeapSecondTableError(ValueError):
    """Raised when leap second data is malformed or out of order."""

    def __init__(self, message: str, line: int | None = None) -> None:
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(message)
        self.line = line
