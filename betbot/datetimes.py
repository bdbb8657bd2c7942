"""Match dates written as 'Year-Month-Day Hours:Minutes'."""

from __future__ import annotations

import re
import time
from datetime import datetime, timedelta

from betbot.errors import InvalidDateFormatError

# Whitespace in the format matches any amount of whitespace; trailing text is ignored.
_PATTERN = re.compile(r"\s*(\d{1,4})-(\d{1,2})-(\d{1,2})\s*(\d{1,2}):(\d{1,2})")


class DateAndTime:
    """A local date and time with minute precision."""

    __slots__ = ("year", "month", "day", "hour", "minute")

    def __init__(self, text: str) -> None:
        found = _PATTERN.match(text)
        if found is None:
            raise InvalidDateFormatError(text)
        year, month, day, hour, minute = (int(part) for part in found.groups())
        if not (
            year >= 1
            and 1 <= month <= 12
            and 1 <= day <= 31
            and 0 <= hour <= 23
            and 0 <= minute <= 59
        ):
            raise InvalidDateFormatError(text)
        self.year = year
        self.month = month
        self.day = day
        self.hour = hour
        self.minute = minute

    def _as_datetime(self) -> datetime:
        # Days past the end of the month roll over into the next one.
        start = datetime(self.year, self.month, 1, self.hour, self.minute)
        return start + timedelta(days=self.day - 1)

    def is_in_future(self) -> bool:
        """Whether this local date and time is later than now."""
        return self._as_datetime().timestamp() > int(time.time())

    def __str__(self) -> str:
        return f"{self.year}-{self.month:02d}-{self.day:02d} {self.hour:02d}:{self.minute:02d}"

    def __repr__(self) -> str:
        return f"DateAndTime({str(self)!r})"

    def _key(self) -> tuple[int, int, int, int, int]:
        return (self.year, self.month, self.day, self.hour, self.minute)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateAndTime):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())