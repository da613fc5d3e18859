# rule.py
"""
Rule value types

Public API:
  - RecurrenceRule (frozen dataclass)
  - MonthDay, NthWeekday (monthly option variants)
  - Frequency, Reason
  - InvalidRecurrenceRule

Weekday codes are 0=Sunday .. 6=Saturday throughout this package.
Python's date.weekday() is Monday-based; use weekday_code() to convert.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional, Tuple, Union

WEEKDAY_CHARS = "UMTWRFS"
WEEKDAY_NAMES = [
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
]
CHAR_TO_WEEKDAY = {c: i for i, c in enumerate(WEEKDAY_CHARS)}

WEEK_NUMBERS = (1, 2, 3, 4, 5, -1)


def weekday_code(d: date) -> int:
    return (d.weekday() + 1) % 7


class Frequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class Reason(Enum):
    MALFORMED_STRUCTURE = "malformed structure"
    UNKNOWN_FREQUENCY = "unknown frequency"
    BAD_INTERVAL = "bad interval"
    BAD_COUNT = "bad count"
    BAD_UNTIL_DATE = "bad until date"
    UNKNOWN_WEEKDAY = "unknown weekday character"
    BAD_MONTH_DAY = "bad month day"
    BAD_MONTHLY_PATTERN = "bad monthly pattern"
    BAD_WEEK_NUMBER = "bad week number"
    CONFLICTING_TERMINATION = "conflicting termination"
    MISPLACED_OPTION = "misplaced option"
    MISSING_TERMINATION = "missing termination"
    UNKNOWN_PHRASE = "unknown phrase"


class InvalidRecurrenceRule(ValueError):
    def __init__(self, reason: Reason, message: str, text: Optional[str] = None) -> None:
        super().__init__(f"{reason.value}: {message}")
        self.reason = reason
        self.text = text


@dataclass(frozen=True)
class MonthDay:
    day: int

    def __post_init__(self) -> None:
        if not (1 <= self.day <= 31):
            raise InvalidRecurrenceRule(Reason.BAD_MONTH_DAY, f"day {self.day} is outside 1..31")


@dataclass(frozen=True)
class NthWeekday:
    week: int     # 1..5 or -1 (last)
    weekday: int  # 0..6

    def __post_init__(self) -> None:
        if self.week not in WEEK_NUMBERS:
            raise InvalidRecurrenceRule(Reason.BAD_WEEK_NUMBER, f"week {self.week} is not one of 1..5 or -1")
        if not (0 <= self.weekday <= 6):
            raise InvalidRecurrenceRule(Reason.UNKNOWN_WEEKDAY, f"weekday {self.weekday} is outside 0..6")


MonthlyOption = Union[MonthDay, NthWeekday]


@dataclass(frozen=True)
class RecurrenceRule:
    frequency: Frequency
    interval: int = 1

    # termination: at most one of these
    count: Optional[int] = None
    until: Optional[date] = None

    weekdays: Tuple[int, ...] = ()          # weekly only
    monthly: Optional[MonthlyOption] = None  # monthly only

    def __post_init__(self) -> None:
        # accept plain strings and any iterable of weekday codes
        try:
            freq = Frequency(self.frequency)
        except ValueError:
            raise InvalidRecurrenceRule(Reason.UNKNOWN_FREQUENCY, f"{self.frequency!r} is not a frequency") from None
        object.__setattr__(self, "frequency", freq)
        object.__setattr__(self, "weekdays", tuple(sorted(set(self.weekdays))))

        if self.interval < 1:
            raise InvalidRecurrenceRule(Reason.BAD_INTERVAL, f"interval must be >= 1, got {self.interval}")
        if self.count is not None and self.count < 1:
            raise InvalidRecurrenceRule(Reason.BAD_COUNT, f"count must be >= 1, got {self.count}")
        if self.count is not None and self.until is not None:
            raise InvalidRecurrenceRule(Reason.CONFLICTING_TERMINATION, "rule has both count and until")

        for wd in self.weekdays:
            if not (0 <= wd <= 6):
                raise InvalidRecurrenceRule(Reason.UNKNOWN_WEEKDAY, f"weekday {wd} is outside 0..6")
        if self.weekdays and self.frequency is not Frequency.WEEKLY:
            raise InvalidRecurrenceRule(Reason.MISPLACED_OPTION, f"weekdays on a {self.frequency.value} rule")
        if self.monthly is not None and self.frequency is not Frequency.MONTHLY:
            raise InvalidRecurrenceRule(Reason.MISPLACED_OPTION, f"monthly option on a {self.frequency.value} rule")

    @property
    def month_day(self) -> Optional[int]:
        return self.monthly.day if isinstance(self.monthly, MonthDay) else None

    @property
    def month_week(self) -> Optional[int]:
        return self.monthly.week if isinstance(self.monthly, NthWeekday) else None

    @property
    def month_weekday(self) -> Optional[int]:
        return self.monthly.weekday if isinstance(self.monthly, NthWeekday) else None

    @property
    def is_bounded(self) -> bool:
        return self.count is not None or self.until is not None
