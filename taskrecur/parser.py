# parser.py
"""
Text -> RecurrenceRule

Public API:
  - parse_rule(text) -> RecurrenceRule          (colon notation, e.g. "weekly2:10:MWF")
  - parse_recurrence(text) -> RecurrenceRule    (colon notation or English phrase)

Both raise InvalidRecurrenceRule on bad input.
"""

from __future__ import annotations

import logging
import re
from datetime import date
from typing import Optional, Tuple

from . import en
from .rule import (
    CHAR_TO_WEEKDAY,
    Frequency,
    InvalidRecurrenceRule,
    MonthDay,
    MonthlyOption,
    NthWeekday,
    Reason,
    RecurrenceRule,
)

logger = logging.getLogger(__name__)

_FREQ_RE = re.compile(r"^(daily|weekly|monthly|yearly)(\d+)?$", re.I | re.ASCII)
_DIGITS_RE = re.compile(r"^\d+$", re.ASCII)
_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$", re.ASCII)
_MONTH_DAY_RE = re.compile(r"^\d{1,2}$", re.ASCII)
_MONTHLY_PATTERN_RE = re.compile(r"^(-|\d)([UMTWRFS])$", re.I | re.ASCII)


def _fail(reason: Reason, message: str, text: str) -> InvalidRecurrenceRule:
    logger.debug("Rejected recurrence %r: %s (%s)", text, reason.value, message)
    return InvalidRecurrenceRule(reason, message, text=text)


def parse_date(s: str, text: str) -> date:
    m = _DATE_RE.match(s)
    if not m:
        raise _fail(Reason.BAD_UNTIL_DATE, f"{s!r} is neither a count nor a YYYY-MM-DD date", text)
    try:
        return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError as e:
        raise _fail(Reason.BAD_UNTIL_DATE, f"{s!r} is not a calendar date ({e})", text) from e


def _parse_frequency(field: str, text: str) -> Tuple[Frequency, int]:
    m = _FREQ_RE.match(field)
    if not m:
        raise _fail(Reason.UNKNOWN_FREQUENCY, f"{field!r} is not daily, weekly, monthly or yearly", text)
    freq = Frequency(m.group(1).lower())
    interval = int(m.group(2)) if m.group(2) else 1
    if interval < 1:
        raise _fail(Reason.BAD_INTERVAL, f"interval must be >= 1, got {interval}", text)
    return freq, interval


def _parse_termination(field: str, text: str) -> Tuple[Optional[int], Optional[date]]:
    if _DIGITS_RE.match(field):
        count = int(field)
        if count < 1:
            raise _fail(Reason.BAD_COUNT, f"count must be >= 1, got {count}", text)
        return count, None
    return None, parse_date(field, text)


def _parse_weekdays(field: str, text: str) -> Tuple[int, ...]:
    codes = set()
    for ch in field.upper():
        if ch not in CHAR_TO_WEEKDAY:
            raise _fail(Reason.UNKNOWN_WEEKDAY, f"{ch!r} is not one of U M T W R F S", text)
        codes.add(CHAR_TO_WEEKDAY[ch])
    return tuple(sorted(codes))


def _parse_monthly(field: str, text: str) -> MonthlyOption:
    if _MONTH_DAY_RE.match(field):
        day = int(field)
        if not (1 <= day <= 31):
            raise _fail(Reason.BAD_MONTH_DAY, f"day {day} is outside 1..31", text)
        return MonthDay(day)

    m = _MONTHLY_PATTERN_RE.match(field)
    if not m:
        raise _fail(Reason.BAD_MONTHLY_PATTERN, f"{field!r} is neither a day number nor a week+weekday pattern", text)

    selector = m.group(1)
    week = -1 if selector == "-" else int(selector)
    if week not in (1, 2, 3, 4, 5, -1):
        raise _fail(Reason.BAD_WEEK_NUMBER, f"week {week} is not one of 1..5 or -", text)
    return NthWeekday(week=week, weekday=CHAR_TO_WEEKDAY[m.group(2).upper()])


def parse_rule(text: str) -> RecurrenceRule:
    fields = [f.strip() for f in text.strip().split(":")]
    if len(fields) not in (2, 3):
        raise _fail(Reason.MALFORMED_STRUCTURE, f"expected 2 or 3 ':'-separated fields, got {len(fields)}", text)

    freq, interval = _parse_frequency(fields[0], text)
    count, until = _parse_termination(fields[1], text)

    weekdays: Tuple[int, ...] = ()
    monthly: Optional[MonthlyOption] = None
    options = fields[2] if len(fields) == 3 else ""
    if options:
        if freq is Frequency.WEEKLY:
            weekdays = _parse_weekdays(options, text)
        elif freq is Frequency.MONTHLY:
            monthly = _parse_monthly(options, text)
        # daily / yearly define no options

    rule = RecurrenceRule(
        frequency=freq,
        interval=interval,
        count=count,
        until=until,
        weekdays=weekdays,
        monthly=monthly,
    )
    logger.debug("Parsed recurrence %r -> %r", text, rule)
    return rule


def parse_recurrence(text: str) -> RecurrenceRule:
    if ":" in text:
        return parse_rule(text)
    return en.parse_phrase(text)
