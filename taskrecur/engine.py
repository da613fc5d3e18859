# engine.py
"""
RecurrenceRule -> dates

Public API:
  - generate_dates(rule, anchor, max_count=DEFAULT_MAX_COUNT) -> List[date]
  - next_occurrence(rule, anchor, reference, search_limit=DEFAULT_SEARCH_LIMIT) -> Optional[date]

Notes:
- Dates are naive calendar dates; no timezone handling.
- Step k is always computed from the anchor (never accumulated), so month and
  year clamping cannot drift.
- Day-of-month candidates past the end of a short month roll forward into the
  next month (monthly:N:31 in February 2025 -> 2025-03-03). Same for a fifth
  weekday the month does not have.
- Yearly steps clamp instead: Feb 29 becomes Feb 28 in non-leap years
  (relativedelta semantics) and is back to Feb 29 in the next leap year.
- Candidates that would leave the supported date range (years 1..9999) end
  the sequence quietly.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from itertools import islice
from typing import Iterator, List, Optional

from dateutil.relativedelta import relativedelta

from .rule import Frequency, MonthDay, NthWeekday, RecurrenceRule, weekday_code

logger = logging.getLogger(__name__)

DEFAULT_MAX_COUNT = 100
DEFAULT_SEARCH_LIMIT = 1000


def week_start(d: date) -> date:
    """Sunday on or before d."""
    return d - timedelta(days=weekday_code(d))


def month_start(d: date) -> date:
    return d.replace(day=1)


def month_end(d: date) -> date:
    return d + relativedelta(day=31)


def nth_weekday_of_month(first: date, week: int, weekday: int) -> date:
    if week == -1:
        last = month_end(first)
        return last - timedelta(days=(weekday_code(last) - weekday) % 7)
    first_match = first + timedelta(days=(weekday - weekday_code(first)) % 7)
    return first_match + timedelta(weeks=week - 1)


def _month_candidate(rule: RecurrenceRule, first: date, anchor: date) -> date:
    option = rule.monthly
    if isinstance(option, NthWeekday):
        return nth_weekday_of_month(first, option.week, option.weekday)
    day = option.day if isinstance(option, MonthDay) else anchor.day
    # not clamped: rolls into the following month
    return first + timedelta(days=day - 1)


def _step_candidates(rule: RecurrenceRule, anchor: date, step: int) -> Iterator[date]:
    if rule.frequency is Frequency.DAILY:
        yield anchor + timedelta(days=step * rule.interval)

    elif rule.frequency is Frequency.WEEKLY and not rule.weekdays:
        yield anchor + timedelta(weeks=step * rule.interval)

    elif rule.frequency is Frequency.WEEKLY:
        start = week_start(anchor) + timedelta(weeks=step * rule.interval)
        for wd in rule.weekdays:
            yield start + timedelta(days=wd)

    elif rule.frequency is Frequency.MONTHLY:
        first = month_start(anchor) + relativedelta(months=step * rule.interval)
        yield _month_candidate(rule, first, anchor)

    else:
        yield anchor + relativedelta(years=step * rule.interval)


def _candidates(rule: RecurrenceRule, anchor: date) -> Iterator[date]:
    """Non-decreasing candidates; may start before the anchor. Ends at the
    edge of the supported date range."""
    step = 0
    try:
        while True:
            yield from _step_candidates(rule, anchor, step)
            step += 1
    except (OverflowError, ValueError) as e:
        # date / relativedelta refuse years outside 1..9999
        logger.debug("Candidates for %r from %s left the date range at step %d (%s)", rule, anchor, step, e)


def _occurrences(rule: RecurrenceRule, anchor: date) -> Iterator[date]:
    """Candidates on/after the anchor, within `until` and `count`."""
    emitted = 0
    for candidate in _candidates(rule, anchor):
        if rule.until is not None and candidate > rule.until:
            logger.debug("Occurrences of %r stopped past until %s", rule, rule.until)
            return
        if candidate < anchor:
            continue
        yield candidate
        emitted += 1
        if rule.count is not None and emitted >= rule.count:
            return


def generate_dates(rule: RecurrenceRule, anchor: date, max_count: int = DEFAULT_MAX_COUNT) -> List[date]:
    dates = list(islice(_occurrences(rule, anchor), max(max_count, 0)))
    logger.debug("Generated %d dates for %r from %s (max_count %d)", len(dates), rule, anchor, max_count)
    return dates


def next_occurrence(
    rule: RecurrenceRule,
    anchor: date,
    reference: date,
    search_limit: int = DEFAULT_SEARCH_LIMIT,
) -> Optional[date]:
    """
    First occurrence strictly after `reference`, looking at no more than
    `search_limit` occurrences counted from the anchor. None when the rule
    ends (or the limit is reached) first.
    """
    for d in islice(_occurrences(rule, anchor), max(search_limit, 0)):
        if d > reference:
            return d
    logger.debug("No occurrence of %r after %s within %d occurrences", rule, reference, search_limit)
    return None
