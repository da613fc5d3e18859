# formatter.py
"""
RecurrenceRule -> canonical colon notation

    parse_rule(format_rule(rule)) == rule   for every rule with count or until
"""

from __future__ import annotations

from .rule import (
    WEEKDAY_CHARS,
    InvalidRecurrenceRule,
    MonthDay,
    NthWeekday,
    Reason,
    RecurrenceRule,
)


def _format_options(rule: RecurrenceRule) -> str:
    if rule.weekdays:
        return "".join(c for i, c in enumerate(WEEKDAY_CHARS) if i in rule.weekdays)
    if isinstance(rule.monthly, MonthDay):
        return str(rule.monthly.day)
    if isinstance(rule.monthly, NthWeekday):
        selector = "-" if rule.monthly.week == -1 else str(rule.monthly.week)
        return selector + WEEKDAY_CHARS[rule.monthly.weekday]
    return ""


def format_rule(rule: RecurrenceRule) -> str:
    freq = rule.frequency.value
    if rule.interval != 1:
        freq += str(rule.interval)

    if rule.count is not None:
        termination = str(rule.count)
    elif rule.until is not None:
        termination = rule.until.isoformat()
    else:
        # the notation has no way to say "forever"
        raise InvalidRecurrenceRule(Reason.MISSING_TERMINATION, "rule has neither count nor until")

    options = _format_options(rule)
    if options:
        return f"{freq}:{termination}:{options}"
    return f"{freq}:{termination}"
