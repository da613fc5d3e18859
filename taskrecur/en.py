# en.py
"""
English <-> RecurrenceRule

Public API:
  - describe_rule(rule) -> str
  - parse_phrase(text) -> RecurrenceRule
  - suggest_phrases(query) -> List[str]

Notes:
- Phrases are the short forms authors type by hand ("every 2 weeks",
  "every monday and thursday"). They carry no count/until.
"""

from __future__ import annotations

import re
from typing import List

from .rule import (
    WEEKDAY_NAMES,
    Frequency,
    InvalidRecurrenceRule,
    MonthDay,
    NthWeekday,
    Reason,
    RecurrenceRule,
)

WEEKDAY_MAP = {name.lower(): i for i, name in enumerate(WEEKDAY_NAMES)}
WEEKDAYS = set(WEEKDAY_MAP.keys())
WORKDAYS = (1, 2, 3, 4, 5)

ORDINAL_WORDS = {
    1: "first",
    2: "second",
    3: "third",
    4: "fourth",
    5: "fifth",
    -1: "last",
}

UNITS = {
    Frequency.DAILY: "day",
    Frequency.WEEKLY: "week",
    Frequency.MONTHLY: "month",
    Frequency.YEARLY: "year",
}
UNIT_TO_FREQ = {unit: freq for freq, unit in UNITS.items()}

PHRASES = [
    "every day",
    "every week",
    "every month",
    "every year",
    "every weekday",
    "every monday",
    "every tuesday",
    "every wednesday",
    "every thursday",
    "every friday",
    "every saturday",
    "every sunday",
    "every 2 weeks",
    "every 2 months",
]

_UNIT_RE = re.compile(r"every\s+(day|week|month|year)")
_INTERVAL_RE = re.compile(r"every\s+(\d+)\s+(day|week|month|year)s?", re.ASCII)
_WEEKDAYS_RE = re.compile(r"every\s+(.+)")


# ------------------ describe ------------------

def _describe_option(rule: RecurrenceRule) -> str:
    if rule.weekdays:
        return " on " + ", ".join(WEEKDAY_NAMES[wd] for wd in rule.weekdays)
    if isinstance(rule.monthly, MonthDay):
        return f" on day {rule.monthly.day}"
    if isinstance(rule.monthly, NthWeekday):
        return f" on the {ORDINAL_WORDS[rule.monthly.week]} {WEEKDAY_NAMES[rule.monthly.weekday]}"
    return ""


def describe_rule(rule: RecurrenceRule) -> str:
    unit = UNITS[rule.frequency]
    if rule.interval > 1:
        text = f"Every {rule.interval} {unit}s"
    else:
        text = f"Every {unit}"

    text += _describe_option(rule)

    if rule.count is not None:
        text += f", {rule.count} time" + ("s" if rule.count != 1 else "")
    elif rule.until is not None:
        text += f" until {rule.until.isoformat()}"
    return text


# ------------------ phrases ------------------

def parse_weekday_list(text: str) -> List[str]:
    t = text.strip().lower().replace(",", " ")
    return [w for w in t.split() if w != "and"]


def parse_phrase(text: str) -> RecurrenceRule:
    s_lower = " ".join(text.strip().split()).lower()

    m = _UNIT_RE.fullmatch(s_lower)
    if m:
        return RecurrenceRule(frequency=UNIT_TO_FREQ[m.group(1)])

    m = _INTERVAL_RE.fullmatch(s_lower)
    if m:
        n = int(m.group(1))
        if n < 1:
            raise InvalidRecurrenceRule(Reason.BAD_INTERVAL, f"interval must be >= 1, got {n}", text=text)
        return RecurrenceRule(frequency=UNIT_TO_FREQ[m.group(2)], interval=n)

    if s_lower == "every weekday":
        return RecurrenceRule(frequency=Frequency.WEEKLY, weekdays=WORKDAYS)

    m = _WEEKDAYS_RE.fullmatch(s_lower)
    if m:
        words = parse_weekday_list(m.group(1))
        if words and all(w in WEEKDAYS for w in words):
            return RecurrenceRule(
                frequency=Frequency.WEEKLY,
                weekdays=tuple(WEEKDAY_MAP[w] for w in words),
            )

    raise InvalidRecurrenceRule(Reason.UNKNOWN_PHRASE, f"unsupported phrase {text!r}", text=text)


def suggest_phrases(query: str) -> List[str]:
    q = query.lower()
    return [p for p in PHRASES if q in p]
