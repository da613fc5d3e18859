from .engine import DEFAULT_MAX_COUNT, DEFAULT_SEARCH_LIMIT, generate_dates, next_occurrence
from .en import describe_rule, parse_phrase, suggest_phrases
from .formatter import format_rule
from .parser import parse_recurrence, parse_rule
from .rule import Frequency, InvalidRecurrenceRule, MonthDay, NthWeekday, Reason, RecurrenceRule

__all__ = [
    "DEFAULT_MAX_COUNT",
    "DEFAULT_SEARCH_LIMIT",
    "Frequency",
    "InvalidRecurrenceRule",
    "MonthDay",
    "NthWeekday",
    "Reason",
    "RecurrenceRule",
    "describe_rule",
    "format_rule",
    "generate_dates",
    "next_occurrence",
    "parse_phrase",
    "parse_recurrence",
    "parse_rule",
    "suggest_phrases",
]
