from datetime import date

import pytest

from taskrecur import (
    Frequency,
    InvalidRecurrenceRule,
    MonthDay,
    NthWeekday,
    Reason,
    RecurrenceRule,
    parse_recurrence,
    parse_rule,
)

CASES = [
    # --- Basics ---
    ("daily2:3", RecurrenceRule(Frequency.DAILY, interval=2, count=3)),
    ("daily:5:", RecurrenceRule(Frequency.DAILY, count=5)),
    ("yearly:2027-01-01", RecurrenceRule(Frequency.YEARLY, until=date(2027, 1, 1))),
    ("  DAILY:10  ", RecurrenceRule(Frequency.DAILY, count=10)),

    # --- Weekly weekday sets ---
    ("weekly:3:MWF", RecurrenceRule(Frequency.WEEKLY, count=3, weekdays=(1, 3, 5))),
    ("weekly:3:fwmw", RecurrenceRule(Frequency.WEEKLY, count=3, weekdays=(1, 3, 5))),
    ("Weekly2:2025-12-31:su", RecurrenceRule(Frequency.WEEKLY, interval=2, until=date(2025, 12, 31), weekdays=(0, 6))),
    ("weekly:4:UMTWRFS", RecurrenceRule(Frequency.WEEKLY, count=4, weekdays=(0, 1, 2, 3, 4, 5, 6))),
    ("weekly12:2", RecurrenceRule(Frequency.WEEKLY, interval=12, count=2)),

    # --- Monthly day / nth weekday ---
    ("monthly:3:15", RecurrenceRule(Frequency.MONTHLY, count=3, monthly=MonthDay(15))),
    ("monthly:3:07", RecurrenceRule(Frequency.MONTHLY, count=3, monthly=MonthDay(7))),
    ("monthly:2:2W", RecurrenceRule(Frequency.MONTHLY, count=2, monthly=NthWeekday(2, 3))),
    ("monthly:5:-f", RecurrenceRule(Frequency.MONTHLY, count=5, monthly=NthWeekday(-1, 5))),
    ("monthly6:2026-06-30:5U", RecurrenceRule(Frequency.MONTHLY, interval=6, until=date(2026, 6, 30), monthly=NthWeekday(5, 0))),

    # --- Options ignored for daily / yearly ---
    ("yearly3:10:MWF", RecurrenceRule(Frequency.YEARLY, interval=3, count=10)),
    ("daily:4:15", RecurrenceRule(Frequency.DAILY, count=4)),
]

INVALID = [
    ("daily", Reason.MALFORMED_STRUCTURE),
    ("daily:1:MWF:2", Reason.MALFORMED_STRUCTURE),
    ("", Reason.MALFORMED_STRUCTURE),
    ("hourly:3", Reason.UNKNOWN_FREQUENCY),
    ("every:3", Reason.UNKNOWN_FREQUENCY),
    ("2daily:3", Reason.UNKNOWN_FREQUENCY),
    ("daily0:3", Reason.BAD_INTERVAL),
    ("daily:0", Reason.BAD_COUNT),
    ("daily:2025-02-30", Reason.BAD_UNTIL_DATE),
    ("daily:2025-1-5", Reason.BAD_UNTIL_DATE),
    ("daily:tomorrow", Reason.BAD_UNTIL_DATE),
    ("daily:", Reason.BAD_UNTIL_DATE),
    ("weekly:3:MXF", Reason.UNKNOWN_WEEKDAY),
    ("weekly:3:M,W", Reason.UNKNOWN_WEEKDAY),
    ("monthly:3:32", Reason.BAD_MONTH_DAY),
    ("monthly:3:0", Reason.BAD_MONTH_DAY),
    ("monthly:3:2X", Reason.BAD_MONTHLY_PATTERN),
    ("monthly:3:last", Reason.BAD_MONTHLY_PATTERN),
    ("monthly:3:123", Reason.BAD_MONTHLY_PATTERN),
    ("monthly:3:6W", Reason.BAD_WEEK_NUMBER),
    ("monthly:3:0M", Reason.BAD_WEEK_NUMBER),

    # --- only ASCII digits are digits ---
    ("daily:２０２５-01-01", Reason.BAD_UNTIL_DATE),
    ("daily:３", Reason.BAD_UNTIL_DATE),
    ("daily２:3", Reason.UNKNOWN_FREQUENCY),
    ("monthly:3:１５", Reason.BAD_MONTHLY_PATTERN),
    ("monthly:3:２W", Reason.BAD_MONTHLY_PATTERN),
]


@pytest.mark.parametrize("text, expected", CASES, ids=[case[0] for case in CASES])
def test_parse_rule(text: str, expected: RecurrenceRule) -> None:
    got = parse_rule(text)
    assert got == expected, f"\nRule: {text!r}\nGot:  {got!r}\nExp:  {expected!r}"


@pytest.mark.parametrize("text, reason", INVALID, ids=[case[0] or "<empty>" for case in INVALID])
def test_parse_rule_invalid(text: str, reason: Reason) -> None:
    with pytest.raises(InvalidRecurrenceRule) as excinfo:
        parse_rule(text)
    assert excinfo.value.reason is reason
    assert excinfo.value.text == text


def test_invalid_rule_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="bad count"):
        parse_rule("weekly:0:MWF")


def test_parsed_weekdays_are_sorted_and_unique() -> None:
    rule = parse_rule("weekly:10:SSFFUU")
    assert rule.weekdays == (0, 5, 6)


def test_parse_recurrence_dispatches_on_notation() -> None:
    assert parse_recurrence("weekly:3:MWF") == parse_rule("weekly:3:MWF")
    assert parse_recurrence("every monday") == RecurrenceRule(Frequency.WEEKLY, weekdays=(1,))


def test_parse_recurrence_does_not_fall_back_to_phrases() -> None:
    with pytest.raises(InvalidRecurrenceRule) as excinfo:
        parse_recurrence("every monday:3")
    assert excinfo.value.reason is Reason.UNKNOWN_FREQUENCY
