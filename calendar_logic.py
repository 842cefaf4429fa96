"""Pure calendar calculations: no UI dependencies."""

from __future__ import annotations

import calendar
from datetime import date, datetime

from errors import PickerConfigError

# Sunday-based numbering: 0 = Sunday ... 6 = Saturday
DAYS_PER_WEEK = 7


def parse_day(value: date | datetime | str) -> date:
    """Return the calendar day for a date, datetime or "YYYY-MM-DD" string.

    Time of day is dropped. Raises ValueError for unparsable strings.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip())
    raise TypeError(f"cannot interpret {value!r} as a calendar day")


def canonical_key(day: date | datetime) -> str:
    """Return the "YYYY-MM-DD" key used for equality and membership."""
    return parse_day(day).isoformat()


def month_start(day: date | datetime) -> date:
    """Normalise a day to the first of its month."""
    return parse_day(day).replace(day=1)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def weekday_index(day: date) -> int:
    """Weekday with Sunday as 0 (Python's weekday() has Monday as 0)."""
    return (day.weekday() + 1) % DAYS_PER_WEEK


def check_week_start(week_start: int) -> int:
    """Return week_start unchanged, or raise if it is not an int in 0..6."""
    if isinstance(week_start, bool) or not isinstance(week_start, int):
        raise PickerConfigError(f"week_start must be an int in 0..6, got {week_start!r}")
    if not 0 <= week_start < DAYS_PER_WEEK:
        raise PickerConfigError(f"week_start must be in 0..6, got {week_start}")
    return week_start


def leading_placeholders(month: date, week_start: int) -> int:
    """Number of empty cells before day 1 in a row starting on week_start."""
    check_week_start(week_start)
    first = month_start(month)
    return (weekday_index(first) - week_start + DAYS_PER_WEEK) % DAYS_PER_WEEK


def shift_month(month: date, delta: int) -> date:
    """Return the first of the month delta months away (negative = earlier)."""
    first = month_start(month)
    year, index = divmod(first.year * 12 + first.month - 1 + delta, 12)
    return date(year, index + 1, 1)


def prev_month(month: date) -> date:
    """Return the first of the previous month."""
    return shift_month(month, -1)


def next_month(month: date) -> date:
    """Return the first of the next month."""
    return shift_month(month, 1)


def can_go_back(month: date, today: date | None = None) -> bool:
    """True while the browsing month lies strictly after today.

    today defaults to the real current date at call time, so the boundary
    follows the clock during a long session.
    """
    if today is None:
        today = date.today()
    return month_start(month) > parse_day(today)


def weekday_names(week_start: int = 0, length: str = "short") -> list[str]:
    """Return the 7 weekday labels in display order, starting at week_start.

    length is "long" (Monday), "short" (Mon) or "narrow" (M). Labels come
    from the calendar module and follow the process locale.
    """
    check_week_start(week_start)
    if length == "long":
        names = calendar.day_name
    elif length in ("short", "narrow"):
        names = calendar.day_abbr
    else:
        raise ValueError(f"unknown weekday label length {length!r}")

    labels: list[str] = []
    for offset in range(DAYS_PER_WEEK):
        sunday_based = (week_start + offset) % DAYS_PER_WEEK
        # calendar module indexes Monday as 0
        label = names[(sunday_based - 1) % DAYS_PER_WEEK]
        labels.append(label[:1] if length == "narrow" else label)
    return labels
