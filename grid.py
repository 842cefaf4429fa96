"""Month grid cells: leading placeholders followed by one cell per day."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Union

from calendar_logic import (
    DAYS_PER_WEEK,
    canonical_key,
    days_in_month,
    leading_placeholders,
    month_start,
)
from eligibility import DateConstraints, is_eligible
from selection import Selection, selected_keys


@dataclass(frozen=True)
class Placeholder:
    """Empty slot before the first day of the month."""

    key: str


@dataclass(frozen=True)
class DayCell:
    date: date
    disabled: bool
    active: bool

    @property
    def key(self) -> str:
        return f"day-{canonical_key(self.date)}"


GridCell = Union[Placeholder, DayCell]


def build_grid(
    month: date,
    week_start: int,
    constraints: DateConstraints,
    selection: Selection,
    today: date | None = None,
) -> list[GridCell]:
    """Return the cells for month in display order.

    The list always has leading_placeholders(month, week_start) placeholders
    followed by every day of the month, and is rebuilt from scratch on
    each call.
    """
    first = month_start(month)
    blanks = leading_placeholders(first, week_start)
    active_keys = selected_keys(selection)
    if today is None:
        today = date.today()

    cells: list[GridCell] = [
        Placeholder(f"e-{first:%Y-%m}-{idx}") for idx in range(blanks)
    ]
    for day_num in range(1, days_in_month(first.year, first.month) + 1):
        d = first.replace(day=day_num)
        cells.append(DayCell(
            date=d,
            disabled=not is_eligible(d, constraints, today=today),
            active=canonical_key(d) in active_keys,
        ))
    return cells


def week_rows(cells: list[GridCell]) -> list[list[GridCell]]:
    """Split a flat cell list into rows of seven; the last row may be short."""
    return [cells[i:i + DAYS_PER_WEEK] for i in range(0, len(cells), DAYS_PER_WEEK)]
