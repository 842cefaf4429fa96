"""Selection values and the day-click transform."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Union

from calendar_logic import canonical_key, parse_day


@dataclass(frozen=True)
class Single:
    """At most one selected day."""

    day: date | None = None


@dataclass(frozen=True)
class Multi:
    """Ordered selected days, unique by canonical key."""

    days: tuple[date, ...] = ()

    def __post_init__(self) -> None:
        # Keep the first occurrence of each day
        seen: set[str] = set()
        unique: list[date] = []
        for d in self.days:
            d = parse_day(d)
            key = canonical_key(d)
            if key not in seen:
                seen.add(key)
                unique.append(d)
        object.__setattr__(self, "days", tuple(unique))

    @classmethod
    def of(cls, days: Iterable[date]) -> "Multi":
        """Build a Multi from any iterable of days."""
        return cls(tuple(days))


Selection = Union[Single, Multi]


def empty_selection(multi: bool) -> Selection:
    return Multi() if multi else Single()


def apply_click(day: date, selection: Selection) -> Selection:
    """Return the selection that results from clicking day.

    Single mode replaces the selected day. Multi mode toggles membership:
    a day already present is removed, otherwise it is appended at the end.
    Eligibility is not checked here.
    """
    day = parse_day(day)
    if isinstance(selection, Single):
        return Single(day)

    key = canonical_key(day)
    remaining = tuple(d for d in selection.days if canonical_key(d) != key)
    if len(remaining) == len(selection.days):
        return Multi(remaining + (day,))
    return Multi(remaining)


def selected_days(selection: Selection) -> tuple[date, ...]:
    """Flatten a selection into a tuple of days."""
    if isinstance(selection, Single):
        return () if selection.day is None else (selection.day,)
    return selection.days


def selected_keys(selection: Selection) -> frozenset[str]:
    return frozenset(canonical_key(d) for d in selected_days(selection))


def change_value(selection: Selection):
    """Payload for on_change: a date (or None) in single mode, a tuple in multi mode."""
    if isinstance(selection, Single):
        return selection.day
    return selection.days
