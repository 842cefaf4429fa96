"""Which calendar days may be selected."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable

from calendar_logic import canonical_key, parse_day
from errors import PickerConfigError


@dataclass(frozen=True)
class DateConstraints:
    """Bounds and allow/deny lists applied to every day in the grid.

    min_date of None means "today" at evaluation time; max_date of None
    means no upper bound. included_dates of None allows every day.
    Set members are canonical "YYYY-MM-DD" keys; entries that are not
    valid dates never match and are simply inert.
    """

    min_date: date | None = None
    max_date: date | None = None
    excluded_dates: frozenset[str] = frozenset()
    included_dates: frozenset[str] | None = None

    def __post_init__(self) -> None:
        # Bounds compare at day precision
        for name in ("min_date", "max_date"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, _bound(value, name))

    @classmethod
    def from_config(
        cls,
        min_date: date | datetime | str | None = None,
        max_date: date | datetime | str | None = None,
        excluded_dates: Iterable[str] = (),
        included_dates: Iterable[str] | None = None,
    ) -> "DateConstraints":
        lo = _bound(min_date, "min_date")
        hi = _bound(max_date, "max_date")
        if lo is not None and hi is not None and hi < lo:
            raise PickerConfigError(f"max_date {hi} is before min_date {lo}")
        return cls(
            min_date=lo,
            max_date=hi,
            excluded_dates=frozenset(excluded_dates or ()),
            included_dates=None if included_dates is None else frozenset(included_dates),
        )


def _bound(value, name: str) -> date | None:
    if value is None:
        return None
    try:
        return parse_day(value)
    except (TypeError, ValueError) as exc:
        raise PickerConfigError(f"invalid {name}: {value!r}") from exc


def is_eligible(day: date, constraints: DateConstraints, today: date | None = None) -> bool:
    """Return True if day can be selected under constraints.

    Rules are checked in order and the first match decides: before the
    minimum, after the maximum, missing from the allow-list, excluded.
    """
    day = parse_day(day)
    lower = constraints.min_date
    if lower is None:
        lower = parse_day(today) if today is not None else date.today()
    if day < lower:
        return False
    if constraints.max_date is not None and day > constraints.max_date:
        return False
    key = canonical_key(day)
    if constraints.included_dates is not None and key not in constraints.included_dates:
        return False
    if key in constraints.excluded_dates:
        return False
    return True
