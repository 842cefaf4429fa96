"""Date picker controller: owns the browsing month, turns clicks into effects."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Iterable, Union

from calendar_logic import can_go_back, check_week_start, month_start, parse_day, shift_month
from eligibility import DateConstraints, is_eligible
from errors import PickerConfigError
from grid import DayCell, GridCell, build_grid
from selection import Multi, Selection, Single, apply_click, change_value, empty_selection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionChanged:
    selection: Selection


@dataclass(frozen=True)
class MonthChanged:
    month: date


@dataclass(frozen=True)
class ScrollIntoView:
    """Ask the host to bring the clicked day into view."""

    day: date


Effect = Union[SelectionChanged, MonthChanged, ScrollIntoView]


class DatePicker:
    """Month date picker state.

    The picker holds only the browsing month. The selection belongs to the
    host: it is passed in to cells() and click() and a new value is handed
    back, never stored. Every state change is returned as a list of effects
    and, when callbacks are configured, reported through them before the
    call returns.
    """

    def __init__(
        self,
        week_start: int = 0,
        min_date: Any = None,
        max_date: Any = None,
        excluded_dates: Iterable[str] = (),
        included_dates: Iterable[str] | None = None,
        multi: bool = False,
        browsing_month: Any = None,
        on_change: Callable[[Any], None] | None = None,
        on_month_change: Callable[[date], None] | None = None,
        is_loading: bool = False,
    ) -> None:
        self.week_start: int = check_week_start(week_start)
        self.constraints = DateConstraints.from_config(
            min_date, max_date, excluded_dates, included_dates,
        )
        self.multi = bool(multi)
        self.on_change = on_change
        self.on_month_change = on_month_change
        self.is_loading = is_loading

        if browsing_month is None:
            browsing_month = date.today()
        try:
            self._browsing_month = month_start(browsing_month)
        except (TypeError, ValueError) as exc:
            raise PickerConfigError(f"invalid browsing_month: {browsing_month!r}") from exc

    @classmethod
    def from_settings(cls, settings: dict, **kwargs) -> "DatePicker":
        """Build a picker from a settings dict (see settings.load_settings)."""
        return cls(
            week_start=settings.get("week_start", 0),
            min_date=settings.get("min_date"),
            max_date=settings.get("max_date"),
            excluded_dates=settings.get("excluded_dates") or (),
            included_dates=settings.get("included_dates"),
            multi=settings.get("multi", False),
            **kwargs,
        )

    # ------------------------------------------------------------------
    # Browsing month
    # ------------------------------------------------------------------
    @property
    def browsing_month(self) -> date:
        return self._browsing_month

    def can_go_back(self, today: date | None = None) -> bool:
        return can_go_back(self._browsing_month, today)

    def shift(self, delta: int) -> list[Effect]:
        """Move the browsing month by delta months. Never clamped."""
        self._browsing_month = shift_month(self._browsing_month, delta)
        logger.debug("browsing month shifted by %+d to %s", delta, self._browsing_month)
        return self._emit([MonthChanged(self._browsing_month)])

    def go_to(self, day: Any) -> list[Effect]:
        """Browse the month containing day."""
        self._browsing_month = month_start(day)
        logger.debug("browsing month set to %s", self._browsing_month)
        return self._emit([MonthChanged(self._browsing_month)])

    # ------------------------------------------------------------------
    # Grid and selection
    # ------------------------------------------------------------------
    def empty_selection(self) -> Selection:
        return empty_selection(self.multi)

    def cells(self, selection: Selection, today: date | None = None) -> list[GridCell]:
        self._check_variant(selection)
        return build_grid(
            self._browsing_month, self.week_start, self.constraints, selection, today=today,
        )

    def is_eligible(self, day: Any, today: date | None = None) -> bool:
        return is_eligible(parse_day(day), self.constraints, today=today)

    def click(
        self, day: Any, selection: Selection, today: date | None = None,
    ) -> tuple[Selection, list[Effect]]:
        """Apply a click on day and return (next selection, effects).

        Clicks while loading or on an ineligible day are ignored.
        """
        self._check_variant(selection)
        day = parse_day(day)
        if self.is_loading:
            logger.debug("click on %s ignored while loading", day)
            return selection, []
        if not self.is_eligible(day, today=today):
            logger.debug("click on ineligible day %s ignored", day)
            return selection, []

        nxt = apply_click(day, selection)
        logger.debug("selection %r -> %r", selection, nxt)
        return nxt, self._emit([SelectionChanged(nxt), ScrollIntoView(day)])

    def clear(self) -> tuple[Selection, list[Effect]]:
        """Return an empty selection and a SelectionChanged effect.

        on_change only ever receives a date in single mode, so clearing a
        single picker is reported through the effect alone.
        """
        empty = self.empty_selection()
        return empty, self._emit([SelectionChanged(empty)])

    def click_handlers(
        self, cells: Iterable[GridCell], selection: Selection, today: date | None = None,
    ) -> dict[str, Callable[[], tuple[Selection, list[Effect]]]]:
        """Return {cell key: handler} for every enabled day cell.

        Each handler applies a click on its day against selection.
        Nothing is bound while loading.
        """
        if self.is_loading:
            return {}
        handlers = {}
        for cell in cells:
            if isinstance(cell, DayCell) and not cell.disabled:
                handlers[cell.key] = (
                    lambda d=cell.date: self.click(d, selection, today=today)
                )
        return handlers

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _check_variant(self, selection: Selection) -> None:
        expected = Multi if self.multi else Single
        if not isinstance(selection, expected):
            raise PickerConfigError(
                f"{'multi' if self.multi else 'single'} picker got selection {selection!r}"
            )

    def _emit(self, effects: list[Effect]) -> list[Effect]:
        for effect in effects:
            if isinstance(effect, SelectionChanged) and self.on_change is not None:
                if effect.selection == Single():
                    continue
                self.on_change(change_value(effect.selection))
            elif isinstance(effect, MonthChanged) and self.on_month_change is not None:
                self.on_month_change(effect.month)
        return effects
