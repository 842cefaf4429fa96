"""Month date picker window (tkinter) hosting a DatePicker."""

import calendar as _cal
import logging
from datetime import date
from tkinter import font as tkfont
import tkinter as tk

from PIL import ImageTk

from calendar_logic import canonical_key, weekday_names
from grid import DayCell, week_rows
from icon_gen import create_icon_image
from picker import DatePicker, MonthChanged, ScrollIntoView, SelectionChanged
from selection import selected_days
from settings import load_settings, save_settings

logger = logging.getLogger(__name__)

# Colours
ACCENT = "#0078D4"
DAY_BG = "#F3F3F3"
GRID_BG = "white"
DISABLED_FG = "#BBBBBB"
LOADING_BG = "#FAFAFA"


class DatePickerWindow:
    """Single-month picker: navigation row, weekday header, day grid, footer.

    The window is the selection's host. It keeps the current selection,
    passes it to the picker on every render and applies the effects the
    picker hands back.
    """

    def __init__(self, settings: dict | None = None, on_change=None,
                 on_month_change=None, settings_path: str | None = None,
                 master: tk.Misc | None = None) -> None:
        self._settings_path = settings_path
        if settings is None:
            settings = load_settings(settings_path)
        self._saved_width: int | None = settings.get("window_width")
        self._saved_height: int | None = settings.get("window_height")

        self.picker = DatePicker.from_settings(
            settings, on_change=on_change, on_month_change=on_month_change,
        )
        self.selection = self.picker.empty_selection()

        self.root = tk.Toplevel(master) if master is not None else tk.Tk()
        self.root.title("Mini Date Picker")
        self.root.configure(bg=GRID_BG)
        self._setup_fonts()

        # Day-cell key -> widget, refilled on every render
        self._cell_widgets: dict[str, tk.Label] = {}
        self._build_shell()

        self._icon = ImageTk.PhotoImage(create_icon_image(date.today().day), master=self.root)
        self.root.iconphoto(False, self._icon)

        self.render()

        if self._saved_width and self._saved_height:
            self.root.geometry(f"{self._saved_width}x{self._saved_height}")
        self.root.bind("<Escape>", self._on_escape)
        self.root.protocol("WM_DELETE_WINDOW", self.close)

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(root=self.root, family=base, size=9)
        self.font_bold = tkfont.Font(root=self.root, family=base, size=9, weight="bold")
        self.font_header = tkfont.Font(root=self.root, family=base, size=11, weight="bold")
        self.font_nav = tkfont.Font(root=self.root, family=base, size=12, weight="bold")

    # ------------------------------------------------------------------
    # Build shell (once): header with nav, weekday row, grid placeholder, footer
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        outer = tk.Frame(self.root, bg=GRID_BG)
        outer.pack(padx=8, pady=6)

        nav = tk.Frame(outer, bg=GRID_BG)
        nav.pack(fill="x", pady=(0, 4))

        self._header = tk.Label(nav, font=self.font_header, bg=GRID_BG, fg="#333333")
        self._header.pack(side="left")

        self._btn_next = tk.Label(
            nav, text="▶", font=self.font_nav, bg=GRID_BG, cursor="hand2",
        )
        self._btn_next.pack(side="right", padx=4)
        self._btn_next.bind("<Button-1>", lambda _e: self.navigate(1))

        self._btn_prev = tk.Label(nav, text="◀", font=self.font_nav, bg=GRID_BG)
        self._btn_prev.pack(side="right", padx=4)
        self._btn_prev.bind("<Button-1>", lambda _e: self.navigate(-1))

        weekdays = tk.Frame(outer, bg=GRID_BG)
        weekdays.pack(fill="x")
        for col, name in enumerate(weekday_names(self.picker.week_start, "short")):
            tk.Label(
                weekdays, text=name.upper(), font=self.font_bold, bg=GRID_BG,
                fg="#888888", width=4,
            ).grid(row=0, column=col, padx=1, pady=(0, 2))

        self._grid_frame = tk.Frame(outer, bg=GRID_BG)
        self._grid_frame.pack()

        self._footer_label = tk.Label(
            outer, font=self.font_normal, bg=GRID_BG, fg="#555555",
        )
        self._footer_label.pack(pady=(6, 0))

    # ------------------------------------------------------------------
    # Render the browsing month from scratch
    # ------------------------------------------------------------------
    def render(self) -> None:
        month = self.picker.browsing_month
        self._header.configure(text=f"{_cal.month_name[month.month]}, {month.year}")

        back_ok = self.picker.can_go_back()
        self._btn_prev.configure(
            fg="black" if back_ok else DISABLED_FG,
            cursor="hand2" if back_ok else "",
        )

        for child in self._grid_frame.winfo_children():
            child.destroy()
        self._cell_widgets.clear()

        today = date.today()
        cells = self.picker.cells(self.selection, today=today)
        handlers = self.picker.click_handlers(cells, self.selection, today=today)

        for r, row in enumerate(week_rows(cells)):
            for c, cell in enumerate(row):
                if not isinstance(cell, DayCell):
                    lbl = tk.Label(self._grid_frame, bg=GRID_BG, width=4)
                elif self.picker.is_loading:
                    lbl = tk.Label(
                        self._grid_frame, text="·", bg=LOADING_BG,
                        fg=DISABLED_FG, width=4,
                    )
                else:
                    lbl = self._day_label(cell, cell.date == today)
                    handler = handlers.get(cell.key)
                    if handler is not None:
                        lbl.bind("<Button-1>", lambda _e, h=handler: self._on_day(h))
                    self._cell_widgets[cell.key] = lbl
                lbl.grid(row=r, column=c, padx=1, pady=1, ipady=3)

        self._footer_label.configure(text=self._footer_text())

    def _day_label(self, cell: DayCell, is_today: bool) -> tk.Label:
        if cell.active:
            bg, fg = ACCENT, "white"
        elif cell.disabled:
            bg, fg = GRID_BG, DISABLED_FG
        else:
            bg, fg = DAY_BG, "black"
        return tk.Label(
            self._grid_frame, text=str(cell.date.day), bg=bg, fg=fg, width=4,
            font=self.font_bold if is_today else self.font_normal,
            cursor="" if cell.disabled else "hand2",
            takefocus=not cell.disabled,
        )

    # ------------------------------------------------------------------
    # Effects from the picker
    # ------------------------------------------------------------------
    def _on_day(self, handler) -> None:
        self.selection, effects = handler()
        self._apply(effects)

    def _apply(self, effects) -> None:
        if not effects:
            return
        focus_day = None
        for effect in effects:
            if isinstance(effect, SelectionChanged):
                self.selection = effect.selection
            elif isinstance(effect, ScrollIntoView):
                focus_day = effect.day
            elif isinstance(effect, MonthChanged):
                logger.debug("Showing %s", effect.month.strftime("%B %Y"))
        self.render()
        if focus_day is not None:
            widget = self._cell_widgets.get(f"day-{canonical_key(focus_day)}")
            if widget is not None:
                widget.focus_set()

    # ------------------------------------------------------------------
    # Navigation and loading state
    # ------------------------------------------------------------------
    def navigate(self, delta: int) -> None:
        if delta < 0 and not self.picker.can_go_back():
            return
        self._apply(self.picker.shift(delta))

    def set_loading(self, loading: bool) -> None:
        self.picker.is_loading = loading
        self.render()

    # ------------------------------------------------------------------
    # Footer text
    # ------------------------------------------------------------------
    def _footer_text(self) -> str:
        days = selected_days(self.selection)
        if not days:
            return "No date selected"
        if len(days) == 1:
            return f"Selected: {days[0].strftime('%d.%m.%Y')}"
        listed = ", ".join(d.strftime('%d.%m') for d in days[:5])
        more = f" +{len(days) - 5}" if len(days) > 5 else ""
        return f"{len(days)} dates: {listed}{more}"

    # ------------------------------------------------------------------
    # ESC clears the selection
    # ------------------------------------------------------------------
    def _on_escape(self, _event: tk.Event) -> None:
        if selected_days(self.selection):
            self.selection, effects = self.picker.clear()
            self._apply(effects)

    # ------------------------------------------------------------------
    # Persist window size and close
    # ------------------------------------------------------------------
    def _persist_size(self) -> None:
        settings = load_settings(self._settings_path)
        settings["window_width"] = self.root.winfo_width()
        settings["window_height"] = self.root.winfo_height()
        try:
            save_settings(settings, self._settings_path)
        except OSError as exc:
            logger.warning("Could not save window size: %s", exc)

    def close(self) -> None:
        self._persist_size()
        self.root.destroy()
