"""
Smoke test for the tkinter picker window.

Needs a display; skipped otherwise.
"""

from datetime import date

import pytest

tk = pytest.importorskip("tkinter")

from calendar_logic import canonical_key, month_start, next_month  # noqa: E402
from selection import Multi  # noqa: E402


@pytest.fixture
def root():
    try:
        r = tk.Tk()
    except tk.TclError:
        pytest.skip("no display available")
    r.withdraw()
    yield r
    r.destroy()


@pytest.fixture
def window(root, tmp_path):
    from calendar_window import DatePickerWindow

    changes = []
    settings = {
        "week_start": 1,
        "multi": True,
        "min_date": None,
        "excluded_dates": [],
        "included_dates": None,
    }
    win = DatePickerWindow(
        settings, on_change=changes.append,
        settings_path=str(tmp_path / "picker.json"), master=root,
    )
    win.changes = changes
    return win


def test_renders_current_month(window):
    this_month = month_start(date.today())
    assert window.picker.browsing_month == this_month
    assert str(this_month.year) in window._header.cget("text")
    assert f"day-{canonical_key(this_month)}" in window._cell_widgets


def test_back_is_inert_on_current_month(window):
    start = window.picker.browsing_month
    window.navigate(-1)
    assert window.picker.browsing_month == start

    window.navigate(1)
    assert window.picker.browsing_month == next_month(start)
    window.navigate(-1)
    assert window.picker.browsing_month == start


def test_clicking_a_day_updates_host_selection(window):
    window.navigate(1)
    day = window.picker.browsing_month.replace(day=2)
    handler = window.picker.click_handlers(
        window.picker.cells(window.selection), window.selection,
    )[f"day-{canonical_key(day)}"]

    window._on_day(handler)

    assert window.selection == Multi((day,))
    assert window.changes == [(day,)]
    assert "Selected" in window._footer_label.cget("text")


def test_loading_hides_day_cells(window):
    window.set_loading(True)
    assert window._cell_widgets == {}
    window.set_loading(False)
    assert window._cell_widgets


def test_clicked_day_receives_focus(window, monkeypatch):
    focused = []
    monkeypatch.setattr(tk.Label, "focus_set", lambda self: focused.append(self))

    window.navigate(1)
    day = window.picker.browsing_month.replace(day=5)
    key = f"day-{canonical_key(day)}"
    handler = window.picker.click_handlers(
        window.picker.cells(window.selection), window.selection,
    )[key]

    window._on_day(handler)

    assert focused == [window._cell_widgets[key]]
