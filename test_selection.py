"""Tests for single replace and multi toggle selection semantics."""

from datetime import date, datetime

import pytest

from selection import (
    Multi,
    Single,
    apply_click,
    change_value,
    empty_selection,
    selected_days,
    selected_keys,
)

D1 = date(2024, 3, 10)
D2 = date(2024, 3, 12)
D3 = date(2024, 3, 20)


@pytest.mark.parametrize("previous", [None, D1, D2])
def test_single_click_replaces(previous):
    assert apply_click(D3, Single(previous)) == Single(D3)


def test_multi_click_appends_absent_day_at_end():
    result = apply_click(D1, Multi((D3, D2)))
    assert result.days == (D3, D2, D1)


def test_multi_click_removes_present_day_keeping_order():
    result = apply_click(D2, Multi((D1, D2, D3)))
    assert result.days == (D1, D3)


def test_multi_click_matches_by_day_not_time():
    result = apply_click(datetime(2024, 3, 12, 15, 0), Multi((D1, D2)))
    assert result.days == (D1,)


@pytest.mark.parametrize("start", [(), (D1,), (D1, D2), (D3, D1, D2)])
@pytest.mark.parametrize("day", [D1, D2, D3])
def test_multi_double_click_restores_membership(start, day):
    selection = Multi(start)
    twice = apply_click(day, apply_click(day, selection))
    assert selected_keys(twice) == selected_keys(selection)
    assert len(twice.days) == len(selection.days)


def test_multi_double_click_on_absent_day_restores_exact_value():
    selection = Multi((D3, D1))
    assert apply_click(D2, apply_click(D2, selection)) == selection


def test_apply_click_does_not_mutate_input():
    selection = Multi((D1,))
    apply_click(D2, selection)
    assert selection.days == (D1,)


def test_multi_of_drops_duplicate_keys():
    selection = Multi.of([D1, datetime(2024, 3, 10, 9, 0), D2])
    assert selection.days == (D1, D2)


def test_flattening_helpers():
    assert selected_days(Single()) == ()
    assert selected_days(Single(D1)) == (D1,)
    assert selected_keys(Multi((D1, D2))) == {"2024-03-10", "2024-03-12"}
    assert change_value(Single(D1)) == D1
    assert change_value(Multi((D1, D2))) == (D1, D2)


def test_empty_selection_variant():
    assert empty_selection(False) == Single()
    assert empty_selection(True) == Multi()


def test_multi_constructor_drops_duplicates():
    selection = Multi((D1, D1, datetime(2024, 3, 10, 8, 0), D2))
    assert selection.days == (D1, D2)


def test_multi_list_payload_becomes_tuple():
    selection = Multi([D1, D2])
    assert selection == Multi((D1, D2))
    assert hash(selection) == hash(Multi((D1, D2)))


def test_duplicate_days_do_not_survive_a_click():
    result = apply_click(D2, Multi((D1, D1)))
    assert result.days == (D1, D2)
