"""Tests for the entry point's logging setup."""

import logging

import pytest

pytest.importorskip("tkinter")

import main  # noqa: E402


@pytest.fixture
def basic_config(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    return calls


def test_info_level_by_default(basic_config, monkeypatch):
    monkeypatch.delenv("DATE_PICKER_DEBUG", raising=False)
    main.configure_logging()
    assert basic_config[0]["level"] == logging.INFO
    assert "%(levelname)s" in basic_config[0]["format"]


def test_debug_flag(basic_config, monkeypatch):
    monkeypatch.delenv("DATE_PICKER_DEBUG", raising=False)
    main.configure_logging(debug=True)
    assert basic_config[0]["level"] == logging.DEBUG


@pytest.mark.parametrize("value", ["1", "true", "YES"])
def test_env_var_forces_debug(basic_config, monkeypatch, value):
    monkeypatch.setenv("DATE_PICKER_DEBUG", value)
    main.configure_logging(debug=False)
    assert basic_config[0]["level"] == logging.DEBUG


def test_env_var_other_values_ignored(basic_config, monkeypatch):
    monkeypatch.setenv("DATE_PICKER_DEBUG", "0")
    main.configure_logging()
    assert basic_config[0]["level"] == logging.INFO
