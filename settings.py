"""JSON-based settings persistence for the date picker."""

import json
import logging
import os

from calendar_logic import parse_day

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".mini-date-picker-settings.json")

_DEFAULTS = {
    "week_start": 0,
    "multi": False,
    "min_date": None,
    "max_date": None,
    "excluded_dates": [],
    "included_dates": None,
    "window_width": None,
    "window_height": None,
}


def settings_path() -> str:
    """Settings file location; DATE_PICKER_SETTINGS overrides the default."""
    return os.environ.get("DATE_PICKER_SETTINGS") or _SETTINGS_PATH


def _is_day(value) -> bool:
    try:
        parse_day(value)
    except (TypeError, ValueError):
        return False
    return True


def _date_list(stored: dict, key: str) -> list[str] | None:
    """Return the string entries of a stored date list, or None if unusable."""
    value = stored[key]
    if not isinstance(value, list):
        logger.warning("Ignoring %s: expected a list, got %r", key, value)
        return None
    entries = [v for v in value if isinstance(v, str)]
    if len(entries) != len(value):
        logger.warning("Dropped non-string entries from %s", key)
    bad = [v for v in entries if not _is_day(v)]
    if bad:
        # Kept: a malformed key never matches a real day
        logger.warning("%s contains entries that are not YYYY-MM-DD dates: %s", key, bad)
    return entries


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing or invalid keys."""
    settings = dict(_DEFAULTS)
    settings["excluded_dates"] = []
    path = path or settings_path()
    try:
        with open(path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Could not read settings from %s: %s", path, exc)
        return settings
    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file %s: top level is not an object", path)
        return settings

    if "week_start" in stored:
        ws = stored["week_start"]
        if isinstance(ws, int) and not isinstance(ws, bool) and 0 <= ws <= 6:
            settings["week_start"] = ws
        else:
            logger.warning("Ignoring week_start %r: expected 0..6", ws)
    if "multi" in stored and isinstance(stored["multi"], bool):
        settings["multi"] = stored["multi"]
    for key in ("min_date", "max_date"):
        if stored.get(key) is None:
            continue
        if isinstance(stored[key], str) and _is_day(stored[key]):
            settings[key] = stored[key]
        else:
            logger.warning("Ignoring %s %r: expected YYYY-MM-DD", key, stored[key])
    if "excluded_dates" in stored:
        entries = _date_list(stored, "excluded_dates")
        if entries is not None:
            settings["excluded_dates"] = entries
    if stored.get("included_dates") is not None:
        settings["included_dates"] = _date_list(stored, "included_dates")
    for key in ("window_width", "window_height"):
        if key in stored and isinstance(stored[key], int):
            settings[key] = stored[key]
    return settings


def save_settings(settings: dict, path: str | None = None) -> None:
    """Persist settings to disk."""
    with open(path or settings_path(), "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
