"""Exceptions raised by the date picker."""


class PickerError(Exception):
    """Base class for date picker errors."""


class PickerConfigError(PickerError, ValueError):
    """Picker configuration violates its contract (bad week start, bounds, ...)."""
