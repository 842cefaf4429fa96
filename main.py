"""Entry point: loads settings, configures logging, runs the picker window."""

import logging
import os
import sys

from calendar_window import DatePickerWindow
from errors import PickerConfigError
from settings import load_settings

logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False) -> None:
    """Root logging setup; DATE_PICKER_DEBUG=1 forces DEBUG level."""
    if os.getenv("DATE_PICKER_DEBUG", "").lower() in ("1", "true", "yes"):
        debug = True
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    configure_logging("--debug" in sys.argv[1:])
    settings = load_settings()

    def on_change(value) -> None:
        logger.info("Selection changed: %s", value)

    def on_month_change(month) -> None:
        logger.info("Browsing %s", month.strftime("%B %Y"))

    try:
        win = DatePickerWindow(settings, on_change=on_change, on_month_change=on_month_change)
    except PickerConfigError as exc:
        logger.error("Invalid picker settings: %s", exc)
        raise SystemExit(2) from exc

    win.root.mainloop()


if __name__ == "__main__":
    main()
