"""Entry point for the lunch-tray Textual app."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.logging import TextualHandler

from lunch_tray.config import resolve_debug_log_path, resolve_log_level
from lunch_tray.lunch_tray_app import LunchTrayApp

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(log_path: str | None = None, level: str | None = None) -> None:
    """
    Send records to the Textual devtools console and to the debug log file.

    The console honours LUNCH_TRAY_LOG_LEVEL; the debug file always records DEBUG.
    """
    debug_log = Path(log_path or resolve_debug_log_path())
    debug_log.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(debug_log, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    console_handler = TextualHandler()
    console_handler.setLevel(level or resolve_log_level())

    logging.basicConfig(
        level=logging.DEBUG,
        handlers=[console_handler, file_handler],
        force=True,
    )


def main() -> None:
    """Run the Textual application."""
    configure_logging()
    LunchTrayApp().run()


if __name__ == "__main__":
    main()
