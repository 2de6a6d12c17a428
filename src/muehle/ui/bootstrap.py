"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Log to stderr; ``MUEHLE_LOG_LEVEL`` overrides the WARNING default."""
    level_name = os.environ.get("MUEHLE_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    if level_name != logging.getLevelName(level):
        _LOGGER.warning("Unknown MUEHLE_LOG_LEVEL %r, using WARNING", level_name)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from muehle.ui.theme import APP_STYLE

    app.setApplicationName("Mühle")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from muehle.ui.main_window import MainWindow

    _configure_logging()
    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow()
    window.show()

    return app.exec()
