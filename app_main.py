"""Application entry point for Kubia Timer."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from kubia_timer.constants.about import APP_NAME, APP_VERSION
from kubia_timer.ui.timer_main_window import TimerMainWindow
from kubia_timer.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting %s v%s", APP_NAME, APP_VERSION)

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    window = TimerMainWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
