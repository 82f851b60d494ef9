"""
BTC Widget - PyQt6 desktop Bitcoin ticker
Main entry point.
"""

import logging
import os
import sys

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QApplication

from config.settings import get_settings_manager
from core.logger import setup_logging
from ui.main_window import MainWindow

__version__ = "1.0.0"


def main():
    """Main application entry point."""
    log_level_env = os.environ.get("LOG_LEVEL", "INFO").upper()
    setup_logging(log_level=getattr(logging, log_level_env, logging.INFO))

    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv)
    app.setApplicationName("BTC Widget")
    app.setApplicationVersion(__version__)

    settings_manager = get_settings_manager()

    window = MainWindow(settings_manager=settings_manager)
    window.show()
    window.start()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
