"""
Logging configuration for BTC Widget.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"


def default_log_dir() -> Path:
    if os.name == "nt":  # Windows
        return Path(os.environ.get("APPDATA", "")) / "btc-widget" / "logs"
    return Path.home() / ".config" / "btc-widget" / "logs"


def setup_logging(log_dir: Path | None = None, log_level: int = logging.INFO) -> Path:
    """
    Configure the root logger with a rotating file and stdout.

    Args:
        log_dir: Directory for app.log. Defaults to the user config directory.
        log_level: Logging level (default: logging.INFO)

    Returns:
        Path of the log file
    """
    log_dir = log_dir or default_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "app.log"

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding="utf-8",
    )
    console_handler = logging.StreamHandler(sys.stdout)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    # Replace handlers so repeated setup does not duplicate output
    root_logger.handlers = []
    for handler in (file_handler, console_handler):
        handler.setFormatter(formatter)
        handler.setLevel(log_level)
        root_logger.addHandler(handler)

    # Connection pool chatter drowns out the one request per refresh
    logging.getLogger("urllib3").setLevel(max(log_level, logging.WARNING))

    logging.info(f"Logging initialized. Log file: {log_file}")
    return log_file
