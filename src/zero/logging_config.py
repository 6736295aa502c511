"""Logging configuration for the CLI process."""

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_file: Path | None, level_name: str = "INFO") -> None:
    """
    Configure the root logger.

    Logs only go to a file since the wizard owns the whole terminal while it
    runs. Without a log file the root logger is left untouched.
    """
    if log_file is None:
        return

    level = getattr(logging, level_name.upper(), logging.INFO)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.setLevel(level)
    for h in root.handlers[:]:
        root.removeHandler(h)
    root.addHandler(handler)
