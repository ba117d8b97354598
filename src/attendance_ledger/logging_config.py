from __future__ import annotations

import logging
import sys

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | int = "INFO", *, log_file: str | None = None) -> logging.Logger:
    """Attach handlers to the package logger once; later calls only adjust the level."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    base_logger = logging.getLogger("attendance_ledger")
    base_logger.setLevel(level)
    if base_logger.handlers:
        return base_logger

    base_logger.propagate = False
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base_logger.addHandler(stream_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            base_logger.addHandler(file_handler)
        except OSError as exc:
            base_logger.warning("Failed to configure logfile '%s': %s", log_file, exc)

    return base_logger
