"""Logging configuration.

Level comes from the LOG_LEVEL environment variable (default WARNING so
CLI output stays clean; set LOG_LEVEL=INFO to echo sink lines).
"""

import logging
import os


def configure_logging() -> None:
    _log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, _log_level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
        datefmt="%H:%M:%S"
    )
