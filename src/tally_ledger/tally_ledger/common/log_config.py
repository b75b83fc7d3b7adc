"""Logging configuration for the API server and scripts.

Level comes from the settings module (``LOG_LEVEL``), defaulting to INFO.
"""
from __future__ import annotations

import logging
import sys

LOG_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    return LOG_LEVEL_MAP.get(str(level or "INFO").upper(), logging.INFO)


def setup_logging(level: str | int | None = "INFO") -> None:
    """Configure the root logger with a single stdout handler.

    Existing handlers are replaced so repeated app factories don't duplicate output.
    """
    log_level = resolve_level(level)
    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
