"""Logging configuration."""

from __future__ import annotations

import logging
import sys

from pythonjsonlogger import jsonlogger

_HANDLER_NAME = "device_hub"


def setup_logging(log_level: str = "INFO", json_format: bool = True) -> None:
    """Configure root logging on stdout.

    Calling this again replaces the handler installed by a previous call
    instead of adding a second one.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_format: Emit structured JSON instead of plain text
    """
    if json_format:
        formatter: logging.Formatter = jsonlogger.JsonFormatter(  # type: ignore[attr-defined]
            "%(asctime)s %(name)s %(levelname)s %(message)s",
            rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"},
        )
    else:
        formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())
