"""Logging helpers shared by the client, gateway and parser modules."""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "taiwan_bank_rates"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_configured = False


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Return a logger, installing the package log format on first use."""
    global _configured
    if not _configured:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        _configured = True
    return logging.getLogger(name)


def set_log_level(level: int | str) -> None:
    """Adjust verbosity for every logger below :data:`PACKAGE_LOGGER`."""

    get_logger().setLevel(level)


__all__ = ["LOG_FORMAT", "PACKAGE_LOGGER", "get_logger", "set_log_level"]
