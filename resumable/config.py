"""Runtime switches read from the environment.

``RESUMABLE_DEBUG`` (``1``, ``true`` or ``yes``) turns on the package's loguru
records at import time. Without it the package logger stays disabled, so an
application only sees driver traces after opting in.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from loguru import logger

DEBUG_ENV_VAR = "RESUMABLE_DEBUG"

_TRUTHY = ("1", "true", "yes")


def debug_requested(environ: Mapping[str, str] | None = None) -> bool:
    env = os.environ if environ is None else environ
    return env.get(DEBUG_ENV_VAR, "").lower() in _TRUTHY


def enable_debug_logging() -> None:
    logger.enable("resumable")


def disable_debug_logging() -> None:
    logger.disable("resumable")


def configure_logging(environ: Mapping[str, str] | None = None) -> bool:
    """Enable or disable package logging from ``environ``; return the decision."""
    if debug_requested(environ):
        enable_debug_logging()
        return True
    disable_debug_logging()
    return False


__all__ = [
    "DEBUG_ENV_VAR",
    "configure_logging",
    "debug_requested",
    "disable_debug_logging",
    "enable_debug_logging",
]
