"""Shared fixtures for the resumable test suite."""

from typing import Any

import pytest
from loguru import logger

from resumable.config import disable_debug_logging, enable_debug_logging
from resumable.slot import ExchangeSlot


@pytest.fixture
def slot() -> ExchangeSlot:
    return ExchangeSlot()


@pytest.fixture
def log_records():
    """Collect the package's loguru records at TRACE level and above."""
    records: list[dict[str, Any]] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="TRACE")
    enable_debug_logging()
    try:
        yield records
    finally:
        disable_debug_logging()
        logger.remove(handler_id)
