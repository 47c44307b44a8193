"""Shared fixtures for listings tests."""

import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Collect listings log messages emitted during a test."""
    messages = []
    logger.enable("listings")
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
    logger.disable("listings")
