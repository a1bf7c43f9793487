"""Fixtures for infrastructure.logging tests."""

import logging

import pytest

from simple_i18n.infrastructure.logging import setup
from simple_i18n.infrastructure.logging.setup import LOGGER_NAME


@pytest.fixture(autouse=True)
def restore_logging_config():
    """Restore the library logger state changed by a test."""
    processors = list(setup._processors)  # pylint: disable=protected-access
    stdlib_logger = logging.getLogger(LOGGER_NAME)
    level = stdlib_logger.level
    handlers = list(stdlib_logger.handlers)
    yield
    setup._processors[:] = processors  # pylint: disable=protected-access
    stdlib_logger.setLevel(level)
    stdlib_logger.handlers[:] = handlers
