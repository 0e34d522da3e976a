"""Fixtures isolating the package logger between logging tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from devprops.platform.logging import LOGGER_NAME


@pytest.fixture(autouse=True)
def restore_package_logger() -> Iterator[None]:
    """Restore handlers and level on the package logger after each test."""

    package_logger = logging.getLogger(LOGGER_NAME)
    original_handlers = list(package_logger.handlers)
    original_level = package_logger.level
    try:
        yield None
    finally:
        for handler in list(package_logger.handlers):
            if handler not in original_handlers:
                handler.close()
        package_logger.handlers[:] = original_handlers
        package_logger.setLevel(original_level)
