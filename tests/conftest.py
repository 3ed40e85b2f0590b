"""Pytest configuration and shared fixtures."""

import logging
from collections.abc import Generator

import pytest

from vecangle.config import get_settings
from vecangle.logging_config import DevFormatter, JSONFormatter
from vecangle.vectors.models import Vector


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Reload settings from the environment for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_root_handlers() -> Generator[None, None, None]:
    """Drop handlers installed by setup_logging during a test.

    They hold the test's captured stderr, which is closed afterwards.
    """
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler.formatter, (DevFormatter, JSONFormatter)):
            root.removeHandler(handler)


@pytest.fixture
def five_vectors() -> list[Vector]:
    """The five 3-dimensional vectors of the reference dataset."""
    return [
        Vector.of(1, 2, 3),
        Vector.of(4, 5, 6),
        Vector.of(7, 8, 9),
        Vector.of(10, 11, 12),
        Vector.of(13, 14, 15),
    ]
