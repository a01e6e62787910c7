"""Pytest configuration and fixtures."""

import logging
from collections.abc import Iterator

import pytest
import structlog
from hypothesis import HealthCheck, settings

from nonsmallint import NonSmallInt

# Long division on wide operands can exceed hypothesis' default deadline
settings.register_profile(
    "nonsmallint",
    deadline=None,
    # quiet_structlog only swaps global config, so one run per test is enough
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("nonsmallint")


@pytest.fixture(autouse=True)
def quiet_structlog() -> Iterator[None]:
    """Drop debug events during tests and undo configure() calls made by CLI tests."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING))
    yield
    structlog.reset_defaults()


@pytest.fixture
def debug_logging() -> None:
    """Let debug events through (for structlog.testing.capture_logs)."""
    structlog.reset_defaults()


@pytest.fixture
def big_value() -> NonSmallInt:
    """A value far beyond the native 64-bit range (2^200)."""
    return NonSmallInt.from_str(str(2**200))


@pytest.fixture
def padded_value() -> NonSmallInt:
    """123 stored with three most-significant zero digits."""
    return NonSmallInt([3, 2, 1, 0, 0, 0])
