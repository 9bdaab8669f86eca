"""Shared test fixtures for sdklog test suite."""

import io
from datetime import datetime

import pytest

from sdklog import Logger, stream_sink
from sdklog import manager as _manager_mod


FIXED_TIME = datetime(2017, 6, 1, 12, 0, 0)
STAMP = "2017-06-01 12:00:00"


# ---------------------------------------------------------------------------
# Buffers and sinks
# ---------------------------------------------------------------------------
@pytest.fixture
def out_buf():
    """Buffer standing in for the info-class destination."""
    return io.StringIO()


@pytest.fixture
def err_buf():
    """Buffer standing in for the error-class destination."""
    return io.StringIO()


@pytest.fixture
def sink(out_buf, err_buf):
    return stream_sink((out_buf, err_buf))


# ---------------------------------------------------------------------------
# Loggers
# ---------------------------------------------------------------------------
@pytest.fixture
def clock():
    """A clock frozen at FIXED_TIME."""
    return lambda: FIXED_TIME


@pytest.fixture
def make_logger(sink, clock):
    """Factory for loggers writing to the out/err buffers."""
    def _make(**options):
        options.setdefault('sink', sink)
        options.setdefault('clock', clock)
        return Logger(**options)
    return _make


@pytest.fixture
def log(make_logger):
    """A Logger at the default level writing to the buffers."""
    return make_logger()


@pytest.fixture
def reset_singleton():
    """Restore the Logger singleton after the test."""
    old = _manager_mod._logger
    _manager_mod._logger = None
    yield
    _manager_mod._logger = old
