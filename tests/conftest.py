"""Shared pytest fixtures for the solver option test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from solver_options.config.environment import gurobi_enabled
from solver_options.config.store import Options, get_options


# ---------------------------------------------------------------------------
# Store fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def options() -> Options:
    """A freshly constructed store holding only defaults."""
    return Options()


@pytest.fixture()
def process_options() -> Iterator[Options]:
    """The process-wide store, rebuilt before and discarded after the test."""
    get_options.cache_clear()
    yield get_options()
    get_options.cache_clear()


@pytest.fixture(autouse=True)
def _clear_backend_probe():
    """Keep the cached backend probe from leaking between tests."""
    gurobi_enabled.cache_clear()
    yield
    gurobi_enabled.cache_clear()
