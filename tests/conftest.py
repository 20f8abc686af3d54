"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
from io import StringIO

import pytest
from rich.console import Console


@pytest.fixture
def console() -> Console:
    """Create a Rich console that records into a string."""
    return Console(file=StringIO(), width=120)


@pytest.fixture(autouse=True)
def restore_logger():
    """Undo handlers and levels that tests attach to the readscan logger."""
    log = logging.getLogger("readscan")
    handlers, level = list(log.handlers), log.level
    yield
    log.handlers = handlers
    log.setLevel(level)
