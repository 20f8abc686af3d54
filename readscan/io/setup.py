"""Logger setup and wiring."""

from __future__ import annotations

import logging

from rich.console import Console

from readscan.io.filters import EventFilter
from readscan.io.handlers import ConsoleHandler
from readscan.io.events import SCANNER_EVENTS


def setup_logging(
    console: Console,
    level: int = logging.DEBUG,
    events: set[str] | None = None,
) -> tuple[logging.Logger, ConsoleHandler]:
    """Configure the readscan logger to report buffer events on ``console``."""
    log = logging.getLogger("readscan")
    log.setLevel(level)

    handler = ConsoleHandler(console)
    handler.addFilter(EventFilter(SCANNER_EVENTS if events is None else events))
    log.addHandler(handler)

    return log, handler
