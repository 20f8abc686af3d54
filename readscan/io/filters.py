"""Logging filters for event-based routing."""

import logging


class EventFilter(logging.Filter):
    """Filter log records by event attribute."""

    def __init__(self, events: set[str]) -> None:
        super().__init__()
        self.events = events

    def filter(self, record: logging.LogRecord) -> bool:
        return getattr(record, "event", None) in self.events
