"""Logging handlers for scanner diagnostics."""

import logging

from rich.console import Console

from readscan.io.formatters import EventFormatter


class ConsoleHandler(logging.Handler):
    """Prints formatted records to a Rich console."""

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console
        self.setFormatter(EventFormatter())

    def emit(self, record: logging.LogRecord) -> None:
        self.console.print(self.format(record), style="dim", highlight=False)
