"""Logging formatters for scanner events."""

import logging


class EventFormatter(logging.Formatter):
    """Formats scanner records with Rich markup based on event."""

    def format(self, record: logging.LogRecord) -> str:
        content = record.getMessage()

        match getattr(record, "event", None):
            case "grow":
                return f"[bold yellow]grow[/] {content}"
            case "compact":
                return f"[bold cyan]compact[/] {content}"
            case "clear":
                return f"[cyan]clear[/] {content}"
            case "exhausted":
                return f"[bold magenta]eof[/] {content}"
            case _:
                return content
