"""Event names attached to scanner log records."""

SCANNER_EVENTS: set[str] = {"grow", "compact", "clear", "exhausted"}
