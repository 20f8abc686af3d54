"""Scanner exception types."""


class ScannerError(Exception):
    """Base class for errors raised by the scanner."""


class EndOfInput(ScannerError, EOFError):
    """A character was requested but the source is exhausted."""


class HorizonError(ScannerError, ValueError):
    """The requested lookahead horizon cannot be honoured."""

    def __init__(self, horizon: int, capacity: int) -> None:
        super().__init__(f"horizon {horizon} is invalid for a buffer of capacity {capacity}")
        self.horizon = horizon
        self.capacity = capacity
