"""Core components: the scanner, its configuration, and its errors."""

from readscan.core.config import DEFAULT_CAPACITY, ScannerConfig
from readscan.core.errors import EndOfInput, HorizonError, ScannerError
from readscan.core.scanner import Scanner

__all__ = [
    "Scanner",
    "ScannerConfig",
    "DEFAULT_CAPACITY",
    "ScannerError",
    "EndOfInput",
    "HorizonError",
]
