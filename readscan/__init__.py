"""
readscan - buffered, pattern-driven scanning over incremental character sources.

A Scanner pulls characters from a Source on demand and lets callers consume
input by anchored regex matches without managing buffering or partial reads.
"""

from readscan.core.config import ScannerConfig
from readscan.core.errors import EndOfInput, HorizonError, ScannerError
from readscan.core.scanner import Scanner
from readscan.io.matcher import Matcher, MatchResult, RegexMatcher
from readscan.io.sources import END_OF_INPUT, ChunkedSource, Source, StreamSource, StringSource

__version__ = "0.1.0"
__all__ = [
    "Scanner",
    "ScannerConfig",
    "ScannerError",
    "EndOfInput",
    "HorizonError",
    "Matcher",
    "MatchResult",
    "RegexMatcher",
    "Source",
    "END_OF_INPUT",
    "StringSource",
    "ChunkedSource",
    "StreamSource",
]
