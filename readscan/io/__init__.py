"""Scanner collaborators: character sources, matchers, and event logging."""

from readscan.io.events import SCANNER_EVENTS
from readscan.io.filters import EventFilter
from readscan.io.formatters import EventFormatter
from readscan.io.handlers import ConsoleHandler
from readscan.io.matcher import Matcher, MatchResult, RegexMatcher, as_matcher
from readscan.io.setup import setup_logging
from readscan.io.sources import END_OF_INPUT, ChunkedSource, Source, StreamSource, StringSource

__all__ = [
    "SCANNER_EVENTS",
    "EventFilter",
    "EventFormatter",
    "ConsoleHandler",
    "Matcher",
    "MatchResult",
    "RegexMatcher",
    "as_matcher",
    "setup_logging",
    "END_OF_INPUT",
    "Source",
    "StringSource",
    "ChunkedSource",
    "StreamSource",
]
