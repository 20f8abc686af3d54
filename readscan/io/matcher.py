"""Anchored pattern matching over the scanner's unconsumed window."""

from __future__ import annotations

import re
from typing import NamedTuple, Protocol, runtime_checkable

import regex


class MatchResult(NamedTuple):
    """Outcome of one anchored match attempt.

    ``end`` is relative to the start of the window. ``hit_end`` is set when
    the window edge limited the outcome, so more input could change it.
    """

    matched: bool
    end: int
    hit_end: bool

@runtime_checkable
class Matcher(Protocol):
    """Protocol for anchored matchers."""

    def match(self, _text: str) -> MatchResult: ...


PatternLike = str | re.Pattern[str] | regex.Pattern | Matcher

# re and regex disagree on some flag values, ASCII among them
RE_FLAGS = {
    re.IGNORECASE: regex.IGNORECASE,
    re.MULTILINE: regex.MULTILINE,
    re.DOTALL: regex.DOTALL,
    re.VERBOSE: regex.VERBOSE,
    re.ASCII: regex.ASCII,
    re.UNICODE: regex.UNICODE,
}


class RegexMatcher:
    """Adapts a ``regex`` pattern to the Matcher protocol.

    Partial matching tells a certain failure (``[a-z]`` against ``"1"``) from
    one that more input could still turn into a match (``ab`` against
    ``"a"``). A match ending exactly at the window edge counts as
    boundary-limited, since a greedy pattern might extend it.

    ``re`` patterns are recompiled with ``regex`` using the same flags.
    """

    def __init__(self, pattern: str | re.Pattern[str] | regex.Pattern, flags: int = 0) -> None:
        if isinstance(pattern, str):
            self.pattern = regex.compile(pattern, flags)
            return
        if flags:
            raise ValueError("cannot process flags argument with a compiled pattern")
        if isinstance(pattern, re.Pattern):
            for re_flag, regex_flag in RE_FLAGS.items():
                if pattern.flags & re_flag:
                    flags |= regex_flag
            pattern = regex.compile(pattern.pattern, flags)
        self.pattern = pattern

    def match(self, text: str) -> MatchResult:
        m = self.pattern.match(text, partial=True)
        if m is None:
            # An empty window has not been examined yet
            return MatchResult(matched=False, end=0, hit_end=not text)
        if m.partial:
            complete = self.pattern.match(text)
            if complete is None:
                return MatchResult(matched=False, end=0, hit_end=True)
            return MatchResult(matched=True, end=complete.end(), hit_end=True)
        return MatchResult(matched=True, end=m.end(), hit_end=m.end() == len(text))

    def __repr__(self) -> str:
        return f"RegexMatcher({self.pattern.pattern!r})"


def as_matcher(pattern: PatternLike) -> Matcher:
    """Coerce a regex string, compiled pattern, or matcher into a Matcher."""
    if isinstance(pattern, (str, re.Pattern, regex.Pattern)):
        return RegexMatcher(pattern)
    if isinstance(pattern, Matcher):
        return pattern
    raise TypeError(f"expected a pattern or Matcher, got {type(pattern).__name__}")
