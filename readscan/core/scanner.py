"""Buffered pattern scanner over an incremental character source."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TextIO

from readscan.core.config import ScannerConfig
from readscan.core.errors import EndOfInput, HorizonError
from readscan.io.matcher import PatternLike, as_matcher
from readscan.io.sources import END_OF_INPUT, Source, StreamSource, StringSource

log = logging.getLogger("readscan")


class Scanner:
    """Consumes characters from a Source by anchored pattern matches.

    Unconsumed input lives in ``buffer[start:end]`` and ``buffer[end:]`` is
    free space. ``read`` grows the buffer by doubling when a single match needs
    more room than it has; ``read_repeatedly`` never grows past its horizon
    and only shifts the unconsumed input down to index 0.

    Not safe for concurrent use. Every operation may block inside the source.
    """

    def __init__(
        self,
        source: Source,
        capacity: int | None = None,
        *,
        config: ScannerConfig | None = None,
    ) -> None:
        if config is None:
            config = ScannerConfig() if capacity is None else ScannerConfig(capacity=capacity)
        elif capacity is not None:
            config = ScannerConfig.model_validate({**config.model_dump(), "capacity": capacity})
        self.config = config
        self.source = source
        self._buffer: list[str] = [""] * config.capacity
        self._start = 0
        self._end = 0
        self._exhausted = False
        # Characters dropped from the front of the buffer by compaction or clearing
        self._discarded = 0

    @classmethod
    def from_text(cls, text: str, capacity: int | None = None) -> Scanner:
        """Scan an in-memory string."""
        return cls(StringSource(text), capacity)

    @classmethod
    def from_stream(cls, stream: TextIO, capacity: int | None = None) -> Scanner:
        """Scan a text file object."""
        return cls(StreamSource(stream), capacity)

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    @property
    def exhausted(self) -> bool:
        """True once the source has signalled end of input."""
        return self._exhausted

    @property
    def buffered(self) -> int:
        """Number of unconsumed characters currently held."""
        return self._end - self._start

    @property
    def offset(self) -> int:
        """Number of characters consumed since the scanner was created."""
        return self._discarded + self._start

    def __repr__(self) -> str:
        return (
            f"Scanner(capacity={self.capacity}, offset={self.offset}, "
            f"buffered={self.buffered}, exhausted={self._exhausted})"
        )

    # Buffer maintenance

    def _pull(self) -> None:
        """Append whatever the source yields into the free space after ``end``."""
        count = self.source.fill(self._buffer, self._end, len(self._buffer) - self._end)
        if count == END_OF_INPUT:
            self._exhausted = True
            log.debug("source exhausted after %d characters", self._discarded + self._end, extra={"event": "exhausted"})
        else:
            self._end += count

    def _grow(self) -> None:
        """Double the capacity, keeping every character at its index."""
        old = len(self._buffer)
        self._buffer = self._buffer + [""] * old
        log.debug("buffer grown from %d to %d", old, len(self._buffer), extra={"event": "grow"})

    def _compact(self) -> None:
        """Shift the unconsumed input down to index 0."""
        shift = self._start
        self._buffer[: self._end - shift] = self._buffer[shift : self._end]
        self._discarded += shift
        self._start = 0
        self._end -= shift
        log.debug("buffer compacted by %d, %d kept", shift, self._end, extra={"event": "compact"})

    def _clear(self) -> None:
        """Reclaim the whole buffer. Only valid when nothing is unconsumed."""
        self._discarded += self._end
        self._start = self._end = 0
        log.debug("buffer cleared at offset %d", self._discarded, extra={"event": "clear"})

    def _window(self) -> str:
        return "".join(self._buffer[self._start : self._end])

    def _consume(self, count: int) -> str:
        text = "".join(self._buffer[self._start : self._start + count])
        self._start += count
        return text

    def _await_char(self) -> bool:
        """Buffer at least one character unless the source is exhausted."""
        while self._start == self._end and not self._exhausted:
            if self._end == len(self._buffer):
                self._clear()
            self._pull()
        return self._start < self._end

    def _reserve(self, horizon: int) -> None:
        if horizon < 1 or (self.config.strict_horizon and horizon > len(self._buffer)):
            raise HorizonError(horizon, len(self._buffer))
        while len(self._buffer) < horizon:
            self._grow()

    # Matching

    def read(self, pattern: PatternLike) -> str:
        """Consume and return the longest match of ``pattern`` at the cursor.

        Keeps pulling input while the match runs into the end of the buffered
        data, so ``a*`` over a source yielding ``"aa"`` and later ``"a"``
        returns ``"aaa"``. Returns ``""`` without advancing when the pattern
        matches nothing, or fails, at the cursor. A failure the matcher
        reports as final returns at once without pulling.

        A full buffer is compacted when the cursor has moved past its start,
        and doubled only when the pending match fills all of it.
        """
        matcher = as_matcher(pattern)
        while True:
            result = matcher.match(self._window())
            if self._exhausted or not result.hit_end:
                return self._consume(result.end) if result.matched else ""
            if self._end == len(self._buffer):
                if self._start == self._end:
                    self._clear()
                elif self._start > 0:
                    self._compact()
                else:
                    self._grow()
            self._pull()

    def read_repeatedly(self, pattern: PatternLike, horizon: int) -> str:
        """Match ``pattern`` over and over, returning everything it consumed.

        Each attempt sees at least ``horizon`` unconsumed characters, unless
        the source is exhausted, so a pattern needing K characters of context
        is safe with ``horizon >= K``. A pattern like ``a{1}`` can therefore
        return more than one character; use ``read`` for a single match.

        Raises:
            HorizonError: If ``horizon`` is below 1, or exceeds the capacity
                while ``config.strict_horizon`` is set.
        """
        matcher = as_matcher(pattern)
        self._reserve(horizon)
        output: list[str] = []
        while True:
            if len(self._buffer) - self._start < horizon:
                self._compact()
            while self._end - self._start < horizon and not self._exhausted:
                self._pull()
            while True:
                result = matcher.match(self._window())
                if not result.matched or result.end == 0:
                    return "".join(output)
                output.append(self._consume(result.end))
                if not self._exhausted and self._end - self._start < horizon:
                    break

    def skip(self, pattern: PatternLike) -> None:
        """Discard input for as long as ``pattern`` keeps matching.

        Stops at the first failed or zero-length match.
        """
        matcher = as_matcher(pattern)
        while True:
            while self._start < self._end:
                result = matcher.match(self._window())
                if not result.matched or result.end == 0:
                    return
                self._start += result.end
            if self._exhausted:
                return
            self._clear()
            self._pull()

    # Single characters

    def peek(self) -> str:
        """Return the next character without consuming it.

        Raises:
            EndOfInput: If the source is exhausted and nothing is buffered.
        """
        if not self._await_char():
            raise EndOfInput(f"no input left at offset {self.offset}")
        return self._buffer[self._start]

    def next(self) -> str:
        """Consume and return the next character."""
        char = self.peek()
        self._start += 1
        return char

    def at_end(self) -> bool:
        """True if nothing is buffered and the source is exhausted."""
        return not self._await_char()

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        try:
            return self.next()
        except EndOfInput:
            raise StopIteration from None
