"""Character sources the scanner pulls from."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, TextIO

END_OF_INPUT = -1


class Source(Protocol):
    """Protocol for incremental character providers.

    ``fill`` writes up to ``size`` characters into ``buffer`` starting at
    ``offset`` and returns how many were written, which may be zero. It returns
    ``END_OF_INPUT`` once no more characters will ever be produced, and keeps
    returning it on every later call.
    """

    def fill(self, _buffer: list[str], _offset: int, _size: int) -> int: ...


class StringSource:
    """Serves an in-memory string, optionally a few characters at a time."""

    def __init__(self, text: str, chunk_size: int | None = None) -> None:
        self.text = text
        self.chunk_size = chunk_size
        self.pos = 0

    def fill(self, buffer: list[str], offset: int, size: int) -> int:
        if size == 0:
            return 0
        if self.pos >= len(self.text):
            return END_OF_INPUT
        if self.chunk_size is not None:
            size = min(size, self.chunk_size)
        chunk = self.text[self.pos : self.pos + size]
        buffer[offset : offset + len(chunk)] = chunk
        self.pos += len(chunk)
        return len(chunk)


class ChunkedSource:
    """Serves an iterable of string chunks in order.

    Empty chunks are delivered as zero-length reads. A chunk longer than the
    requested size is split across calls.
    """

    def __init__(self, chunks: Iterable[str]) -> None:
        self._chunks = iter(chunks)
        self._pending = ""
        self._done = False

    def fill(self, buffer: list[str], offset: int, size: int) -> int:
        if size == 0:
            return 0
        if not self._pending:
            if self._done:
                return END_OF_INPUT
            try:
                self._pending = next(self._chunks)
            except StopIteration:
                self._done = True
                return END_OF_INPUT
        chunk, self._pending = self._pending[:size], self._pending[size:]
        buffer[offset : offset + len(chunk)] = chunk
        return len(chunk)


class StreamSource:
    """Wraps a text file object; ``read`` returning ``""`` means end of file."""

    def __init__(self, stream: TextIO, chunk_size: int | None = None) -> None:
        self.stream = stream
        self.chunk_size = chunk_size
        self._eof = False

    def fill(self, buffer: list[str], offset: int, size: int) -> int:
        if size == 0:
            return 0
        if self._eof:
            return END_OF_INPUT
        if self.chunk_size is not None:
            size = min(size, self.chunk_size)
        chunk = self.stream.read(size)
        if not chunk:
            self._eof = True
            return END_OF_INPUT
        buffer[offset : offset + len(chunk)] = chunk
        return len(chunk)
