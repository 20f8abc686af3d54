"""Tests for Scanner.read_repeatedly and compaction."""

import logging

import pytest

from readscan.core.config import ScannerConfig
from readscan.core.errors import HorizonError
from readscan.core.scanner import Scanner
from readscan.io.sources import ChunkedSource, StringSource

HORIZON_TEXT = "aaaaaPaPbPcPFPaPbPc"


@pytest.mark.parametrize(
    "capacity,horizon1,horizon2",
    [
        (2, 1, 2),
        (3, 1, 2),
        (4, 1, 3),
        (2, 1, 3),
        (7, 3, 3),
        (8, 5, 2),
        (2, 2, 2),
        (3, 2, 2),
        (100, 100, 100),
    ],
)
def test_read_repeatedly_respects_horizon(capacity, horizon1, horizon2):
    scanner = Scanner(StringSource(HORIZON_TEXT), capacity)
    assert scanner.read_repeatedly("a", horizon1) == "aaaaa"
    # P[^F] needs two characters to tell PF apart from the rest
    assert scanner.read_repeatedly("P[^F]", horizon2) == "PaPbPc"
    assert scanner.read_repeatedly(".*", horizon1) == "PFPaPbPc"
    assert scanner.at_end()


def test_read_repeatedly_across_chunk_boundaries():
    scanner = Scanner(ChunkedSource(["a", "b", "a", "b", "c"]), 4)
    assert scanner.read_repeatedly("ab", 2) == "abab"
    assert scanner.read("c") == "c"


def test_read_repeatedly_returns_empty_without_advancing():
    scanner = Scanner.from_text("xyz")
    assert scanner.read_repeatedly("a", 1) == ""
    assert scanner.offset == 0
    assert scanner.peek() == "x"


def test_single_match_pattern_repeats():
    scanner = Scanner.from_text("aaab")
    assert scanner.read_repeatedly("a{1}", 1) == "aaa"


def test_zero_width_match_ends_repetition():
    scanner = Scanner.from_text("abc")
    assert scanner.read_repeatedly("x*", 1) == ""
    assert scanner.read_repeatedly("[ab]?", 1) == "ab"
    assert scanner.next() == "c"


def test_compaction_keeps_capacity_and_offset(caplog):
    scanner = Scanner(StringSource(HORIZON_TEXT), 7)
    with caplog.at_level(logging.DEBUG, logger="readscan"):
        assert scanner.read_repeatedly("a", 3) == "aaaaa"

    assert "compact" in [getattr(r, "event", None) for r in caplog.records]
    assert scanner.capacity == 7
    assert scanner.offset == 5
    assert scanner.peek() == "P"


def test_horizon_must_be_positive():
    scanner = Scanner.from_text("abc")
    with pytest.raises(HorizonError):
        scanner.read_repeatedly("a", 0)


def test_strict_horizon_rejects_oversized_horizon():
    scanner = Scanner(StringSource("abc"), config=ScannerConfig(capacity=2, strict_horizon=True))
    with pytest.raises(HorizonError) as exc_info:
        scanner.read_repeatedly("a", 3)

    assert exc_info.value.horizon == 3
    assert exc_info.value.capacity == 2
    assert isinstance(exc_info.value, ValueError)


def test_oversized_horizon_grows_buffer_by_default():
    scanner = Scanner(StringSource("abc"), 2)
    assert scanner.read_repeatedly("[ab]", 3) == "ab"
    assert scanner.capacity == 4
