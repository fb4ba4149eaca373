# topmark:header:start
#
#   project      : Barline
#   file         : test_scanner.py
#   file_relpath : tests/parsing/test_scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the shared parsing cursor and error merging."""

from __future__ import annotations

import pytest

from barline.errors import ParseError, SourcePosition, TemplateError
from barline.parsing.scanner import Scanner, merge_errors


def test_position_tracks_lines_and_columns() -> None:
    """Positions are 1-based and restart their column after each newline."""
    scanner = Scanner("ab\ncd\nef")
    assert scanner.position(0) == SourcePosition(0, 1, 1)
    assert scanner.position(4) == SourcePosition(4, 2, 2)
    assert scanner.position(6) == SourcePosition(6, 3, 1)
    assert str(scanner.position(4)) == "2:2"


def test_mark_and_reset_backtrack() -> None:
    """`reset` restores the cursor saved by `mark`."""
    scanner = Scanner("hello")
    start: int = scanner.mark()
    scanner.advance(3)
    assert scanner.rest() == "lo"
    scanner.reset(start)
    assert scanner.rest() == "hello"


def test_expect_failure_consumes_nothing() -> None:
    """A failed `expect` leaves the cursor in place."""
    scanner = Scanner("abc", source="demo")
    with pytest.raises(ParseError) as excinfo:
        scanner.expect("abd")
    assert scanner.offset == 0
    assert str(excinfo.value) == "demo:1:1: expected \"abd\", found 'a'"


def test_error_class_is_configurable() -> None:
    """Failures are raised with the scanner's error class."""
    scanner = Scanner("", error_cls=TemplateError)
    with pytest.raises(TemplateError) as excinfo:
        scanner.take_while1(str.isdigit, "digit")
    assert excinfo.value.found == "end of input"


def test_error_at_offset_does_not_move_cursor() -> None:
    """`error` reports at a given offset without moving the cursor."""
    scanner = Scanner("abc")
    scanner.advance(2)
    err: ParseError = scanner.error("x", offset=0)
    assert err.position.offset == 0
    assert scanner.offset == 2


def test_expected_alternatives_are_sorted_and_joined() -> None:
    """Expectations are de-duplicated and joined with "or"."""
    err = ParseError(SourcePosition(0, 1, 1), ("b", "a", "c", "a"), "'x'")
    assert err.expected == ("a", "b", "c")
    assert err.describe() == "1:1: expected a, b or c, found 'x'"


def test_merge_errors_prefers_furthest() -> None:
    """The error that got furthest wins."""
    near = ParseError(SourcePosition(1, 1, 2), ("a",), "'x'")
    far = ParseError(SourcePosition(5, 1, 6), ("b",), "'y'")
    assert merge_errors([near, far]) is far


def test_merge_errors_combines_ties() -> None:
    """Errors at the same position combine their expectations."""
    pos = SourcePosition(3, 1, 4)
    merged: ParseError = merge_errors(
        [ParseError(pos, ("a",), "'x'", "src"), ParseError(pos, ("b",), "'x'", "src")]
    )
    assert merged.expected == ("a", "b")
    assert merged.source == "src"


def test_merge_errors_needs_input() -> None:
    """Merging nothing is a programming error."""
    with pytest.raises(ValueError):
        merge_errors([])
