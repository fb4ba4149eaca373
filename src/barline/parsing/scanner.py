# topmark:header:start
#
#   project      : Barline
#   file         : scanner.py
#   file_relpath : src/barline/parsing/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input cursor with backtracking for hand-written recursive descent parsers.

A `Scanner` owns an immutable input string and a single offset into it. Every
parser in Barline (markup, template, structured values and the configuration
decoder) advances one shared `Scanner`, so source positions reported in errors
are always relative to the original input, including across lines.

Ordered choice is expressed with `Scanner.mark` / `Scanner.reset`:

```python
start = scanner.mark()
try:
    return parse_first(scanner)
except ParseError:
    scanner.reset(start)
    return parse_second(scanner)
```

Failures are raised as `ParseError` (or the subclass given as ``error_cls``)
carrying the position, the expected alternatives and what was found.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

from barline.errors import ParseError, SourcePosition

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

END_OF_INPUT: str = "end of input"


class Scanner:
    """Cursor over ``text`` with save/restore and position tracking.

    Args:
        text (str): The input to scan.
        source (str): Name of the input used as prefix in error messages.
        error_cls (type[ParseError]): Exception class raised by `fail`.
    """

    def __init__(
        self,
        text: str,
        *,
        source: str = "",
        error_cls: type[ParseError] = ParseError,
    ) -> None:
        self.text: str = text
        self.offset: int = 0
        self.source: str = source
        self.error_cls: type[ParseError] = error_cls

    def __repr__(self) -> str:
        return f"Scanner(offset={self.offset}, rest={self.rest()[:20]!r})"

    # --- cursor ---------------------------------------------------------

    def mark(self) -> int:
        """Return the current offset for a later `reset`."""
        return self.offset

    def reset(self, mark: int) -> None:
        """Move the cursor back to a previously saved ``mark``."""
        self.offset = mark

    def at_end(self) -> bool:
        """Return True when the whole input has been consumed."""
        return self.offset >= len(self.text)

    def rest(self) -> str:
        """Return the unconsumed input."""
        return self.text[self.offset :]

    def peek(self, count: int = 1) -> str:
        """Return up to ``count`` characters at the cursor without consuming them."""
        return self.text[self.offset : self.offset + count]

    def startswith(self, literal: str) -> bool:
        """Return True if the unconsumed input starts with ``literal``."""
        return self.text.startswith(literal, self.offset)

    def advance(self, count: int = 1) -> str:
        """Consume and return up to ``count`` characters."""
        chunk: str = self.text[self.offset : self.offset + count]
        self.offset += len(chunk)
        return chunk

    # --- position -------------------------------------------------------

    def position(self, offset: int | None = None) -> SourcePosition:
        """Return the 1-based line/column of ``offset`` (default: the cursor).

        Args:
            offset (int | None): Offset to convert; defaults to the current offset.

        Returns:
            SourcePosition: The position of ``offset`` in the input.
        """
        if offset is None:
            offset = self.offset
        line: int = self.text.count("\n", 0, offset) + 1
        line_start: int = self.text.rfind("\n", 0, offset) + 1
        return SourcePosition(offset=offset, line=line, column=offset - line_start + 1)

    # --- matching -------------------------------------------------------

    def expect(self, literal: str, description: str | None = None) -> str:
        """Consume ``literal`` or fail without consuming anything.

        Args:
            literal (str): The exact text expected at the cursor.
            description (str | None): How to name the expectation in errors;
                defaults to the quoted literal.

        Returns:
            str: The consumed literal.
        """
        if not self.startswith(literal):
            self.fail(description or f'"{literal}"')
        self.offset += len(literal)
        return literal

    def take_while(self, predicate: Callable[[str], bool]) -> str:
        """Consume the longest run of characters satisfying ``predicate``."""
        start: int = self.offset
        end: int = start
        size: int = len(self.text)
        while end < size and predicate(self.text[end]):
            end += 1
        self.offset = end
        return self.text[start:end]

    def take_while1(self, predicate: Callable[[str], bool], description: str) -> str:
        """Like `take_while` but fail when not even one character matches."""
        run: str = self.take_while(predicate)
        if not run:
            self.fail(description)
        return run

    def skip_spaces(self) -> None:
        """Skip any whitespace, newlines included."""
        self.take_while(str.isspace)

    def expect_end(self) -> None:
        """Fail unless the whole input has been consumed."""
        if not self.at_end():
            self.fail(END_OF_INPUT)

    # --- errors ---------------------------------------------------------

    def found(self) -> str:
        """Describe the character at the cursor for error messages."""
        if self.at_end():
            return END_OF_INPUT
        return repr(self.peek())

    def error(self, *expected: str, offset: int | None = None) -> ParseError:
        """Build (but do not raise) an error at ``offset`` (default: the cursor)."""
        saved: int = self.offset
        if offset is not None:
            self.offset = offset
        try:
            return self.error_cls(self.position(), expected, self.found(), self.source)
        finally:
            self.offset = saved

    def fail(self, *expected: str, offset: int | None = None) -> NoReturn:
        """Raise an error expecting any of ``expected`` at ``offset``."""
        raise self.error(*expected, offset=offset)


def merge_errors(errors: Iterable[ParseError]) -> ParseError:
    """Merge the failures of alternative branches into a single error.

    The error that got furthest into the input wins; when several errors share
    that position their expectations are combined.

    Args:
        errors (Iterable[ParseError]): Failures of the alternatives (at least one).

    Returns:
        ParseError: The merged error, of the class of the furthest one.

    Raises:
        ValueError: If ``errors`` is empty.
    """
    pending: list[ParseError] = list(errors)
    if not pending:
        raise ValueError("merge_errors() needs at least one error")
    furthest: SourcePosition = max(err.position for err in pending)
    at_furthest: list[ParseError] = [err for err in pending if err.position == furthest]
    head: ParseError = at_furthest[0]
    if len(at_furthest) == 1:
        return head
    expected: tuple[str, ...] = tuple(item for err in at_furthest for item in err.expected)
    return type(head)(head.position, expected, head.found, head.source)
