# topmark:header:start
#
#   project      : Barline
#   file         : errors.py
#   file_relpath : src/barline/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the Barline parsers.

Two failure kinds exist:

- *Recoverable* failures (`MarkupError`, `TemplateError`) are raised by the
  low-level parsers and caught at the public boundary
  ([`parse_markup`][barline.markup.parse_markup],
  [`parse_template`][barline.template.parse_template]), which turn them into a
  displayable fallback.
- *Fatal* failures (`ConfigParseError`) propagate to the caller of
  [`parse_config`][barline.config.decoder.parse_config], which decides whether to
  abort or to fall back to the baseline configuration.
"""

from __future__ import annotations

from dataclasses import dataclass


class BarlineError(Exception):
    """Base class for all Barline errors."""


@dataclass(frozen=True, order=True)
class SourcePosition:
    """1-based line/column position inside a parsed text.

    Attributes:
        offset (int): 0-based character offset into the text.
        line (int): 1-based line number.
        column (int): 1-based column number.
    """

    offset: int
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class ParseError(BarlineError):
    """A parse failure at a known position, with an expected-vs-found description.

    Args:
        position (SourcePosition): Where the failure was detected.
        expected (tuple[str, ...]): Human-readable descriptions of what would have
            been accepted at ``position``.
        found (str): Description of what was found instead.
        source (str): Name of the parsed input, used as message prefix.
    """

    def __init__(
        self,
        position: SourcePosition,
        expected: tuple[str, ...],
        found: str,
        source: str = "",
    ) -> None:
        self.position = position
        self.expected = tuple(sorted(set(expected)))
        self.found = found
        self.source = source
        super().__init__(self.describe())

    def describe(self) -> str:
        """Return the rendered error message.

        Returns:
            str: ``"<source>:<line>:<column>: expected A, B or C, found X"``.
        """
        prefix: str = f"{self.source}:{self.position}" if self.source else str(self.position)
        return f"{prefix}: expected {_join_alternatives(self.expected)}, found {self.found}"


class MarkupError(ParseError):
    """Malformed color markup (unbalanced or malformed ``<fc=...>`` directives)."""


class TemplateError(ParseError):
    """Template text could not be tokenized."""


class LiteralError(ParseError):
    """Malformed structured value (position, command list, ...)."""


class ConfigParseError(ParseError):
    """Malformed configuration block. The whole block is rejected."""


def _join_alternatives(items: tuple[str, ...]) -> str:
    if not items:
        return "nothing"
    if len(items) == 1:
        return items[0]
    return f"{', '.join(items[:-1])} or {items[-1]}"
