# topmark:header:start
#
#   project      : Barline
#   file         : markup.py
#   file_relpath : src/barline/markup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color markup parser.

Markup strings carry inline color directives that may nest::

    cpu: <fc=#FF0000>hot <fc=yellow>warm</fc> hot</fc> cold

`parse_markup` turns such a string into `StyledFragment` pairs in rendering
order, each tagged with its effective color: the color of the innermost open
directive, or the ambient color outside any directive.

Grammar::

    Doc       := (Text | ColorBlock)* EOF
    Text      := (any char but "<" | "<" not starting "fc=" or "/fc>")+
    ColorBlock:= "<fc=" Color ">" (Text | ColorBlock)* "</fc>"
    Color     := (alphanumeric | "," | "#")+

A lone ``<`` is ordinary text. Unbalanced or malformed directives make the
whole string unparsable; `parse_markup` then returns a single fragment with a
"Could not parse string: ..." message in the ambient color and never a partial
result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, NamedTuple

from barline.config.logging import get_logger
from barline.constants import MARKUP_ERROR_PREFIX
from barline.errors import MarkupError
from barline.parsing.scanner import Scanner

if TYPE_CHECKING:
    from barline.config.logging import BarlineLogger

logger: BarlineLogger = get_logger(__name__)

OPEN_TAG: Final[str] = "<fc="
CLOSE_TAG: Final[str] = "</fc>"


class StyledFragment(NamedTuple):
    """A run of text and the color it is rendered in."""

    text: str
    color: str


def _is_color_char(ch: str) -> bool:
    return ch.isalnum() or ch in ",#"


def _at_directive(scanner: Scanner) -> bool:
    return scanner.startswith(OPEN_TAG) or scanner.startswith(CLOSE_TAG)


def _read_text(scanner: Scanner) -> str:
    """Consume a maximal run of text, stopping before any directive."""
    start: int = scanner.mark()
    while not scanner.at_end() and not _at_directive(scanner):
        scanner.advance()
    return scanner.text[start : scanner.offset]


def markup_parser(ambient_color: str, text: str) -> list[StyledFragment]:
    """Parse ``text`` strictly.

    Args:
        ambient_color (str): Color of text outside any directive.
        text (str): The markup string.

    Returns:
        list[StyledFragment]: Fragments in left-to-right order.

    Raises:
        MarkupError: If a directive is malformed or unbalanced.
    """
    scanner = Scanner(text, source="markup", error_cls=MarkupError)
    colors: list[str] = [ambient_color]
    fragments: list[StyledFragment] = []

    while not scanner.at_end():
        if scanner.startswith(OPEN_TAG):
            scanner.advance(len(OPEN_TAG))
            color: str = scanner.take_while1(_is_color_char, "color")
            scanner.expect(">")
            colors.append(color)
            logger.trace("markup.open: %r at %s (depth %d)", color, scanner.position(), len(colors))
        elif scanner.startswith(CLOSE_TAG):
            if len(colors) == 1:
                scanner.fail("text", f'"{OPEN_TAG}"', "end of input")
            scanner.advance(len(CLOSE_TAG))
            colors.pop()
        else:
            fragments.append(StyledFragment(_read_text(scanner), colors[-1]))

    if len(colors) > 1:
        scanner.fail("text", f'"{OPEN_TAG}"', f'"{CLOSE_TAG}"')
    return fragments


def parse_markup(ambient_color: str, text: str) -> list[StyledFragment]:
    """Parse a markup string, never failing.

    Args:
        ambient_color (str): Color of text outside any directive; also the color
            of the error fragment.
        text (str): The markup string.

    Returns:
        list[StyledFragment]: The parsed fragments, or a single fragment reading
            ``"Could not parse string: <text>"`` when ``text`` is malformed.
    """
    try:
        return markup_parser(ambient_color, text)
    except MarkupError as exc:
        logger.debug("markup: %s", exc)
        return [StyledFragment(MARKUP_ERROR_PREFIX + text, ambient_color)]


def strip_markup(text: str) -> str:
    """Return ``text`` without its color directives.

    Malformed markup is returned unchanged.
    """
    try:
        return "".join(fragment.text for fragment in markup_parser("", text))
    except MarkupError:
        return text
