# topmark:header:start
#
#   project      : Barline
#   file         : literal.py
#   file_relpath : src/barline/parsing/literal.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic structured-value reader.

Some configuration attributes (``position``, ``commands``) hold structured
values rather than plain strings, e.g.::

    position = TopW L 90
    position = Static { xpos = 0, ypos = 0, width = 1024, height = 15 }
    commands = [ Run Cpu ["-L", "3", "-H", "50"] 10
               , Run Com "uname" ["-s", "-r"] "" 36000 ]

`read_value` reads one such literal at the cursor of a shared
[`Scanner`][barline.parsing.scanner.Scanner] and leaves the cursor right after
it. Because the decoder and this reader advance the same scanner, error
positions stay correct after multi-line values.

Grammar::

    value       := Constructor atom* | atom
    atom        := number | string | list | tuple | "(" value ")"
                 | Constructor "{" fields "}" | Constructor
    list        := "[" (value ("," value)*)? "]"
    tuple       := "(" ")" | "(" value ("," value)+ ")"
    fields      := (ident "=" value ("," ident "=" value)*)?
    number      := "-"? digits ("." digits)?

The reader is untyped: converting a value into a domain object (a position,
a runnable) is the job of the caller.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from barline.config.logging import get_logger
from barline.errors import LiteralError
from barline.parsing.scanner import Scanner

if TYPE_CHECKING:
    from barline.config.logging import BarlineLogger

logger: BarlineLogger = get_logger(__name__)


@dataclass(frozen=True)
class Constructor:
    """A (possibly nullary) constructor application such as ``TopW L 90``."""

    name: str
    args: tuple[Value, ...] = ()


@dataclass(frozen=True)
class Record:
    """A constructor with named fields such as ``Static { xpos = 0, ... }``.

    Fields are held in a dict, so records are unhashable.
    """

    name: str
    fields: dict[str, Value] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]


Value = Union[int, float, str, "list[Value]", "tuple[Value, ...]", Constructor, Record]

# Nesting depth of lists, tuples and records accepted by the reader.
MAX_NESTING: int = 100

_MAX_CODE_DIGITS: int = len(str(sys.maxunicode))

_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "\\": "\\",
    '"': '"',
    "'": "'",
    "&": "",
}


def _is_ident_char(ch: str) -> bool:
    return ch.isalnum() or ch in "_'"


def _starts_atom(scanner: Scanner) -> bool:
    head: str = scanner.peek()
    if not head:
        return False
    if head in '"[(' or head.isdecimal() or head.isupper():
        return True
    return head == "-" and scanner.peek(2)[1:].isdecimal()


def read_value(scanner: Scanner) -> Value:
    """Read one structured value at the cursor.

    Leading whitespace is skipped; trailing whitespace is left unconsumed.

    Args:
        scanner (Scanner): The shared cursor; advanced past the value on success.

    Returns:
        Value: The value read.
    """
    return _read_value(scanner, 0)


def read_value_text(text: str, *, source: str = "value") -> Value:
    """Read ``text`` as exactly one structured value.

    Args:
        text (str): The literal text, surrounding whitespace allowed.
        source (str): Name of the input used in error messages.

    Returns:
        Value: The value read.

    Raises:
        LiteralError: If ``text`` is not a single well-formed value.
    """
    scanner = Scanner(text, source=source, error_cls=LiteralError)
    value: Value = read_value(scanner)
    scanner.skip_spaces()
    scanner.expect_end()
    return value


def _read_value(scanner: Scanner, depth: int) -> Value:
    scanner.skip_spaces()
    if depth >= MAX_NESTING:
        scanner.fail(f"at most {MAX_NESTING} levels of nesting")
    if scanner.peek().isupper():
        name: str = scanner.take_while(_is_ident_char)
        record: Record | None = _read_record_body(scanner, name, depth + 1)
        if record is not None:
            return record
        args: list[Value] = []
        while True:
            before: int = scanner.mark()
            scanner.skip_spaces()
            if not _starts_atom(scanner):
                scanner.reset(before)
                break
            args.append(_read_atom(scanner, depth))
        return Constructor(name, tuple(args))
    return _read_atom(scanner, depth)


def _read_atom(scanner: Scanner, depth: int) -> Value:
    head: str = scanner.peek()
    if head == '"':
        return _read_string(scanner)
    if head == "[":
        return _read_list(scanner, depth + 1)
    if head == "(":
        return _read_parenthesized(scanner, depth + 1)
    if head.isdecimal() or head == "-":
        return _read_number(scanner)
    if head.isupper():
        name: str = scanner.take_while(_is_ident_char)
        record: Record | None = _read_record_body(scanner, name, depth + 1)
        return record if record is not None else Constructor(name)
    scanner.fail("value")


def _read_number(scanner: Scanner) -> int | float:
    start: int = scanner.mark()
    sign: str = scanner.advance() if scanner.peek() == "-" else ""
    digits: str = scanner.take_while1(str.isdecimal, "digit")
    if scanner.peek() == "." and scanner.peek(2)[1:].isdecimal():
        scanner.advance()
        fraction: str = scanner.take_while(str.isdecimal)
        return float(f"{sign}{digits}.{fraction}")
    logger.trace("literal.number: %s%s at offset %d", sign, digits, start)
    try:
        return int(sign + digits)
    except ValueError:
        # int() refuses strings beyond sys.get_int_max_str_digits()
        scanner.fail("number", offset=start)


def _read_string(scanner: Scanner) -> str:
    scanner.expect('"')
    chunks: list[str] = []
    while True:
        if scanner.at_end():
            scanner.fail("closing quote")
        escape_at: int = scanner.mark()
        ch: str = scanner.advance()
        if ch == '"':
            return "".join(chunks)
        if ch != "\\":
            chunks.append(ch)
            continue
        if scanner.peek().isdecimal():
            code: str = scanner.take_while(str.isdecimal)
            if len(code) > _MAX_CODE_DIGITS or int(code) > sys.maxunicode:
                scanner.fail("escape sequence", offset=escape_at)
            chunks.append(chr(int(code)))
            continue
        escape: str = scanner.peek()
        if escape not in _ESCAPES:
            scanner.fail("escape sequence")
        scanner.advance()
        chunks.append(_ESCAPES[escape])


def _read_list(scanner: Scanner, depth: int) -> list[Value]:
    scanner.expect("[")
    scanner.skip_spaces()
    items: list[Value] = []
    if scanner.startswith("]"):
        scanner.advance()
        return items
    while True:
        items.append(_read_value(scanner, depth))
        scanner.skip_spaces()
        if scanner.startswith(","):
            scanner.advance()
            continue
        scanner.expect("]", '"," or "]"')
        return items


def _read_parenthesized(scanner: Scanner, depth: int) -> Value:
    scanner.expect("(")
    scanner.skip_spaces()
    if scanner.startswith(")"):
        scanner.advance()
        return ()
    first: Value = _read_value(scanner, depth)
    scanner.skip_spaces()
    if scanner.startswith(")"):
        scanner.advance()
        return first
    items: list[Value] = [first]
    while scanner.startswith(","):
        scanner.advance()
        items.append(_read_value(scanner, depth))
        scanner.skip_spaces()
    scanner.expect(")", '"," or ")"')
    return tuple(items)


def _read_record_body(scanner: Scanner, name: str, depth: int) -> Record | None:
    """Read ``{ field = value, ... }`` after a constructor name, if present."""
    before: int = scanner.mark()
    scanner.skip_spaces()
    if not scanner.startswith("{"):
        scanner.reset(before)
        return None
    scanner.advance()
    scanner.skip_spaces()
    fields: dict[str, Value] = {}
    if scanner.startswith("}"):
        scanner.advance()
        return Record(name, fields)
    while True:
        scanner.skip_spaces()
        label_at: int = scanner.mark()
        label: str = scanner.take_while1(_is_ident_char, "field name")
        if label in fields:
            scanner.fail(f"field other than {label!r}", offset=label_at)
        scanner.skip_spaces()
        scanner.expect("=")
        fields[label] = _read_value(scanner, depth)
        scanner.skip_spaces()
        if scanner.startswith(","):
            scanner.advance()
            continue
        scanner.expect("}", '"," or "}"')
        return Record(name, fields)


def render_value(value: Value, *, atomic: bool = False) -> str:
    """Render ``value`` back into literal syntax accepted by `read_value`.

    Args:
        value (Value): The value to render.
        atomic (bool): Parenthesize constructor applications and negative
            numbers, as required for constructor arguments.

    Returns:
        str: The literal text.
    """
    if isinstance(value, str):
        return _render_string(value)
    if isinstance(value, (int, float)):
        text: str = str(value)
        return f"({text})" if atomic and value < 0 else text
    if isinstance(value, list):
        return "[" + ", ".join(render_value(item) for item in value) + "]"
    if isinstance(value, tuple):
        return "(" + ", ".join(render_value(item) for item in value) + ")"
    if isinstance(value, Record):
        body: str = ", ".join(f"{name} = {render_value(v)}" for name, v in value.fields.items())
        return f"{value.name} {{ {body} }}" if body else f"{value.name} {{}}"
    if not value.args:
        return value.name
    applied: str = " ".join([value.name, *(render_value(a, atomic=True) for a in value.args)])
    return f"({applied})" if atomic else applied


def _render_string(text: str) -> str:
    chunks: list[str] = ['"']
    for ch in text:
        if ch in '"\\':
            chunks.append("\\" + ch)
        elif ch == "\n":
            chunks.append("\\n")
        elif ch == "\t":
            chunks.append("\\t")
        elif ch == "\r":
            chunks.append("\\r")
        elif ord(ch) < 0x20:
            chunks.append(f"\\{ord(ch)}\\&")
        else:
            chunks.append(ch)
    chunks.append('"')
    return "".join(chunks)
