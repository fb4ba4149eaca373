# topmark:header:start
#
#   project      : Barline
#   file         : decoder.py
#   file_relpath : src/barline/config/decoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decoder for ``Config { ... }`` blocks.

A configuration block lists ``name = value`` assignments in any order::

    Config { fgColor = "grey"
           , position = TopW L 90
           , commands = [ Run Cpu ["-L", "3"] 10, Run Com "uname" ["-s"] "" 36000 ]
           , template = "%cpu% }{ %uname%"
           }

Each of the nine attributes may appear at most once. Absent attributes take
their value from a baseline record and are reported, in canonical order, in
the *default log* of the result. Anything else (an unknown attribute, a
duplicate, a malformed value, trailing text) rejects the whole block with a
[`ConfigParseError`][barline.errors.ConfigParseError] carrying the position
and an expected-vs-found description.

Decoding is a loop over a static table of `FieldDescriptor` entries: at each
step, every attribute not yet seen is tried against the next assignment; the
cursor is restored between attempts so a failed attempt consumes nothing.
Structured values (``position``, ``commands``) are read by
[`read_value`][barline.parsing.literal.read_value] on the same
[`Scanner`][barline.parsing.scanner.Scanner], so positions reported after a
multi-line value remain exact.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Final

from barline.commands import commands_from_value, runnable_to_value
from barline.config.logging import get_logger
from barline.config.model import (
    DEFAULT_CONFIG,
    LowerOnStart,
    position_from_value,
    position_to_value,
)
from barline.constants import CONFIG_KEYWORD, CONFIG_SOURCE_NAME
from barline.errors import ConfigParseError, ParseError
from barline.parsing.literal import read_value, render_value
from barline.parsing.scanner import Scanner, merge_errors

if TYPE_CHECKING:
    from collections.abc import Callable

    from barline.config.logging import BarlineLogger
    from barline.config.model import Config
    from barline.parsing.literal import Value

logger: BarlineLogger = get_logger(__name__)


# ------------------ Value sub-parsers ------------------


def parse_quoted(scanner: Scanner) -> str:
    """Parse ``"..."``: one or more characters other than ``"`` between quotes."""
    scanner.expect('"', "quoted string")
    body: str = scanner.take_while1(lambda ch: ch != '"', "string character")
    scanner.expect('"', "closing quote")
    return body


def parse_lower_on_start(scanner: Scanner) -> LowerOnStart:
    """Parse one of the printed names of `LowerOnStart`, longest first."""
    for name in sorted(LowerOnStart.printed_names(), key=len, reverse=True):
        if scanner.startswith(name):
            scanner.advance(len(name))
            return LowerOnStart(name)
    scanner.fail(*(f'"{name}"' for name in LowerOnStart.printed_names()))


def _structured(convert: Callable[[Value], Any], description: str) -> Callable[[Scanner], Any]:
    """Wrap a value converter into a sub-parser reporting failures at the value start."""

    def parse(scanner: Scanner) -> Any:
        start: int = scanner.mark()
        value: Value = read_value(scanner)
        try:
            return convert(value)
        except ValueError as exc:
            logger.debug("config.value: %s", exc)
            scanner.fail(description, offset=start)

    return parse


# ------------------ Field table ------------------


@dataclass(frozen=True)
class FieldDescriptor:
    """One configuration attribute.

    Attributes:
        name (str): Attribute name in configuration text.
        field (str): Matching `Config` field.
        parse (Callable[[Scanner], Any]): Sub-parser for the value.
        render (Callable[[Any], str]): Inverse of ``parse``, used by `render_config`.
    """

    name: str
    field: str
    parse: Callable[[Scanner], Any]
    render: Callable[[Any], str]


def _render_quoted(value: str) -> str:
    return f'"{value}"'


FIELDS: Final[tuple[FieldDescriptor, ...]] = (
    FieldDescriptor("font", "font", parse_quoted, _render_quoted),
    FieldDescriptor("bgColor", "bg_color", parse_quoted, _render_quoted),
    FieldDescriptor("fgColor", "fg_color", parse_quoted, _render_quoted),
    FieldDescriptor(
        "position",
        "position",
        _structured(position_from_value, "position"),
        lambda position: render_value(position_to_value(position)),
    ),
    FieldDescriptor("lowerOnStart", "lower_on_start", parse_lower_on_start, str),
    FieldDescriptor(
        "commands",
        "commands",
        _structured(commands_from_value, "list of commands"),
        lambda commands: render_value([runnable_to_value(command) for command in commands]),
    ),
    FieldDescriptor("sepChar", "sep_char", parse_quoted, _render_quoted),
    FieldDescriptor("alignSep", "align_sep", parse_quoted, _render_quoted),
    FieldDescriptor("template", "template", parse_quoted, _render_quoted),
)

FIELD_NAMES: Final[tuple[str, ...]] = tuple(descriptor.name for descriptor in FIELDS)


@dataclass(frozen=True)
class DecodedConfig:
    """Result of decoding a configuration block.

    Attributes:
        config (Config): The decoded record.
        defaulted (tuple[str, ...]): Attribute names absent from the block and
            taken from the baseline, in canonical order.
    """

    config: Config
    defaulted: tuple[str, ...]


# ------------------ Decoder ------------------


def _parse_assignment(scanner: Scanner, descriptor: FieldDescriptor) -> Any:
    """Parse ``<name> = <value>`` for ``descriptor``."""
    name_at: int = scanner.mark()
    scanner.expect(descriptor.name, "field name")
    if scanner.peek().isalnum():
        scanner.fail("field name", offset=name_at)
    scanner.skip_spaces()
    scanner.expect("=")
    scanner.skip_spaces()
    return descriptor.parse(scanner)


def _parse_next_field(
    scanner: Scanner, pending: list[FieldDescriptor]
) -> tuple[FieldDescriptor, Any]:
    """Try each pending descriptor against the next assignment."""
    start: int = scanner.mark()
    failures: list[ParseError] = []
    for descriptor in pending:
        try:
            return descriptor, _parse_assignment(scanner, descriptor)
        except ParseError as exc:
            failures.append(exc)
            scanner.reset(start)
    raise merge_errors(failures)


def parse_config(text: str, defaults: Config = DEFAULT_CONFIG) -> DecodedConfig:
    """Decode a ``Config { ... }`` block.

    Args:
        text (str): The configuration block.
        defaults (Config): Baseline record supplying absent attributes.

    Returns:
        DecodedConfig: The decoded record and the names of defaulted attributes.

    Raises:
        ConfigParseError: If the block is malformed; no partial record is returned.
    """
    scanner = Scanner(text, source=CONFIG_SOURCE_NAME, error_cls=ConfigParseError)
    scanner.skip_spaces()
    scanner.expect(CONFIG_KEYWORD)
    scanner.skip_spaces()
    scanner.expect("{")
    scanner.skip_spaces()

    pending: list[FieldDescriptor] = list(FIELDS)
    values: dict[str, Any] = {}

    if not scanner.startswith("}"):
        while True:
            descriptor, value = _parse_next_field(scanner, pending)
            pending.remove(descriptor)
            values[descriptor.field] = value
            logger.trace("config.field: %s parsed at %s", descriptor.name, scanner.position())
            scanner.skip_spaces()
            if not scanner.startswith(","):
                break
            if not pending:
                scanner.fail('"}"')
            scanner.advance()
            scanner.skip_spaces()

    scanner.skip_spaces()
    if not scanner.startswith("}"):
        scanner.fail('"}"', *(['","'] if values and pending else []))
    scanner.advance()
    scanner.skip_spaces()
    scanner.expect_end()

    defaulted: tuple[str, ...] = tuple(descriptor.name for descriptor in pending)
    if defaulted:
        logger.info("Fields missing from config defaulted: %s", ", ".join(defaulted))
    return DecodedConfig(config=replace(defaults, **values), defaulted=defaulted)


def decode_config_or_default(text: str, defaults: Config = DEFAULT_CONFIG) -> DecodedConfig:
    """Decode ``text``, falling back to ``defaults`` entirely on error.

    Args:
        text (str): The configuration block.
        defaults (Config): Baseline record.

    Returns:
        DecodedConfig: The decoded configuration, or ``defaults`` with every
            attribute listed as defaulted when ``text`` cannot be decoded.
    """
    try:
        return parse_config(text, defaults)
    except ConfigParseError as exc:
        logger.error("Could not decode config, using defaults: %s", exc)
        return DecodedConfig(config=defaults, defaulted=FIELD_NAMES)


def render_config(config: Config) -> str:
    """Render ``config`` as a ``Config { ... }`` block that decodes back to it.

    Args:
        config (Config): The record to render.

    Returns:
        str: One attribute per line, in canonical order.
    """
    lines: list[str] = []
    for index, descriptor in enumerate(FIELDS):
        lead: str = f"{CONFIG_KEYWORD} {{ " if index == 0 else "       , "
        rendered: str = descriptor.render(getattr(config, descriptor.field))
        lines.append(f"{lead}{descriptor.name} = {rendered}")
    lines.append("       }")
    return "\n".join(lines) + "\n"
