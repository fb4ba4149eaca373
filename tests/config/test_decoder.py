# topmark:header:start
#
#   project      : Barline
#   file         : test_decoder.py
#   file_relpath : tests/config/test_decoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the ``Config { ... }`` decoder (`barline.config.decoder`)."""

from __future__ import annotations

import logging
from dataclasses import replace

import pytest
from hypothesis import HealthCheck, given, settings

from barline.commands import Command, Monitor
from barline.config.decoder import (
    FIELD_NAMES,
    FIELDS,
    DecodedConfig,
    decode_config_or_default,
    parse_config,
    render_config,
)
from barline.config.model import DEFAULT_CONFIG, Align, Config, LowerOnStart, Static, TopW
from barline.errors import ConfigParseError
from barline.parsing.literal import MAX_NESTING
from tests.conftest import parametrize
from tests.strategies_barline import s_config_assignments

ALL_FIELDS: str = """\
Config { font = "xft:Mono-9"
       , bgColor = "black"
       , fgColor = "grey"
       , position = TopW L 90
       , lowerOnStart = False
       , commands = [ Run Cpu ["-L", "3", "-H", "50"] 10
                    , Run Com "uname" ["-s", "-r"] "" 36000
                    , Run Date "%a %b %_d" "date" 10
                    ]
       , sepChar = "%"
       , alignSep = "}{"
       , template = "%cpu% }{ %date% | %uname%"
       }
"""


def test_empty_block_is_all_defaults() -> None:
    """``Config { }`` yields the baseline with every attribute defaulted."""
    decoded: DecodedConfig = parse_config("Config { }")
    assert decoded.config == DEFAULT_CONFIG
    assert decoded.defaulted == FIELD_NAMES
    assert len(decoded.defaulted) == 9


def test_all_fields() -> None:
    """A block assigning every attribute defaults nothing."""
    decoded: DecodedConfig = parse_config(ALL_FIELDS)
    assert decoded.defaulted == ()
    config: Config = decoded.config
    assert config.font == "xft:Mono-9"
    assert config.position == TopW(Align.L, 90)
    assert config.lower_on_start is LowerOnStart.FALSE
    assert config.commands == (
        Monitor("Cpu", (["-L", "3", "-H", "50"], 10)),
        Command("uname", ("-s", "-r"), "", 36000),
        Monitor("Date", ("%a %b %_d", "date", 10)),
    )
    assert [command.alias for command in config.commands] == ["cpu", "uname", "date"]


def test_partial_block_reports_defaulted_in_canonical_order(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Absent attributes come from the baseline and are listed in canonical order."""
    with caplog.at_level(logging.INFO):
        decoded = parse_config('Config { template = "%cpu%", fgColor = "grey" }')
    assert decoded.config == replace(DEFAULT_CONFIG, template="%cpu%", fg_color="grey")
    assert decoded.defaulted == (
        "font",
        "bgColor",
        "position",
        "lowerOnStart",
        "commands",
        "sepChar",
        "alignSep",
    )
    assert "Fields missing from config defaulted: font, bgColor" in caplog.text


def test_custom_baseline() -> None:
    """Absent attributes are taken from the given baseline."""
    baseline: Config = replace(DEFAULT_CONFIG, font="fixed")
    assert parse_config("Config { }", baseline).config.font == "fixed"


def test_static_position_and_surrounding_whitespace() -> None:
    """Whitespace (newlines included) is allowed around every token."""
    text = (
        "\n  Config\n{\n position =\n"
        " Static { xpos = 0, ypos = 0, width = 1024, height = 15 }\n}\n"
    )
    assert parse_config(text).config.position == Static(0, 0, 1024, 15)


def test_lower_on_start_true() -> None:
    """``lowerOnStart`` accepts the printed names of `LowerOnStart`."""
    assert parse_config("Config { lowerOnStart = True }").config.lower_on_start is LowerOnStart.TRUE


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None)
@given(drawn=s_config_assignments())
def test_field_order_is_irrelevant(
    drawn: tuple[Config, list[tuple[str, str]], list[tuple[str, str]], str],
) -> None:
    """Any order of distinct assignments decodes to the same record."""
    config, assignments, shuffled, separator = drawn

    def block(pairs: list[tuple[str, str]]) -> str:
        body: str = separator.join(f"{name} = {text}" for name, text in pairs)
        return f"Config {{ {body} }}"

    decoded: DecodedConfig = parse_config(block(assignments))
    assert parse_config(block(shuffled)) == decoded
    assigned: set[str] = {name for name, _ in assignments}
    assert set(decoded.defaulted) == set(FIELD_NAMES) - assigned
    for descriptor in FIELDS:
        source: Config = config if descriptor.name in assigned else DEFAULT_CONFIG
        assert getattr(decoded.config, descriptor.field) == getattr(source, descriptor.field)


@parametrize(
    ("text", "column", "expected"),
    [
        ('Config { font = "a", font = "b" }', 22, ("field name",)),
        ('Config { colour = "red" }', 10, ("field name",)),
        ('Config { fonts = "a" }', 10, ("field name",)),
        ('Config { font = "a", }', 22, ("field name",)),
        ('Config { font = "a" ', 21, ('","', '"}"')),
        ('Config { font = "a" } trailing', 23, ("end of input",)),
        ('Config { font = "" }', 18, ("string character",)),
        ("Config { font = plain }", 17, ("quoted string",)),
        ("Config { lowerOnStart = Maybe }", 25, ('"False"', '"True"')),
        ("Config { position = Middle }", 21, ("position",)),
        ("Config { commands = [Cpu [] 10] }", 21, ("list of commands",)),
        ("Config { font }", 15, ('"="',)),
        ("Konfig { }", 1, ('"Config"',)),
        ("", 1, ('"Config"',)),
    ],
)
def test_malformed_blocks_are_rejected(
    text: str, column: int, expected: tuple[str, ...]
) -> None:
    """Malformed blocks raise `ConfigParseError` at the offending position."""
    with pytest.raises(ConfigParseError) as excinfo:
        parse_config(text)
    err: ConfigParseError = excinfo.value
    assert err.position.column == column
    assert err.expected == expected


def test_comma_after_last_attribute_is_rejected() -> None:
    """After all nine attributes only the closing brace is accepted."""
    body: str = ALL_FIELDS.rstrip().removesuffix("}")
    with pytest.raises(ConfigParseError) as excinfo:
        parse_config(body + ", }")
    assert excinfo.value.expected == ('"}"',)


def test_error_inside_multiline_value_has_exact_line() -> None:
    """An error after a multi-line value is reported on its own line."""
    text = (
        "Config { commands = [ Run Cpu [] 10\n"
        "                    , Run Memory [] 10\n"
        "                    ]\n"
        "       , position = Middle\n"
        "       }\n"
    )
    with pytest.raises(ConfigParseError) as excinfo:
        parse_config(text)
    err: ConfigParseError = excinfo.value
    assert (err.position.line, err.position.column) == (4, 21)
    assert str(err).startswith("Config:4:21: expected position")


def test_decode_or_default_falls_back(caplog: pytest.LogCaptureFixture) -> None:
    """An undecodable block yields the baseline with every attribute defaulted."""
    with caplog.at_level(logging.ERROR):
        decoded = decode_config_or_default("Config { bogus = 1 }")
    assert decoded == DecodedConfig(DEFAULT_CONFIG, FIELD_NAMES)
    assert "Could not decode config" in caplog.text


def test_decode_or_default_passes_valid_blocks() -> None:
    """Valid blocks are decoded normally."""
    decoded = decode_config_or_default('Config { sepChar = "$" }')
    assert decoded.config.sep_char == "$"
    assert "sepChar" not in decoded.defaulted


@parametrize("config", [DEFAULT_CONFIG, parse_config(ALL_FIELDS).config])
def test_render_config_decodes_back(config: Config) -> None:
    """`render_config` output decodes to the same record with nothing defaulted."""
    rendered: str = render_config(config)
    assert rendered.startswith("Config { font = ")
    assert parse_config(rendered) == DecodedConfig(config, ())


@parametrize(
    ("text", "column"),
    [
        (r'Config { commands = [Run Com "a\1114112" [] "" 10] }', 32),
        (
            r'Config { position = Static { xpos = "\99999999999999999999", ypos = 0,'
            r" width = 1, height = 1 } }",
            38,
        ),
    ],
)
def test_out_of_range_escape_is_a_parse_error(text: str, column: int) -> None:
    """A decimal escape beyond the last code point is reported at its backslash."""
    with pytest.raises(ConfigParseError) as excinfo:
        parse_config(text)
    assert excinfo.value.expected == ("escape sequence",)
    assert excinfo.value.position.column == column
    assert decode_config_or_default(text) == DecodedConfig(DEFAULT_CONFIG, FIELD_NAMES)


def test_deeply_nested_commands_are_a_parse_error() -> None:
    """Nesting beyond the reader's limit fails cleanly instead of exhausting the stack."""
    text: str = "Config { commands = " + "[" * 5000 + "]" * 5000 + " }"
    with pytest.raises(ConfigParseError) as excinfo:
        parse_config(text)
    assert excinfo.value.expected == (f"at most {MAX_NESTING} levels of nesting",)
    assert excinfo.value.position.column == len("Config { commands = ") + MAX_NESTING + 1
    assert decode_config_or_default(text) == DecodedConfig(DEFAULT_CONFIG, FIELD_NAMES)


def test_decoded_configs_are_unhashable() -> None:
    """Configs compare by value; they may hold list arguments and cannot be hashed."""
    assert parse_config(ALL_FIELDS) == parse_config(ALL_FIELDS)
    with pytest.raises(TypeError):
        hash(parse_config(ALL_FIELDS).config)
