# topmark:header:start
#
#   project      : Barline
#   file         : __init__.py
#   file_relpath : src/barline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Barline package.

Barline turns the raw text of a status bar into structured data: color markup
into styled fragments, output templates into resolved command segments, and
``Config { ... }`` blocks into configuration records.

Public entry points:
    - [`parse_markup`][barline.markup.parse_markup]
    - [`parse_template`][barline.template.parse_template]
    - [`parse_config`][barline.config.decoder.parse_config]
"""

from __future__ import annotations

from barline.commands import Command, Monitor, Runnable
from barline.config.decoder import DecodedConfig, parse_config
from barline.config.model import DEFAULT_CONFIG, Config
from barline.errors import BarlineError, ConfigParseError, ParseError
from barline.markup import StyledFragment, parse_markup
from barline.template import ResolvedSegment, TemplateContext, parse_template

__all__: list[str] = [
    "DEFAULT_CONFIG",
    "BarlineError",
    "Command",
    "Config",
    "ConfigParseError",
    "DecodedConfig",
    "Monitor",
    "ParseError",
    "ResolvedSegment",
    "Runnable",
    "StyledFragment",
    "TemplateContext",
    "parse_config",
    "parse_markup",
    "parse_template",
]
