# topmark:header:start
#
#   project      : Barline
#   file         : constants.py
#   file_relpath : src/barline/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Barline Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

BARLINE_VERSION: str = get_version("barline")

# Refresh interval (in tenths of a second) of placeholder commands.
DEFAULT_REFRESH_RATE: int = 10

# Prefix of the fragment shown in place of unparsable markup.
MARKUP_ERROR_PREFIX: str = "Could not parse string: "

# Source name used in configuration error messages.
CONFIG_SOURCE_NAME: str = "Config"
CONFIG_KEYWORD: str = "Config"
