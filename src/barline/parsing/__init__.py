# topmark:header:start
#
#   project      : Barline
#   file         : __init__.py
#   file_relpath : src/barline/parsing/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Low-level parsing primitives shared by the Barline parsers.

Exports:
    - `Scanner`: cursor over an input string with backtracking and
      position-aware error reporting.
    - `read_value`: generic structured-value reader that advances a `Scanner`.
"""

from __future__ import annotations

from barline.parsing.literal import (
    Constructor,
    Record,
    Value,
    read_value,
    read_value_text,
    render_value,
)
from barline.parsing.scanner import Scanner, merge_errors

__all__: list[str] = [
    "Constructor",
    "Record",
    "Scanner",
    "Value",
    "merge_errors",
    "read_value",
    "read_value_text",
    "render_value",
]
