# topmark:header:start
#
#   project      : Barline
#   file         : __init__.py
#   file_relpath : src/barline/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration record, baseline defaults and the ``Config { ... }`` decoder.

Submodules:
    - `barline.config.model`: the immutable `Config` record and its value types.
    - `barline.config.decoder`: the order-insensitive ``Config { ... }`` decoder.
    - `barline.config.logging`: logging setup shared by all Barline modules.

This package module stays import-free so that `barline.config.logging` can be
imported from anywhere without cycles.
"""

from __future__ import annotations
