# topmark:header:start
#
#   project      : Barline
#   file         : __init__.py
#   file_relpath : src/barline/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Barline CLI subcommands."""
