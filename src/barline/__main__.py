# topmark:header:start
#
#   project      : Barline
#   file         : __main__.py
#   file_relpath : src/barline/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Barline via ``python -m barline``.

Delegates to [`barline.cli.main.cli`][barline.cli.main.cli], the same entry
point as the ``barline`` console script.
"""

from __future__ import annotations

from barline.cli.main import cli

if __name__ == "__main__":
    cli()
