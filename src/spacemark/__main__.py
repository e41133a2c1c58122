# topmark:header:start
#
#   project      : SpaceMark
#   file         : __main__.py
#   file_relpath : src/spacemark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running SpaceMark via ``python -m spacemark``.

It delegates directly to :func:`spacemark.cli.main.cli`, so the module and the
``spacemark`` console script share a single entry point.

Examples:
    Annotate a JSON template tree read from STDIN::

        python -m spacemark annotate - < template.json
"""

from __future__ import annotations

from spacemark.cli.main import cli

if __name__ == "__main__":
    cli()
