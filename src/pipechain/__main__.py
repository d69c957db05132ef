# topmark:header:start
#
#   project      : PipeChain
#   file         : __main__.py
#   file_relpath : src/pipechain/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 PipeChain contributors
#
# topmark:header:end

"""Module entry point for ``python -m pipechain``.

Examples:
    Apply a built-in caster from the command line::

        python -m pipechain cast int 2.5
"""

from __future__ import annotations

from pipechain.cli.main import cli

if __name__ == "__main__":
    cli()
