# topmark:header:start
#
#   project      : PipeChain
#   file         : version.py
#   file_relpath : src/pipechain/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 PipeChain contributors
#
# topmark:header:end

"""PipeChain `version` command.

Prints the current PipeChain version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from pipechain.constants import PIPECHAIN_VERSION


@click.command(
    name="version",
    help="Show the current version of PipeChain.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the version as a JSON object.",
)
def version_command(*, as_json: bool = False) -> None:
    """Show the current version of PipeChain.

    Args:
        as_json (bool): Emit ``{"version": ...}`` instead of plain text.
    """
    if as_json:
        click.echo(json.dumps({"version": PIPECHAIN_VERSION}))
    else:
        click.echo(click.style(PIPECHAIN_VERSION, bold=True))
