# topmark:header:start
#
#   project      : PipeChain
#   file         : casters.py
#   file_relpath : src/pipechain/cli/commands/casters.py
#   license      : MIT
#   copyright    : (c) 2025 PipeChain contributors
#
# topmark:header:end

"""PipeChain `casters` command.

Lists the built-in casters a pipeline can be constructed with, with their
accepted aliases.
"""

from __future__ import annotations

import click

from pipechain.pipeline.casting import Caster


@click.command(
    name="casters",
    help="List the built-in casters.",
)
def casters_command() -> None:
    """List the built-in casters (key, description and aliases)."""
    width: int = max(len(m.key) for m in Caster)
    for member in Caster:
        aliases: str = ", ".join(member.aliases)
        line: str = f"{click.style(member.key.ljust(width), bold=True)}  {member.label}"
        if aliases:
            line += click.style(f" (aliases: {aliases})", dim=True)
        click.echo(line)
