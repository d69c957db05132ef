# topmark:header:start
#
#   project      : PipeChain
#   file         : config.py
#   file_relpath : src/pipechain/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 PipeChain contributors
#
# topmark:header:end

"""PipeChain `config` command.

Prints the effective pipeline settings as TOML: the runtime defaults, or the
settings read from ``--file`` (``pipechain.toml`` or a ``pyproject.toml``
with a ``[tool.pipechain]`` table).
"""

from __future__ import annotations

from pathlib import Path

import click

from pipechain.cli.errors import PipechainConfigError
from pipechain.config.io import load_toml_dict
from pipechain.config.settings import PipelineSettings


@click.command(
    name="config",
    help="Show the effective pipeline settings as TOML.",
)
@click.option(
    "--file",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read settings from this pipechain.toml or pyproject.toml.",
)
def config_command(*, config_file: Path | None = None) -> None:
    """Show the effective pipeline settings.

    Args:
        config_file (Path | None): Optional TOML file to read.
    """
    if config_file is None:
        settings: PipelineSettings = PipelineSettings.from_defaults()
    else:
        if not load_toml_dict(config_file):
            raise PipechainConfigError(f"Cannot read TOML configuration from {config_file}.")
        settings = PipelineSettings.from_toml_file(config_file)

    click.echo(settings.to_toml(), nl=False)
