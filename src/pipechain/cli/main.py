# topmark:header:start
#
#   project      : PipeChain
#   file         : main.py
#   file_relpath : src/pipechain/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 PipeChain contributors
#
# topmark:header:end

"""Click entry point for the ``pipechain`` command.

Group-level options are resolved once and placed into ``ctx.obj``; the
subcommands read them from there.
"""

from __future__ import annotations

import click

from pipechain.cli.commands.cast import cast_command
from pipechain.cli.commands.casters import casters_command
from pipechain.cli.commands.config import config_command
from pipechain.cli.commands.version import version_command
from pipechain.cli.options import common_verbose_options, resolve_verbosity
from pipechain.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int) -> None:
    """Initialize shared state (verbosity & logging) on the Click context.

    ``PIPECHAIN_LOG_LEVEL`` wins over ``-v``; without either, logging stays at CRITICAL.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    level_env: int | None = resolve_env_log_level()
    log_level: int | None = level_env if level_env is not None else (level_cli if verbose else None)
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="PipeChain CLI",
)
@common_verbose_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int) -> None:
    """Entry point for the PipeChain CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet)

    if ctx.invoked_subcommand is None:
        click.echo("Hint: use 'pipechain casters' to list the built-in casters.")
        click.echo()
        click.echo(ctx.get_help())


cli.add_command(version_command)

cli.add_command(casters_command)

cli.add_command(cast_command)

cli.add_command(config_command)

if __name__ == "__main__":
    cli()
