# topmark:header:start
#
#   project      : PipeChain
#   file         : cast.py
#   file_relpath : src/pipechain/cli/commands/cast.py
#   license      : MIT
#   copyright    : (c) 2025 PipeChain contributors
#
# topmark:header:end

"""PipeChain `cast` command.

Applies one built-in caster to a value and prints the result as JSON. Useful
to check what a pipeline configured with that caster will hand to its next
step:

    pipechain cast int 2.5          # -> 2
    pipechain cast array --json '{"a": 1}'   # -> {"a": 1}
"""

from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any

import click

from pipechain.cli.errors import PipechainCastError, PipechainUsageError
from pipechain.config.logging import get_logger
from pipechain.pipeline.casting import Caster

logger = get_logger(__name__)


def _jsonable(value: Any) -> Any:
    """`json.dumps` fallback: namespaces become objects, anything else its ``repr``."""
    if isinstance(value, SimpleNamespace):
        return vars(value)
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    if isinstance(value, complex):
        return str(value)
    return repr(value)


@click.command(
    name="cast",
    help="Apply a built-in caster to VALUE and print the result as JSON.",
)
@click.argument("caster_name", metavar="CASTER")
@click.argument("value")
@click.option(
    "--json",
    "parse_json",
    is_flag=True,
    default=False,
    help="Parse VALUE as JSON before casting (default: use it as a string).",
)
def cast_command(*, caster_name: str, value: str, parse_json: bool = False) -> None:
    """Apply CASTER to VALUE.

    Args:
        caster_name (str): Caster key, name or alias (see ``pipechain casters``).
        value (str): The raw value.
        parse_json (bool): Decode ``value`` as JSON first.
    """
    caster: Caster | None = Caster.parse(caster_name)
    if caster is None:
        raise PipechainUsageError(
            f"Unknown caster {caster_name!r}; expected one of: "
            f"{', '.join(m.key for m in Caster)}."
        )

    data: Any = value
    if parse_json:
        try:
            data = json.loads(value)
        except json.JSONDecodeError as exc:
            raise PipechainCastError(f"VALUE is not valid JSON: {exc}") from exc

    try:
        result: Any = caster(data)
    except (TypeError, ValueError, UnicodeDecodeError) as exc:
        logger.debug("Caster %s failed on %r: %s", caster.key, data, exc)
        raise PipechainCastError(f"Cannot cast {data!r} with {caster.key!r}: {exc}") from exc

    click.echo(json.dumps(result, default=_jsonable))
