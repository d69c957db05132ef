# topmark:header:start
#
#   project      : PipeChain
#   file         : casting.py
#   file_relpath : src/pipechain/pipeline/casting.py
#   license      : MIT
#   copyright    : (c) 2025 PipeChain contributors
#
# topmark:header:end

"""Built-in casters applied to intermediate pipeline values.

A *caster* is a one-argument callable ``(value) -> value`` that a pipeline
applies to the result of every step (and optionally to the initial value).
Six built-in coercions are selectable through the [`Caster`][pipechain.pipeline.casting.Caster]
enum; any other callable can be used as a custom caster.

Coercion rules
--------------
- ``ARRAY``: ``None`` → ``[]``; mappings → ``dict``; objects with attributes
  → ``dict`` of their attributes; non-string iterables → ``list``; other
  scalars → ``[value]``.
- ``OBJECT``: ``None`` → empty namespace; mappings and lists/tuples →
  ``SimpleNamespace`` keyed by (stringified) key/index; scalars →
  ``SimpleNamespace(scalar=value)``; other objects are returned unchanged.
- ``STRING``: ``None`` → ``""``; ``bytes`` decoded as UTF-8; else ``str()``.
- ``INT``: ``None`` → ``0``; text parsed as an integer, or as a float and
  truncated; else ``int()``.
- ``BOOL``: Python truthiness.
- ``FLOAT``: ``None`` → ``0.0``; else ``float()``.

Conversion errors raised by ``int()``/``float()`` propagate to the caller of
``Pipeline.apply`` exactly like a failing step.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import SimpleNamespace
from typing import TYPE_CHECKING, Any, Final

from pipechain.config.logging import get_logger
from pipechain.core.enum_mixins import KeyedStrEnum
from pipechain.errors import ArgumentError

if TYPE_CHECKING:
    from collections.abc import Callable

    from pipechain.config.logging import PipechainLogger

logger: PipechainLogger = get_logger(__name__)

SCALAR_TYPES: Final[tuple[type, ...]] = (str, bytes, bool, int, float, complex)


def is_scalar(value: Any) -> bool:
    """Return True for ``None`` and primitive values (str, bytes, bool, int, float, complex)."""
    return value is None or isinstance(value, SCALAR_TYPES)


class Caster(KeyedStrEnum):
    """Built-in coercions selectable at pipeline construction time."""

    ARRAY = ("array", "Coerce to a list, or to a dict for mappings and objects", ("list", "map"))
    OBJECT = ("object", "Coerce to an attribute namespace", ("namespace",))
    STRING = ("string", "Coerce to a string", ("str",))
    INT = ("int", "Coerce to an integer", ("integer",))
    BOOL = ("bool", "Coerce to a boolean (truthiness)", ("boolean",))
    FLOAT = ("float", "Coerce to a float", ("double",))

    def __call__(self, value: Any) -> Any:
        return _CASTERS[self](value)


def to_array(value: Any) -> list[Any] | dict[Any, Any]:
    if value is None:
        return []
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, (str, bytes)):
        return [value]
    if isinstance(value, Iterable):
        return list(value)
    if is_scalar(value):
        return [value]
    if hasattr(value, "__dict__"):
        return dict(vars(value))
    return [value]


def to_object(value: Any) -> Any:
    if value is None:
        return SimpleNamespace()
    if isinstance(value, Mapping):
        return SimpleNamespace(**{str(k): v for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return SimpleNamespace(**{str(i): v for i, v in enumerate(value)})
    if is_scalar(value):
        return SimpleNamespace(scalar=value)
    return value


def to_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


def to_int(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, (str, bytes)):
        text = value.decode("utf-8") if isinstance(value, bytes) else value
        try:
            return int(text.strip())
        except ValueError:
            # "2.5" -> 2
            return int(float(text.strip()))
    return int(value)


def to_bool(value: Any) -> bool:
    return bool(value)


def to_float(value: Any) -> float:
    if value is None:
        return 0.0
    if isinstance(value, str):
        return float(value.strip())
    return float(value)


_CASTERS: Final[dict[Caster, Callable[[Any], Any]]] = {
    Caster.ARRAY: to_array,
    Caster.OBJECT: to_object,
    Caster.STRING: to_string,
    Caster.INT: to_int,
    Caster.BOOL: to_bool,
    Caster.FLOAT: to_float,
}


def resolve_caster(
    caster: Caster | str | Callable[[Any], Any] | None,
) -> Callable[[Any], Any] | None:
    """Resolve a caster selector into the callable the pipeline will apply.

    Args:
        caster (Caster | str | Callable[[Any], Any] | None): ``None`` (no casting),
            a `Caster` member, the key/name/alias of one (e.g. ``"int"``), or a
            custom one-argument callable.

    Returns:
        Callable[[Any], Any] | None: The coercion function, or ``None``.

    Raises:
        ArgumentError: If ``caster`` names no built-in caster or is not callable.
    """
    if caster is None:
        return None
    if isinstance(caster, Caster):
        return _CASTERS[caster]
    if isinstance(caster, str):
        member: Caster | None = Caster.parse(caster)
        if member is None:
            logger.debug("Unknown caster name: %r", caster)
            raise ArgumentError(
                f"Unknown caster {caster!r}; expected one of: "
                f"{', '.join(m.key for m in Caster)}."
            )
        return _CASTERS[member]
    if callable(caster):
        return caster
    logger.debug("Invalid caster: %r", caster)
    raise ArgumentError(f"Caster must be a Caster, a caster name or a callable, not {caster!r}.")
