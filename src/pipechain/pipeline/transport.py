# topmark:header:start
#
#   project      : PipeChain
#   file         : transport.py
#   file_relpath : src/pipechain/pipeline/transport.py
#   license      : MIT
#   copyright    : (c) 2025 PipeChain contributors
#
# topmark:header:end

"""Run-scoped transport shared by every step of a pipeline run.

A `Transport` carries the original input of a run, the owning pipeline's
context, the time the run started and a key/value storage steps use to pass
side-channel data to each other (and to the caller, through
`Pipeline.info()`).

Storage contract
----------------
- Keys are strings; insertion order is preserved.
- An entry holding a scalar (``None``, ``bool``, ``int``, ``float``,
  ``complex``, ``str``, ``bytes``) may be overwritten.
- An entry holding a structured value (lists, dicts and any other object)
  may not be overwritten: `ArgumentError`.
- Entries are never removed: `delete()` (and ``del transport[key]``) always
  raises `LogicError`.

Only the pipeline that created a transport may export its full state
(`export_for`); nested pipelines receive the same transport but cannot
export it.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any, Final

from pipechain.config.logging import get_logger
from pipechain.errors import AccessError, ArgumentError, LogicError
from pipechain.pipeline.casting import is_scalar
from pipechain.pipeline.history import RunSnapshot

if TYPE_CHECKING:
    from pipechain.config.logging import PipechainLogger
    from pipechain.pipeline.pipeline import Pipeline

logger: PipechainLogger = get_logger(__name__)

# Sentinel default of `Transport(context=...)`: use the owning pipeline's context.
INHERIT_CONTEXT: Final[Any] = object()


class Transport:
    """Key/value bag plus run metadata passed as third argument to every step.

    Args:
        pipeline (Pipeline): The pipeline that owns this transport.
        original_input (Any): The initial value of the run this transport belongs to.
        context (Any): The context visible to steps. When omitted, ``pipeline.context``
            is used; an explicit ``None`` is kept as ``None``.
    """

    __slots__ = ("_context", "_created_at", "_input", "_owner_id", "_storage")

    def __init__(
        self, pipeline: Pipeline, original_input: Any, context: Any = INHERIT_CONTEXT
    ) -> None:
        self._owner_id: str = pipeline.uid
        self._input: Any = original_input
        self._context: Any = pipeline.context if context is INHERIT_CONTEXT else context
        self._created_at: float = time.time()
        self._storage: dict[str, Any] = {}

    def __repr__(self) -> str:
        return (
            f"Transport(owner_id={self._owner_id!r}, original_input={self._input!r}, "
            f"keys={list(self._storage)!r})"
        )

    @property
    def owner_id(self) -> str:
        """Identity token of the pipeline that created this transport."""
        return self._owner_id

    @property
    def original_input(self) -> Any:
        return self._input

    @property
    def context(self) -> Any:
        return self._context

    @property
    def created_at(self) -> float:
        return self._created_at

    def accepts_input(self, value: Any) -> bool:
        """Return True if ``value`` is the input this transport was created for.

        Scalars compare by type and value; structured values compare by identity.
        """
        if is_scalar(value) and is_scalar(self._input):
            return type(value) is type(self._input) and value == self._input
        return value is self._input

    def export_for(self, pipeline: Pipeline) -> RunSnapshot:
        """Return the transport state as a [`RunSnapshot`][pipechain.pipeline.history.RunSnapshot].

        Args:
            pipeline (Pipeline): The pipeline requesting the state.

        Returns:
            RunSnapshot: Original input, a copy of the storage and the start timestamp.

        Raises:
            AccessError: If ``pipeline`` is not the pipeline that created this transport.
        """
        if pipeline.uid != self._owner_id:
            logger.debug(
                "Transport owned by %s refused export to %s", self._owner_id, pipeline.uid
            )
            raise AccessError("Only the pipeline that created a transport can export its state.")
        return RunSnapshot(
            input=self._input,
            transported=self._storage,
            started_at=self._created_at,
        )

    # --- storage ---

    def has(self, key: str) -> bool:
        return key in self._storage

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default`` when unset."""
        return self._storage.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``.

        Raises:
            TypeError: If ``key`` is not a string.
            ArgumentError: If ``key`` currently holds a structured (non-scalar) value.
        """
        if not isinstance(key, str):
            raise TypeError(f"Transport keys must be strings, not {type(key).__name__}.")
        if key in self._storage and not is_scalar(self._storage[key]):
            logger.debug("Refused overwrite of structured transport entry %r", key)
            raise ArgumentError(
                f"Transported entry {key!r} holds an object and can't be overwritten."
            )
        logger.trace("Transport[%r] = %r", key, value)
        self._storage[key] = value

    def delete(self, key: str) -> None:
        """Always raises: transported data can't be deleted.

        Raises:
            LogicError: Unconditionally.
        """
        logger.debug("Refused deletion of transport entry %r", key)
        raise LogicError(f"Transported entry {key!r} can't be deleted.")

    def keys(self) -> list[str]:
        return list(self._storage)

    # Python container sugar, routed through the named methods above.

    def __contains__(self, key: object) -> bool:
        return key in self._storage

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        self.delete(key)
