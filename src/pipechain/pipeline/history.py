# topmark:header:start
#
#   project      : PipeChain
#   file         : history.py
#   file_relpath : src/pipechain/pipeline/history.py
#   license      : MIT
#   copyright    : (c) 2025 PipeChain contributors
#
# topmark:header:end

"""Run history: the stack of transports and the snapshots exported from it.

`RunHistory` is a last-in-first-out stack of the transports a pipeline has
run with. `Pipeline.info()` reads it most-recent-first and empties it, so a
run log is read exactly once.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, overload

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from pipechain.pipeline.transport import Transport


@dataclass(frozen=True, slots=True)
class RunSnapshot:
    """Exported state of one pipeline run.

    Attributes:
        input (Any): The original input of the run.
        transported (Mapping[str, Any]): Read-only copy of the transport storage,
            in insertion order.
        started_at (float): Timestamp (seconds since the epoch) the transport was created at.
    """

    input: Any
    transported: Mapping[str, Any]
    started_at: float

    def __post_init__(self) -> None:
        if not isinstance(self.transported, MappingProxyType):
            object.__setattr__(self, "transported", MappingProxyType(dict(self.transported)))

    def to_dict(self) -> dict[str, Any]:
        """Return the snapshot as a plain dict (``input``, ``transported``, ``started_at``)."""
        return {
            "input": self.input,
            "transported": dict(self.transported),
            "started_at": self.started_at,
        }


class PipelineInfo(Sequence[RunSnapshot]):
    """Run snapshots of a pipeline, most recent first, plus the pipeline context.

    Indexing and iteration yield `RunSnapshot`s only; the context is held once in
    `context`. `to_list()` gives the flat export: the context entry first, then
    one dict per run.
    """

    def __init__(self, context: Any, runs: Sequence[RunSnapshot] = ()) -> None:
        self.context: Any = context
        self._runs: tuple[RunSnapshot, ...] = tuple(runs)

    @overload
    def __getitem__(self, index: int) -> RunSnapshot: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[RunSnapshot]: ...

    def __getitem__(self, index: int | slice) -> RunSnapshot | Sequence[RunSnapshot]:
        return self._runs[index]

    def __len__(self) -> int:
        return len(self._runs)

    def __repr__(self) -> str:
        return f"PipelineInfo(context={self.context!r}, runs={list(self._runs)!r})"

    def to_list(self) -> list[Any]:
        """Return ``[{"context": ...}, run_dict, ...]``, the context entry first."""
        return [{"context": self.context}, *(run.to_dict() for run in self._runs)]


@dataclass
class RunHistory:
    """LIFO stack of transports, one per pipeline run."""

    _stack: list[Transport] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self._stack)

    def __iter__(self) -> Iterator[Transport]:
        """Iterate most recent first, without draining."""
        return reversed(self._stack)

    def push(self, transport: Transport) -> None:
        self._stack.append(transport)

    def top(self) -> Transport:
        """Return the most recently pushed transport.

        Raises:
            IndexError: If the history is empty.
        """
        if not self._stack:
            raise IndexError("Run history is empty.")
        return self._stack[-1]

    def drain(self) -> list[Transport]:
        """Pop every transport, most recent first, leaving the stack empty."""
        drained: list[Transport] = list(reversed(self._stack))
        self._stack.clear()
        return drained
