# topmark:header:start
#
#   project      : PipeChain
#   file         : contracts.py
#   file_relpath : src/pipechain/pipeline/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 PipeChain contributors
#
# topmark:header:end

"""Type contracts for pipeline steps (engine-facing).

A step is any callable with the signature

    step(carry, initial, transport, *args) -> new_carry

where ``carry`` is the running value (the previous step's result, possibly
cast), ``initial`` is the value the run was started with, ``transport`` is the
run's [`Transport`][pipechain.pipeline.transport.Transport] and ``args`` are
the extra arguments given at registration. The return value becomes the next
carry. A `Pipeline` is itself a step, which is how pipelines nest.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .transport import Transport


class Step(Protocol):
    """Protocol for a single pipeline step."""

    def __call__(self, carry: Any, initial: Any, transport: Transport, /, *args: Any) -> Any:
        """Produce the next carry value.

        Args:
            carry (Any): The running value.
            initial (Any): The value the run was started with.
            transport (Transport): The run-scoped transport.
            *args (Any): Extra arguments supplied at registration.

        Returns:
            Any: The new running value.
        """
        ...


@dataclass(frozen=True, eq=False, slots=True)
class StepRegistration:
    """One registration of a step in a pipeline.

    Registrations compare by identity, so registering the same callable twice
    yields two distinct entries that both run.

    Attributes:
        handle (Step): The callable to invoke.
        args (tuple[Any, ...]): Extra positional arguments appended after the transport.
        name (str): Display name used in logs.
    """

    handle: Step
    args: tuple[Any, ...] = ()
    name: str = "<step>"

    @classmethod
    def of(cls, step: Step, args: tuple[Any, ...] = ()) -> StepRegistration:
        """Build a registration, deriving a display name from ``step``."""
        name: str = getattr(step, "__qualname__", None) or type(step).__qualname__
        return cls(handle=step, args=tuple(args), name=name)

    def __call__(self, carry: Any, initial: Any, transport: Transport) -> Any:
        return self.handle(carry, initial, transport, *self.args)
