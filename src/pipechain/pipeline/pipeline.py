# topmark:header:start
#
#   project      : PipeChain
#   file         : pipeline.py
#   file_relpath : src/pipechain/pipeline/pipeline.py
#   license      : MIT
#   copyright    : (c) 2025 PipeChain contributors
#
# topmark:header:end

"""Sequential callback pipeline (execution engine).

A `Pipeline` holds an ordered list of steps and applies them to a value:

    result = Pipeline().pipe(strip).pipe(upper).apply("  hi ")

Each step is called as ``step(carry, initial, transport, *args)`` and returns
the next carry. When a caster is configured, every step result (and, with
``cast_first``, the initial value) is coerced before it reaches the next step.

Lifecycle
---------
1) *Building*: steps are appended with `register_step` (alias `pipe`).
2) *Locked*: the first non-empty `apply` locks the pipeline forever; further
   registrations raise `StateError`.
3) *Working*: while `apply` runs, re-entrant `apply`, `register_step` and
   `info` on the same instance raise `StateError`. The flag is reset on every
   exit path, including a failing step.

Each run's [`Transport`][pipechain.pipeline.transport.Transport] is pushed on
a history stack that `info()` drains most-recent-first.

Nesting
-------
A pipeline is itself a step: ``outer.pipe(inner)`` runs ``inner`` with the
outer carry as its starting cursor and the *outer* transport, so storage
entries are shared across nesting levels.
"""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING, Any

from pipechain.config.logging import get_logger
from pipechain.errors import LogicError, StateError
from pipechain.pipeline.casting import resolve_caster
from pipechain.pipeline.contracts import StepRegistration
from pipechain.pipeline.history import PipelineInfo, RunHistory
from pipechain.pipeline.transport import Transport

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from pipechain.config.logging import PipechainLogger
    from pipechain.config.settings import PipelineSettings
    from pipechain.pipeline.casting import Caster
    from pipechain.pipeline.contracts import Step
    from pipechain.pipeline.history import RunSnapshot

logger: PipechainLogger = get_logger(__name__)


class Pipeline:
    """Ordered chain of steps applied to an evolving value.

    Args:
        context (Any): Value exposed to every step as ``transport.context``.
        caster (Caster | str | Callable[[Any], Any] | None): Optional coercion
            applied to every step result; a `Caster` member, its name, or a
            custom callable.
        cast_first (bool): Also cast the initial value before the first step.

    Raises:
        ArgumentError: If ``caster`` is neither a known caster nor callable.
    """

    def __init__(
        self,
        context: Any = None,
        caster: Caster | str | Callable[[Any], Any] | None = None,
        cast_first: bool = False,
    ) -> None:
        self._uid: str = uuid.uuid4().hex
        self._context: Any = context
        self._caster: Callable[[Any], Any] | None = resolve_caster(caster)
        self._cast_first: bool = bool(cast_first)
        self._steps: list[StepRegistration] = []
        self._history: RunHistory = RunHistory()
        self._locked: bool = False
        self._working: bool = False

    @classmethod
    def from_settings(cls, settings: PipelineSettings, context: Any = None) -> Pipeline:
        """Build an empty pipeline configured from loaded settings.

        Args:
            settings (PipelineSettings): Caster selection and ``cast_first`` flag.
            context (Any): Context exposed to the steps.

        Returns:
            Pipeline: A new, unlocked pipeline without steps.
        """
        return cls(context=context, caster=settings.caster, cast_first=settings.cast_first)

    def __repr__(self) -> str:
        return (
            f"Pipeline(uid={self._uid!r}, steps={[s.name for s in self._steps]!r}, "
            f"locked={self._locked}, working={self._working})"
        )

    @property
    def uid(self) -> str:
        """Stable identity token used for transport ownership checks."""
        return self._uid

    @property
    def context(self) -> Any:
        return self._context

    @property
    def caster(self) -> Callable[[Any], Any] | None:
        return self._caster

    @property
    def cast_first(self) -> bool:
        return self._cast_first

    @property
    def locked(self) -> bool:
        return self._locked

    @property
    def working(self) -> bool:
        return self._working

    @property
    def step_count(self) -> int:
        return len(self._steps)

    @property
    def steps(self) -> tuple[StepRegistration, ...]:
        """Registered steps, in execution order."""
        return tuple(self._steps)

    def register_step(self, step: Step, args: Iterable[Any] = ()) -> Pipeline:
        """Append a step to the pipeline.

        The step is called as ``step(carry, initial, transport, *args)``.

        Args:
            step (Step): Any callable, including another `Pipeline`.
            args (Iterable[Any]): Extra positional arguments appended after the transport.

        Returns:
            Pipeline: ``self``, for fluent chaining.

        Raises:
            StateError: If the pipeline is locked (already applied) or working.
            TypeError: If ``step`` is not callable or ``args`` is a string.
        """
        if self._locked:
            logger.debug("register_step() refused: pipeline %s is locked", self._uid)
            raise StateError("It is not possible to register a step on a locked pipeline.")
        if self._working:
            logger.debug("register_step() refused: pipeline %s is working", self._uid)
            raise StateError("It is not possible to register a step while a pipeline works.")
        if not callable(step):
            raise TypeError(f"Pipeline steps must be callable, not {type(step).__name__}.")
        if isinstance(args, (str, bytes)):
            raise TypeError("Step arguments must be a sequence of values, not a string.")
        registration: StepRegistration = StepRegistration.of(step, tuple(args))
        self._steps.append(registration)
        logger.trace("Registered step #%d %s on %s", len(self._steps), registration.name, self._uid)
        return self

    pipe = register_step

    def apply(self, initial: Any, transport: Transport | None = None, cursor: Any = None) -> Any:
        """Run every step, in order, and return the final carry.

        Args:
            initial (Any): The value the run is started with; passed to every step.
            transport (Transport | None): A transport to reuse; it must have been created
                for ``initial``. A new one is created when omitted.
            cursor (Any): Starting carry when not ``None`` (cast when a caster is set);
                used when the pipeline runs as a nested step.

        Returns:
            Any: The final carry, or ``initial`` unchanged when no step is registered.

        Raises:
            StateError: If the pipeline is already working.
            LogicError: If ``transport`` was created for a different input.
        """
        if self._working:
            logger.debug("apply() refused: pipeline %s is already working", self._uid)
            raise StateError("It is not possible to run a pipeline that is already working.")
        if not self._steps:
            return initial

        run_transport: Transport = self._init_transport(transport, initial)
        self._working = True
        self._locked = True
        self._history.push(run_transport)
        logger.debug("Pipeline %s: run started with %d step(s)", self._uid, len(self._steps))
        try:
            carry: Any = self._initial_carry(initial, cursor)
            for index, registration in enumerate(self._steps, start=1):
                logger.trace("Pipeline %s: step #%d %s", self._uid, index, registration.name)
                carry = self._maybe_cast(registration(carry, initial, run_transport))
        finally:
            self._working = False
        logger.debug("Pipeline %s: run finished", self._uid)
        return carry

    def __call__(
        self, carry: Any, initial: Any, transport: Transport | None = None, *_extra: Any
    ) -> Any:
        """Run this pipeline as a step of another pipeline.

        The outer carry becomes the starting cursor and the outer transport is
        shared. Extra registration arguments are ignored.
        """
        return self.apply(initial, transport, carry)

    def info(self) -> PipelineInfo:
        """Drain the run history into snapshots, most recent run first.

        Runs made on a transport owned by another pipeline (a nested run sharing
        the outer transport) are dropped from the history without a snapshot.

        Returns:
            PipelineInfo: The pipeline context plus one
                [`RunSnapshot`][pipechain.pipeline.history.RunSnapshot] per run since the last
                call. The history is empty afterwards.

        Raises:
            StateError: If the pipeline is working.
        """
        if self._working:
            logger.debug("info() refused: pipeline %s is working", self._uid)
            raise StateError("It is not possible to get info on a working pipeline.")
        snapshots: list[RunSnapshot] = []
        for transport in self._history.drain():
            if transport.owner_id != self._uid:
                logger.debug(
                    "info(): skipping run on transport owned by %s", transport.owner_id
                )
                continue
            snapshots.append(transport.export_for(self))
        return PipelineInfo(self._context, snapshots)

    def _init_transport(self, transport: Transport | None, initial: Any) -> Transport:
        if transport is None:
            return Transport(self, initial, self._context)
        if not transport.accepts_input(initial):
            logger.debug("apply() refused: transport does not match initial value %r", initial)
            raise LogicError("A custom transport must be created with the proper initial value.")
        return transport

    def _initial_carry(self, initial: Any, cursor: Any) -> Any:
        if cursor is not None:
            return self._maybe_cast(cursor)
        return self._maybe_cast(initial) if self._cast_first else initial

    def _maybe_cast(self, value: Any) -> Any:
        return value if self._caster is None else self._caster(value)
