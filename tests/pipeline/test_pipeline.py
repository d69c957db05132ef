# topmark:header:start
#
#   project      : PipeChain
#   file         : test_pipeline.py
#   file_relpath : tests/pipeline/test_pipeline.py
#   license      : MIT
#   copyright    : (c) 2025 PipeChain contributors
#
# topmark:header:end

"""Tests for the `Pipeline` engine: ordering, locking, reentrancy and transports.

Covered behaviors:
- an empty pipeline returns its input unchanged and records nothing
- steps run left to right with ``(carry, initial, transport, *args)``
- the first run locks the pipeline; re-entrant calls fail while it works
- custom transports must match the initial value
- a cursor value replaces the initial value as starting carry
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from pipechain.errors import LogicError, StateError
from pipechain.pipeline import Pipeline, Transport
from tests.conftest import mark_pipeline, parametrize
from tests.pipeline.conftest import append, append_initial, identity

if TYPE_CHECKING:
    from collections.abc import Callable


@mark_pipeline
def test_empty_pipeline_returns_input_unchanged(pipeline: Pipeline) -> None:
    """Without steps, ``apply`` is the identity and neither locks nor records a run."""
    value: dict[str, int] = {"a": 1}
    assert pipeline.apply(value) is value
    assert pipeline.apply("foo") == "foo"
    assert pipeline.locked is False
    assert len(pipeline.info()) == 0


@mark_pipeline
def test_steps_run_in_registration_order(pipeline: Pipeline) -> None:
    """``"Z"`` through ``+X`` then ``+Y`` yields ``"ZXY"``."""
    pipeline.pipe(append("X"))
    pipeline.pipe(append("Y"))
    assert pipeline.apply("Z") == "ZXY"


@mark_pipeline
def test_step_receives_carry_initial_and_transport(pipeline: Pipeline) -> None:
    """Every step gets the running carry, the untouched initial value and the same transport."""
    seen: list[tuple[Any, Any, Transport]] = []

    def spy(carry: Any, initial: Any, transport: Transport) -> Any:
        seen.append((carry, initial, transport))
        return carry * 2

    pipeline.pipe(spy).pipe(spy)
    assert pipeline.apply(3) == 12
    assert [(c, i) for c, i, _t in seen] == [(3, 3), (6, 3)]
    assert seen[0][2] is seen[1][2]


@mark_pipeline
def test_extra_args_are_appended_after_transport(pipeline: Pipeline) -> None:
    """Registration arguments follow the transport in the step call."""

    def concat(carry: str, initial: str, transport: Transport, foo: str, bar: str) -> str:
        return carry + initial + foo + bar

    pipeline.register_step(concat, ["foo ", "bar"])
    assert pipeline.apply("baz ") == "baz baz foo bar"


@mark_pipeline
def test_same_callable_registered_twice_runs_twice(pipeline: Pipeline) -> None:
    """Registrations are not deduplicated by callable identity."""
    step: Callable[..., Any] = append("!")
    pipeline.pipe(step).pipe(step).pipe(step)
    assert pipeline.step_count == 3
    assert pipeline.apply("hey") == "hey!!!"


@mark_pipeline
def test_register_step_rejects_non_callables(pipeline: Pipeline) -> None:
    """A non-callable step is a programming error."""
    with pytest.raises(TypeError):
        pipeline.register_step("not a step")  # type: ignore[arg-type]


@mark_pipeline
@parametrize("args", ["ab", b"ab"])
def test_register_step_rejects_string_args(pipeline: Pipeline, args: Any) -> None:
    """A string is not split into one argument per character."""
    with pytest.raises(TypeError):
        pipeline.register_step(identity, args)
    assert pipeline.step_count == 0


@mark_pipeline
def test_register_step_fails_when_locked(pipeline: Pipeline) -> None:
    """After a completed run, registration raises `StateError`."""
    pipeline.pipe(identity)
    pipeline.apply("x")
    assert pipeline.locked is True
    with pytest.raises(StateError):
        pipeline.pipe(identity)


@mark_pipeline
def test_register_step_fails_while_working(pipeline: Pipeline) -> None:
    """A step registering another step on its own pipeline raises `StateError`."""

    def registers(carry: Any, initial: Any, transport: Transport) -> Any:
        pipeline.pipe(identity)
        return carry

    pipeline.pipe(registers)
    with pytest.raises(StateError):
        pipeline.apply("x")


@mark_pipeline
def test_apply_fails_while_working(pipeline: Pipeline) -> None:
    """A step re-applying its own pipeline raises `StateError`."""

    def reenters(carry: Any, initial: Any, transport: Transport) -> Any:
        return pipeline.apply("x")

    pipeline.pipe(reenters)
    with pytest.raises(StateError):
        pipeline.apply("x")


@mark_pipeline
def test_info_fails_while_working(pipeline: Pipeline) -> None:
    """A step reading its own pipeline's info raises `StateError`."""

    def inspects(carry: Any, initial: Any, transport: Transport) -> Any:
        pipeline.info()
        return carry

    pipeline.pipe(inspects)
    with pytest.raises(StateError):
        pipeline.apply("x")


@mark_pipeline
def test_working_flag_is_reset_when_a_step_raises(pipeline: Pipeline) -> None:
    """A failing step propagates; the pipeline stays usable and keeps earlier storage writes."""
    calls: list[Any] = []

    def flaky(carry: Any, initial: Any, transport: Transport) -> Any:
        transport.set("attempt", len(calls))
        calls.append(carry)
        if len(calls) == 1:
            raise RuntimeError("boom")
        return carry

    pipeline.pipe(flaky)
    with pytest.raises(RuntimeError, match="boom"):
        pipeline.apply("first")
    assert pipeline.working is False

    assert pipeline.apply("second") == "second"
    snapshots = pipeline.info()
    assert [s.input for s in snapshots] == ["second", "first"]
    assert [s.transported["attempt"] for s in snapshots] == [1, 0]


@mark_pipeline
def test_working_is_true_during_run_only(pipeline: Pipeline) -> None:
    """``working`` is observable from inside a step and cleared afterwards."""
    observed: list[bool] = []

    def probe(carry: Any, initial: Any, transport: Transport) -> Any:
        observed.append(pipeline.working)
        return carry

    pipeline.pipe(probe)
    pipeline.apply(None)
    assert observed == [True]
    assert pipeline.working is False


@mark_pipeline
def test_custom_transport_is_used(pipeline: Pipeline) -> None:
    """A pre-populated transport built for the initial value is handed to the steps."""
    transport = Transport(pipeline, "bar")
    transport.set("foo", "foo")

    def check(carry: str, initial: str, t: Transport) -> str:
        return carry + " foo" if t.get("foo") == "foo" else carry

    pipeline.pipe(check)
    assert pipeline.apply("bar", transport) == "bar foo"


@mark_pipeline
def test_custom_transport_with_wrong_input_fails(pipeline: Pipeline) -> None:
    """A transport created for another input raises `LogicError`."""
    pipeline.pipe(identity)
    transport = Transport(pipeline, "foo")
    with pytest.raises(LogicError):
        pipeline.apply("bar", transport)
    assert pipeline.locked is False


@mark_pipeline
def test_custom_transport_for_structured_input_requires_same_object(pipeline: Pipeline) -> None:
    """Structured inputs match by identity, not equality."""
    pipeline.pipe(identity)
    original: list[str] = ["x"]
    transport = Transport(pipeline, original)
    with pytest.raises(LogicError):
        pipeline.apply(["x"], transport)
    assert pipeline.apply(original, transport) == ["x"]


@mark_pipeline
def test_cursor_becomes_starting_carry(pipeline: Pipeline) -> None:
    """With a cursor, the first step sees the cursor as carry and the initial value as initial."""
    pipeline.pipe(append_initial)
    assert pipeline.apply("baz", None, ["foo", "bar"]) == ["foo", "bar", "baz"]


@mark_pipeline
@parametrize(
    "context",
    [None, "I am the context", {"env": "test"}],
)
def test_context_is_visible_to_steps(context: Any) -> None:
    """The pipeline context is exposed by the transport."""
    pipeline = Pipeline(context)
    seen: list[Any] = []

    def grab(carry: Any, initial: Any, transport: Transport) -> Any:
        seen.append(transport.context)
        return carry

    pipeline.pipe(grab)
    pipeline.apply(1)
    assert seen == [context]
    assert pipeline.context is context
