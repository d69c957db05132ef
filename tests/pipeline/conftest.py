# topmark:header:start
#
#   project      : PipeChain
#   file         : conftest.py
#   file_relpath : tests/pipeline/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 PipeChain contributors
#
# topmark:header:end

"""Shared step factories and fixtures for pipeline tests.

Steps follow the engine contract ``step(carry, initial, transport, *args)``;
the factories below build small, observable steps so tests can focus on the
engine behavior (ordering, casting, transport sharing).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from pipechain.pipeline import Pipeline

if TYPE_CHECKING:
    from collections.abc import Callable

    from pipechain.pipeline import Transport


def identity(carry: Any, initial: Any, transport: Transport, *args: Any) -> Any:
    """Return the carry unchanged."""
    return carry


def append(suffix: str) -> Callable[..., Any]:
    """Return a step concatenating ``suffix`` to the carry."""

    def _step(carry: Any, initial: Any, transport: Transport, *args: Any) -> Any:
        return carry + suffix

    return _step


def append_initial(carry: list[Any], initial: Any, transport: Transport) -> list[Any]:
    """Return a new list: the carry followed by the run's initial value."""
    return [*carry, initial]


def store(key: str, value: Any) -> Callable[..., Any]:
    """Return a step writing ``value`` under ``key`` in the transport."""

    def _step(carry: Any, initial: Any, transport: Transport, *args: Any) -> Any:
        transport.set(key, value)
        return carry

    return _step


def read_into_carry(key: str) -> Callable[..., Any]:
    """Return a step appending the transported value under ``key`` to the carry."""

    def _step(carry: Any, initial: Any, transport: Transport, *args: Any) -> Any:
        return f"{carry}{transport.get(key)}"

    return _step


@pytest.fixture
def pipeline() -> Pipeline:
    """An empty pipeline without context or caster."""
    return Pipeline()
