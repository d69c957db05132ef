# topmark:header:start
#
#   project      : PipeChain
#   file         : __init__.py
#   file_relpath : src/pipechain/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 PipeChain contributors
#
# topmark:header:end

"""PipeChain package.

PipeChain runs a value through an ordered chain of callables ("steps"),
optionally coercing every intermediate result, and hands each step a
run-scoped [`Transport`][pipechain.pipeline.transport.Transport] for
side-channel data. Pipelines nest: a pipeline is itself a step.

Example:
    ```python
    from pipechain import Caster, Pipeline

    doubled = (
        Pipeline(caster=Caster.INT)
        .pipe(lambda carry, initial, transport: carry)
        .pipe(lambda carry, initial, transport: carry * 2)
    )
    assert doubled.apply("2") == 4
    ```
"""

from __future__ import annotations

from pipechain.config.settings import PipelineSettings
from pipechain.constants import PIPECHAIN_VERSION
from pipechain.errors import AccessError, ArgumentError, LogicError, PipechainError, StateError
from pipechain.pipeline import (
    Caster,
    Pipeline,
    PipelineInfo,
    RunSnapshot,
    Step,
    Transport,
)

__version__ = PIPECHAIN_VERSION

__all__ = [
    "AccessError",
    "ArgumentError",
    "Caster",
    "LogicError",
    "Pipeline",
    "PipelineInfo",
    "PipelineSettings",
    "PipechainError",
    "RunSnapshot",
    "StateError",
    "Step",
    "Transport",
    "__version__",
]
