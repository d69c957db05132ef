# topmark:header:start
#
#   project      : PipeChain
#   file         : __init__.py
#   file_relpath : src/pipechain/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 PipeChain contributors
#
# topmark:header:end

"""PipeChain pipeline package.

This package contains the execution engine and its companions:

- [`pipechain.pipeline.pipeline`][pipechain.pipeline.pipeline]: the `Pipeline` engine
- [`pipechain.pipeline.transport`][pipechain.pipeline.transport]: the run-scoped `Transport`
- [`pipechain.pipeline.casting`][pipechain.pipeline.casting]: built-in casters
- [`pipechain.pipeline.history`][pipechain.pipeline.history]: run history and snapshots
- [`pipechain.pipeline.contracts`][pipechain.pipeline.contracts]: the step protocol
"""

from __future__ import annotations

from pipechain.pipeline.casting import Caster, resolve_caster
from pipechain.pipeline.contracts import Step, StepRegistration
from pipechain.pipeline.history import PipelineInfo, RunHistory, RunSnapshot
from pipechain.pipeline.pipeline import Pipeline
from pipechain.pipeline.transport import Transport

__all__ = [
    "Caster",
    "Pipeline",
    "PipelineInfo",
    "RunHistory",
    "RunSnapshot",
    "Step",
    "StepRegistration",
    "Transport",
    "resolve_caster",
]
