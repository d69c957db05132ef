# topmark:header:start
#
#   project      : PipeChain
#   file         : errors.py
#   file_relpath : src/pipechain/errors.py
#   license      : MIT
#   copyright    : (c) 2025 PipeChain contributors
#
# topmark:header:end

"""Exceptions raised by the PipeChain library.

All errors signal programmer/usage mistakes; none of them is transient and
the library never catches or retries them. Each class also derives from the
closest built-in exception so callers can catch by either family.

Usage:
    ```python
    from pipechain.errors import StateError

    try:
        pipeline.register_step(step)
    except StateError:
        ...  # the pipeline already ran (locked) or is running
    ```
"""

from __future__ import annotations


class PipechainError(Exception):
    """Base class for all PipeChain errors."""


class StateError(PipechainError, RuntimeError):
    """Operation not allowed in the pipeline's current state (working or locked)."""


class LogicError(PipechainError, RuntimeError):
    """Contract violation: mismatched transport input or deleting transported data."""


class ArgumentError(PipechainError, ValueError):
    """Invalid argument: overwriting a structured transport entry or an unknown caster."""


class AccessError(PipechainError, RuntimeError):
    """A pipeline other than the owner tried to read a transport's state."""
