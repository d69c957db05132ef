# topmark:header:start
#
#   project      : PipeChain
#   file         : errors.py
#   file_relpath : src/pipechain/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 PipeChain contributors
#
# topmark:header:end

"""Exceptions for the PipeChain CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library errors (`pipechain.errors`) are translated
    at the command boundary; the library itself never imports Click.
"""

from __future__ import annotations

import click

from pipechain.cli.exit_codes import ExitCode


class PipechainCliError(click.ClickException):
    """Base class for all PipeChain CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))


class PipechainUsageError(PipechainCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class PipechainCastError(PipechainCliError):
    """Error when a value cannot be parsed or cast."""

    exit_code = ExitCode.DATA_ERROR


class PipechainConfigError(PipechainCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
