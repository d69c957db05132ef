# topmark:header:start
#
#   project      : PipeChain
#   file         : constants.py
#   file_relpath : src/pipechain/constants.py
#   license      : MIT
#   copyright    : (c) 2025 PipeChain contributors
#
# topmark:header:end

"""PipeChain Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    PIPECHAIN_VERSION: str = get_version("pipechain")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    PIPECHAIN_VERSION = "0.0.0"

# Environment variable holding the runtime log level (name or number):
LOG_LEVEL_ENV_VAR: str = "PIPECHAIN_LOG_LEVEL"

# Configuration file names and the pyproject.toml table holding PipeChain settings:
PIPECHAIN_TOML_NAME: str = "pipechain.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "pipechain"
