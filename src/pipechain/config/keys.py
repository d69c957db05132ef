# topmark:header:start
#
#   project      : PipeChain
#   file         : keys.py
#   file_relpath : src/pipechain/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 PipeChain contributors
#
# topmark:header:end

"""Canonical TOML section and key names for PipeChain configuration.

These constants define the external configuration schema as it appears in
``pipechain.toml`` and in ``[tool.pipechain]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by PipeChain configuration."""

    # [pipeline]
    SECTION_PIPELINE: Final[str] = "pipeline"

    KEY_CASTER: Final[str] = "caster"
    KEY_CAST_FIRST: Final[str] = "cast_first"
