# topmark:header:start
#
#   project      : PipeChain
#   file         : io.py
#   file_relpath : src/pipechain/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 PipeChain contributors
#
# topmark:header:end

"""Load and render TOML configuration sources.

Parsing and rendering is done with `tomlkit`; parsed documents are returned
as plain `dict` structures. Read errors are logged and yield an empty table
so callers fall back to defaults.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from pipechain.config.keys import Toml
from pipechain.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from pipechain.config.logging import PipechainLogger

TomlTable = dict[str, Any]

logger: PipechainLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return PipeChain's runtime defaults as a new TOML-compatible dict.

    ``caster`` is absent by default (no casting).
    """
    return {
        Toml.SECTION_PIPELINE: {
            Toml.KEY_CAST_FIRST: False,
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``pipechain.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content; an empty dict on failure (the error is logged).
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def to_toml(table: TomlTable) -> str:
    """Render a TOML table as text."""
    return tomlkit.dumps(table)


def get_table(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table ``key`` of ``table``, or an empty dict if missing or malformed."""
    value: Any = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.warning("Expected [%s] to be a table, got %s; ignoring", key, type(value).__name__)
    return {}


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean; non-boolean values are logged and ignored."""
    value: Any = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    logger.warning("Expected '%s' to be a boolean, got %r; ignoring", key, value)
    return None


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string; non-string values are logged and ignored."""
    value: Any = table.get(key)
    if value is None or isinstance(value, str):
        return value
    logger.warning("Expected '%s' to be a string, got %r; ignoring", key, value)
    return None
