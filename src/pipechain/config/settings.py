# topmark:header:start
#
#   project      : PipeChain
#   file         : settings.py
#   file_relpath : src/pipechain/config/settings.py
#   license      : MIT
#   copyright    : (c) 2025 PipeChain contributors
#
# topmark:header:end

"""Pipeline settings loaded from TOML.

Settings select how a pipeline is constructed (built-in caster and
``cast_first``); step lists are code and are never read from configuration.

Sources:
    - runtime defaults ([`load_defaults_dict`][pipechain.config.io.load_defaults_dict])
    - ``pipechain.toml`` (top-level ``[pipeline]`` table)
    - ``pyproject.toml`` (``[tool.pipechain.pipeline]``)

Example ``pipechain.toml``:

    [pipeline]
    caster = "int"
    cast_first = true

Invalid values are logged as warnings and fall back to the defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pipechain.config.io import (
    get_bool_value_or_none,
    get_string_value_or_none,
    get_table,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
)
from pipechain.config.keys import Toml
from pipechain.config.logging import get_logger
from pipechain.constants import PYPROJECT_TOML_NAME, PYPROJECT_TOOL_SECTION
from pipechain.pipeline.casting import Caster

if TYPE_CHECKING:
    from pathlib import Path

    from pipechain.config.io import TomlTable
    from pipechain.config.logging import PipechainLogger

logger: PipechainLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class PipelineSettings:
    """Immutable pipeline construction settings.

    Attributes:
        caster (Caster | None): Built-in caster applied to step results, or ``None``.
        cast_first (bool): Whether the initial value is cast as well.
        config_files (tuple[Path, ...]): Files the settings were read from (empty for defaults).
    """

    caster: Caster | None = None
    cast_first: bool = False
    config_files: tuple[Path, ...] = ()

    @classmethod
    def from_defaults(cls) -> PipelineSettings:
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(
        cls, table: TomlTable, *, config_files: tuple[Path, ...] = ()
    ) -> PipelineSettings:
        """Build settings from a parsed TOML table holding a ``[pipeline]`` section.

        Args:
            table (TomlTable): Top-level table (``[pipeline]`` is looked up inside).
            config_files (tuple[Path, ...]): Files the table was read from.

        Returns:
            PipelineSettings: The resulting settings; unknown or malformed values are ignored.
        """
        section: TomlTable = get_table(table, Toml.SECTION_PIPELINE)

        caster: Caster | None = None
        caster_name: str | None = get_string_value_or_none(section, Toml.KEY_CASTER)
        if caster_name:
            caster = Caster.parse(caster_name)
            if caster is None:
                logger.warning(
                    "Unknown caster %r in configuration; expected one of: %s",
                    caster_name,
                    ", ".join(m.key for m in Caster),
                )

        cast_first: bool = bool(get_bool_value_or_none(section, Toml.KEY_CAST_FIRST))
        return cls(caster=caster, cast_first=cast_first, config_files=config_files)

    @classmethod
    def from_toml_file(cls, path: Path) -> PipelineSettings:
        """Load settings from ``pipechain.toml`` or ``[tool.pipechain]`` in ``pyproject.toml``.

        Args:
            path (Path): The TOML file to read.

        Returns:
            PipelineSettings: Settings read from ``path``; defaults when the file or the
                ``[tool.pipechain]`` table is missing or malformed.
        """
        logger.debug("Loading PipelineSettings from TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            toml_data = get_table(get_table(toml_data, "tool"), PYPROJECT_TOOL_SECTION)
            if not toml_data:
                logger.warning("[tool.%s] section missing in %s", PYPROJECT_TOOL_SECTION, path)

        settings: PipelineSettings = cls.from_toml_dict(toml_data, config_files=(path,))
        logger.debug("Loaded PipelineSettings: %s", settings)
        return settings

    def to_toml_dict(self) -> TomlTable:
        section: TomlTable = {}
        if self.caster is not None:
            section[Toml.KEY_CASTER] = self.caster.key
        section[Toml.KEY_CAST_FIRST] = self.cast_first
        return {Toml.SECTION_PIPELINE: section}

    def to_toml(self) -> str:
        return to_toml(self.to_toml_dict())
