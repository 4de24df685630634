# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders for description conversion and input binding."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .description.types import GENERIC_INPUT_TYPE, PHENODATA_INPUT_TYPE

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "sadlkit"


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class ConversionSettings(BaseModel):
    """Settings applied while converting ACD records into canonical descriptions."""

    model_config = ConfigDict(validate_assignment=True)

    boolean_default: str = "N"
    generic_input_type: str = GENERIC_INPUT_TYPE
    default_category: str = "Miscellaneous"


class BindingSettings(BaseModel):
    """Settings controlling how concrete data items bind to formal inputs."""

    model_config = ConfigDict(validate_assignment=True)

    metadata_prefix: str = Field(default="phenodata", min_length=1)
    metadata_type: str = PHENODATA_INPUT_TYPE
    ordinal_width: int = Field(default=3, ge=1)


class OutputSettings(BaseModel):
    """Console presentation preferences for the command line."""

    model_config = ConfigDict(validate_assignment=True)

    emoji: bool = True
    color: bool = True


class WorkbenchConfig(BaseModel):
    """Aggregate configuration for the workbench core."""

    model_config = ConfigDict(validate_assignment=True)

    conversion: ConversionSettings = Field(default_factory=ConversionSettings)
    binding: BindingSettings = Field(default_factory=BindingSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)


def load_config(path: Path | None) -> WorkbenchConfig:
    """Return configuration loaded from ``path`` or the built-in defaults.

    ``pyproject.toml`` files contribute their ``[tool.sadlkit]`` table; any
    other TOML document is read as a whole.

    Args:
        path: Optional TOML document to read. Missing files yield defaults.

    Returns:
        WorkbenchConfig: Validated configuration.

    Raises:
        ConfigError: If the document cannot be parsed or holds invalid values.
    """

    if path is None or not path.exists():
        return WorkbenchConfig()
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: failed to parse TOML: {exc}") from exc
    if path.name == PYPROJECT_FILENAME:
        data = _pyproject_section(data)
    try:
        return WorkbenchConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"{path}: invalid configuration: {exc}") from exc


def _pyproject_section(data: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return the ``[tool.sadlkit]`` table from a pyproject payload."""

    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if not isinstance(section, Mapping):
        return {}
    return section


__all__ = [
    "BindingSettings",
    "ConfigError",
    "ConversionSettings",
    "OutputSettings",
    "WorkbenchConfig",
    "load_config",
]
