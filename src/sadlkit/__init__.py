# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Normalise external tool descriptions into SADL and bind data items to tool inputs."""

from __future__ import annotations

from typing import Final

from .acd import AcdDescription, AcdDocumentLoader, AcdRecord, ConversionReport, convert
from .binding import BindingResult, DataBinding, Suitability, bind_inputs
from .catalog import InputSlot, ToolCatalog, ToolCatalogEntry
from .config import WorkbenchConfig, load_config
from .description import ToolDescription

__version__: Final[str] = "0.1.0"

__all__: Final[tuple[str, ...]] = (
    "AcdDescription",
    "AcdDocumentLoader",
    "AcdRecord",
    "BindingResult",
    "ConversionReport",
    "DataBinding",
    "InputSlot",
    "Suitability",
    "ToolCatalog",
    "ToolCatalogEntry",
    "ToolDescription",
    "WorkbenchConfig",
    "bind_inputs",
    "convert",
    "load_config",
)
