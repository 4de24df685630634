# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Public export surface for the tool catalog."""

from __future__ import annotations

from typing import Final

from ..binding.outcome import Suitability
from .entry import ToolCatalogEntry
from .errors import CatalogIntegrityError
from .registry import ToolCatalog
from .slots import InputSlot, ParameterSlot, split_repeated_name

__all__: Final[tuple[str, ...]] = (
    "CatalogIntegrityError",
    "InputSlot",
    "ParameterSlot",
    "Suitability",
    "ToolCatalog",
    "ToolCatalogEntry",
    "split_repeated_name",
)
