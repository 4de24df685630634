# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Public export surface for the canonical description model."""

from __future__ import annotations

from typing import Final

from .errors import DescriptionIntegrityError
from .model import Input, Name, Output, Parameter, ToolDescription, ToolDescriptionBuilder
from .types import GENERIC_INPUT_TYPE, PHENODATA_INPUT_TYPE, ParameterType

__all__: Final[tuple[str, ...]] = (
    "GENERIC_INPUT_TYPE",
    "PHENODATA_INPUT_TYPE",
    "DescriptionIntegrityError",
    "Input",
    "Name",
    "Output",
    "Parameter",
    "ParameterType",
    "ToolDescription",
    "ToolDescriptionBuilder",
)
