# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Adapter converting parsed ACD parameter records into SADL descriptions."""

from __future__ import annotations

from typing import Final

from .convert import (
    ConversionReport,
    convert,
    create_input,
    create_output,
    create_parameter,
    resolve_list_default,
)
from .errors import RecordValidationError
from .groups import ParameterGroup, detect_parameter_group
from .loader import AcdDocumentLoader, load_acd_document
from .record import AcdAttributes, AcdDescription, AcdRecord, AttributeValue

__all__: Final[tuple[str, ...]] = (
    "AcdAttributes",
    "AcdDescription",
    "AcdDocumentLoader",
    "AcdRecord",
    "AttributeValue",
    "ConversionReport",
    "ParameterGroup",
    "RecordValidationError",
    "convert",
    "create_input",
    "create_output",
    "create_parameter",
    "detect_parameter_group",
    "load_acd_document",
    "resolve_list_default",
)
