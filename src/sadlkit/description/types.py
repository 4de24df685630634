# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for canonical tool descriptions."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Final, TypeAlias

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

GENERIC_INPUT_TYPE: Final[str] = "GENERIC"
PHENODATA_INPUT_TYPE: Final[str] = "PHENODATA"


class ParameterType(str, Enum):
    """Enumerate the semantic value domains a parameter may declare."""

    INTEGER = "INTEGER"
    DECIMAL = "DECIMAL"
    STRING = "STRING"
    ENUM = "ENUM"

    @property
    def is_numeric(self) -> bool:
        """Return ``True`` for types whose values obey numeric bounds."""

        return self in (ParameterType.INTEGER, ParameterType.DECIMAL)


__all__ = [
    "GENERIC_INPUT_TYPE",
    "PHENODATA_INPUT_TYPE",
    "JSONPrimitive",
    "JSONValue",
    "ParameterType",
]
