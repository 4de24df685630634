# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Formal parameter and input slots exposed by catalog entries."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Final, TypeAlias

from ..description.model import Input, Parameter
from ..description.types import ParameterType

REPEAT_MARKER: Final[str] = "{...}"

RepeatDetector: TypeAlias = Callable[[str], tuple[str, str] | None]


def split_repeated_name(name: str) -> tuple[str, str] | None:
    """Split a repeated input name such as ``chip{...}.tsv`` into prefix and postfix.

    Args:
        name: Input name as declared by the tool description.

    Returns:
        tuple[str, str] | None: ``(prefix, postfix)`` for repeated inputs,
        ``None`` for single inputs.
    """

    if REPEAT_MARKER not in name:
        return None
    prefix, postfix = name.split(REPEAT_MARKER, 1)
    return prefix, postfix


@dataclass(frozen=True, slots=True)
class InputSlot:
    """Formal input a tool declares, either single or repeated."""

    name: str
    data_type: str
    postfix: str = ""
    multi: bool = False

    @staticmethod
    def single(name: str, data_type: str) -> InputSlot:
        """Return a slot binding exactly one item."""
        return InputSlot(name=name, data_type=data_type)

    @staticmethod
    def repeated(prefix: str, postfix: str, data_type: str) -> InputSlot:
        """Return a slot binding any number of items named ``prefix<NNN>postfix``."""
        return InputSlot(name=prefix, data_type=data_type, postfix=postfix, multi=True)

    @staticmethod
    def from_input(entry: Input, detector: RepeatDetector = split_repeated_name) -> InputSlot:
        """Create a slot from a canonical input, asking ``detector`` about repetition."""

        parts = detector(entry.name.id)
        if parts is None:
            return InputSlot.single(entry.name.id, entry.type_name)
        prefix, postfix = parts
        return InputSlot.repeated(prefix, postfix, entry.type_name)

    def resolved_name(self, ordinal: int, width: int = 3) -> str:
        """Return the name used for the ``ordinal``-th item bound to this slot.

        Args:
            ordinal: One-based position of the item within this slot.
            width: Minimum number of digits the ordinal is padded to.

        Returns:
            str: Slot name, with a zero-padded ordinal for repeated slots.
        """

        if not self.multi:
            return self.name
        return f"{self.name}{ordinal:0{width}d}{self.postfix}"


def _decimal_or_none(value: str | None) -> Decimal | None:
    if value is None:
        return None
    try:
        number = Decimal(value)
    except InvalidOperation:
        return None
    return number if number.is_finite() else None


@dataclass(frozen=True, slots=True)
class ParameterSlot:
    """Formal parameter exposed to users, with value validation."""

    parameter: Parameter

    @property
    def name(self) -> str:
        return self.parameter.name.id

    @property
    def label(self) -> str:
        return self.parameter.name.label

    @property
    def default(self) -> str | None:
        return self.parameter.default

    @property
    def optional(self) -> bool:
        return self.parameter.optional

    def accepts(self, value: str) -> bool:
        """Return ``True`` when ``value`` is valid for this parameter.

        Integers and decimals must parse and respect the declared bounds,
        enumerations must name an option key, strings are always accepted.

        Args:
            value: Raw value chosen by the user.

        Returns:
            bool: ``True`` when the value is acceptable.
        """

        parameter_type = self.parameter.parameter_type
        if parameter_type is ParameterType.ENUM:
            return value in self.parameter.option_keys
        if parameter_type is ParameterType.STRING:
            return True
        if parameter_type is ParameterType.INTEGER:
            try:
                number = Decimal(int(value.strip()))
            except ValueError:
                return False
        else:
            number = _decimal_or_none(value.strip())
            if number is None:
                return False
        minimum = _decimal_or_none(self.parameter.minimum)
        maximum = _decimal_or_none(self.parameter.maximum)
        if minimum is not None and number < minimum:
            return False
        return maximum is None or number <= maximum


__all__ = [
    "REPEAT_MARKER",
    "InputSlot",
    "ParameterSlot",
    "RepeatDetector",
    "split_repeated_name",
]
