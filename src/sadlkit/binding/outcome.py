# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Binding outcome classification and result containers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

from .protocols import DataItem

_LABELS: Final[dict[str, str]] = {
    "SUITABLE": "Suitable",
    "IMPOSSIBLE": "Impossible",
    "ALREADY_DONE": "Already done",
    "TOO_MANY_INPUTS": "Too many inputs",
    "NOT_ENOUGH_INPUTS": "Not enough inputs",
}

GREEN: Final[str] = "#34c431"
YELLOW: Final[str] = "#c4ba31"
RED: Final[str] = "#c43131"
LAVENDER: Final[str] = "#e6b4fa"


class Suitability(str, Enum):
    """Enumerate the results of evaluating a tool against a set of data items."""

    SUITABLE = "SUITABLE"
    IMPOSSIBLE = "IMPOSSIBLE"
    ALREADY_DONE = "ALREADY_DONE"
    TOO_MANY_INPUTS = "TOO_MANY_INPUTS"
    NOT_ENOUGH_INPUTS = "NOT_ENOUGH_INPUTS"

    @property
    def is_impossible(self) -> bool:
        """Return ``True`` when the tool cannot run on the evaluated items."""

        return self in (
            Suitability.IMPOSSIBLE,
            Suitability.NOT_ENOUGH_INPUTS,
            Suitability.TOO_MANY_INPUTS,
        )

    @property
    def is_ok(self) -> bool:
        """Return ``True`` only for :attr:`SUITABLE`."""
        return self is Suitability.SUITABLE

    @property
    def label(self) -> str:
        """Return the human-readable label shown next to a tool."""
        return _LABELS[self.value]

    @property
    def indicator_style(self) -> str:
        """Return the rich colour used to paint the suitability indicator."""

        if self.is_impossible:
            return RED
        if self.is_ok:
            return GREEN
        if self is Suitability.ALREADY_DONE:
            return LAVENDER
        return YELLOW


@dataclass(frozen=True, slots=True)
class DataBinding:
    """Concrete item bound to a resolved formal input name."""

    item: DataItem
    slot_name: str
    data_type: str


@dataclass(frozen=True, slots=True)
class BindingResult:
    """Outcome of one binding attempt.

    Failed attempts never carry partial bindings.
    """

    outcome: Suitability
    bindings: tuple[DataBinding, ...] = ()

    @property
    def ok(self) -> bool:
        """Return ``True`` when every item and slot was bound."""
        return self.outcome.is_ok

    @staticmethod
    def failure(outcome: Suitability) -> BindingResult:
        """Return a failed result carrying ``outcome`` and no bindings."""

        return BindingResult(outcome=outcome)

    def slot_names(self) -> dict[str, str]:
        """Return a mapping of resolved slot name to bound item name."""

        return {binding.slot_name: binding.item.name for binding in self.bindings}


__all__ = ["BindingResult", "DataBinding", "Suitability"]
