# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Runtime tool definitions built from canonical descriptions."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Final

from ..binding.binder import bind_inputs
from ..binding.outcome import BindingResult, Suitability
from ..binding.protocols import DataItem, DataItemStore
from ..config import BindingSettings
from ..description.model import ToolDescription
from .slots import InputSlot, ParameterSlot, RepeatDetector, split_repeated_name

LOGGER = logging.getLogger(__name__)

IDENTIFIER_SEPARATOR: Final[str] = "/"


@dataclass(slots=True)
class ToolCatalogEntry:
    """Named, categorised tool with ordered formal parameters and inputs.

    Slots are immutable, so concurrent ``bind`` calls on one entry only share
    :attr:`last_outcome`, which records the most recent classification for UI
    feedback.
    """

    name: str
    category: str
    description: str
    parameters: tuple[ParameterSlot, ...] = ()
    inputs: tuple[InputSlot, ...] = ()
    outputs: tuple[str, ...] = ()
    has_source_code: bool = False
    last_outcome: Suitability | None = field(default=None, compare=False)

    @property
    def identifier(self) -> str:
        """Return the registry key ``<name>/<category>``."""
        return f"{self.name}{IDENTIFIER_SEPARATOR}{self.category}"

    @property
    def full_name(self) -> str:
        """Return ``<category> / <name>`` for display."""
        return f"{self.category} / {self.name}"

    def default_parameter_values(self) -> dict[str, str]:
        """Return default values keyed by parameter name, omitting parameters without one."""

        return {slot.name: slot.default for slot in self.parameters if slot.default is not None}

    def bind(
        self,
        items: Iterable[DataItem],
        store: DataItemStore,
        settings: BindingSettings | None = None,
    ) -> BindingResult:
        """Bind ``items`` to this entry's inputs and remember the outcome.

        Args:
            items: Concrete items chosen by the user.
            store: Data-item store answering compatibility and ancestry questions.
            settings: Optional binding settings.

        Returns:
            BindingResult: Result of the greedy binding pass.
        """

        result = bind_inputs(self.inputs, items, store, settings)
        self.last_outcome = result.outcome
        return result

    def evaluate_suitability(
        self,
        items: Iterable[DataItem],
        store: DataItemStore,
        settings: BindingSettings | None = None,
    ) -> Suitability:
        """Return only the outcome of binding ``items``."""

        return self.bind(items, store, settings).outcome

    @staticmethod
    def from_description(
        description: ToolDescription,
        *,
        detector: RepeatDetector = split_repeated_name,
        has_source_code: bool = False,
    ) -> ToolCatalogEntry:
        """Create an entry from a canonical description.

        Args:
            description: Canonical tool description.
            detector: Callable deciding whether an input name is repeated.
            has_source_code: Whether the tool ships viewable source.

        Returns:
            ToolCatalogEntry: Entry whose slots follow declaration order.
        """

        parameters = tuple(ParameterSlot(parameter) for parameter in description.parameters)
        for slot in parameters:
            if not slot.parameter.default_is_resolved:
                LOGGER.warning(
                    "%s: parameter '%s' keeps unresolved default '%s'",
                    description.name.id,
                    slot.name,
                    slot.default,
                )
        return ToolCatalogEntry(
            name=description.name.id,
            category=description.category,
            description=description.description,
            parameters=parameters,
            inputs=tuple(InputSlot.from_input(entry, detector) for entry in description.inputs),
            outputs=tuple(output.name.id for output in description.outputs),
            has_source_code=has_source_code,
        )


__all__ = ["IDENTIFIER_SEPARATOR", "ToolCatalogEntry"]
