# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Canonical (SADL) models describing a tool's parameters, inputs and outputs."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Final

from .errors import DescriptionIntegrityError
from .types import GENERIC_INPUT_TYPE, JSONValue, ParameterType


@dataclass(frozen=True, slots=True)
class Name:
    """Identifier paired with an optional human-readable label."""

    id: str
    display: str | None = None

    @staticmethod
    def create(identifier: str, display: str | None = None) -> Name:
        """Return a name, treating an empty display label as absent."""

        return Name(id=identifier, display=display or None)

    @property
    def label(self) -> str:
        """Return the display label, falling back to the identifier."""
        return self.display or self.id

    def to_dict(self) -> dict[str, JSONValue]:
        """Return a JSON-compatible representation of the name."""
        return {"id": self.id, "display": self.display}


@dataclass(frozen=True, slots=True)
class Parameter:
    """Canonical tool parameter with a typed value domain."""

    name: Name
    parameter_type: ParameterType
    options: tuple[Name, ...] = ()
    minimum: str | None = None
    maximum: str | None = None
    default: str | None = None
    help: str | None = None
    optional: bool = False

    def __post_init__(self) -> None:
        """Validate option invariants for enumerated parameters."""

        context = f"parameter '{self.name.id}'"
        if self.parameter_type is ParameterType.ENUM:
            if not self.options:
                raise DescriptionIntegrityError(f"{context}: enumerated parameters require options")
            keys = [option.id for option in self.options]
            if len(set(keys)) != len(keys):
                raise DescriptionIntegrityError(f"{context}: option keys must be unique")
        elif self.options:
            raise DescriptionIntegrityError(
                f"{context}: options are only valid for {ParameterType.ENUM.value} parameters",
            )

    @property
    def option_keys(self) -> tuple[str, ...]:
        """Return option keys in declaration order."""
        return tuple(option.id for option in self.options)

    @property
    def default_is_resolved(self) -> bool:
        """Return ``False`` when an enum default matches none of the option keys."""

        if self.parameter_type is not ParameterType.ENUM or self.default is None:
            return True
        return self.default in self.option_keys

    def to_dict(self) -> dict[str, JSONValue]:
        """Return a JSON-compatible representation of the parameter."""

        return {
            "name": self.name.to_dict(),
            "type": self.parameter_type.value,
            "options": [option.to_dict() for option in self.options],
            "minimum": self.minimum,
            "maximum": self.maximum,
            "default": self.default,
            "help": self.help,
            "optional": self.optional,
        }


@dataclass(frozen=True, slots=True)
class Input:
    """Canonical input file slot."""

    name: Name
    type_name: str = GENERIC_INPUT_TYPE
    required: bool = True

    def to_dict(self) -> dict[str, JSONValue]:
        """Return a JSON-compatible representation of the input."""
        return {"name": self.name.to_dict(), "type": self.type_name, "required": self.required}


@dataclass(frozen=True, slots=True)
class Output:
    """Canonical output file produced by a tool."""

    name: Name
    optional: bool = False

    def to_dict(self) -> dict[str, JSONValue]:
        """Return a JSON-compatible representation of the output."""
        return {"name": self.name.to_dict(), "optional": self.optional}


@dataclass(frozen=True, slots=True)
class ToolDescription:
    """Immutable canonical description of a single tool."""

    name: Name
    category: str
    description: str
    parameters: tuple[Parameter, ...] = ()
    inputs: tuple[Input, ...] = ()
    outputs: tuple[Output, ...] = ()

    def to_dict(self) -> Mapping[str, JSONValue]:
        """Return a JSON-compatible representation of the description.

        Returns:
            Mapping[str, JSONValue]: Mapping listing the tool identity and its
            parameters, inputs and outputs in declaration order.
        """

        return {
            "name": self.name.to_dict(),
            "category": self.category,
            "description": self.description,
            "parameters": [parameter.to_dict() for parameter in self.parameters],
            "inputs": [entry.to_dict() for entry in self.inputs],
            "outputs": [entry.to_dict() for entry in self.outputs],
        }


@dataclass(slots=True)
class ToolDescriptionBuilder:
    """Accumulate canonical entities in declaration order before freezing."""

    name: Name
    category: str
    description: str
    _parameters: list[Parameter] = field(default_factory=list, init=False, repr=False)
    _inputs: list[Input] = field(default_factory=list, init=False, repr=False)
    _outputs: list[Output] = field(default_factory=list, init=False, repr=False)

    def add_parameter(self, parameter: Parameter) -> None:
        """Append ``parameter`` to the description."""
        self._parameters.append(parameter)

    def add_input(self, entry: Input) -> None:
        """Append ``entry`` to the description inputs."""
        self._inputs.append(entry)

    def add_output(self, entry: Output) -> None:
        """Append ``entry`` to the description outputs."""
        self._outputs.append(entry)

    def build(self) -> ToolDescription:
        """Return the frozen :class:`ToolDescription` accumulated so far."""

        return ToolDescription(
            name=self.name,
            category=self.category,
            description=self.description,
            parameters=tuple(self._parameters),
            inputs=tuple(self._inputs),
            outputs=tuple(self._outputs),
        )


__all__: Final[tuple[str, ...]] = (
    "Input",
    "Name",
    "Output",
    "Parameter",
    "ToolDescription",
    "ToolDescriptionBuilder",
)
