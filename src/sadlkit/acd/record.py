# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Typed views over already-parsed ACD parameter records."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Final, Literal, TypeAlias

from ..description.errors import DescriptionIntegrityError
from ..description.types import JSONValue
from ..description.utils import (
    expect_mapping,
    expect_sequence,
    expect_string,
    optional_bool,
    optional_string,
    string_array,
    string_mapping,
)
from .groups import ParameterGroup, detect_parameter_group

LOGGER = logging.getLogger(__name__)

AttributeName: TypeAlias = Literal["default", "minimum", "maximum", "help", "information"]
RECOGNISED_ATTRIBUTES: Final[tuple[AttributeName, ...]] = (
    "default",
    "minimum",
    "maximum",
    "help",
    "information",
)
GRAPHICS_EXTENSION: Final[str] = ".png"
OUTPUT_EXTENSION: Final[str] = ".txt"


@dataclass(frozen=True, slots=True)
class AttributeValue:
    """Attribute value paired with its provenance.

    ``evaluated`` is ``False`` when the parser saw a computed expression or a
    variable reference instead of a literal value.
    """

    value: str
    evaluated: bool = True

    @staticmethod
    def from_json(value: JSONValue, *, context: str) -> AttributeValue:
        """Create an attribute from a bare string or a ``{value, evaluated}`` object.

        Args:
            value: Raw attribute payload.
            context: Human-readable context used in error messages.

        Returns:
            AttributeValue: Parsed attribute value.

        Raises:
            DescriptionIntegrityError: If the payload has an unexpected shape.
        """

        if isinstance(value, str):
            return AttributeValue(value=value)
        mapping = expect_mapping(value, key="attribute", context=context)
        return AttributeValue(
            value=expect_string(mapping.get("value"), key="value", context=context),
            evaluated=optional_bool(
                mapping.get("evaluated"),
                key="evaluated",
                context=context,
                default=True,
            ),
        )


@dataclass(frozen=True, slots=True)
class AcdAttributes:
    """Recognised attributes of an ACD record."""

    default: AttributeValue | None = None
    minimum: AttributeValue | None = None
    maximum: AttributeValue | None = None
    help: AttributeValue | None = None
    information: AttributeValue | None = None

    def get(self, name: AttributeName) -> AttributeValue | None:
        """Return the attribute called ``name`` when present."""
        return getattr(self, name)

    def literal(self, name: AttributeName) -> str | None:
        """Return the value of ``name`` only when it was a literal, evaluated value.

        Args:
            name: Attribute to inspect.

        Returns:
            str | None: Attribute value, or ``None`` when absent or computed.
        """

        attribute = self.get(name)
        if attribute is None or not attribute.evaluated:
            return None
        return attribute.value

    def text(self, name: AttributeName) -> str | None:
        """Return the raw value of ``name`` regardless of provenance."""

        attribute = self.get(name)
        return None if attribute is None else attribute.value

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, context: str) -> AcdAttributes:
        """Create attributes from JSON data, ignoring unrecognised names.

        Args:
            data: Mapping of attribute name to attribute payload.
            context: Human-readable context used in error messages.

        Returns:
            AcdAttributes: Attributes limited to the recognised options.
        """

        values: dict[str, AttributeValue] = {}
        for key, raw in data.items():
            if key not in RECOGNISED_ATTRIBUTES:
                LOGGER.debug("%s: ignoring attribute '%s'", context, key)
                continue
            values[key] = AttributeValue.from_json(raw, context=f"{context}.{key}")
        return AcdAttributes(**values)


@dataclass(frozen=True, slots=True)
class AcdRecord:
    """Single parsed ACD parameter definition."""

    type_tag: str
    name: str
    attributes: AcdAttributes = field(default_factory=AcdAttributes)
    options: Mapping[str, str] = field(default_factory=dict)
    required: bool = False
    advanced: bool = False
    additional: bool = False
    output_filename: str | None = None

    @property
    def group(self) -> ParameterGroup:
        """Return the functional classification of the record's type tag."""
        return detect_parameter_group(self.type_tag)

    def output_filename_for(self, extension: bool = True) -> str:
        """Return the file name an output record writes to.

        Args:
            extension: Whether to append the conventional file extension.

        Returns:
            str: Explicit output filename when the parser supplied one,
            otherwise a name derived from the record name.
        """

        if self.output_filename:
            return self.output_filename
        if not extension:
            return self.name
        suffix = GRAPHICS_EXTENSION if self.group is ParameterGroup.GRAPHICS else OUTPUT_EXTENSION
        return f"{self.name}{suffix}"

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, context: str) -> AcdRecord:
        """Create an ``AcdRecord`` from JSON data.

        Args:
            data: Mapping describing a single parsed record.
            context: Human-readable context used in error messages.

        Returns:
            AcdRecord: Frozen record instance.

        Raises:
            DescriptionIntegrityError: If required fields are missing or invalid.
        """

        attributes_data = data.get("attributes")
        attributes = (
            AcdAttributes.from_mapping(
                expect_mapping(attributes_data, key="attributes", context=context),
                context=f"{context}.attributes",
            )
            if attributes_data is not None
            else AcdAttributes()
        )
        return AcdRecord(
            type_tag=expect_string(data.get("type"), key="type", context=context).lower(),
            name=expect_string(data.get("name"), key="name", context=context),
            attributes=attributes,
            options=string_mapping(data.get("options"), key="options", context=context),
            required=optional_bool(data.get("required"), key="required", context=context, default=False),
            advanced=optional_bool(data.get("advanced"), key="advanced", context=context, default=False),
            additional=optional_bool(
                data.get("additional"),
                key="additional",
                context=context,
                default=False,
            ),
            output_filename=optional_string(
                data.get("outputFilename"),
                key="outputFilename",
                context=context,
            ),
        )


@dataclass(frozen=True, slots=True)
class AcdDescription:
    """Parsed ACD tool definition: identity plus ordered parameter records."""

    name: str
    description: str
    groups: tuple[str, ...] = ()
    parameters: tuple[AcdRecord, ...] = ()

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, context: str) -> AcdDescription:
        """Create an ``AcdDescription`` from JSON data.

        Args:
            data: Mapping describing a parsed ACD application.
            context: Human-readable context used in error messages.

        Returns:
            AcdDescription: Frozen description with records in document order.

        Raises:
            DescriptionIntegrityError: If the mapping is malformed.
        """

        records_data = data.get("parameters")
        records: list[AcdRecord] = []
        if records_data is not None:
            for index, element in enumerate(expect_sequence(records_data, key="parameters", context=context)):
                element_context = f"{context}.parameters[{index}]"
                records.append(
                    AcdRecord.from_mapping(
                        expect_mapping(element, key=f"parameters[{index}]", context=context),
                        context=element_context,
                    ),
                )
        description = optional_string(data.get("description"), key="description", context=context)
        return AcdDescription(
            name=expect_string(data.get("name"), key="name", context=context),
            description=description or "",
            groups=string_array(data.get("groups"), key="groups", context=context),
            parameters=tuple(records),
        )


__all__ = [
    "RECOGNISED_ATTRIBUTES",
    "AcdAttributes",
    "AcdDescription",
    "AcdRecord",
    "AttributeName",
    "AttributeValue",
    "DescriptionIntegrityError",
]
