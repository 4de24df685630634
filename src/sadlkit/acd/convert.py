# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Conversion of parsed ACD records into canonical SADL descriptions.

Each record becomes at most one canonical entity. Parameters are tried
first, then inputs, then outputs; records that fit none of them are skipped
and reported through :class:`ConversionReport`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from ..config import ConversionSettings
from ..description.model import Input, Name, Output, Parameter, ToolDescription, ToolDescriptionBuilder
from ..description.types import ParameterType
from .groups import ParameterGroup
from .record import AcdDescription, AcdRecord

LOGGER = logging.getLogger(__name__)

PARAMETER_TYPE_MAP: Final[dict[str, ParameterType]] = {
    "array": ParameterType.STRING,
    "float": ParameterType.DECIMAL,
    "integer": ParameterType.INTEGER,
    "string": ParameterType.STRING,
    "range": ParameterType.STRING,
    "boolean": ParameterType.ENUM,
    "toggle": ParameterType.ENUM,
    "list": ParameterType.ENUM,
    "selection": ParameterType.ENUM,
}
BOOLEAN_TAGS: Final[frozenset[str]] = frozenset({"boolean", "toggle"})
BOOLEAN_OPTIONS: Final[tuple[Name, ...]] = (Name.create("Y", "Yes"), Name.create("N", "No"))

_DEFAULT_SETTINGS: Final[ConversionSettings] = ConversionSettings()


@dataclass(frozen=True, slots=True)
class ConversionReport:
    """Outcome of converting one ACD description."""

    description: ToolDescription
    skipped: tuple[str, ...]

    @property
    def skipped_count(self) -> int:
        """Return the number of records that produced no canonical entity."""
        return len(self.skipped)


def resolve_list_default(default: str | None, options: dict[str, str]) -> str | None:
    """Return ``default`` mapped onto an option key.

    ACD list defaults sometimes name the label rather than the key. When
    ``default`` is not a key, the last key whose label equals it is returned;
    otherwise ``default`` is returned unchanged.

    Args:
        default: Default value declared by the record.
        options: Ordered key to label mapping.

    Returns:
        str | None: Option key, or the unchanged default when nothing matches.
    """

    if default is None or default in options:
        return default
    resolved = default
    for key, label in options.items():
        if label == default:
            resolved = key
    return resolved


def _help_text(record: AcdRecord) -> str | None:
    """Return single-line help text, preferring ``help`` over ``information``."""

    text = record.attributes.text("help")
    if not text:
        text = record.attributes.text("information")
    if text is None:
        return None
    return text.replace("\n", "")


def create_parameter(record: AcdRecord, settings: ConversionSettings = _DEFAULT_SETTINGS) -> Parameter | None:
    """Create a canonical parameter from ``record``.

    Args:
        record: Parsed ACD record.
        settings: Conversion settings supplying the boolean default.

    Returns:
        Parameter | None: Canonical parameter, or ``None`` when the record is
        not parameter shaped.
    """

    parameter_type = PARAMETER_TYPE_MAP.get(record.type_tag)
    if parameter_type is None:
        return None

    default = record.attributes.literal("default") or None
    minimum = record.attributes.literal("minimum")
    maximum = record.attributes.literal("maximum")
    name = Name.create(record.name, record.attributes.text("information"))
    help_text = _help_text(record)
    optional = record.additional or record.advanced
    group = record.group

    if record.type_tag in BOOLEAN_TAGS:
        # two options only, so a default must always resolve
        return Parameter(
            name=name,
            parameter_type=parameter_type,
            options=BOOLEAN_OPTIONS,
            default=default if default is not None else settings.boolean_default,
            help=help_text,
            optional=optional,
        )
    if group is ParameterGroup.SIMPLE:
        return Parameter(
            name=name,
            parameter_type=parameter_type,
            minimum=minimum,
            maximum=maximum,
            default=default,
            help=help_text,
            optional=optional,
        )
    if group is ParameterGroup.LIST:
        options = dict(record.options)
        if not options:
            LOGGER.warning("list parameter '%s' declares no options; skipping", record.name)
            return None
        return Parameter(
            name=name,
            parameter_type=parameter_type,
            options=tuple(Name.create(key, label) for key, label in options.items()),
            minimum=minimum,
            maximum=maximum,
            default=resolve_list_default(default, options),
            help=help_text,
            optional=optional,
        )
    return None


def create_input(record: AcdRecord, settings: ConversionSettings = _DEFAULT_SETTINGS) -> Input | None:
    """Create a canonical input from ``record``.

    Only required, non-advanced input records are converted; optional and
    advanced file inputs cannot be represented yet and are dropped.

    Args:
        record: Parsed ACD record.
        settings: Conversion settings supplying the generic input type.

    Returns:
        Input | None: Canonical input or ``None``.
    """

    if record.group is not ParameterGroup.INPUT or not record.required or record.advanced:
        return None
    return Input(name=Name.create(record.name), type_name=settings.generic_input_type, required=True)


def create_output(record: AcdRecord) -> Output | None:
    """Create a canonical output from ``record``.

    Args:
        record: Parsed ACD record.

    Returns:
        Output | None: Canonical output for non-advanced output or graphics
        records, otherwise ``None``.
    """

    if record.group not in (ParameterGroup.OUTPUT, ParameterGroup.GRAPHICS) or record.advanced:
        return None
    return Output(name=Name.create(record.output_filename_for(True)), optional=not record.required)


def add_record(
    record: AcdRecord,
    builder: ToolDescriptionBuilder,
    settings: ConversionSettings = _DEFAULT_SETTINGS,
) -> bool:
    """Convert ``record`` and append the first matching entity to ``builder``.

    Args:
        record: Parsed ACD record.
        builder: Description builder receiving the entity.
        settings: Conversion settings.

    Returns:
        bool: ``True`` when an entity was added, ``False`` when skipped.
    """

    parameter = create_parameter(record, settings)
    if parameter is not None:
        builder.add_parameter(parameter)
        return True
    entry = create_input(record, settings)
    if entry is not None:
        builder.add_input(entry)
        return True
    output = create_output(record)
    if output is not None:
        builder.add_output(output)
        return True
    return False


def convert(description: AcdDescription, settings: ConversionSettings | None = None) -> ConversionReport:
    """Convert a parsed ACD description into a canonical tool description.

    Args:
        description: Parsed ACD application with ordered records.
        settings: Optional conversion settings.

    Returns:
        ConversionReport: Canonical description plus the names of skipped records.
    """

    active = settings or _DEFAULT_SETTINGS
    category = description.groups[0] if description.groups else active.default_category
    builder = ToolDescriptionBuilder(
        name=Name.create(description.name),
        category=category,
        description=description.description,
    )
    skipped: list[str] = []
    for record in description.parameters:
        if not add_record(record, builder, active):
            LOGGER.debug("skipping unsupported record '%s' (%s)", record.name, record.type_tag)
            skipped.append(record.name)
    result = builder.build()
    for parameter in result.parameters:
        if not parameter.default_is_resolved:
            LOGGER.warning(
                "%s: default '%s' of parameter '%s' matches no option",
                description.name,
                parameter.default,
                parameter.name.id,
            )
    LOGGER.info(
        "converted %s: %d parameters, %d inputs, %d outputs, %d skipped",
        description.name,
        len(result.parameters),
        len(result.inputs),
        len(result.outputs),
        len(skipped),
    )
    return ConversionReport(description=result, skipped=tuple(skipped))


__all__ = [
    "BOOLEAN_OPTIONS",
    "PARAMETER_TYPE_MAP",
    "ConversionReport",
    "add_record",
    "convert",
    "create_input",
    "create_output",
    "create_parameter",
    "resolve_list_default",
]
