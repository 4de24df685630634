# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests covering conversion of ACD records into canonical descriptions."""

from __future__ import annotations

import logging

import pytest

from sadlkit.acd import (
    AcdAttributes,
    AcdDescription,
    AcdRecord,
    AttributeValue,
    convert,
    create_input,
    create_output,
    create_parameter,
    resolve_list_default,
)
from sadlkit.config import ConversionSettings
from sadlkit.description import ParameterType


def _record(type_tag: str, name: str = "field", **kwargs: object) -> AcdRecord:
    return AcdRecord(type_tag=type_tag, name=name, **kwargs)  # type: ignore[arg-type]


@pytest.mark.parametrize("tag", ["boolean", "toggle"])
@pytest.mark.parametrize("default", [None, "Y", "N"])
def test_boolean_records_always_have_two_options_and_a_default(tag: str, default: str | None) -> None:
    attributes = AcdAttributes(
        default=AttributeValue(default) if default is not None else None,
        minimum=AttributeValue("0"),
        maximum=AttributeValue("1"),
    )
    parameter = create_parameter(_record(tag, attributes=attributes))

    assert parameter is not None
    assert parameter.parameter_type is ParameterType.ENUM
    assert [(option.id, option.display) for option in parameter.options] == [("Y", "Yes"), ("N", "No")]
    assert parameter.default == (default or "N")
    assert parameter.minimum is None
    assert parameter.maximum is None


def test_boolean_ignores_computed_default() -> None:
    attributes = AcdAttributes(default=AttributeValue("$(other)", evaluated=False))

    parameter = create_parameter(_record("toggle", attributes=attributes))

    assert parameter is not None
    assert parameter.default == "N"


def test_boolean_default_is_configurable() -> None:
    parameter = create_parameter(_record("boolean"), ConversionSettings(boolean_default="Y"))

    assert parameter is not None
    assert parameter.default == "Y"


@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        ("array", ParameterType.STRING),
        ("float", ParameterType.DECIMAL),
        ("integer", ParameterType.INTEGER),
        ("string", ParameterType.STRING),
        ("range", ParameterType.STRING),
    ],
)
def test_simple_records_map_types(tag: str, expected: ParameterType) -> None:
    parameter = create_parameter(_record(tag))

    assert parameter is not None
    assert parameter.parameter_type is expected
    assert parameter.options == ()


def test_simple_record_keeps_only_literal_attributes() -> None:
    attributes = AcdAttributes(
        default=AttributeValue("10", evaluated=False),
        minimum=AttributeValue("1"),
        maximum=AttributeValue("$(length)", evaluated=False),
    )

    parameter = create_parameter(_record("integer", attributes=attributes))

    assert parameter is not None
    assert parameter.default is None
    assert parameter.minimum == "1"
    assert parameter.maximum is None


def test_empty_default_is_omitted() -> None:
    parameter = create_parameter(_record("string", attributes=AcdAttributes(default=AttributeValue(""))))

    assert parameter is not None
    assert parameter.default is None


def test_help_prefers_help_then_information_and_strips_newlines() -> None:
    with_help = AcdAttributes(help=AttributeValue("line one\nline two"), information=AttributeValue("Info"))
    empty_help = AcdAttributes(help=AttributeValue(""), information=AttributeValue("Info\ntext"))

    first = create_parameter(_record("string", attributes=with_help))
    second = create_parameter(_record("string", attributes=empty_help))

    assert first is not None and second is not None
    assert first.help == "line oneline two"
    assert first.name.display == "Info"
    assert second.help == "Infotext"


def test_list_default_given_by_label_resolves_to_key() -> None:
    options = {"pair": "Pair", "markx0": "Markx0", "srspair": "SRS pair"}
    record = _record("selection", options=options, attributes=AcdAttributes(default=AttributeValue("SRS pair")))

    parameter = create_parameter(record)

    assert parameter is not None
    assert parameter.parameter_type is ParameterType.ENUM
    assert parameter.default == "srspair"
    assert parameter.option_keys == ("pair", "markx0", "srspair")


def test_list_default_matching_a_key_is_kept() -> None:
    assert resolve_list_default("pair", {"pair": "markx0", "markx0": "pair"}) == "pair"


def test_list_default_shared_label_resolves_to_last_key() -> None:
    assert resolve_list_default("Same", {"a": "Same", "b": "Same", "c": "Other"}) == "b"


def test_unresolvable_list_default_is_left_as_given() -> None:
    record = _record("list", options={"a": "Alpha"}, attributes=AcdAttributes(default=AttributeValue("Gamma")))

    parameter = create_parameter(record)

    assert parameter is not None
    assert parameter.default == "Gamma"
    assert not parameter.default_is_resolved


def test_list_without_options_produces_nothing() -> None:
    assert create_parameter(_record("list")) is None


@pytest.mark.parametrize(("additional", "advanced", "optional"), [(False, False, False), (True, False, True), (False, True, True)])
def test_optional_flag_follows_additional_or_advanced(additional: bool, advanced: bool, optional: bool) -> None:
    parameter = create_parameter(_record("integer", additional=additional, advanced=advanced))

    assert parameter is not None
    assert parameter.optional is optional


def test_unmapped_tag_produces_no_parameter() -> None:
    assert create_parameter(_record("sequence")) is None
    assert create_parameter(_record("variable")) is None


def test_only_required_inputs_are_converted() -> None:
    required = create_input(_record("sequence", required=True))

    assert required is not None
    assert required.type_name == "GENERIC"
    assert required.required is True
    assert create_input(_record("sequence")) is None
    assert create_input(_record("seqall", advanced=True)) is None
    assert create_input(_record("seqall", required=True, advanced=True)) is None
    assert create_input(_record("integer", required=True)) is None


def test_output_polarity_and_advanced_filter() -> None:
    required = create_output(_record("outfile", name="outfile", required=True))
    optional = create_output(_record("report", name="report"))

    assert required is not None and optional is not None
    assert required.name.id == "outfile.txt"
    assert required.optional is False
    assert optional.optional is True
    assert create_output(_record("outfile", advanced=True)) is None
    assert create_output(_record("sequence", required=True)) is None


def test_graphics_output_uses_image_filename() -> None:
    output = create_output(_record("xygraph", name="plot"))

    assert output is not None
    assert output.name.id == "plot.png"


def test_convert_water_description(water_document: dict[str, object], caplog: pytest.LogCaptureFixture) -> None:
    description = AcdDescription.from_mapping(water_document, context="water")

    with caplog.at_level(logging.DEBUG, logger="sadlkit.acd.convert"):
        report = convert(description)

    result = report.description
    assert result.name.id == "water"
    assert result.category == "Alignment:Local"
    assert [parameter.name.id for parameter in result.parameters] == [
        "gapopen",
        "gapextend",
        "brief",
        "aformat",
    ]
    assert [entry.name.id for entry in result.inputs] == ["asequence", "bsequence"]
    assert [output.name.id for output in result.outputs] == ["outfile.txt"]
    assert report.skipped == ("datafile", "graph", "acdprotein")
    assert report.skipped_count == 3
    assert "skipping unsupported record 'acdprotein'" in caplog.text

    gapopen, gapextend, brief, aformat = result.parameters
    assert gapopen.default is None
    assert (gapopen.minimum, gapopen.maximum) == ("0.0", "100.0")
    assert gapopen.help == "Gap opening penalty"
    assert (gapextend.default, gapextend.maximum) == ("0.5", None)
    assert brief.default == "N" and brief.optional
    assert aformat.default == "pair" and aformat.optional


def test_convert_without_groups_uses_default_category() -> None:
    report = convert(AcdDescription(name="bare", description=""), ConversionSettings(default_category="Other"))

    assert report.description.category == "Other"
    assert report.description.parameters == ()


def test_each_record_becomes_at_most_one_entity() -> None:
    records = tuple(
        _record(tag, name=f"r{index}", required=True)
        for index, tag in enumerate(["integer", "sequence", "outfile", "list", "graph"])
    )

    report = convert(AcdDescription(name="mixed", description="", groups=("Misc",), parameters=records))
    result = report.description

    total = len(result.parameters) + len(result.inputs) + len(result.outputs)
    assert total + report.skipped_count == len(records)
    assert report.skipped == ("r3",)


def test_advanced_required_input_is_skipped() -> None:
    records = (
        _record("sequence", name="query", required=True),
        _record("seqall", name="database", required=True, advanced=True),
    )

    report = convert(AcdDescription(name="search", description="", groups=("Search",), parameters=records))

    assert [entry.name.id for entry in report.description.inputs] == ["query"]
    assert report.skipped == ("database",)
