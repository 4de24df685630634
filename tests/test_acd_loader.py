# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for parsing and validating ACD record documents."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from sadlkit.acd import (
    AcdAttributes,
    AcdDocumentLoader,
    AcdRecord,
    ParameterGroup,
    RecordValidationError,
    detect_parameter_group,
    load_acd_document,
)
from sadlkit.description import DescriptionIntegrityError


@pytest.mark.parametrize(
    ("tag", "group"),
    [
        ("integer", ParameterGroup.SIMPLE),
        ("Toggle", ParameterGroup.SIMPLE),
        ("seqall", ParameterGroup.INPUT),
        ("selection", ParameterGroup.LIST),
        ("outfile", ParameterGroup.OUTPUT),
        ("xygraph", ParameterGroup.GRAPHICS),
        ("variable", ParameterGroup.UNKNOWN),
    ],
)
def test_detect_parameter_group(tag: str, group: ParameterGroup) -> None:
    assert detect_parameter_group(tag) is group


def test_attributes_accept_bare_strings_and_provenance_objects() -> None:
    attributes = AcdAttributes.from_mapping(
        {
            "default": "5",
            "maximum": {"value": "$(len)", "evaluated": False},
            "prompt": "ignored",
        },
        context="test",
    )

    assert attributes.literal("default") == "5"
    assert attributes.literal("maximum") is None
    assert attributes.text("maximum") == "$(len)"
    assert attributes.literal("minimum") is None


def test_record_from_mapping_normalises_type_tag() -> None:
    record = AcdRecord.from_mapping(
        {"type": "OutFile", "name": "out", "required": True, "options": {"b": "Beta", "a": "Alpha"}},
        context="test",
    )

    assert record.type_tag == "outfile"
    assert record.group is ParameterGroup.OUTPUT
    assert list(record.options) == ["b", "a"]
    assert record.advanced is False
    assert record.output_filename_for(True) == "out.txt"
    assert record.output_filename_for(False) == "out"


def test_record_explicit_output_filename_wins() -> None:
    record = AcdRecord(type_tag="graph", name="plot", output_filename="plot%d.svg")

    assert record.output_filename_for() == "plot%d.svg"


def test_record_with_bad_flag_type_is_rejected() -> None:
    with pytest.raises(DescriptionIntegrityError, match="required"):
        AcdRecord.from_mapping({"type": "integer", "name": "n", "required": "yes"}, context="test")


def test_loader_reads_document(
    write_json: Callable[[str, object], Path],
    water_document: dict[str, object],
) -> None:
    path = write_json("water.json", water_document)

    description = load_acd_document(path)

    assert description.name == "water"
    assert description.groups == ("Alignment:Local",)
    assert [record.name for record in description.parameters][:3] == ["asequence", "bsequence", "datafile"]


def test_loader_converts_document(
    write_json: Callable[[str, object], Path],
    water_document: dict[str, object],
) -> None:
    report = AcdDocumentLoader().load_and_convert(write_json("water.json", water_document))

    assert report.description.name.id == "water"
    assert len(report.description.inputs) == 2


def test_loader_rejects_structurally_invalid_document(write_json: Callable[[str, object], Path]) -> None:
    path = write_json("broken.json", {"name": "broken", "parameters": [{"type": "integer"}]})

    with pytest.raises(RecordValidationError, match="parameters/0"):
        AcdDocumentLoader().load(path)


def test_loader_rejects_unknown_record_keys(write_json: Callable[[str, object], Path]) -> None:
    path = write_json("extra.json", {"name": "x", "parameters": [{"type": "integer", "name": "n", "bogus": 1}]})

    with pytest.raises(RecordValidationError):
        AcdDocumentLoader().load(path)


def test_loader_reports_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "invalid.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(DescriptionIntegrityError, match="failed to parse JSON"):
        load_acd_document(path)


def test_loader_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_acd_document(tmp_path / "missing.json")
