# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Unit tests for the canonical description model."""

from __future__ import annotations

import pytest

from sadlkit.description import (
    DescriptionIntegrityError,
    Input,
    Name,
    Output,
    Parameter,
    ParameterType,
    ToolDescriptionBuilder,
)


def _enum(default: str | None = None) -> Parameter:
    return Parameter(
        name=Name.create("mode"),
        parameter_type=ParameterType.ENUM,
        options=(Name.create("a", "Alpha"), Name.create("b", "Beta")),
        default=default,
    )


def test_enum_parameter_requires_options() -> None:
    with pytest.raises(DescriptionIntegrityError, match="require options"):
        Parameter(name=Name.create("mode"), parameter_type=ParameterType.ENUM)


def test_enum_parameter_rejects_duplicate_keys() -> None:
    with pytest.raises(DescriptionIntegrityError, match="unique"):
        Parameter(
            name=Name.create("mode"),
            parameter_type=ParameterType.ENUM,
            options=(Name.create("a", "Alpha"), Name.create("a", "Again")),
        )


def test_scalar_parameter_rejects_options() -> None:
    with pytest.raises(DescriptionIntegrityError):
        Parameter(
            name=Name.create("count"),
            parameter_type=ParameterType.INTEGER,
            options=(Name.create("1"),),
        )


def test_default_resolution_flag() -> None:
    assert _enum("a").default_is_resolved
    assert _enum(None).default_is_resolved
    assert not _enum("Alpha").default_is_resolved


def test_name_label_falls_back_to_identifier() -> None:
    assert Name.create("gapopen").label == "gapopen"
    assert Name.create("gapopen", "").display is None
    assert Name.create("gapopen", "Gap opening penalty").label == "Gap opening penalty"


def test_builder_preserves_declaration_order() -> None:
    builder = ToolDescriptionBuilder(name=Name.create("tool"), category="Utilities", description="demo")
    builder.add_parameter(_enum("a"))
    builder.add_parameter(Parameter(name=Name.create("count"), parameter_type=ParameterType.INTEGER))
    builder.add_input(Input(name=Name.create("first")))
    builder.add_input(Input(name=Name.create("second")))
    builder.add_output(Output(name=Name.create("result.txt")))

    description = builder.build()

    assert [parameter.name.id for parameter in description.parameters] == ["mode", "count"]
    assert [entry.name.id for entry in description.inputs] == ["first", "second"]
    assert description.outputs[0].name.id == "result.txt"

    payload = description.to_dict()
    assert payload["category"] == "Utilities"
    assert payload["parameters"][0]["options"] == [
        {"id": "a", "display": "Alpha"},
        {"id": "b", "display": "Beta"},
    ]
    assert payload["inputs"][0] == {"name": {"id": "first", "display": None}, "type": "GENERIC", "required": True}
