# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rich rendering helpers for descriptions and binding results."""

from __future__ import annotations

from rich.table import Table
from rich.text import Text

from ..binding.outcome import BindingResult
from ..description.model import ToolDescription


def _bounds(minimum: str | None, maximum: str | None) -> str:
    if minimum is None and maximum is None:
        return ""
    return f"{minimum or ''}..{maximum or ''}"


def build_parameters_table(description: ToolDescription) -> Table:
    """Return a table listing the description's parameters in order."""

    table = Table(title="Parameters", show_lines=False)
    table.add_column("Name", style="bold")
    table.add_column("Type")
    table.add_column("Default")
    table.add_column("Bounds")
    table.add_column("Options")
    table.add_column("Optional")
    for parameter in description.parameters:
        options = ", ".join(f"{option.id}={option.label}" for option in parameter.options)
        default = Text(parameter.default or "")
        if not parameter.default_is_resolved:
            default.stylize("yellow")
        table.add_row(
            parameter.name.id,
            parameter.parameter_type.value,
            default,
            _bounds(parameter.minimum, parameter.maximum) if parameter.parameter_type.is_numeric else "",
            options,
            "yes" if parameter.optional else "no",
        )
    return table


def build_files_table(description: ToolDescription) -> Table:
    """Return a table listing input and output files."""

    table = Table(title="Files")
    table.add_column("Direction")
    table.add_column("Name", style="bold")
    table.add_column("Type")
    table.add_column("Optional")
    for entry in description.inputs:
        table.add_row("input", entry.name.id, entry.type_name, "no" if entry.required else "yes")
    for output in description.outputs:
        table.add_row("output", output.name.id, "file", "yes" if output.optional else "no")
    return table


def build_bindings_table(result: BindingResult) -> Table:
    """Return a table listing each bound item with its resolved input name."""

    table = Table(title="Bindings")
    table.add_column("Input", style="bold")
    table.add_column("Item")
    table.add_column("Type")
    for binding in result.bindings:
        table.add_row(binding.slot_name, binding.item.name, binding.data_type)
    return table


def outcome_text(result: BindingResult) -> Text:
    """Return the outcome label painted with its indicator colour."""

    return Text(result.outcome.label, style=f"bold {result.outcome.indicator_style}")


__all__ = ["build_bindings_table", "build_files_table", "build_parameters_table", "outcome_text"]
