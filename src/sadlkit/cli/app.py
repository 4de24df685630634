# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command line entry point for converting tool descriptions and binding inputs."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from .. import logging as console_log
from ..acd.convert import ConversionReport
from ..acd.errors import RecordValidationError
from ..acd.io import load_document
from ..acd.loader import AcdDocumentLoader
from ..binding.store import load_item_document
from ..catalog.entry import ToolCatalogEntry
from ..config import ConfigError, WorkbenchConfig, load_config
from ..description.errors import DescriptionIntegrityError
from ..description.utils import expect_mapping
from .rendering import build_bindings_table, build_files_table, build_parameters_table, outcome_text

app = typer.Typer(help="Convert ACD tool records to SADL descriptions and bind data items.", no_args_is_help=True)

RecordsArgument = Annotated[
    Path,
    typer.Argument(help="JSON document holding parsed ACD records.", dir_okay=False),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="TOML configuration file (pyproject.toml or standalone).", dir_okay=False),
]


class CLIError(RuntimeError):
    """Error raised when a command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def _console(config: WorkbenchConfig) -> Console:
    return Console(no_color=not config.output.color, emoji=config.output.emoji, highlight=False)


def _load_config(path: Path | None) -> WorkbenchConfig:
    try:
        return load_config(path)
    except ConfigError as exc:
        raise CLIError(str(exc)) from exc


def _convert(records: Path, config: WorkbenchConfig) -> ConversionReport:
    try:
        return AcdDocumentLoader().load_and_convert(records, config.conversion)
    except (FileNotFoundError, DescriptionIntegrityError, RecordValidationError) as exc:
        raise CLIError(f"failed to load {records}: {exc}") from exc


def _exit_with(exc: CLIError, config: WorkbenchConfig | None) -> typer.Exit:
    use_emoji = config.output.emoji if config is not None else False
    console_log.fail(str(exc), use_emoji=use_emoji, use_color=False)
    return typer.Exit(code=exc.exit_code)


@app.command("convert")
def convert_command(
    records: RecordsArgument,
    as_json: Annotated[bool, typer.Option("--json", help="Emit the description as JSON.")] = False,
    config_path: ConfigOption = None,
) -> None:
    """Convert a parsed ACD document into a canonical SADL description."""

    config: WorkbenchConfig | None = None
    try:
        config = _load_config(config_path)
        report = _convert(records, config)
    except CLIError as exc:
        raise _exit_with(exc, config) from exc

    description = report.description
    if as_json:
        typer.echo(json.dumps(description.to_dict(), indent=2))
        return

    console = _console(config)
    console_log.section(f"{description.category} / {description.name.id}", use_color=config.output.color, console=console)
    if description.description:
        console.print(description.description)
    console.print(build_parameters_table(description))
    console.print(build_files_table(description))
    if report.skipped:
        console_log.warn(
            f"skipped {report.skipped_count} unsupported record(s): {', '.join(report.skipped)}",
            use_emoji=config.output.emoji,
            use_color=config.output.color,
            console=console,
        )
    else:
        total = len(description.parameters) + len(description.inputs) + len(description.outputs)
        console_log.ok(
            f"converted all {total} record(s)",
            use_emoji=config.output.emoji,
            use_color=config.output.color,
            console=console,
        )


@app.command("bind")
def bind_command(
    records: RecordsArgument,
    items: Annotated[
        Path,
        typer.Argument(help="JSON document listing the selected data items.", dir_okay=False),
    ],
    config_path: ConfigOption = None,
) -> None:
    """Bind selected data items to the inputs of a converted tool."""

    config: WorkbenchConfig | None = None
    try:
        config = _load_config(config_path)
        report = _convert(records, config)
        try:
            document = expect_mapping(load_document(items), key="<root>", context=str(items))
            store, selected = load_item_document(document, context=str(items))
        except (FileNotFoundError, DescriptionIntegrityError) as exc:
            raise CLIError(f"failed to load {items}: {exc}") from exc
    except CLIError as exc:
        raise _exit_with(exc, config) from exc

    entry = ToolCatalogEntry.from_description(report.description)
    result = entry.bind(selected, store, config.binding)

    console = _console(config)
    console_log.info(
        f"binding {len(selected)} item(s) to {entry.full_name}",
        use_emoji=config.output.emoji,
        use_color=config.output.color,
        console=console,
    )
    console.print(outcome_text(result))
    if result.ok:
        console.print(build_bindings_table(result))
        return
    raise typer.Exit(code=1)


def main() -> None:
    """Run the command line application."""

    app()


__all__ = ["app", "main"]
