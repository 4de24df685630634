# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from sadlkit.binding import InMemoryItemStore, StoredItem

MICROARRAY = "GENE_EXPRS"
TEXT = "TEXT"


@pytest.fixture
def store() -> InMemoryItemStore:
    """Return an empty in-memory item store."""
    return InMemoryItemStore()


@pytest.fixture
def make_item(store: InMemoryItemStore) -> Callable[..., StoredItem]:
    """Return a factory registering items with the shared store."""

    def factory(
        name: str,
        shape: str = MICROARRAY,
        *,
        metadata: StoredItem | None = None,
        parent: StoredItem | None = None,
    ) -> StoredItem:
        return store.add(StoredItem(name=name, shape=shape, metadata=metadata, parent=parent))

    return factory


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, object], Path]:
    """Return a helper serialising payloads into ``tmp_path``."""

    def writer(filename: str, payload: object) -> Path:
        path = tmp_path / filename
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return path

    return writer


@pytest.fixture
def water_document() -> dict[str, object]:
    """Return a parsed ACD document modelled on the EMBOSS ``water`` tool."""

    return {
        "name": "water",
        "description": "Smith-Waterman local alignment of sequences",
        "groups": ["Alignment:Local"],
        "parameters": [
            {"type": "sequence", "name": "asequence", "required": True},
            {"type": "seqall", "name": "bsequence", "required": True},
            {"type": "matrixf", "name": "datafile", "additional": True},
            {
                "type": "float",
                "name": "gapopen",
                "attributes": {
                    "default": {"value": "@($(acdprotein)? 10.0 : 10.0 )", "evaluated": False},
                    "minimum": "0.0",
                    "maximum": "100.0",
                    "information": "Gap opening penalty",
                },
                "required": True,
            },
            {
                "type": "float",
                "name": "gapextend",
                "attributes": {
                    "default": "0.5",
                    "minimum": "0.0",
                    "maximum": {"value": "$(gapopen)", "evaluated": False},
                    "information": "Gap extension penalty",
                },
                "required": True,
            },
            {
                "type": "boolean",
                "name": "brief",
                "attributes": {"information": "Brief identity and similarity"},
                "advanced": True,
            },
            {
                "type": "list",
                "name": "aformat",
                "attributes": {"default": "Pair", "information": "Alignment format"},
                "options": {"pair": "Pair", "markx0": "Markx0", "srspair": "SRS pair"},
                "additional": True,
            },
            {"type": "align", "name": "outfile", "required": True},
            {"type": "graph", "name": "graph", "advanced": True},
            {"type": "variable", "name": "acdprotein"},
        ],
    }
