# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""I/O helpers for reading record documents and schemas."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import cast

from ..description.errors import DescriptionIntegrityError
from ..description.types import JSONValue


def load_document(path: Path) -> JSONValue:
    """Load a JSON document from disk.

    Args:
        path: Filesystem path to the JSON document.

    Returns:
        JSONValue: Parsed JSON value extracted from the document.

    Raises:
        FileNotFoundError: If the JSON document is missing.
        DescriptionIntegrityError: If the document cannot be parsed.
    """
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as stream:
        try:
            return cast(JSONValue, json.load(stream))
        except json.JSONDecodeError as exc:
            raise DescriptionIntegrityError(f"{path}: failed to parse JSON: {exc.msg}") from exc


def load_schema(path: Path) -> Mapping[str, JSONValue]:
    """Load a JSON schema from disk and ensure it is a JSON object.

    Args:
        path: Filesystem path to the schema file.

    Returns:
        Mapping[str, JSONValue]: Parsed JSON schema mapping.

    Raises:
        FileNotFoundError: If the schema file does not exist.
        DescriptionIntegrityError: If the schema is not a JSON object.
    """
    payload = load_document(path)
    if not isinstance(payload, Mapping):
        raise DescriptionIntegrityError(f"{path}: expected a JSON object")
    return payload


__all__ = ["load_document", "load_schema"]
