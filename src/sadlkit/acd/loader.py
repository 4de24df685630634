# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Loader that validates parsed ACD documents and materialises records."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from ..config import ConversionSettings
from ..description.types import JSONValue
from ..description.utils import expect_mapping
from .convert import ConversionReport, convert
from .errors import RecordValidationError
from .io import load_document, load_schema
from .record import AcdDescription

SCHEMA_FILENAME: Final[str] = "acd_description.schema.json"
DEFAULT_SCHEMA_PATH: Final[Path] = Path(__file__).resolve().parent / "schema" / SCHEMA_FILENAME


@dataclass(slots=True)
class AcdDocumentLoader:
    """Validate record documents against the bundled schema and parse them."""

    schema_path: Path = DEFAULT_SCHEMA_PATH
    _validator: Draft202012Validator = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Compile the JSON schema validator after dataclass setup."""

        self._validator = Draft202012Validator(load_schema(self.schema_path))

    def parse(self, document: JSONValue, *, context: str) -> AcdDescription:
        """Validate ``document`` and return the parsed description.

        Args:
            document: Raw JSON payload describing one ACD application.
            context: Human-readable context used in error messages.

        Returns:
            AcdDescription: Parsed description with records in document order.

        Raises:
            RecordValidationError: If the payload fails schema validation.
            DescriptionIntegrityError: If the payload is semantically invalid.
        """

        try:
            self._validator.validate(document)
        except ValidationError as exc:
            location = "/".join(str(part) for part in exc.absolute_path) or "<root>"
            raise RecordValidationError(f"{context}: {location}: {exc.message}") from exc
        mapping = expect_mapping(document, key="<root>", context=context)
        return AcdDescription.from_mapping(mapping, context=context)

    def load(self, path: Path) -> AcdDescription:
        """Load and parse the record document at ``path``.

        Args:
            path: JSON document produced by the ACD parser.

        Returns:
            AcdDescription: Parsed description.
        """

        return self.parse(load_document(path), context=str(path))

    def load_and_convert(self, path: Path, settings: ConversionSettings | None = None) -> ConversionReport:
        """Load the document at ``path`` and convert it to a canonical description."""

        return convert(self.load(path), settings)


def load_acd_document(path: Path) -> AcdDescription:
    """Load ``path`` with a default :class:`AcdDocumentLoader`."""

    return AcdDocumentLoader().load(path)


__all__ = [
    "DEFAULT_SCHEMA_PATH",
    "AcdDocumentLoader",
    "load_acd_document",
]
