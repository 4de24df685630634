# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised while reading parsed ACD record documents."""

from __future__ import annotations

from ..description.errors import DescriptionIntegrityError


class RecordValidationError(RuntimeError):
    """Raised when a record document fails structural schema validation."""


__all__ = ("DescriptionIntegrityError", "RecordValidationError")
