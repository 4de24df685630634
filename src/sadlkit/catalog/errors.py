# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by tool catalog operations."""

from __future__ import annotations


class CatalogIntegrityError(RuntimeError):
    """Raised when catalog registrations violate uniqueness or lookup invariants."""


__all__ = ("CatalogIntegrityError",)
