# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised while building canonical tool descriptions."""

from __future__ import annotations


class DescriptionIntegrityError(RuntimeError):
    """Raised when description metadata violates semantic invariants."""


__all__ = ("DescriptionIntegrityError",)
