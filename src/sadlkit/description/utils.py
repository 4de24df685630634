# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Utility helpers for validating JSON structures that feed descriptions."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .errors import DescriptionIntegrityError
from .types import JSONValue


def expect_string(value: JSONValue | None, *, key: str, context: str) -> str:
    """Return ``value`` as ``str`` or raise a description error.

    Args:
        value: Raw JSON value extracted from the document.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        str: Value as a string.

    Raises:
        DescriptionIntegrityError: If ``value`` is not a string.
    """
    if not isinstance(value, str):
        raise DescriptionIntegrityError(f"{context}: expected '{key}' to be a string")
    return value


def optional_string(value: JSONValue | None, *, key: str, context: str) -> str | None:
    """Return ``value`` as an optional string with validation.

    Args:
        value: Raw JSON value extracted from the document.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        str | None: ``value`` when present, otherwise ``None``.

    Raises:
        DescriptionIntegrityError: If ``value`` is present but not a string.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise DescriptionIntegrityError(f"{context}: expected '{key}' to be a string if present")
    return value


def optional_bool(
    value: JSONValue | None,
    *,
    key: str,
    context: str,
    default: bool | None = None,
) -> bool:
    """Return ``value`` coerced to ``bool`` with an optional default.

    Args:
        value: Raw JSON value extracted from the document.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.
        default: Value returned when ``value`` is ``None``.

    Returns:
        bool: Boolean value derived from ``value`` or ``default``.

    Raises:
        DescriptionIntegrityError: If ``value`` is not ``None`` and not a bool,
            or ``value`` is ``None`` and no ``default`` was provided.
    """
    if value is None:
        if default is None:
            raise DescriptionIntegrityError(f"{context}: expected '{key}' to be a boolean")
        return default
    if isinstance(value, bool):
        return value
    raise DescriptionIntegrityError(f"{context}: expected '{key}' to be a boolean")


def string_array(value: JSONValue | None, *, key: str, context: str) -> tuple[str, ...]:
    """Return ``value`` as a tuple of strings with validation.

    Args:
        value: Raw JSON value extracted from the document.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        tuple[str, ...]: Tuple containing all string entries from ``value``.

    Raises:
        DescriptionIntegrityError: If ``value`` is not a sequence of strings.
    """
    if value is None:
        return ()
    result: list[str] = []
    for index, item in enumerate(expect_sequence(value, key=key, context=context)):
        if not isinstance(item, str):
            raise DescriptionIntegrityError(f"{context}: expected '{key}[{index}]' to be a string")
        result.append(item)
    return tuple(result)


def expect_sequence(value: JSONValue | None, *, key: str, context: str) -> Sequence[JSONValue]:
    """Return ``value`` as a JSON array or raise an error.

    Args:
        value: Raw JSON value extracted from the document.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        Sequence[JSONValue]: Sequence derived from ``value``.

    Raises:
        DescriptionIntegrityError: If ``value`` is not an array.
    """
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        raise DescriptionIntegrityError(f"{context}: expected '{key}' to be an array")
    return value


def expect_mapping(value: JSONValue | None, *, key: str, context: str) -> Mapping[str, JSONValue]:
    """Return ``value`` as a mapping of JSON values or raise an error.

    Args:
        value: Raw JSON value extracted from the document.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        Mapping[str, JSONValue]: Mapping derived from ``value``.

    Raises:
        DescriptionIntegrityError: If ``value`` is not a mapping.
    """
    if not isinstance(value, Mapping):
        raise DescriptionIntegrityError(f"{context}: expected '{key}' to be an object")
    return value


def string_mapping(value: JSONValue | None, *, key: str, context: str) -> dict[str, str]:
    """Return ``value`` as an insertion-ordered mapping of strings.

    Args:
        value: Raw JSON value extracted from the document.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        dict[str, str]: Mapping containing string keys and string values in
        document order.

    Raises:
        DescriptionIntegrityError: If ``value`` is not a mapping of strings.
    """
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise DescriptionIntegrityError(f"{context}: expected '{key}' to be an object")
    result: dict[str, str] = {}
    for item_key, item_value in value.items():
        if not isinstance(item_key, str) or not isinstance(item_value, str):
            raise DescriptionIntegrityError(f"{context}: expected '{key}' to be a mapping of strings")
        result[item_key] = item_value
    return result


__all__ = [
    "expect_mapping",
    "expect_sequence",
    "expect_string",
    "optional_bool",
    "optional_string",
    "string_array",
    "string_mapping",
]
