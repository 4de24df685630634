# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Catalog providing lookup of tool entries by identifier or category."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator, Mapping

from ..description.model import ToolDescription
from .entry import ToolCatalogEntry
from .errors import CatalogIntegrityError


class ToolCatalog(Mapping[str, ToolCatalogEntry]):
    """Session-scoped catalog of tool entries.

    ``ToolCatalog`` behaves like a read-only mapping whose keys are entry
    identifiers (``<name>/<category>``) in registration order. Applications
    create one catalog at session start and pass it to the components that
    need it.
    """

    def __init__(self) -> None:
        """Initialise an empty catalog."""

        self._entries: dict[str, ToolCatalogEntry] = {}
        self._by_category: dict[str, list[str]] = defaultdict(list)

    def register(self, entry: ToolCatalogEntry) -> ToolCatalogEntry:
        """Register ``entry`` enforcing uniqueness of its identifier.

        Args:
            entry: Entry to insert.

        Returns:
            ToolCatalogEntry: The registered entry.

        Raises:
            CatalogIntegrityError: If an entry with the same identifier exists.
        """

        identifier = entry.identifier
        if identifier in self._entries:
            raise CatalogIntegrityError(f"Tool '{identifier}' already registered")
        self._entries[identifier] = entry
        self._by_category[entry.category].append(identifier)
        return entry

    def register_description(self, description: ToolDescription, *, has_source_code: bool = False) -> ToolCatalogEntry:
        """Build an entry from ``description`` and register it."""

        return self.register(ToolCatalogEntry.from_description(description, has_source_code=has_source_code))

    def reset(self) -> None:
        """Remove all entries from the catalog."""
        self._entries.clear()
        self._by_category.clear()

    def try_get(self, identifier: str) -> ToolCatalogEntry | None:
        """Return the entry for ``identifier`` when registered, otherwise ``None``."""

        return self._entries.get(identifier)

    def categories(self) -> tuple[str, ...]:
        """Return category names in first-registration order."""

        return tuple(self._by_category)

    def entries_in(self, category: str) -> Iterable[ToolCatalogEntry]:
        """Return entries registered under ``category`` in registration order.

        Args:
            category: Category name used to filter entries.

        Returns:
            Iterable[ToolCatalogEntry]: Matching entries.
        """

        return tuple(self._entries[identifier] for identifier in self._by_category.get(category, ()))

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __getitem__(self, identifier: str) -> ToolCatalogEntry:
        return self._entries[identifier]


__all__ = ["ToolCatalog"]
