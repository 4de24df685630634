# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""In-memory data-item store used by the command line and tests."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Final

from ..description.errors import DescriptionIntegrityError
from ..description.types import GENERIC_INPUT_TYPE, JSONValue
from ..description.utils import expect_mapping, expect_sequence, expect_string, optional_string
from .protocols import DataItem


@dataclass(eq=False, slots=True)
class StoredItem:
    """Data item with a shape, an optional metadata link and an optional parent."""

    name: str
    shape: str
    metadata: StoredItem | None = None
    parent: StoredItem | None = None


@dataclass(slots=True)
class InMemoryItemStore:
    """Answer compatibility and ancestry questions for :class:`StoredItem` objects.

    An item is compatible with a slot when its shape equals the slot data type
    or the slot accepts ``wildcard`` data.
    """

    wildcard: str = GENERIC_INPUT_TYPE
    _items: dict[str, StoredItem] = field(default_factory=dict, init=False, repr=False)

    def add(self, item: StoredItem) -> StoredItem:
        """Register ``item`` so it can be looked up by name.

        Raises:
            DescriptionIntegrityError: If an item with the same name exists.
        """

        if item.name in self._items:
            raise DescriptionIntegrityError(f"Item '{item.name}' already registered")
        self._items[item.name] = item
        return item

    def get(self, name: str) -> StoredItem:
        """Return the item registered as ``name``.

        Raises:
            KeyError: If no item was registered under ``name``.
        """

        return self._items[name]

    def is_compatible(self, item: DataItem, data_type: str) -> bool:
        if data_type == self.wildcard:
            return True
        return isinstance(item, StoredItem) and item.shape == data_type

    def retrieve_metadata(self, item: DataItem) -> DataItem | None:
        current = item if isinstance(item, StoredItem) else None
        while current is not None:
            if current.metadata is not None:
                return current.metadata
            current = current.parent
        return None


_ITEMS_KEY: Final[str] = "items"
_METADATA_KEY: Final[str] = "metadata"


def load_item_document(
    data: Mapping[str, JSONValue],
    *,
    context: str,
) -> tuple[InMemoryItemStore, tuple[StoredItem, ...]]:
    """Build a store and the selected items from an items document.

    The document holds ``metadata`` (available metadata items) and ``items``
    (the user's selection, in order). Selected items may reference a
    metadata item or an earlier item by name through ``metadata`` and
    ``parent``.

    Args:
        data: Parsed items document.
        context: Human-readable context used in error messages.

    Returns:
        tuple[InMemoryItemStore, tuple[StoredItem, ...]]: Populated store and
        the selected items in document order.

    Raises:
        DescriptionIntegrityError: If the document is malformed or references
            unknown items.
    """

    store = InMemoryItemStore()
    raw_metadata = data.get(_METADATA_KEY)
    if raw_metadata is not None:
        for index, element in enumerate(expect_sequence(raw_metadata, key=_METADATA_KEY, context=context)):
            entry = expect_mapping(element, key=f"{_METADATA_KEY}[{index}]", context=context)
            entry_context = f"{context}.{_METADATA_KEY}[{index}]"
            store.add(
                StoredItem(
                    name=expect_string(entry.get("name"), key="name", context=entry_context),
                    shape=optional_string(entry.get("shape"), key="shape", context=entry_context)
                    or store.wildcard,
                ),
            )

    selected: list[StoredItem] = []
    for index, element in enumerate(expect_sequence(data.get(_ITEMS_KEY), key=_ITEMS_KEY, context=context)):
        entry = expect_mapping(element, key=f"{_ITEMS_KEY}[{index}]", context=context)
        entry_context = f"{context}.{_ITEMS_KEY}[{index}]"
        item = StoredItem(
            name=expect_string(entry.get("name"), key="name", context=entry_context),
            shape=expect_string(entry.get("shape"), key="shape", context=entry_context),
            metadata=_lookup(store, entry.get("metadata"), key="metadata", context=entry_context),
            parent=_lookup(store, entry.get("parent"), key="parent", context=entry_context),
        )
        selected.append(store.add(item))
    return store, tuple(selected)


def _lookup(store: InMemoryItemStore, value: JSONValue | None, *, key: str, context: str) -> StoredItem | None:
    """Resolve an item reference by name."""

    name = optional_string(value, key=key, context=context)
    if name is None:
        return None
    try:
        return store.get(name)
    except KeyError as exc:
        raise DescriptionIntegrityError(f"{context}: unknown {key} item '{name}'") from exc


__all__ = ["InMemoryItemStore", "StoredItem", "load_item_document"]
