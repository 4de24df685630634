# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Protocols describing the collaborators consumed by the input binder."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DataItem(Protocol):
    """Concrete unit of data owned by the data-item store."""

    @property
    def name(self) -> str:
        """Return the display name of the item."""
        ...


class DataItemStore(Protocol):
    """Oracles supplied by the data-item store.

    The binder never inspects item shapes itself; every compatibility and
    ancestry question is delegated here.
    """

    def is_compatible(self, item: DataItem, data_type: str) -> bool:
        """Return ``True`` when ``item`` can fill a slot declaring ``data_type``.

        Args:
            item: Candidate concrete item.
            data_type: Data type declared by the formal input slot.

        Returns:
            bool: ``True`` when the item's current shape is compatible.
        """
        ...

    def retrieve_metadata(self, item: DataItem) -> DataItem | None:
        """Return the nearest metadata item linked to ``item`` or its ancestors.

        Args:
            item: Primary item whose lineage is walked.

        Returns:
            DataItem | None: Metadata item, or ``None`` when the lineage has none.
        """
        ...


class FormalInput(Protocol):
    """Formal input slot as seen by the binder."""

    @property
    def name(self) -> str:
        """Return the slot name (the prefix for repeated slots)."""
        ...

    @property
    def data_type(self) -> str:
        """Return the data type concrete items must be compatible with."""
        ...

    @property
    def multi(self) -> bool:
        """Return ``True`` when the slot absorbs any number of items."""
        ...

    def resolved_name(self, ordinal: int, width: int) -> str:
        """Return the slot name rendered for the ``ordinal``-th bound item."""
        ...


__all__ = ["DataItem", "DataItemStore", "FormalInput"]
