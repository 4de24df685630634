# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Input binding between formal tool inputs and concrete data items."""

from __future__ import annotations

from typing import Final

from .binder import bind_inputs
from .outcome import BindingResult, DataBinding, Suitability
from .protocols import DataItem, DataItemStore, FormalInput
from .store import InMemoryItemStore, StoredItem, load_item_document

__all__: Final[tuple[str, ...]] = (
    "BindingResult",
    "DataBinding",
    "DataItem",
    "DataItemStore",
    "FormalInput",
    "InMemoryItemStore",
    "StoredItem",
    "Suitability",
    "bind_inputs",
    "load_item_document",
)
