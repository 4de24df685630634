# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Greedy, order-based binding of concrete data items to formal inputs.

Formal inputs are processed in declaration order and the first compatible
concrete item is bound to each of them. Repeated inputs absorb every
compatible item left in the pool. Every formal input must receive at least
one item, an item is never bound twice, and every item must end up bound.
Metadata inputs are not matched directly: they are filled from the lineage
of the primary items, pairing the Nth metadata input with the Nth binding.

There is no backtracking. Once an item is consumed it is never reconsidered,
so some assignments a global matching would find are rejected.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Final

from ..config import BindingSettings
from .outcome import BindingResult, DataBinding, Suitability
from .protocols import DataItem, DataItemStore, FormalInput

LOGGER = logging.getLogger(__name__)

FIRST_ORDINAL: Final[int] = 1

_DEFAULT_SETTINGS: Final[BindingSettings] = BindingSettings()


def _bind_slot(
    slot: FormalInput,
    pool: Sequence[DataItem],
    store: DataItemStore,
    settings: BindingSettings,
) -> list[DataBinding]:
    """Return the bindings ``slot`` claims from ``pool`` in pool order."""

    bound: list[DataBinding] = []
    ordinal = FIRST_ORDINAL
    for item in pool:
        LOGGER.debug("trying to bind %s to %s (%s)", item.name, slot.name, slot.data_type)
        if not store.is_compatible(item, slot.data_type):
            continue
        slot_name = slot.resolved_name(ordinal, settings.ordinal_width)
        LOGGER.debug("bound successfully (%s -> %s)", item.name, slot_name)
        bound.append(DataBinding(item=item, slot_name=slot_name, data_type=slot.data_type))
        if not slot.multi:
            break
        ordinal += 1
    return bound


def _bind_metadata(
    deferred: Sequence[FormalInput],
    primary: Sequence[DataBinding],
    store: DataItemStore,
    settings: BindingSettings,
) -> list[DataBinding] | None:
    """Return metadata bindings for ``deferred`` slots or ``None`` when one is missing."""

    metadata_bindings: list[DataBinding] = []
    primary_iter = iter(primary)
    for slot in deferred:
        source = next(primary_iter, None)
        if source is None:
            LOGGER.debug("no primary input available for metadata input %s", slot.name)
            return None
        metadata = store.retrieve_metadata(source.item)
        if metadata is None:
            LOGGER.debug("no metadata linked to %s for %s", source.item.name, slot.name)
            return None
        metadata_bindings.append(
            DataBinding(
                item=metadata,
                slot_name=slot.resolved_name(FIRST_ORDINAL, settings.ordinal_width),
                data_type=settings.metadata_type,
            ),
        )
    return metadata_bindings


def bind_inputs(
    slots: Sequence[FormalInput],
    items: Iterable[DataItem],
    store: DataItemStore,
    settings: BindingSettings | None = None,
) -> BindingResult:
    """Bind ``items`` to ``slots`` and classify the attempt.

    Args:
        slots: Formal inputs in declaration order.
        items: Concrete items chosen by the user; processed in iteration order.
        store: Data-item store answering compatibility and ancestry questions.
        settings: Optional binding settings (metadata prefix, ordinal width).

    Returns:
        BindingResult: ``SUITABLE`` with primary bindings followed by metadata
        bindings, or a failure outcome without bindings.
    """

    active = settings or _DEFAULT_SETTINGS
    pool: list[DataItem] = list(items)
    LOGGER.debug("binding %d values to %d formal inputs", len(pool), len(slots))

    bindings: list[DataBinding] = []
    deferred: list[FormalInput] = []
    for slot in slots:
        if slot.name.startswith(active.metadata_prefix):
            deferred.append(slot)
            continue
        claimed = _bind_slot(slot, pool, store, active)
        if not claimed:
            LOGGER.debug("no binding found for %s", slot.name)
            return BindingResult.failure(Suitability.NOT_ENOUGH_INPUTS)
        claimed_ids = {id(binding.item) for binding in claimed}
        pool = [item for item in pool if id(item) not in claimed_ids]
        bindings.extend(claimed)

    if pool:
        LOGGER.debug("%d concrete inputs were not bound", len(pool))
        return BindingResult.failure(Suitability.TOO_MANY_INPUTS)

    LOGGER.debug("we have %d bindings before metadata retrieval", len(bindings))
    metadata_bindings = _bind_metadata(deferred, bindings, store, active)
    if metadata_bindings is None:
        return BindingResult.failure(Suitability.NOT_ENOUGH_INPUTS)
    bindings.extend(metadata_bindings)
    LOGGER.debug("we have %d bindings after metadata retrieval", len(bindings))
    return BindingResult(outcome=Suitability.SUITABLE, bindings=tuple(bindings))


__all__ = ["bind_inputs"]
