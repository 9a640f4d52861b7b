"""Owned, unopened booster packs."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque

from .events import EventBus
from .exceptions import EmptyQueue, InvalidArgument

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class OwnedPack:
    pack_type: int
    card_count: int


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class BoosterInventory:
    """FIFO queue of packs waiting to be opened plus the open mode flag."""

    def __init__(
        self,
        *,
        event_bus: EventBus | None = None,
        min_cards_per_open: int = 2,
        single: bool = True,
    ) -> None:
        self._packs: Deque[OwnedPack] = deque()
        self._single = single
        self._event_bus = event_bus
        self._min_cards_per_open = min_cards_per_open

    def add_pack(self, pack_type: int, card_count: int) -> OwnedPack:
        if not _is_int(pack_type) or pack_type < 0:
            raise InvalidArgument(f"Invalid pack type {pack_type!r}")
        if not _is_int(card_count) or card_count <= 0:
            raise InvalidArgument(f"Invalid number of cards {card_count!r}")
        if card_count < self._min_cards_per_open:
            logger.warning(
                "Pack type %s queued with %s card(s); packs below %s cards cannot be opened.",
                pack_type,
                card_count,
                self._min_cards_per_open,
            )
        entry = OwnedPack(pack_type=pack_type, card_count=card_count)
        self._packs.append(entry)
        logger.info("Added booster pack %s with %s card(s).", pack_type, card_count)
        if self._event_bus:
            self._event_bus.publish(
                "booster.pack.added",
                {"pack_type": pack_type, "card_count": card_count, "queued": len(self._packs)},
            )
        return entry

    def has_packs(self) -> bool:
        return bool(self._packs)

    def next_pack(self) -> OwnedPack:
        """Remove and return the oldest queued pack."""
        if not self._packs:
            raise EmptyQueue("No packs available to open")
        return self._packs.popleft()

    def peek(self) -> OwnedPack | None:
        return self._packs[0] if self._packs else None

    def set_open_mode(self, single: bool) -> None:
        self._single = bool(single)

    def is_single_mode(self) -> bool:
        return self._single

    def snapshot(self) -> list[tuple[int, int]]:
        return [(entry.pack_type, entry.card_count) for entry in self._packs]

    def __len__(self) -> int:
        return len(self._packs)
