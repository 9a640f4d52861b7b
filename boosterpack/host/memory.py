"""In-memory host collaborators for tools, tests and headless runs."""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, Sequence

from .base import BattleCardCollection, MessageWindow, PartyInventory


class InMemoryBattleCollection(BattleCardCollection):
    def __init__(self, cards: Iterable[int] = ()) -> None:
        self._cards: list[int] = list(cards)

    def append(self, card_index: int) -> None:
        self._cards.append(card_index)

    def all_cards(self) -> Sequence[int]:
        return tuple(self._cards)


class InMemoryParty(PartyInventory):
    """Item bag; ``known_items`` mirrors the host item database when given."""

    def __init__(self, known_items: Iterable[int] | None = None) -> None:
        self._known = set(known_items) if known_items is not None else None
        self.items: dict[int, int] = {}

    def has_item(self, item_id: int) -> bool:
        if self._known is None:
            return item_id > 0
        return item_id in self._known

    def gain_item(self, item_id: int, amount: int = 1) -> None:
        self.items[item_id] = self.items.get(item_id, 0) + amount


class InMemoryMessageWindow(MessageWindow):
    def __init__(self, *, maxlen: int = 100) -> None:
        self._messages: Deque[str] = deque(maxlen=maxlen)

    def add(self, text: str) -> None:
        self._messages.append(text)

    def dump(self) -> list[str]:
        return list(self._messages)
