"""Interfaces of the host runtime that boosterpack writes into."""

from __future__ import annotations

from typing import Protocol, Sequence


class BattleCardCollection(Protocol):
    """Global card list owned by the card-battle plugin."""

    def append(self, card_index: int) -> None:
        ...

    def all_cards(self) -> Sequence[int]:
        ...


class PartyInventory(Protocol):
    """The player's item bag."""

    def has_item(self, item_id: int) -> bool:
        ...

    def gain_item(self, item_id: int, amount: int = 1) -> None:
        ...


class MessageWindow(Protocol):
    """User-facing in-game message surface."""

    def add(self, text: str) -> None:
        ...
