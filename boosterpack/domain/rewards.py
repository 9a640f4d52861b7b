"""Strategies applying a drawn card to the game world."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .cards import CardDefinition
from .exceptions import ResolutionFailure
from ..host.base import BattleCardCollection, PartyInventory


class RewardStrategy(ABC):
    """Define what the player receives for each drawn card."""

    @abstractmethod
    def apply(self, card: CardDefinition) -> None:
        """Apply a single drawn card. Raise ResolutionFailure if it cannot be granted."""


@dataclass(slots=True)
class BattleCollectionStrategy(RewardStrategy):
    """Register drawn cards into the battle plugin's global card list."""

    collection: BattleCardCollection

    def apply(self, card: CardDefinition) -> None:
        self.collection.append(card.index)


@dataclass(slots=True)
class ItemGrantStrategy(RewardStrategy):
    """Grant one unit of the card's mapped item."""

    party: PartyInventory
    amount: int = 1

    def apply(self, card: CardDefinition) -> None:
        if card.gain_item is None:
            raise ResolutionFailure(f"Card {card.index} has no gainItem configured")
        if not self.party.has_item(card.gain_item):
            raise ResolutionFailure(
                f"Card {card.index} references unknown item {card.gain_item}"
            )
        self.party.gain_item(card.gain_item, self.amount)
