"""Host runtime collaborators for boosterpack."""

from .base import BattleCardCollection, MessageWindow, PartyInventory
from .memory import InMemoryBattleCollection, InMemoryMessageWindow, InMemoryParty

__all__ = [
    "BattleCardCollection",
    "MessageWindow",
    "PartyInventory",
    "InMemoryBattleCollection",
    "InMemoryMessageWindow",
    "InMemoryParty",
]
