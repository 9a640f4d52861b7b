"""Top level application object wiring boosterpack into a host."""

from __future__ import annotations

import logging
from random import Random
from typing import Any, Mapping

from .commands import build_commands, run_command
from .config import BoosterPackConfig
from .domain.cards import BoosterCatalog
from .domain.draw import OpenedPack, PackDrawEngine
from .domain.events import EventBus
from .domain.exceptions import InvalidArgument
from .domain.inventory import BoosterInventory, OwnedPack
from .domain.results import LoadIssue, Result
from .domain.rewards import BattleCollectionStrategy, ItemGrantStrategy, RewardStrategy
from .domain.sequencer import OpeningSequencer
from .host.base import BattleCardCollection, MessageWindow, PartyInventory
from .host.memory import InMemoryBattleCollection, InMemoryMessageWindow, InMemoryParty
from .loaders import load_catalog_from_json

logger = logging.getLogger(__name__)


class BoosterApp:
    """Central dependency container shared by the commands and the opening scene."""

    def __init__(
        self,
        config: BoosterPackConfig,
        *,
        catalog: BoosterCatalog | None = None,
        party: PartyInventory | None = None,
        battle_collection: BattleCardCollection | None = None,
        messages: MessageWindow | None = None,
        event_bus: EventBus | None = None,
        rng: Random | None = None,
        reward_strategy: RewardStrategy | None = None,
    ) -> None:
        self.config = config
        self.event_bus = event_bus or EventBus()
        self.party = party or InMemoryParty()
        self.battle_collection = battle_collection or InMemoryBattleCollection()
        self.messages = messages or InMemoryMessageWindow()
        self.load_issues: list[LoadIssue] = []

        if catalog is None:
            catalog = self._load_catalog()
        self.catalog = catalog

        self._rng = rng or (Random(config.rng_seed) if config.rng_seed is not None else Random())

        self.inventory = BoosterInventory(
            event_bus=self.event_bus,
            min_cards_per_open=config.draw.min_cards_per_open,
        )
        self.draw_engine = PackDrawEngine(
            catalog=self.catalog,
            inventory=self.inventory,
            reward_strategy=reward_strategy or self._default_strategy(),
            messages=self.messages,
            draw_config=config.draw,
            message_config=config.messages,
            event_bus=self.event_bus,
            rng=self._rng,
        )
        self.commands = build_commands(self)

    def _load_catalog(self) -> BoosterCatalog:
        if not self.config.catalog_path:
            raise ValueError("BoosterApp requires a catalog or config.catalog_path")
        loaded = load_catalog_from_json(
            self.config.catalog_path,
            battle_integration=self.config.draw.battle_integration,
        )
        if loaded.issues:
            logger.warning("%s", loaded.report())
        self.load_issues = loaded.issues
        return loaded.catalog

    def _default_strategy(self) -> RewardStrategy:
        if self.config.draw.battle_integration:
            return BattleCollectionStrategy(self.battle_collection)
        return ItemGrantStrategy(self.party)

    def add_pack(self, pack_type: int, card_count: int) -> Result[OwnedPack]:
        """Queue a pack; bad arguments are reported to the player, not raised."""
        try:
            return Result.success(self.inventory.add_pack(pack_type, card_count))
        except InvalidArgument as exc:
            logger.warning("Invalid packNum or numCards: %s", exc)
            self.messages.add(self.config.messages.invalid_arguments)
            return Result.failure(exc.kind, str(exc))

    def open_pack(self) -> Result[OpenedPack]:
        return self.draw_engine.open_pack()

    def new_sequencer(self) -> OpeningSequencer:
        return OpeningSequencer(self.draw_engine, self.inventory, self.catalog.layout)

    def run_command(self, name: str, args: Mapping[str, str] | None = None) -> Result[Any]:
        return run_command(self.commands, name, args)

    def snapshot(self) -> dict[str, Any]:
        """Export current state for debugging."""
        return {
            "cards": [card.index for card in self.catalog.iter_cards()],
            "packs": {pool.pack_type: len(pool) for pool in self.catalog.iter_pools()},
            "queued": self.inventory.snapshot(),
            "single_mode": self.inventory.is_single_mode(),
            "battle_integration": self.config.draw.battle_integration,
            "commands": [command.name for command in self.commands.all()],
        }
