"""Pack opening: weighted draws and their side effects."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from random import Random

from .cards import BoosterCatalog
from .events import EventBus
from .exceptions import BoosterPackError, EmptyQueue, InvalidPackData, ResolutionFailure
from .inventory import BoosterInventory, OwnedPack
from .results import ErrorKind, Result
from .rewards import RewardStrategy
from ..config import DrawConfig, MessageConfig
from ..host.base import MessageWindow

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class OpenedPack:
    pack_type: int
    cards: tuple[int, ...]
    image: str


class PackDrawEngine:
    """Open queued packs, drawing cards from each pack type's weighted pool."""

    def __init__(
        self,
        catalog: BoosterCatalog,
        inventory: BoosterInventory,
        reward_strategy: RewardStrategy,
        messages: MessageWindow,
        draw_config: DrawConfig,
        message_config: MessageConfig,
        event_bus: EventBus,
        *,
        rng: Random | None = None,
    ) -> None:
        self._catalog = catalog
        self._inventory = inventory
        self._reward_strategy = reward_strategy
        self._messages = messages
        self._draw = draw_config
        self._texts = message_config
        self._event_bus = event_bus
        self._rng = rng or Random()

    def open_pack(self) -> Result[OpenedPack]:
        """Consume the next queued pack and apply its cards.

        Never raises: every failure is logged, reported in the message window
        where the player should see it, and returned as a failed Result.
        """
        try:
            entry = self._inventory.next_pack()
        except EmptyQueue as exc:
            logger.error("No packs available to open.")
            self._messages.add(self._texts.invalid_pack_data)
            return Result.failure(exc.kind, str(exc))

        try:
            self._check_entry(entry)
            opened = self._open_entry(entry)
        except InvalidPackData as exc:
            logger.error("Invalid pack data %s: %s", entry, exc)
            self._messages.add(self._texts.invalid_pack_data)
            return Result.failure(exc.kind, str(exc))
        except BoosterPackError as exc:
            logger.error("Error opening booster pack %s: %s", entry, exc)
            self._messages.add(self._texts.open_failed)
            return Result.failure(exc.kind, str(exc))
        except Exception as exc:
            logger.exception("Unexpected error opening booster pack %s.", entry)
            self._messages.add(self._texts.open_failed)
            return Result.failure(ErrorKind.UNEXPECTED, str(exc))
        return Result.success(opened)

    def draw(self, pack_type: int, count: int) -> tuple[int, ...]:
        """Draw ``count`` card indices with replacement, without side effects."""
        pool = self._catalog.get_pool(pack_type)
        return tuple(pool.pick(self._rng) for _ in range(count))

    def _check_entry(self, entry: OwnedPack) -> None:
        if entry.pack_type is None or entry.pack_type < 0:
            raise InvalidPackData(f"Pack entry has no pack type: {entry}")
        if entry.card_count is None or entry.card_count < self._draw.min_cards_per_open:
            raise InvalidPackData(
                f"Pack entry opens {entry.card_count} card(s), "
                f"at least {self._draw.min_cards_per_open} required"
            )

    def _open_entry(self, entry: OwnedPack) -> OpenedPack:
        pack = self._catalog.get_pack(entry.pack_type)
        drawn = self.draw(pack.index, entry.card_count)

        for card_index in drawn:
            card = self._catalog.get_card(card_index)
            try:
                self._reward_strategy.apply(card)
            except ResolutionFailure as exc:
                logger.error("Could not grant card %s: %s", card_index, exc)

        logger.info("Opened booster pack %s: %s", pack.index, list(drawn))
        self._event_bus.publish(
            "booster.pack.opened",
            {"pack_type": pack.index, "cards": list(drawn), "image": pack.booster_image},
        )
        return OpenedPack(pack_type=pack.index, cards=drawn, image=pack.booster_image)
