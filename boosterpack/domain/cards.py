"""Card, pack type and weighted pool models."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from random import Random
from types import MappingProxyType
from typing import Iterable, Mapping, Sequence

from .exceptions import ResolutionFailure
from .results import ErrorKind, LoadIssue

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class CardDefinition:
    """Definition of a collectible card, addressed by its index in the card list."""

    index: int
    rarity: int
    gain_item: int | None = None
    image: str | None = None
    stats: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )


@dataclass(slots=True, frozen=True)
class PackType:
    """A configured category of booster pack."""

    index: int
    cards: tuple[int, ...]
    booster_image: str = ""


@dataclass(slots=True, frozen=True)
class WeightedPool:
    """Card indices repeated by rarity; sampled uniformly by position."""

    pack_type: int
    entries: tuple[int, ...]

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, card_index: object) -> bool:
        return card_index in self.entries

    def count(self, card_index: int) -> int:
        return self.entries.count(card_index)

    def probability(self, card_index: int) -> float:
        if not self.entries:
            return 0.0
        return self.count(card_index) / len(self.entries)

    def members(self) -> tuple[int, ...]:
        return tuple(dict.fromkeys(self.entries))

    def pick(self, rng: Random) -> int:
        if not self.entries:
            raise ResolutionFailure(f"Pack type {self.pack_type} has an empty card pool")
        return self.entries[rng.randrange(len(self.entries))]


@dataclass(slots=True, frozen=True)
class SceneLayout:
    """Images and card slots used by the opening scene."""

    back_card: str = ""
    back_image: str = ""
    card_positions: tuple[tuple[int, int], ...] = ()


def build_pool(
    pack: PackType, cards: Mapping[int, CardDefinition]
) -> tuple[WeightedPool, list[LoadIssue]]:
    """Expand a pack type's members into its weighted pool.

    Members that cannot be resolved are skipped and reported; the rest of the
    pool is still built.
    """
    entries: list[int] = []
    issues: list[LoadIssue] = []
    for card_index in pack.cards:
        card = cards.get(card_index)
        if card is None:
            issue = LoadIssue(
                ErrorKind.RESOLUTION_FAILURE,
                f"pack[{pack.index}]",
                f"card {card_index} has no usable definition, skipped",
            )
            logger.warning("Skipping card in pool: %s", issue)
            issues.append(issue)
            continue
        entries.extend([card.index] * card.rarity)
    return WeightedPool(pack_type=pack.index, entries=tuple(entries)), issues


class BoosterCatalog:
    """Read-only table of cards, pack types and their pools."""

    def __init__(
        self,
        cards: Iterable[CardDefinition],
        pack_types: Iterable[PackType],
        pools: Iterable[WeightedPool],
        layout: SceneLayout | None = None,
    ) -> None:
        self._cards = MappingProxyType({card.index: card for card in cards})
        self._packs = MappingProxyType({pack.index: pack for pack in pack_types})
        self._pools = MappingProxyType({pool.pack_type: pool for pool in pools})
        self.layout = layout or SceneLayout()

    @classmethod
    def from_definitions(
        cls,
        cards: Sequence[CardDefinition],
        pack_types: Sequence[PackType],
        layout: SceneLayout | None = None,
    ) -> tuple["BoosterCatalog", list[LoadIssue]]:
        card_table = {card.index: card for card in cards}
        pools: list[WeightedPool] = []
        issues: list[LoadIssue] = []
        for pack in pack_types:
            pool, pool_issues = build_pool(pack, card_table)
            pools.append(pool)
            issues.extend(pool_issues)
        return cls(cards, pack_types, pools, layout), issues

    def get_card(self, index: int) -> CardDefinition:
        try:
            return self._cards[index]
        except KeyError as exc:
            raise ResolutionFailure(f"Card {index} not found") from exc

    def get_pack(self, index: int) -> PackType:
        try:
            return self._packs[index]
        except KeyError as exc:
            raise ResolutionFailure(f"Pack type {index} not found") from exc

    def get_pool(self, pack_type: int) -> WeightedPool:
        try:
            return self._pools[pack_type]
        except KeyError as exc:
            raise ResolutionFailure(f"Pack type {pack_type} has no card pool") from exc

    def iter_cards(self) -> Iterable[CardDefinition]:
        return self._cards.values()

    def iter_packs(self) -> Iterable[PackType]:
        return self._packs.values()

    def iter_pools(self) -> Iterable[WeightedPool]:
        return self._pools.values()
