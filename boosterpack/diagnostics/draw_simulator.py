"""Draw frequency simulation helpers."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from random import Random
from typing import Dict

from ..app import BoosterApp


@dataclass(slots=True)
class SimulationResult:
    pack_type: int
    pulls: int
    counts: Dict[int, int] = field(default_factory=dict)
    expected: Dict[int, float] = field(default_factory=dict)

    def observed(self, card_index: int) -> float:
        if not self.pulls:
            return 0.0
        return self.counts.get(card_index, 0) / self.pulls

    def max_deviation(self) -> float:
        return max(
            (abs(self.observed(card) - share) for card, share in self.expected.items()),
            default=0.0,
        )


class DrawSimulator:
    """Monte-Carlo simulation of single-card draws from a pack's pool."""

    def __init__(self, app: BoosterApp, *, rng: Random | None = None) -> None:
        self._app = app
        self._rng = rng or Random()

    def simulate(self, pack_type: int, *, pulls: int = 10000) -> SimulationResult:
        pool = self._app.catalog.get_pool(pack_type)
        counts = Counter(pool.pick(self._rng) for _ in range(pulls))
        return SimulationResult(
            pack_type=pack_type,
            pulls=pulls,
            counts=dict(counts),
            expected={card: pool.probability(card) for card in pool.members()},
        )
