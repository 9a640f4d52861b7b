"""Phase machine behind the pack opening scene.

Rendering and frame timing belong to the host. The host calls ``advance()``
whenever the animation of the current phase has finished; the sequencer
decides what comes next, including looping into the next queued pack when
the inventory is not in single mode.
"""

from __future__ import annotations

import logging
from enum import Enum

from .cards import SceneLayout
from .draw import OpenedPack, PackDrawEngine
from .inventory import BoosterInventory
from .results import Result

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    IDLE = "idle"
    REVEAL_PACK = "reveal_pack"
    FLIP_CARDS = "flip_cards"
    DISPERSE = "disperse"
    CLOSE = "close"


class OpeningSequencer:
    def __init__(
        self,
        engine: PackDrawEngine,
        inventory: BoosterInventory,
        layout: SceneLayout | None = None,
    ) -> None:
        self._engine = engine
        self._inventory = inventory
        self._layout = layout or SceneLayout()
        self.phase = Phase.IDLE
        self.current: OpenedPack | None = None
        self.opened: list[OpenedPack] = []

    @property
    def finished(self) -> bool:
        return self.phase is Phase.CLOSE

    def start(self) -> Result[OpenedPack]:
        if self.phase is not Phase.IDLE:
            raise RuntimeError(f"Sequencer already started (phase {self.phase.value})")
        return self._open_next()

    def advance(self) -> Phase:
        if self.phase is Phase.IDLE:
            raise RuntimeError("Sequencer has not been started")
        if self.phase is Phase.REVEAL_PACK:
            self.phase = Phase.FLIP_CARDS
        elif self.phase is Phase.FLIP_CARDS:
            self.phase = Phase.DISPERSE
        elif self.phase is Phase.DISPERSE:
            if self._inventory.has_packs() and not self._inventory.is_single_mode():
                self._open_next()
            else:
                self.phase = Phase.CLOSE
        return self.phase

    def card_slots(self) -> list[tuple[int, tuple[int, int] | None]]:
        """Pair each card of the current pack with its configured screen slot."""
        if self.current is None:
            return []
        positions = self._layout.card_positions
        return [
            (card, positions[n] if n < len(positions) else None)
            for n, card in enumerate(self.current.cards)
        ]

    def _open_next(self) -> Result[OpenedPack]:
        result = self._engine.open_pack()
        if not result.ok:
            logger.info("Closing opening scene: %s", result.reason)
            self.current = None
            self.phase = Phase.CLOSE
            return result
        self.current = result.value
        self.opened.append(result.value)
        self.phase = Phase.REVEAL_PACK
        return result
