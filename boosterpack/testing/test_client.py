"""Scripted client that drives plugin commands without a host engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from ..app import BoosterApp
from ..domain.sequencer import OpeningSequencer, Phase


@dataclass(slots=True)
class TestMessage:
    __test__ = False

    text: str
    metadata: Dict[str, Any]


class TestClient:
    __test__ = False

    """Run commands and play opening scenes to completion."""

    def __init__(self, app: BoosterApp) -> None:
        self._app = app
        self._log: List[TestMessage] = []

    def add(self, pack_type: Any, card_count: Any) -> bool:
        result = self._app.run_command(
            self._app.config.commands.add_pack,
            {"boosterNum": str(pack_type), "cardsOpened": str(card_count)},
        )
        self._log.append(
            TestMessage(
                text=f"Add {pack_type}x{card_count}: {'ok' if result.ok else result.error.value}",
                metadata={"queued": self._app.inventory.snapshot()},
            )
        )
        return result.ok

    def open(self, *, single: bool = True) -> OpeningSequencer | None:
        """Issue the open command and tick the scene until it closes."""
        result = self._app.run_command(
            self._app.config.commands.open_pack,
            {"single": "true" if single else "false"},
        )
        if not result.ok:
            self._log.append(
                TestMessage(text=f"Open failed: {result.error.value}", metadata={"reason": result.reason})
            )
            return None
        sequencer = result.value
        while sequencer.advance() is not Phase.CLOSE:
            pass
        for pack in sequencer.opened:
            self._log.append(
                TestMessage(
                    text=f"Opened {pack.pack_type}: {', '.join(map(str, pack.cards))}",
                    metadata={"cards": list(pack.cards), "image": pack.image},
                )
            )
        return sequencer

    def history(self) -> List[TestMessage]:
        return list(self._log)
