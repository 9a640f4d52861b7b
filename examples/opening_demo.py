"""Headless opening session: queue packs, open them all, print the pulls."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.table import Table

from boosterpack import BoosterApp, BoosterPackConfig
from boosterpack.domain.sequencer import Phase


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    console = Console()

    config = BoosterPackConfig(
        catalog_path=str(Path(__file__).with_name("catalog") / "plugin.json"),
        rng_seed=2024,
    )
    app = BoosterApp(config)

    app.run_command("Add Booster Pack", {"boosterNum": "0", "cardsOpened": "5"})
    app.run_command("Add Booster Pack", {"boosterNum": "1", "cardsOpened": "4"})
    result = app.run_command("Open Booster Pack", {"single": "false"})
    if not result.ok:
        console.print(f"Nothing opened: {result.reason}", style="red")
        return

    sequencer = result.value
    while sequencer.advance() is not Phase.CLOSE:
        pass

    table = Table(title="Opened packs")
    table.add_column("Pack")
    table.add_column("Image")
    table.add_column("Cards")
    for pack in sequencer.opened:
        table.add_row(str(pack.pack_type), pack.image, ", ".join(map(str, pack.cards)))
    console.print(table)
    console.print(f"Items: {app.party.items}")


if __name__ == "__main__":
    main()
