"""Command line helpers for boosterpack."""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console
from rich.table import Table

from .app import BoosterApp
from .config import BoosterPackConfig
from .diagnostics.checklist import run_checklist as checklist_run
from .diagnostics.draw_simulator import DrawSimulator
from .loaders import validate_catalog_file
from .validators import validate_app

console = Console()


def _config_from_args(args: argparse.Namespace) -> BoosterPackConfig:
    config = BoosterPackConfig.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config.catalog_path = args.catalog
    if args.battle:
        config.draw.battle_integration = True
    return config


def _base_parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("catalog", help="Path to the plugin parameters JSON file")
    parser.add_argument(
        "--battle",
        action="store_true",
        help="Read cards from the battle plugin's 'Card Creation' list",
    )
    return parser


def run_simulator() -> None:
    parser = _base_parser("Booster pack draw simulator")
    parser.add_argument("pack_type", type=int, help="Pack type index to simulate")
    parser.add_argument("--pulls", type=int, default=10000, help="Number of single-card draws")
    args = parser.parse_args()

    app = BoosterApp(_config_from_args(args))
    result = DrawSimulator(app).simulate(args.pack_type, pulls=args.pulls)

    table = Table(title=f"Pack {result.pack_type}: {result.pulls} draws")
    table.add_column("Card", justify="right")
    table.add_column("Draws", justify="right")
    table.add_column("Observed", justify="right")
    table.add_column("Expected", justify="right")
    for card, share in sorted(result.expected.items()):
        table.add_row(
            str(card),
            str(result.counts.get(card, 0)),
            f"{result.observed(card):.2%}",
            f"{share:.2%}",
        )
    console.print(table)
    console.print(f"Max deviation: {result.max_deviation():.2%}")


def run_checklist() -> None:
    parser = _base_parser("Booster pack sanity checks")
    args = parser.parse_args()

    app = BoosterApp(_config_from_args(args))
    issues = checklist_run(app)
    if not issues:
        console.print("No problems found.", style="green")
        return
    for issue in issues:
        style = "red" if issue.severity == "error" else "yellow"
        console.print(f"[{issue.severity.upper()}] {issue.message}", style=style, markup=False)
    if any(issue.severity == "error" for issue in issues):
        sys.exit(1)


def run_validate() -> None:
    parser = _base_parser("Booster pack configuration validator")
    parser.add_argument(
        "--catalog-only",
        action="store_true",
        help="Only check the file structure, not the assembled app",
    )
    args = parser.parse_args()

    if args.catalog_only:
        errors = validate_catalog_file(args.catalog, battle_integration=args.battle)
    else:
        errors = validate_app(BoosterApp(_config_from_args(args)))

    if errors:
        console.print("Configuration errors:", style="red")
        for err in errors:
            console.print(f"- {err}", markup=False)
        sys.exit(1)
    console.print("Configuration is valid.", style="green")
