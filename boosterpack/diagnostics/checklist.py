"""Automated checks to highlight balancing issues."""

from __future__ import annotations

from dataclasses import dataclass

from ..app import BoosterApp


@dataclass(slots=True)
class ChecklistIssue:
    severity: str
    message: str


def run_checklist(app: BoosterApp, *, dominance: float = 0.9) -> list[ChecklistIssue]:
    issues: list[ChecklistIssue] = []
    pools = list(app.catalog.iter_pools())
    if not pools:
        issues.append(ChecklistIssue("error", "No pack types registered."))

    for pool in pools:
        if not len(pool):
            issues.append(ChecklistIssue("error", f"Pack {pool.pack_type} has an empty pool."))
            continue
        members = pool.members()
        if len(members) == 1:
            issues.append(
                ChecklistIssue("warning", f"Pack {pool.pack_type} can only ever draw card {members[0]}.")
            )
            continue
        for card in members:
            if pool.probability(card) >= dominance:
                issues.append(
                    ChecklistIssue(
                        "warning",
                        f"Card {card} makes up {pool.probability(card):.0%} of pack {pool.pack_type}.",
                    )
                )

    layout = app.catalog.layout
    if not layout.card_positions:
        issues.append(ChecklistIssue("warning", "No card positions configured for the opening scene."))

    if app.config.draw.min_cards_per_open > 1:
        issues.append(
            ChecklistIssue(
                "warning",
                f"Packs added with fewer than {app.config.draw.min_cards_per_open} cards "
                "are accepted but fail when opened.",
            )
        )

    return issues
