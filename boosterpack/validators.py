"""Validation utilities for boosterpack applications."""

from __future__ import annotations

from .app import BoosterApp


def validate_app(app: BoosterApp) -> list[str]:
    """Return list of validation errors discovered in configured app."""
    errors: list[str] = [f"Load issue {issue}" for issue in app.load_issues]
    catalog = app.catalog
    draw = app.config.draw

    packs = list(catalog.iter_packs())
    if not packs:
        errors.append("No pack types configured.")
    if not list(catalog.iter_cards()):
        errors.append("No cards configured.")

    for pack in packs:
        if not pack.cards:
            errors.append(f"Pack {pack.index} does not list any cards.")
        if not pack.booster_image:
            errors.append(f"Pack {pack.index} has no boosterImage.")
        pool = catalog.get_pool(pack.index)
        if not len(pool):
            errors.append(f"Pack {pack.index} has an empty card pool and can never be opened.")

    if not draw.battle_integration:
        for card in catalog.iter_cards():
            if card.gain_item is None:
                errors.append(f"Card {card.index} has no gainItem; drawing it grants nothing.")
            elif not app.party.has_item(card.gain_item):
                errors.append(f"Card {card.index} references unknown item {card.gain_item}.")

    if draw.min_cards_per_open < 1:
        errors.append("Draw configuration 'min_cards_per_open' must be positive.")

    for pack_type, card_count in app.inventory.snapshot():
        if card_count < draw.min_cards_per_open:
            errors.append(
                f"Queued pack {pack_type} opens {card_count} card(s) but at least "
                f"{draw.min_cards_per_open} are required to open it."
            )

    return errors


__all__ = ["validate_app"]
