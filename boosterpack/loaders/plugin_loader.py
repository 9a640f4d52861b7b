"""Load cards, pack types and scene layout from plugin parameters.

The host stores plugin parameters as text: arrays and structs are JSON
documents nested inside JSON strings, and numbers are strings. Every level is
decoded and checked here once, producing typed definitions plus a list of
issues for the entries that had to be skipped.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable

from ..domain.cards import BoosterCatalog, CardDefinition, PackType, SceneLayout
from ..domain.results import ErrorKind, LoadIssue

logger = logging.getLogger(__name__)

PACKS_KEY = "Booster Pack Configuration"
CARDS_KEY = "Card Configuration"
SCENE_KEY = "Booster Scene Configuration"
BATTLE_CARDS_KEY = "Card Creation"

_INT_RE = re.compile(r"^\s*-?\d+\s*$")


@dataclass(slots=True)
class CatalogLoad:
    catalog: BoosterCatalog
    issues: list[LoadIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues

    def report(self) -> str:
        return _format_errors("Catalog loaded with issues", self.issues)


class _Collector:
    def __init__(self) -> None:
        self.issues: list[LoadIssue] = []

    def add(self, kind: ErrorKind, location: str, message: str) -> None:
        issue = LoadIssue(kind, location, message)
        logger.warning("Configuration issue at %s", issue)
        self.issues.append(issue)


def load_catalog_from_json(
    path: str | Path,
    *,
    battle_integration: bool = False,
    strict: bool = False,
) -> CatalogLoad:
    """Load a catalog from a JSON file holding the plugin parameters."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Catalog file {path} must contain a JSON object")
    battle_cards = data.get(BATTLE_CARDS_KEY) if battle_integration else None
    if battle_integration and battle_cards is None:
        raise ValueError(f"Battle integration requires '{BATTLE_CARDS_KEY}' in {path}")
    loaded = parse_plugin_parameters(data, battle_cards=battle_cards)
    if strict and loaded.issues:
        raise ValueError(_format_errors("Catalog validation failed", loaded.issues))
    return loaded


def parse_plugin_parameters(
    params: dict[str, Any], *, battle_cards: Any | None = None
) -> CatalogLoad:
    """Parse plugin parameters into a catalog.

    ``battle_cards`` is the battle plugin's card list; when given it replaces
    the booster plugin's own card configuration.
    """
    collector = _Collector()
    if battle_cards is not None:
        cards = _parse_cards(battle_cards, BATTLE_CARDS_KEY, collector, battle=True)
    else:
        cards = _parse_cards(params.get(CARDS_KEY), CARDS_KEY, collector, battle=False)
    packs = _parse_packs(params.get(PACKS_KEY), collector)
    layout = _parse_layout(params.get(SCENE_KEY), collector)
    catalog, pool_issues = BoosterCatalog.from_definitions(cards, packs, layout)
    collector.issues.extend(pool_issues)
    return CatalogLoad(catalog=catalog, issues=collector.issues)


def validate_parameters(params: dict[str, Any], *, battle_cards: Any | None = None) -> list[str]:
    return [str(issue) for issue in parse_plugin_parameters(params, battle_cards=battle_cards).issues]


def validate_catalog_file(path: str | Path, *, battle_integration: bool = False) -> list[str]:
    """Validate a catalog JSON file and return a list of errors."""
    try:
        loaded = load_catalog_from_json(path, battle_integration=battle_integration)
    except (ValueError, OSError) as exc:
        return [str(exc)]
    return [str(issue) for issue in loaded.issues]


def _decode(value: Any) -> Any:
    """Unwrap one level of JSON-in-a-string encoding."""
    if isinstance(value, str):
        return json.loads(value)
    return value


def parse_int(value: Any) -> int | None:
    """Accept ints and digit strings; reject floats, bools and anything else."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INT_RE.match(value):
        try:
            return int(value)
        except ValueError:
            # digit strings past the interpreter's conversion limit
            return None
    return None


def _decode_list(value: Any, location: str, collector: _Collector) -> list[Any] | None:
    if value is None:
        collector.add(ErrorKind.INVALID_ARGUMENT, location, "is missing")
        return None
    try:
        decoded = _decode(value)
    except json.JSONDecodeError as exc:
        collector.add(ErrorKind.INVALID_ARGUMENT, location, f"is not valid JSON ({exc.msg})")
        return None
    if not isinstance(decoded, list):
        collector.add(ErrorKind.INVALID_ARGUMENT, location, "must be an array")
        return None
    return decoded


def _decode_object(value: Any, location: str, collector: _Collector) -> dict[str, Any] | None:
    try:
        decoded = _decode(value)
    except json.JSONDecodeError as exc:
        collector.add(ErrorKind.INVALID_ARGUMENT, location, f"is not valid JSON ({exc.msg})")
        return None
    if not isinstance(decoded, dict):
        collector.add(ErrorKind.INVALID_ARGUMENT, location, "must be an object")
        return None
    return decoded


def _parse_cards(
    raw: Any, key: str, collector: _Collector, *, battle: bool
) -> list[CardDefinition]:
    entries = _decode_list(raw, key, collector)
    if entries is None:
        return []
    cards: list[CardDefinition] = []
    for index, raw_entry in enumerate(entries):
        location = f"card[{index}]"
        entry = _decode_object(raw_entry, location, collector)
        if entry is None:
            continue
        rarity = parse_int(entry.get("Rarity"))
        if rarity is None or rarity <= 0:
            collector.add(
                ErrorKind.RESOLUTION_FAILURE,
                location,
                f"invalid Rarity {entry.get('Rarity')!r}, must be a positive integer",
            )
            continue

        gain_item = None
        if "gainItem" in entry and entry["gainItem"] not in (None, ""):
            gain_item = parse_int(entry["gainItem"])
            if gain_item is None:
                collector.add(
                    ErrorKind.RESOLUTION_FAILURE,
                    location,
                    f"invalid gainItem {entry['gainItem']!r}",
                )

        image = entry.get("Image_Player_1") if battle else entry.get("image")
        stats = MappingProxyType(
            {str(k): str(v) for k, v in entry.items() if k not in {"Rarity", "gainItem"}}
            if battle
            else {}
        )
        cards.append(
            CardDefinition(
                index=index,
                rarity=rarity,
                gain_item=gain_item,
                image=image if isinstance(image, str) and image else None,
                stats=stats,
            )
        )
    return cards


def _parse_packs(raw: Any, collector: _Collector) -> list[PackType]:
    entries = _decode_list(raw, PACKS_KEY, collector)
    if entries is None:
        return []
    packs: list[PackType] = []
    for index, raw_entry in enumerate(entries):
        location = f"pack[{index}]"
        entry = _decode_object(raw_entry, location, collector)
        if entry is None:
            continue
        members = _decode_list(entry.get("cards"), f"{location}.cards", collector)
        if members is None:
            continue

        card_indices: list[int] = []
        for member in members:
            card_index = parse_int(member)
            if card_index is None or card_index < 0:
                collector.add(
                    ErrorKind.RESOLUTION_FAILURE,
                    f"{location}.cards",
                    f"invalid card index {member!r}, skipped",
                )
                continue
            card_indices.append(card_index)

        image = entry.get("boosterImage")
        if not isinstance(image, str) or not image.strip():
            collector.add(ErrorKind.INVALID_ARGUMENT, location, "boosterImage must be a non-empty string")
            image = ""
        packs.append(PackType(index=index, cards=tuple(card_indices), booster_image=image))
    return packs


def _parse_layout(raw: Any, collector: _Collector) -> SceneLayout:
    if raw is None:
        return SceneLayout()
    scene = _decode_object(raw, SCENE_KEY, collector)
    if scene is None:
        return SceneLayout()

    positions: list[tuple[int, int]] = []
    raw_positions = scene.get("card positions")
    if raw_positions is not None:
        for n, raw_position in enumerate(
            _decode_list(raw_positions, f"{SCENE_KEY}.card positions", collector) or []
        ):
            location = f"card position[{n}]"
            position = _decode_object(raw_position, location, collector)
            if position is None:
                continue
            x, y = parse_int(position.get("xPos")), parse_int(position.get("yPos"))
            if x is None or y is None:
                collector.add(ErrorKind.INVALID_ARGUMENT, location, "xPos and yPos must be integers")
                continue
            positions.append((x, y))

    return SceneLayout(
        back_card=str(scene.get("BackCard") or ""),
        back_image=str(scene.get("BackImage") or ""),
        card_positions=tuple(positions),
    )


def _format_errors(prefix: str, errors: Iterable[object]) -> str:
    formatted = "\n".join(f"- {err}" for err in errors)
    return f"{prefix}:\n{formatted}"
