"""Configuration models for boosterpack."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


_TRUTHY = {"1", "true", "yes"}


@dataclass(slots=True)
class DrawConfig:
    """Rules controlling how queued packs are opened."""

    min_cards_per_open: int = 2
    battle_integration: bool = False


@dataclass(slots=True)
class MessageConfig:
    """Texts shown in the in-game message window."""

    invalid_arguments: str = "Error: Invalid pack number or number of cards."
    invalid_pack_data: str = "Error: Invalid pack data."
    open_failed: str = "Error: Unable to open booster pack."


@dataclass(slots=True)
class CommandConfig:
    """Allows renaming the plugin commands."""

    plugin_name: str = "IgnisBoosterPack"
    add_pack: str = "Add Booster Pack"
    open_pack: str = "Open Booster Pack"


@dataclass(slots=True)
class BoosterPackConfig:
    """Top-level configuration container."""

    catalog_path: str | None = None
    draw: DrawConfig = field(default_factory=DrawConfig)
    messages: MessageConfig = field(default_factory=MessageConfig)
    commands: CommandConfig = field(default_factory=CommandConfig)
    rng_seed: int | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "BoosterPackConfig":
        """Create config from environment variables prefixed with BOOSTERPACK_."""
        prefix = "BOOSTERPACK_"

        draw_config = DrawConfig(
            min_cards_per_open=int(os.getenv(f"{prefix}MIN_CARDS_PER_OPEN", "2")),
            battle_integration=os.getenv(f"{prefix}BATTLE_INTEGRATION", "false").lower()
            in _TRUTHY,
        )

        defaults = MessageConfig()
        messages = MessageConfig(
            invalid_arguments=os.getenv(f"{prefix}MSG_INVALID_ARGUMENTS")
            or defaults.invalid_arguments,
            invalid_pack_data=os.getenv(f"{prefix}MSG_INVALID_PACK_DATA")
            or defaults.invalid_pack_data,
            open_failed=os.getenv(f"{prefix}MSG_OPEN_FAILED") or defaults.open_failed,
        )

        commands = CommandConfig(
            plugin_name=os.getenv(f"{prefix}PLUGIN_NAME", "IgnisBoosterPack") or "IgnisBoosterPack",
            add_pack=os.getenv(f"{prefix}CMD_ADD_PACK", "Add Booster Pack") or "Add Booster Pack",
            open_pack=os.getenv(f"{prefix}CMD_OPEN_PACK", "Open Booster Pack")
            or "Open Booster Pack",
        )

        return cls(
            catalog_path=os.getenv(f"{prefix}CATALOG_PATH") or None,
            draw=draw_config,
            messages=messages,
            commands=commands,
            rng_seed=(
                int(os.getenv(f"{prefix}RNG_SEED")) if os.getenv(f"{prefix}RNG_SEED") else None
            ),
            log_level=os.getenv(f"{prefix}LOG_LEVEL", "INFO").upper(),
        )
