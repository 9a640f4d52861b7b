"""Plugin command handlers wired onto a BoosterApp."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping

from .domain.inventory import OwnedPack
from .domain.results import ErrorKind, Result
from .domain.sequencer import OpeningSequencer
from .loaders.plugin_loader import parse_int
from .registry import CommandRegistry, PluginCommand

if TYPE_CHECKING:
    from .app import BoosterApp

logger = logging.getLogger(__name__)


def build_commands(app: "BoosterApp") -> CommandRegistry:
    names = app.config.commands
    registry = CommandRegistry(names.plugin_name)

    def handle_add_pack(args: Mapping[str, str]) -> Result[OwnedPack]:
        pack_type = parse_int(args.get("boosterNum"))
        card_count = parse_int(args.get("cardsOpened"))
        if pack_type is None or card_count is None:
            reason = (
                f"boosterNum={args.get('boosterNum')!r} cardsOpened={args.get('cardsOpened')!r}"
            )
            logger.warning("Rejected '%s': %s", names.add_pack, reason)
            app.messages.add(app.config.messages.invalid_arguments)
            return Result.failure(ErrorKind.INVALID_ARGUMENT, reason)
        return app.add_pack(pack_type, card_count)

    def handle_open_pack(args: Mapping[str, str]) -> Result[OpeningSequencer]:
        app.inventory.set_open_mode(args.get("single") == "true")
        if not app.inventory.has_packs():
            logger.info("'%s' ignored: no packs queued.", names.open_pack)
            return Result.failure(ErrorKind.EMPTY_QUEUE, "No packs available to open")
        sequencer = app.new_sequencer()
        started = sequencer.start()
        if not started.ok:
            return Result.failure(started.error, started.reason)
        return Result.success(sequencer)

    registry.register(
        PluginCommand(
            name=names.add_pack,
            handler=handle_add_pack,
            description="Adds a booster pack to the player's unopened packs.",
            args=("boosterNum", "cardsOpened"),
        )
    )
    registry.register(
        PluginCommand(
            name=names.open_pack,
            handler=handle_open_pack,
            description="Opens a single booster pack or all queued packs.",
            args=("single",),
        )
    )
    return registry


def run_command(
    registry: CommandRegistry, name: str, args: Mapping[str, str] | None = None
) -> Result[Any]:
    """Dispatch a command by name; failures are returned, never raised."""
    command = registry.find(name)
    if command is None:
        logger.warning("Unknown command '%s' for plugin %s.", name, registry.plugin_name)
        return Result.failure(ErrorKind.INVALID_ARGUMENT, f"Unknown command {name}")
    try:
        return command.handler(dict(args or {}))
    except Exception as exc:
        logger.exception("Command '%s' failed.", name)
        return Result.failure(ErrorKind.UNEXPECTED, str(exc))
