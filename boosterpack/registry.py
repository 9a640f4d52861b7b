"""Runtime registry for plugin commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping

from .domain.results import Result

CommandHandler = Callable[[Mapping[str, str]], Result[Any]]


@dataclass(slots=True)
class PluginCommand:
    name: str
    handler: CommandHandler
    description: str = ""
    args: tuple[str, ...] = ()


class CommandRegistry:
    """Register and look up plugin commands of one plugin."""

    def __init__(self, plugin_name: str) -> None:
        self.plugin_name = plugin_name
        self._commands: Dict[str, PluginCommand] = {}

    def register(self, command: PluginCommand) -> None:
        key = _key(command.name)
        if not key:
            raise ValueError("Command name must not be empty")
        if key in self._commands:
            raise ValueError(f"Command '{command.name}' already registered")
        self._commands[key] = command

    def get(self, name: str) -> PluginCommand:
        try:
            return self._commands[_key(name)]
        except KeyError as exc:
            raise KeyError(f"Command {name} not found") from exc

    def find(self, name: str) -> PluginCommand | None:
        return self._commands.get(_key(name))

    def all(self) -> list[PluginCommand]:
        return list(self._commands.values())


def _key(name: str) -> str:
    return " ".join(name.split()).lower()


__all__ = [
    "CommandHandler",
    "CommandRegistry",
    "PluginCommand",
]
