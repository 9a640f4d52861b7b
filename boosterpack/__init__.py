"""Booster pack collectible-card mechanics: public API."""

from .app import BoosterApp
from .config import BoosterPackConfig
from .registry import CommandRegistry, PluginCommand

__all__ = [
    "BoosterApp",
    "BoosterPackConfig",
    "CommandRegistry",
    "PluginCommand",
]
