"""Domain models and services."""

from .cards import BoosterCatalog, CardDefinition, PackType, SceneLayout, WeightedPool, build_pool
from .draw import OpenedPack, PackDrawEngine
from .events import EventBus
from .exceptions import (
    BoosterPackError,
    EmptyQueue,
    InvalidArgument,
    InvalidPackData,
    ResolutionFailure,
)
from .inventory import BoosterInventory, OwnedPack
from .results import ErrorKind, LoadIssue, Result
from .rewards import BattleCollectionStrategy, ItemGrantStrategy, RewardStrategy
from .sequencer import OpeningSequencer, Phase

__all__ = [
    "BoosterCatalog",
    "CardDefinition",
    "PackType",
    "SceneLayout",
    "WeightedPool",
    "build_pool",
    "OpenedPack",
    "PackDrawEngine",
    "EventBus",
    "BoosterPackError",
    "EmptyQueue",
    "InvalidArgument",
    "InvalidPackData",
    "ResolutionFailure",
    "BoosterInventory",
    "OwnedPack",
    "ErrorKind",
    "LoadIssue",
    "Result",
    "BattleCollectionStrategy",
    "ItemGrantStrategy",
    "RewardStrategy",
    "OpeningSequencer",
    "Phase",
]
