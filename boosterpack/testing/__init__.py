"""Testing utilities for boosterpack."""

from .factory import CardFactory, PackFactory, build_catalog, encode_plugin_parameters
from .fixtures import app_fixture, memory_app
from .test_client import TestClient

__all__ = [
    "CardFactory",
    "PackFactory",
    "build_catalog",
    "encode_plugin_parameters",
    "app_fixture",
    "memory_app",
    "TestClient",
]
