"""Pytest fixtures for boosterpack."""

from __future__ import annotations

import pytest

from ..app import BoosterApp
from ..config import BoosterPackConfig
from .factory import build_catalog


@pytest.fixture()
def memory_app() -> BoosterApp:
    return app_fixture()


def app_fixture(*, rng_seed: int | None = 1, **kwargs) -> BoosterApp:
    """Helper for ad-hoc tests where pytest is not available.

    Pack 0 holds cards 5 (rarity 1) and 7 (rarity 3); pack 1 holds cards 1-3.
    """
    config = BoosterPackConfig(rng_seed=rng_seed, **kwargs)
    catalog = build_catalog(
        {1: 1, 2: 2, 3: 1, 5: 1, 7: 3},
        {0: (5, 7), 1: (1, 2, 3)},
    )
    return BoosterApp(config, catalog=catalog)
