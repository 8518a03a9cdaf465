"""Shared fixtures for assignment tests."""

import pytest

from df_assignments.config import GameConfig


@pytest.fixture
def config() -> GameConfig:
    """Config from the home-claim example: radius 100, scale 2, x mirrored."""
    return GameConfig(world_radius=100, scale=2, mirror_x=True, mirror_y=False)


@pytest.fixture
def plain_config() -> GameConfig:
    """Config from the move examples: radius 100, scale 1, no mirroring."""
    return GameConfig(world_radius=100, scale=1, mirror_x=False, mirror_y=False)


@pytest.fixture
def world_constants() -> dict:
    """World constants document as served by the backend."""
    return {
        "constants": {
            "MiMCSeedWord": "darkfrontier",
            "PerlinSeedWord": "darkfrontier-perlin",
            "XMirror": 0,
            "YMirror": 1,
            "Scale": 512,
            "RadiusMax": 8000,
            "InstanceName": "test",
            "TickRate": 1,
        }
    }
