from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import numpy as np
import pytest

from data_bones.world import World

# Gap between platform 0 (x 0..200) and platform 1 (x 300..500).
FLOOR_X = 250.0


@pytest.fixture
def world() -> World:
    """A world with platforms only, no spawned entities."""
    return World.create(rng=np.random.default_rng(0), populate=False)


def _stand_on_floor(world: World, x: float = FLOOR_X) -> None:
    player = world.player
    player.x = x
    player.y = world.config.height - player.height
    player.vy = 0.0
    player.grounded = True


@pytest.fixture
def stand_on_floor():
    """Puts the player at rest on the floor, in the gap between platforms."""
    return _stand_on_floor
