from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from data_bones.config import GameConfig

logger = logging.getLogger(__name__)


@dataclass
class Box:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def collides(self, other) -> bool:
        # Strict overlap: touching edges do not collide.
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )


@dataclass(frozen=True)
class Platform:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y


@dataclass
class Player(Box):
    vy: float = 0.0
    grounded: bool = False
    reveal: bool = False
    slow_time: bool = False
    slow_time_left: int = 0


@dataclass
class Bone(Box):
    hidden: bool = False
    parked: bool = False  # set aside for the rest of a reveal press


@dataclass
class Asteroid(Box):
    speed: float = 0.0


@dataclass
class Robot(Box):
    speed: float = 0.0


@dataclass
class World:
    """The whole mutable game state. One instance per running game."""

    config: GameConfig
    player: Player
    platforms: tuple[Platform, ...]
    rng: np.random.Generator
    bones: list[Bone] = field(default_factory=list)
    asteroids: list[Asteroid] = field(default_factory=list)
    robots: list[Robot] = field(default_factory=list)
    score: int = 0
    frame: int = 0
    message: Optional[str] = None
    key_held: bool = False  # any key held last frame, for "press any key"

    @classmethod
    def create(cls, config: Optional[GameConfig] = None, rng: Optional[np.random.Generator] = None,
               populate: bool = True) -> "World":
        config = config or GameConfig()
        if rng is None:
            rng = np.random.default_rng()
        start_x, start_y = config.player_start
        world = cls(
            config=config,
            player=Player(start_x, start_y, config.player_width, config.player_height),
            platforms=tuple(Platform(*p) for p in config.default_platforms()),
            rng=rng,
        )
        if populate:
            # One of each before the first frame.
            world.spawn_bone()
            world.spawn_asteroid()
            world.spawn_robot()
        return world

    # --- Reveal mode ---

    def park_hidden_bones(self) -> int:
        """Set aside the hidden bones present when reveal starts."""
        parked = 0
        for bone in self.bones:
            if bone.hidden:
                bone.parked = True
                parked += 1
        return parked

    def restore_parked_bones(self) -> None:
        """Merge parked bones back in after the active ones."""
        parked = self.parked_bones()
        if not parked:
            return
        self.bones[:] = self.active_bones() + parked
        for bone in parked:
            bone.parked = False

    def is_collectable(self, bone: Bone) -> bool:
        # Hidden bones only count while revealed, and parked ones not at all.
        return not bone.parked and (not bone.hidden or self.player.reveal)

    def active_bones(self) -> list[Bone]:
        return [b for b in self.bones if not b.parked]

    def parked_bones(self) -> list[Bone]:
        return [b for b in self.bones if b.parked]

    @property
    def slow_factor(self) -> float:
        return self.config.slow_time_factor if self.player.slow_time else 1.0

    # --- Spawning ---

    def _random_platform(self) -> Platform:
        return self.platforms[int(self.rng.integers(len(self.platforms)))]

    def spawn_bone(self) -> Bone:
        cfg = self.config
        plat = self._random_platform()
        bone = Bone(
            plat.x + self.rng.random() * (plat.width - cfg.bone_size),
            plat.top - cfg.bone_size,
            cfg.bone_size,
            cfg.bone_size,
            hidden=bool(self.rng.random() < cfg.bone_hidden_chance),
        )
        self.bones.append(bone)
        logger.debug("spawned bone at (%.1f, %.1f) hidden=%s", bone.x, bone.y, bone.hidden)
        return bone

    def spawn_asteroid(self) -> Asteroid:
        cfg = self.config
        asteroid = Asteroid(
            float(cfg.width),
            self.rng.random() * (cfg.height - cfg.asteroid_spawn_margin),
            cfg.asteroid_size,
            cfg.asteroid_size,
            speed=cfg.asteroid_min_speed + self.rng.random() * cfg.asteroid_speed_range,
        )
        self.asteroids.append(asteroid)
        logger.debug("spawned asteroid at y=%.1f speed=%.2f", asteroid.y, asteroid.speed)
        return asteroid

    def spawn_robot(self) -> Robot:
        cfg = self.config
        plat = self._random_platform()
        robot = Robot(
            plat.right - cfg.robot_size,
            plat.top - cfg.robot_size,
            cfg.robot_size,
            cfg.robot_size,
            speed=cfg.robot_speed,
        )
        self.robots.append(robot)
        logger.debug("spawned robot on platform at x=%.1f", plat.x)
        return robot

    # --- Game over ---

    def reset_after_collision(self) -> None:
        """Hazard hit: wipe score and entities, send the player home."""
        logger.info("game over at frame %d with score %d", self.frame, self.score)
        self.score = 0
        self.player.x, self.player.y = self.config.player_start
        self.player.vy = 0.0
        self.asteroids.clear()
        self.robots.clear()
        self.bones.clear()
        self.message = self.config.game_over_message

    def platform_under(self, box: Box) -> Optional[Platform]:
        # Exact equality; robots never move vertically.
        for plat in self.platforms:
            if box.bottom == plat.top:
                return plat
        return None
