from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    # World
    width: int = 800
    height: int = 600
    fps: int = 60

    # Player physics
    player_start_x: float = 50.0
    player_start_offset: float = 50.0  # start y is height - offset
    player_width: float = 40.0
    player_height: float = 40.0
    player_speed: float = 5.0
    gravity: float = 0.5
    jump_power: float = -12.0

    # Modes
    slow_time_duration: int = 120  # 2 seconds at 60 FPS
    slow_time_factor: float = 0.5

    # Bones
    bone_size: float = 20.0
    bone_hidden_chance: float = 0.3

    # Asteroids
    asteroid_size: float = 30.0
    asteroid_min_speed: float = 3.0
    asteroid_speed_range: float = 2.0
    asteroid_spawn_margin: float = 100.0  # keeps spawns out of the bottom band

    # Robots
    robot_size: float = 40.0
    robot_speed: float = -2.0

    # Spawn cadence, in frames
    bone_interval: int = 60
    asteroid_interval: int = 120
    robot_interval: int = 180

    # Colors
    color_background: tuple = (10, 10, 30)
    color_platform: tuple = (75, 0, 130)
    color_player: tuple = (0, 204, 255)
    color_player_slow: tuple = (0, 255, 204)
    color_bone: tuple = (255, 215, 0)
    color_bone_hidden: tuple = (255, 255, 255)
    bone_hidden_alpha: float = 0.2
    color_asteroid: tuple = (128, 128, 128)
    color_robot: tuple = (255, 69, 0)
    color_text: tuple = (255, 255, 255)
    color_text_shadow: tuple = (0, 0, 0)

    # Text
    score_label: str = "Data Bones: {score}"
    game_over_message: str = "Game Over! Press any key to restart."

    @property
    def player_start(self) -> tuple[float, float]:
        return self.player_start_x, self.height - self.player_start_offset

    def default_platforms(self) -> list[tuple[float, float, float, float]]:
        h = self.height
        return [
            (0, h - 20, 200, 20),
            (300, h - 100, 200, 20),
            (600, h - 200, 200, 20),
        ]
