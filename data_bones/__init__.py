from data_bones.config import GameConfig
from data_bones.controls import Directives
from data_bones.render import DrawCommand, Frame
from data_bones.simulation import step
from data_bones.world import Asteroid, Bone, Platform, Player, Robot, World

__all__ = [
    "Asteroid",
    "Bone",
    "Directives",
    "DrawCommand",
    "Frame",
    "GameConfig",
    "Platform",
    "Player",
    "Robot",
    "World",
    "step",
]
