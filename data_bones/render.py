from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pygame
import pygame.gfxdraw

from data_bones.world import World


@dataclass(frozen=True)
class DrawCommand:
    kind: str  # "clear" or "rect"
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    color: tuple = (0, 0, 0)
    alpha: float = 1.0


@dataclass(frozen=True)
class Frame:
    commands: tuple[DrawCommand, ...]
    score: int
    message: Optional[str]
    game_over: bool = False


def _rect(box, color, alpha=1.0) -> DrawCommand:
    return DrawCommand("rect", box.x, box.y, box.width, box.height, tuple(color), alpha)


def build_draw_commands(world: World) -> tuple[DrawCommand, ...]:
    cfg = world.config
    commands = [DrawCommand("clear", 0, 0, cfg.width, cfg.height, cfg.color_background)]

    for plat in world.platforms:
        commands.append(_rect(plat, cfg.color_platform))

    player_color = cfg.color_player_slow if world.player.slow_time else cfg.color_player
    commands.append(_rect(world.player, player_color))

    for bone in world.active_bones():
        if bone.hidden and not world.player.reveal:
            commands.append(_rect(bone, cfg.color_bone_hidden, cfg.bone_hidden_alpha))
        else:
            commands.append(_rect(bone, cfg.color_bone))

    for asteroid in world.asteroids:
        commands.append(_rect(asteroid, cfg.color_asteroid))
    for robot in world.robots:
        commands.append(_rect(robot, cfg.color_robot))
    return tuple(commands)


class SurfacePainter:
    """Applies draw commands and score/message text to a pygame surface."""

    def __init__(self, surface: pygame.Surface, config) -> None:
        self.surface = surface
        self.config = config
        pygame.font.init()
        self.font_ui = pygame.font.SysFont("monospace", 20, bold=True)
        self.font_message = pygame.font.SysFont("monospace", 28, bold=True)
        self.score = 0
        self.message: Optional[str] = None

    def paint(self, commands) -> None:
        for cmd in commands:
            if cmd.kind == "clear":
                self.surface.fill(cmd.color)
                continue
            rect = pygame.Rect(int(cmd.x), int(cmd.y), int(cmd.width), int(cmd.height))
            if cmd.alpha >= 1.0:
                pygame.draw.rect(self.surface, cmd.color, rect)
            else:
                pygame.gfxdraw.box(self.surface, rect, (*cmd.color[:3], int(round(cmd.alpha * 255))))
        self._render_ui()

    # TextSink
    def show_score(self, score: int) -> None:
        self.score = score

    def show_message(self, message: Optional[str]) -> None:
        self.message = message

    def _render_ui(self) -> None:
        self._draw_text(self.config.score_label.format(score=self.score), (15, 10), self.font_ui)
        if self.message:
            self._draw_text(self.message, self.surface.get_rect().center, self.font_message, center=True)

    def _draw_text(self, text, pos, font, center=False):
        text_surface = font.render(text, True, self.config.color_text)
        shadow_surface = font.render(text, True, self.config.color_text_shadow)
        text_rect = text_surface.get_rect()
        if center:
            text_rect.center = pos
        else:
            text_rect.topleft = pos
        self.surface.blit(shadow_surface, (text_rect.left + 2, text_rect.top + 2))
        self.surface.blit(text_surface, text_rect)
