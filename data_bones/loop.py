from __future__ import annotations

import logging
from typing import Callable, Hashable, Iterable, Optional, Protocol, Sequence

import pygame

from data_bones.controls import DEFAULT_KEY_MAP, Directives
from data_bones.render import DrawCommand, Frame
from data_bones.simulation import step
from data_bones.world import World

logger = logging.getLogger(__name__)


class KeySource(Protocol):
    def held_keys(self) -> Iterable[Hashable]: ...


class Painter(Protocol):
    def paint(self, commands: Sequence[DrawCommand]) -> None: ...


class TextSink(Protocol):
    def show_score(self, score: int) -> None: ...

    def show_message(self, message: Optional[str]) -> None: ...


class Scheduler(Protocol):
    def tick(self, fps: int) -> object: ...


class PygameKeys:
    """Held keys as reported by pygame, limited to keys the game knows."""

    def __init__(self, key_map=DEFAULT_KEY_MAP) -> None:
        self.codes = [key for key in key_map if isinstance(key, int)]

    def held_keys(self) -> list[int]:
        pressed = pygame.key.get_pressed()
        return [code for code in self.codes if pressed[code]]


class FrameLoop:
    """
    Drives a World one frame per `tick()`.

    The loop owns no timing of its own: `run()` hands pacing to the scheduler
    (a `pygame.time.Clock` in the windowed game) and checks `should_stop`
    between frames.
    """

    def __init__(
        self,
        world: World,
        keys: KeySource,
        painter: Optional[Painter] = None,
        text: Optional[TextSink] = None,
        key_map=DEFAULT_KEY_MAP,
    ) -> None:
        self.world = world
        self.keys = keys
        self.painter = painter
        self.text = text
        self.key_map = key_map
        self.frames = 0
        self.game_overs = 0
        self.best_score = 0

    def tick(self) -> Frame:
        directives = Directives.from_keys(self.keys.held_keys(), self.key_map)
        frame = step(self.world, directives)
        self.frames += 1
        self.best_score = max(self.best_score, frame.score)
        if frame.game_over:
            self.game_overs += 1

        if self.text is not None:
            self.text.show_score(frame.score)
            self.text.show_message(frame.message)
        if self.painter is not None:
            self.painter.paint(frame.commands)
        return frame

    def run(
        self,
        scheduler: Scheduler,
        fps: Optional[int] = None,
        max_frames: Optional[int] = None,
        should_stop: Callable[[], bool] = lambda: False,
    ) -> int:
        fps = fps or self.world.config.fps
        ran = 0
        while not should_stop():
            if max_frames is not None and ran >= max_frames:
                break
            self.tick()
            ran += 1
            scheduler.tick(fps)
        logger.info("loop stopped after %d frames", ran)
        return ran
