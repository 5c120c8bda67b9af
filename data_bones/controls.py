from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Iterable, Mapping, Sequence

import pygame

# Action vector layout, one binary slot per directive.
ACTION_NVEC = [2, 2, 2, 2, 2]
LEFT, RIGHT, JUMP, REVEAL, SLOW_TIME = range(5)

# Both pygame key codes and browser-style key names are understood.
DEFAULT_KEY_MAP: Mapping[Hashable, int] = {
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_SPACE: JUMP,
    pygame.K_UP: JUMP,
    pygame.K_d: REVEAL,
    pygame.K_t: SLOW_TIME,
    "ArrowLeft": LEFT,
    "ArrowRight": RIGHT,
    "ArrowUp": JUMP,
    " ": JUMP,
    "Space": JUMP,
    "d": REVEAL,
    "t": SLOW_TIME,
}


@dataclass(frozen=True)
class Directives:
    move_left: bool = False
    move_right: bool = False
    jump: bool = False
    reveal: bool = False
    slow_time: bool = False

    @property
    def any_key(self) -> bool:
        return self.move_left or self.move_right or self.jump or self.reveal or self.slow_time

    @property
    def horizontal(self) -> int:
        """-1, 0 or +1. Holding both directions cancels out."""
        return int(self.move_right) - int(self.move_left)

    def to_action(self) -> list[int]:
        return [int(self.move_left), int(self.move_right), int(self.jump), int(self.reveal), int(self.slow_time)]

    @classmethod
    def from_action(cls, action: Sequence[int]) -> "Directives":
        if len(action) != len(ACTION_NVEC):
            raise ValueError(f"expected an action of length {len(ACTION_NVEC)}, got {len(action)}")
        return cls(*(bool(a) for a in action))

    @classmethod
    def from_keys(cls, held: Iterable[Hashable], key_map: Mapping[Hashable, int] = DEFAULT_KEY_MAP) -> "Directives":
        slots = [False] * len(ACTION_NVEC)
        for key in held:
            slot = key_map.get(key)
            if slot is not None:
                slots[slot] = True
        return cls(*slots)

    @classmethod
    def from_pressed(cls, pressed, key_map: Mapping[Hashable, int] = DEFAULT_KEY_MAP) -> "Directives":
        """Read a `pygame.key.get_pressed()` result."""
        held = [key for key in key_map if isinstance(key, int) and pressed[key]]
        return cls.from_keys(held, key_map)
