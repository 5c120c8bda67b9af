from __future__ import annotations

import argparse
import logging

import numpy as np
import pygame

from data_bones.config import GameConfig
from data_bones.loop import FrameLoop, PygameKeys
from data_bones.render import SurfacePainter
from data_bones.world import World


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="data_bones", description="Collect data bones, dodge the hazards.")
    parser.add_argument("--fps", type=int, default=GameConfig.fps, help="Frames per second.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for entity spawning.")
    parser.add_argument("--frames", type=int, default=None, help="Stop after this many frames.")
    parser.add_argument("--verbose", action="store_true", help="Log spawns and mode changes.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = GameConfig(fps=args.fps)
    world = World.create(config, np.random.default_rng(args.seed))

    pygame.init()
    screen = pygame.display.set_mode((config.width, config.height))
    pygame.display.set_caption("Data Bones")
    painter = SurfacePainter(screen, config)
    loop = FrameLoop(world, PygameKeys(), painter=painter, text=painter)

    def should_stop() -> bool:
        pygame.display.flip()
        return any(event.type == pygame.QUIT for event in pygame.event.get())

    try:
        loop.run(pygame.time.Clock(), fps=args.fps, max_frames=args.frames, should_stop=should_stop)
    finally:
        pygame.quit()

    print(f"Stopped after {loop.frames} frames. Best score: {loop.best_score}, game overs: {loop.game_overs}")


if __name__ == "__main__":
    main()
