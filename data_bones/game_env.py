import gymnasium as gym
from gymnasium.spaces import MultiDiscrete
import numpy as np
import pygame
import os

from data_bones.config import GameConfig
from data_bones.controls import ACTION_NVEC, Directives
from data_bones.render import Frame, SurfacePainter, build_draw_commands
from data_bones.simulation import step as step_world
from data_bones.world import World


# Set Pygame to run in a headless mode, which is required for Gymnasium environments
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class GameEnv(gym.Env):
    """
    Byte the robot dog hops between three platforms collecting data bones.
    Asteroids fly in from the right and robots patrol the platforms; touching
    either wipes the score. Some bones are hidden and only count while deep
    search is held. Think mode halves hazard speed for two seconds.
    """
    metadata = {"render_modes": ["rgb_array"]}

    # Must be a short, user-facing control string:
    user_guide = (
        "Controls: ← and → to run, Space to jump, hold D to deep-search for hidden bones, T for think mode."
    )

    # Must be a short, user-facing description of the game:
    game_description = (
        "Collect data bones on floating platforms while dodging asteroids and patrolling robots."
    )

    # Frames auto-advance for real-time physics and spawning.
    auto_advance = True

    def __init__(self, render_mode="rgb_array", config=None, max_steps=5000):
        super().__init__()
        self.config = config or GameConfig()
        self.render_mode = render_mode
        self.MAX_STEPS = max_steps

        # --- Gymnasium Spaces ---
        self.observation_space = gym.spaces.Box(
            low=0, high=255, shape=(self.config.height, self.config.width, 3), dtype=np.uint8
        )
        self.action_space = MultiDiscrete(ACTION_NVEC)

        # --- Pygame Setup ---
        pygame.init()
        self.screen = pygame.Surface((self.config.width, self.config.height))
        self.painter = SurfacePainter(self.screen, self.config)

        # --- State Variables (initialized in reset) ---
        self.world = None
        self.last_frame = None
        self.steps = None
        self.game_overs = None
        self.truncated = None

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)

        self.world = World.create(self.config, self.np_random)
        self.last_frame = Frame(build_draw_commands(self.world), self.world.score, self.world.message)
        self.steps = 0
        self.game_overs = 0
        self.truncated = False

        return self._get_observation(), self._get_info()

    def step(self, action):
        if self.truncated:
            return self._get_observation(), 0, False, True, self._get_info()

        prev_score = self.world.score
        frame = step_world(self.world, Directives.from_action(action))
        self.last_frame = frame
        self.steps += 1

        if frame.game_over:
            self.game_overs += 1
            reward = -1.0
        else:
            reward = float(frame.score - prev_score)

        # The world resets itself on a hit, so episodes only end by time limit.
        terminated = False
        self.truncated = self.steps >= self.MAX_STEPS

        return self._get_observation(), reward, terminated, self.truncated, self._get_info()

    def render(self):
        return self._get_observation()

    def _get_observation(self):
        self.painter.show_score(self.last_frame.score)
        self.painter.show_message(self.last_frame.message)
        self.painter.paint(self.last_frame.commands)

        arr = pygame.surfarray.array3d(self.screen)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)

    def _get_info(self):
        player = self.world.player
        return {
            "score": self.world.score,
            "steps": self.steps,
            "game_overs": self.game_overs,
            "reveal": player.reveal,
            "slow_time_left": player.slow_time_left if player.slow_time else 0,
            "bones": len(self.world.bones),
            "asteroids": len(self.world.asteroids),
            "robots": len(self.world.robots),
            "message": self.world.message,
        }

    def close(self):
        pygame.quit()

    def validate_implementation(self):
        '''
        Call this after construction to verify the environment contract:
        '''
        # Test action space
        assert self.action_space.shape == (5,)
        assert self.action_space.nvec.tolist() == ACTION_NVEC

        # Test reset
        obs, info = self.reset()
        assert obs.shape == (self.config.height, self.config.width, 3)
        assert obs.dtype == np.uint8
        assert isinstance(info, dict)

        # Test step
        test_action = self.action_space.sample()
        obs, reward, term, trunc, info = self.step(test_action)
        assert obs.shape == (self.config.height, self.config.width, 3)
        assert isinstance(reward, (int, float))
        assert isinstance(term, bool)
        assert trunc == False
        assert isinstance(info, dict)

        print("✓ Implementation validated successfully")
