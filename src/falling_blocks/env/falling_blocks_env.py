from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import PALETTE, GameConfig, Intent, TetrisGame
from falling_blocks.game.shapes import color_for_id


class FallingBlocksEnv(gym.Env):
    """
    Headless falling-block environment over ``TetrisGame``.

    Actions (5 total), matching ``Intent``:
      0: Move Left
      1: Move Right
      2: Soft Drop
      3: Rotate
      4: No-op

    Each step applies the action, then one gravity tick, the same cadence as
    the interactive loop. The reward is the score gained during the step. An
    episode terminates when a game over happens; the engine has already reset
    itself by then, so the next ``reset()`` just reseeds.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 max_episode_steps: int = 10000) -> None:
        super().__init__()
        self.game = TetrisGame(config)
        self.render_mode = render_mode
        self.max_episode_steps = int(max_episode_steps)

        rows, cols = self.game.config.rows, self.game.config.cols
        n_colors = len(PALETTE)
        # Settled cells hold positive color ids, the falling piece negative ones
        self.observation_space = spaces.Box(low=-n_colors, high=n_colors, shape=(rows, cols), dtype=np.int8)
        self.action_space = spaces.Discrete(len(Intent))

        self._steps = 0

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "lines_cleared_total": self.game.lines_cleared_total,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        self.game.reset(seed)
        self._steps = 0
        return self.game.get_state(), self._get_info()

    def step(self, action: int):
        intent = Intent(int(action))
        score_before = self.game.score

        lines = 0
        final_score: Optional[int] = None
        for advance in (lambda: self.game.apply(intent), self.game.move_down):
            result = advance()
            if result is None:
                continue
            lines += result.lines_cleared
            if result.game_over:
                # The engine has already reset; keep the score it finished with
                final_score = result.final_score
                break

        terminated = final_score is not None
        score_after = final_score if final_score is not None else self.game.score
        self._steps += 1
        truncated = not terminated and self._steps >= self.max_episode_steps
        info = self._get_info()
        info["lines_cleared"] = lines
        return self.game.get_state(), float(score_after - score_before), terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            state = self.game.get_state()
            cell = 12
            h, w = state.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    v = abs(int(state[y, x]))
                    color = _hex_to_rgb(color_for_id(v)) if v else (30, 30, 36)
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
            return img
        return None

    def close(self) -> None:
        pass


def _hex_to_rgb(value: str) -> Tuple[int, int, int]:
    value = value.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)
