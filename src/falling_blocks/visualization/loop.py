from __future__ import annotations

from typing import Callable, Optional

import pygame

from falling_blocks.game import DropResult, TetrisGame

from .renderer import Renderer
from .surface import DrawingSurface


class FrameLoop:
    """Per-frame driver: gravity step, then repaint, then wait for the next frame.

    With ``gravity_frames=1`` the piece falls one row on every displayed
    frame. Larger values only advance gravity every n-th frame while still
    repainting each frame.
    """

    def __init__(
        self,
        game: TetrisGame,
        renderer: Renderer,
        surface: DrawingSurface,
        fps: int = 60,
        gravity_frames: int = 1,
        clock: Optional[pygame.time.Clock] = None,
        present: Optional[Callable[[], None]] = None,
    ) -> None:
        if fps < 1:
            raise ValueError(f"fps must be >= 1, got {fps}")
        if gravity_frames < 1:
            raise ValueError(f"gravity_frames must be >= 1, got {gravity_frames}")
        self.game = game
        self.renderer = renderer
        self.surface = surface
        self.fps = fps
        self.gravity_frames = gravity_frames
        self.clock = clock
        self.present = present or pygame.display.flip
        self.frame = 0

    def tick(self) -> Optional[DropResult]:
        self.frame += 1
        result = None
        if self.frame % self.gravity_frames == 0:
            result = self.game.move_down()
        self.renderer.draw(self.surface, self.game)
        return result

    def run(self, pump_events: Callable[[], bool], max_frames: Optional[int] = None) -> None:
        """Run until ``pump_events`` returns False (or ``max_frames`` ticks)."""
        if self.clock is None:
            self.clock = pygame.time.Clock()
        frames = 0
        while pump_events():
            self.tick()
            self.present()
            self.clock.tick(self.fps)
            frames += 1
            if max_frames is not None and frames >= max_frames:
                break
