from __future__ import annotations

import argparse
import logging
from typing import Callable, Dict, Optional, Sequence

import pygame

from falling_blocks.game import GameConfig, Intent, TetrisGame
from .loop import FrameLoop
from .renderer import BLOCK_SIZE, Renderer
from .surface import PygameSurface


logger = logging.getLogger(__name__)

KEY_TO_INTENT: Dict[int, Intent] = {
    pygame.K_LEFT: Intent.LEFT,
    pygame.K_RIGHT: Intent.RIGHT,
    pygame.K_DOWN: Intent.SOFT_DROP,
    pygame.K_UP: Intent.ROTATE,
}

PANEL_WIDTH = 160


def intent_for_key(key: int) -> Optional[Intent]:
    return KEY_TO_INTENT.get(key)


class ScorePanel:
    """Side panel text; re-rendered only when the score changes."""

    def __init__(self, font: pygame.font.Font, rect: pygame.Rect) -> None:
        self.font = font
        self.rect = rect
        self.score = 0
        self._text: Optional[pygame.Surface] = None

    def update(self, score: int) -> None:
        self.score = score
        self._text = None

    def draw(self, screen: pygame.Surface) -> None:
        if self._text is None:
            self._text = self.font.render(f"Score: {self.score}", True, (230, 230, 230))
        pygame.draw.rect(screen, (15, 15, 20), self.rect)
        screen.blit(self._text, (self.rect.x + 12, self.rect.y + 12))


def show_game_over(screen: pygame.Surface, font: pygame.font.Font, score: int,
                   redraw: Optional[Callable[[], None]] = None) -> None:
    """Block until the player acknowledges the game-over message.

    ``redraw`` repaints the final board first, since the lock that ended the
    game happens before the frame is drawn.
    """
    if redraw is not None:
        redraw()
    text = font.render(f"Game Over! Your score: {score}", True, (255, 100, 100))
    hint = font.render("Press any key", True, (230, 230, 230))
    center = screen.get_rect().center
    screen.blit(text, text.get_rect(center=center))
    screen.blit(hint, hint.get_rect(center=(center[0], center[1] + 30)))
    pygame.display.flip()
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            raise SystemExit(0)
        if event.type == pygame.KEYDOWN:
            return


def pump_events(game: TetrisGame) -> bool:
    """Deliver pending key presses to ``game``; False once the player quits."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            intent = intent_for_key(event.key)
            if intent is not None:
                game.apply(intent)
    return True


def run(config: Optional[GameConfig] = None, fps: int = 60, gravity_frames: int = 1,
        block_size: int = BLOCK_SIZE) -> None:
    pygame.init()
    try:
        config = config or GameConfig()
        renderer = Renderer(block_size=block_size)
        canvas_w, canvas_h = renderer.canvas_size(config.rows, config.cols)
        screen = pygame.display.set_mode((canvas_w + PANEL_WIDTH, canvas_h))
        pygame.display.set_caption("Falling Blocks")
        font = pygame.font.SysFont(None, 28)

        canvas = PygameSurface(screen.subsurface(pygame.Rect(0, 0, canvas_w, canvas_h)))
        panel = ScorePanel(font, pygame.Rect(canvas_w, 0, PANEL_WIDTH, canvas_h))

        game = TetrisGame(config, on_score_change=panel.update)
        game.on_game_over = lambda score: show_game_over(
            screen, font, score, redraw=lambda: renderer.draw(canvas, game))

        def present() -> None:
            panel.draw(screen)
            pygame.display.flip()

        loop = FrameLoop(game, renderer, canvas, fps=fps, gravity_frames=gravity_frames, present=present)
        loop.run(lambda: pump_events(game))
        logger.info("session closed: score=%d games=%d", game.score, game.games_played)
    finally:
        pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Falling Blocks")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--fps", type=int, default=60)
    p.add_argument("--gravity-frames", type=int, default=1,
                   help="Advance gravity once every N frames (1 = every frame)")
    p.add_argument("--block-size", type=int, default=BLOCK_SIZE)
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")
    run(GameConfig(random_seed=args.seed), fps=args.fps,
        gravity_frames=args.gravity_frames, block_size=args.block_size)


if __name__ == "__main__":  # pragma: no cover
    main()
