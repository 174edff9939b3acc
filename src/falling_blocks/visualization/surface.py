from __future__ import annotations

from typing import Protocol, Tuple, Union

import pygame


Color = Union[str, Tuple[int, int, int]]


class DrawingSurface(Protocol):
    """Minimal 2D drawing capability the renderer paints through."""

    def clear_region(self, x: int, y: int, w: int, h: int) -> None: ...

    def fill_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None: ...

    def stroke_rect(self, x: int, y: int, w: int, h: int) -> None: ...


class PygameSurface:
    """Adapts a ``pygame.Surface`` to the ``DrawingSurface`` calls."""

    def __init__(
        self,
        surface: pygame.Surface,
        background: Color = (20, 20, 26),
        outline: Color = (0, 0, 0),
    ) -> None:
        self.surface = surface
        self.background = pygame.Color(background)
        self.outline = pygame.Color(outline)

    def clear_region(self, x: int, y: int, w: int, h: int) -> None:
        self.surface.fill(self.background, pygame.Rect(x, y, w, h))

    def fill_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        pygame.draw.rect(self.surface, pygame.Color(color), pygame.Rect(x, y, w, h))

    def stroke_rect(self, x: int, y: int, w: int, h: int) -> None:
        pygame.draw.rect(self.surface, self.outline, pygame.Rect(x, y, w, h), 1)
