"""
Canvas backed by a pygame Surface.
This is a THIN ADAPTER - no game logic here.
"""
from typing import Dict

import pygame

from roots_vs_robots.gameplay.ports import Color


class PygameCanvas:
    """Implements the Canvas protocol with pygame.draw and pygame.font."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self._fonts: Dict[int, pygame.font.Font] = {}

    def clear(self, color: Color) -> None:
        self.surface.fill(color)

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        pygame.draw.rect(self.surface, color, pygame.Rect(int(x), int(y), int(width), int(height)))

    def fill_circle(self, x: float, y: float, radius: float, color: Color) -> None:
        pygame.draw.circle(self.surface, color, (int(x), int(y)), int(radius))

    def draw_text(self, text: str, x: float, y: float, size: int, color: Color) -> None:
        image = self._font(size).render(text, True, color)
        self.surface.blit(image, (int(x), int(y)))

    def _font(self, size: int) -> pygame.font.Font:
        """Default font at the given pixel size, cached."""
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font
