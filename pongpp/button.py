"""Clickable image buttons."""

from __future__ import annotations

import os
from typing import Sequence

import pygame


class Button:
    """An image drawn at a fixed position that reports mouse clicks over it."""

    def __init__(self, image_path, position, scale):
        image = pygame.image.load(os.fspath(image_path))
        width, height = image.get_size()
        new_size = (int(width * scale), int(height * scale))
        self.image = pygame.transform.scale(image, new_size)
        self.position = pygame.Vector2(position)

    @property
    def size(self) -> tuple[int, int]:
        return self.image.get_size()

    def _contains(self, point: Sequence[float]) -> bool:
        px, py = point[0], point[1]
        width, height = self.size
        return (
            self.position.x <= px < self.position.x + width
            and self.position.y <= py < self.position.y + height
        )

    def draw(self, surface) -> None:
        """Blit the button image onto ``surface`` at its position."""
        surface.blit(self.image, (int(self.position.x), int(self.position.y)))

    def is_pressed(self, mouse_pos, mouse_pressed) -> bool:
        """Return True when the mouse was pressed while over the button."""
        return bool(mouse_pressed) and self._contains(mouse_pos)