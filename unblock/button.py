"""A clickable on-screen button."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import pygame

from unblock.bounds import Bounds, get_bounds

DARK_BLUE = (0, 82, 172, 255)
WHITE = (255, 255, 255, 255)
PRESSED_SCALE = 0.9
ROUNDNESS = 0.25


@dataclass(eq=False)
class Button:
    """A rectangular button with a centred label and a click action."""

    position: tuple[float, float]
    size: tuple[float, float]
    text: str
    font_size: int
    action: Callable[[], object]
    scale: float = 1.0

    def bounds(self) -> Bounds:
        """Return the button's bounds at its unscaled size."""
        return get_bounds(self.position, self.size)

    def is_point_colliding(self, point: tuple[float, float]) -> bool:
        """Return True if the point lies strictly inside the button."""
        b = self.bounds()
        return b.start[0] < point[0] < b.end[0] and b.start[1] < point[1] < b.end[1]

    def update(self, mouse_pos, mouse_down: bool, mouse_pressed: bool) -> None:
        """React to the mouse state of the current frame."""
        if not self.is_point_colliding(mouse_pos):
            return
        self.scale = PRESSED_SCALE if mouse_down else 1.0
        if mouse_pressed:
            self.action()

    def draw(self, surface, font) -> None:
        """Draw the button and its label onto a pygame surface."""
        width = self.size[0] * self.scale
        height = self.size[1] * self.scale
        rect = pygame.Rect(
            int(self.position[0]), int(self.position[1]), int(width), int(height)
        )
        radius = int(min(width, height) * ROUNDNESS / 2)
        pygame.draw.rect(surface, DARK_BLUE, rect, border_radius=radius)

        label = font.render(self.text, True, WHITE)
        if self.scale != 1.0:
            label = pygame.transform.smoothscale(
                label,
                (
                    max(1, int(label.get_width() * self.scale)),
                    max(1, int(label.get_height() * self.scale)),
                ),
            )
        text_width = font.size(self.text)[0]
        x = int(self.position[0]) + int(self.size[0] * 0.5) - text_width // 2
        y = int(self.position[1]) + int(self.size[1] * 0.5) - self.font_size // 2
        surface.blit(label, (x, y))