"""Moving circular particles that bounce inside a boundary."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from quadsim.geometry import Rect

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
GREEN: Color = (0, 255, 0)
RED: Color = (255, 0, 0)


@dataclass(eq=False)
class Particle:
    """A circle whose position is the top-left corner of its bounding box."""

    radius: float
    position: tuple[float, float] = (0.0, 0.0)
    velocity: tuple[float, float] = (0.0, 0.0)
    color: Color = WHITE

    def update(self, dt: float, boundary: Rect) -> None:
        """Reverse velocity on leaving the boundary, then move by velocity * dt."""
        x, y = self.position
        vx, vy = self.velocity
        r = self.radius

        if x - r < boundary.left or x + r > boundary.right:
            vx = -vx
        if y - r < boundary.top or y + r > boundary.bottom:
            vy = -vy
        if x - r > boundary.right or x + r < boundary.left:
            vx = -vx
        if y - r > boundary.bottom or y + r < boundary.top:
            vy = -vy

        self.velocity = (vx, vy)
        self.position = (x + vx * dt, y + vy * dt)

    def bounds(self) -> Rect:
        """The bounding box of the circle."""
        x, y = self.position
        diameter = 2 * self.radius
        return Rect(x, y, diameter, diameter)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the particle as a filled circle."""
        x, y = self.position
        r = self.radius
        pygame.draw.circle(surface, self.color, (x + r, y + r), r)