"""Circle overlap tests."""

from __future__ import annotations

import math

from quadsim.particle import Particle


def circles_collide(
    position_a: tuple[float, float],
    radius_a: float,
    position_b: tuple[float, float],
    radius_b: float,
) -> bool:
    """Return True if the corner distance is less than the sum of the radii."""
    return math.dist(position_a, position_b) < radius_a + radius_b


def particles_collide(a: Particle, b: Particle) -> bool:
    """Return True if two particles overlap."""
    return circles_collide(a.position, a.radius, b.position, b.radius)