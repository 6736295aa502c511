"""
Slashed-zero particle animation.

A ring of points plus a diagonal chord, stored in polar coordinates and
wobbled a little on every tick while the whole shape rotates.
"""

import math
import random
from dataclasses import dataclass

ROTATION_STEP = 0.008
RADIUS_WOBBLE = 0.5
ANGLE_WOBBLE = 0.1
ANGLE_FREQUENCY = 1.5


@dataclass
class Particle:
    base_radius: float
    base_angle: float
    speed: float
    offset_radius: float = 0.0
    offset_angle: float = 0.0


@dataclass(frozen=True)
class Viewport:
    """Character grid a particle field is projected onto."""

    width: int
    height: int
    origin_x: float
    origin_y: float
    scale: float = 1.0
    glyph: str = "•"


FULL_VIEW = Viewport(width=80, height=16, origin_x=40.0, origin_y=8.0)
LOGO_VIEW = Viewport(width=80, height=6, origin_x=40.0, origin_y=2.5, scale=0.3, glyph="·")


class ParticleField:
    """Animated particle set with a shared rotation accumulator."""

    def __init__(self, particles: list[Particle]):
        self.particles = particles
        self.rotation = 0.0

    @classmethod
    def slashed_zero(
        cls,
        circle_points: int = 120,
        circle_radius: float = 12.0,
        slash_points: int = 40,
        slash_extent: float = 8.0,
        rng: random.Random | None = None,
    ) -> "ParticleField":
        """
        Build the slashed-zero shape.

        Args:
            circle_points: Points evenly spaced around the ring.
            circle_radius: Ring radius in cells.
            slash_points: Points on the chord from (-extent, extent) to
                (extent, -extent).
            slash_extent: Half-length of the chord along each axis.
            rng: Source of per-particle speeds; seeded for reproducible output.
        """
        rng = rng or random.Random()
        particles = []

        for i in range(circle_points):
            angle = i / circle_points * 2.0 * math.pi
            particles.append(Particle(circle_radius, angle, _speed(rng)))

        for i in range(slash_points):
            t = i / (slash_points - 1) if slash_points > 1 else 0.5
            x = -slash_extent + t * 2.0 * slash_extent
            y = slash_extent - t * 2.0 * slash_extent
            particles.append(Particle(math.hypot(x, y), math.atan2(y, x), _speed(rng)))

        return cls(particles)

    def advance(self) -> None:
        """Advance the animation by one tick."""
        self.rotation += ROTATION_STEP
        for particle in self.particles:
            phase = self.rotation * particle.speed
            particle.offset_radius = math.sin(phase) * RADIUS_WOBBLE
            particle.offset_angle = math.cos(phase * ANGLE_FREQUENCY) * ANGLE_WOBBLE

    def positions(self) -> list[tuple[float, float]]:
        """Displayed (radius, angle) of every particle."""
        return [
            (
                p.base_radius + p.offset_radius,
                p.base_angle + self.rotation + p.offset_angle,
            )
            for p in self.particles
        ]

    def project(self, view: Viewport) -> set[tuple[int, int]]:
        """Map particles to (column, row) cells inside the viewport."""
        cells = set()
        for radius, angle in self.positions():
            radius *= view.scale
            # int() truncates toward zero
            col = int(view.origin_x + radius * math.cos(angle))
            row = int(view.origin_y + radius * math.sin(angle))
            if 0 <= col < view.width and 0 <= row < view.height:
                cells.add((col, row))
        return cells

    def grid(self, view: Viewport) -> list[str]:
        """Render the field as text rows; off-grid particles are dropped."""
        rows = [[" "] * view.width for _ in range(view.height)]
        for col, row in self.project(view):
            rows[row][col] = view.glyph
        return ["".join(row) for row in rows]


def _speed(rng: random.Random) -> float:
    return 0.02 + rng.random() * 0.01
