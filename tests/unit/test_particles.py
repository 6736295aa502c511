"""Unit tests for the slashed-zero particle field."""

import math
import random

import pytest

from zero.wizard.particles import (
    FULL_VIEW,
    LOGO_VIEW,
    ROTATION_STEP,
    Particle,
    ParticleField,
    Viewport,
)


class TestConstruction:
    """Tests for building the slashed zero."""

    def test_point_counts(self, particles):
        """Test the default shape has 120 ring and 40 slash points."""
        assert len(particles.particles) == 160

    def test_ring_is_evenly_spaced(self, particles):
        """Test ring points sit on radius 12 at 2*pi*i/N."""
        ring = particles.particles[:120]
        for i, particle in enumerate(ring):
            assert particle.base_radius == 12.0
            assert particle.base_angle == pytest.approx(2 * math.pi * i / 120)

    def test_slash_crosses_at_45_degrees(self, particles):
        """Test slash endpoints are the chord's corners in polar form."""
        slash = particles.particles[120:]
        first, last = slash[0], slash[-1]
        assert first.base_radius == pytest.approx(math.hypot(8, 8))
        assert first.base_angle == pytest.approx(math.atan2(8, -8))
        assert last.base_radius == pytest.approx(math.hypot(8, 8))
        assert last.base_angle == pytest.approx(math.atan2(-8, 8))

    def test_speeds_in_range(self, particles):
        """Test per-particle speeds stay within [0.02, 0.03)."""
        assert all(0.02 <= p.speed < 0.03 for p in particles.particles)

    def test_seeded_rng_is_reproducible(self):
        """Test the same seed yields the same speeds."""
        a = ParticleField.slashed_zero(rng=random.Random(1))
        b = ParticleField.slashed_zero(rng=random.Random(1))
        assert [p.speed for p in a.particles] == [p.speed for p in b.particles]

    def test_single_slash_point(self):
        """Test a one-point slash sits at the center."""
        field = ParticleField.slashed_zero(circle_points=0, slash_points=1)
        assert field.particles[0].base_radius == pytest.approx(0.0)


class TestAdvance:
    """Tests for the per-tick update."""

    def test_rotation_accumulates(self, particles):
        """Test each tick adds a fixed rotation step."""
        for _ in range(5):
            particles.advance()
        assert particles.rotation == pytest.approx(5 * ROTATION_STEP)

    def test_wobble_formula(self):
        """Test offsets follow sin/cos of rotation times speed."""
        field = ParticleField([Particle(base_radius=10.0, base_angle=1.0, speed=0.025)])
        field.advance()
        field.advance()

        rotation = 2 * ROTATION_STEP
        radius, angle = field.positions()[0]
        assert radius == pytest.approx(10.0 + math.sin(rotation * 0.025) * 0.5)
        assert angle == pytest.approx(1.0 + rotation + math.cos(rotation * 0.025 * 1.5) * 0.1)

    def test_offsets_are_bounded(self, particles):
        """Test wobble never exceeds its amplitudes."""
        for _ in range(500):
            particles.advance()
        for p in particles.particles:
            assert abs(p.offset_radius) <= 0.5
            assert abs(p.offset_angle) <= 0.1


class TestProjection:
    """Tests for mapping particles onto a character grid."""

    def test_grid_dimensions(self, particles):
        """Test grids have the viewport's size."""
        rows = particles.grid(FULL_VIEW)
        assert len(rows) == 16
        assert all(len(row) == 80 for row in rows)

        rows = particles.grid(LOGO_VIEW)
        assert len(rows) == 6
        assert all(len(row) == 80 for row in rows)

    def test_glyphs(self, particles):
        """Test each variant draws with its own glyph."""
        assert "•" in "".join(particles.grid(FULL_VIEW))
        assert "·" in "".join(particles.grid(LOGO_VIEW))

    def test_known_cell(self):
        """Test a particle lands on the truncated cell."""
        field = ParticleField([Particle(base_radius=5.0, base_angle=0.0, speed=0.02)])
        assert field.project(FULL_VIEW) == {(45, 8)}

    def test_out_of_bounds_dropped(self):
        """Test particles outside the grid are not drawn."""
        field = ParticleField(
            [
                Particle(base_radius=100.0, base_angle=0.0, speed=0.02),
                Particle(base_radius=12.0, base_angle=math.pi / 2, speed=0.02),
            ]
        )
        # Both fall outside: x=140, and y=8+12=20 on a 16-row grid
        assert field.project(FULL_VIEW) == set()
        assert field.grid(FULL_VIEW) == [" " * 80] * 16

    def test_scale(self):
        """Test the scale factor shrinks the radius."""
        view = Viewport(width=20, height=20, origin_x=10.0, origin_y=10.0, scale=0.5)
        field = ParticleField([Particle(base_radius=8.0, base_angle=0.0, speed=0.02)])
        assert field.project(view) == {(14, 10)}

    def test_ring_spans_full_width(self, particles):
        """Test the ring reaches columns 28 and 52 on the full view."""
        cols = {col for col, _ in particles.project(FULL_VIEW)}
        assert min(cols) == 28
        assert max(cols) == 52
