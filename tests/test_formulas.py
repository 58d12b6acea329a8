"""Tests for the closed-form plate and beam formulas."""
import math

import pytest

from tubcalc.formulas import (
    plate_flexural_rigidity,
    plate_max_deflection,
    rectangular_moment_of_inertia,
    beam_deflection_uniform,
    beam_deflection_uniform_at,
    bending_stress,
    mode_shape,
)


class TestPlateFormulas:
    """Plate rigidity and deflection."""

    def test_rigidity_value(self):
        # 400000 * 0.75^3 / (12 * 0.91)
        assert plate_flexural_rigidity(400000.0, 0.75) == pytest.approx(15453.2967, rel=1e-8)

    def test_rigidity_scales_with_cube_of_thickness(self):
        d1 = plate_flexural_rigidity(400000.0, 0.5)
        d2 = plate_flexural_rigidity(400000.0, 1.0)
        assert d2 / d1 == pytest.approx(8.0)

    def test_rigidity_custom_poisson(self):
        assert plate_flexural_rigidity(12.0, 1.0, nu=0.0) == pytest.approx(1.0)

    def test_plate_deflection(self):
        assert plate_max_deflection(q=1.0, a=2.0, D=1.0) == pytest.approx(16.0 / 64.0)

    def test_plate_deflection_fourth_power_of_span(self):
        d1 = plate_max_deflection(0.5, 10.0, 1000.0)
        d2 = plate_max_deflection(0.5, 20.0, 1000.0)
        assert d2 / d1 == pytest.approx(16.0)


class TestBeamFormulas:
    """Simply supported beam under uniform load."""

    def test_moment_and_deflection(self):
        M, delta = beam_deflection_uniform(L=100.0, w=2.0, E=1.0e6, I=10.0)
        assert M == pytest.approx(2.0 * 100.0 ** 2 / 8)
        assert delta == pytest.approx(5 * 2.0 * 100.0 ** 4 / (384 * 1.0e6 * 10.0))

    def test_shape_zero_at_supports(self):
        assert beam_deflection_uniform_at(50.0, 3.0, 1.0e6, 2.0, 0.0) == 0.0
        assert beam_deflection_uniform_at(50.0, 3.0, 1.0e6, 2.0, 50.0) == pytest.approx(0.0, abs=1e-12)

    def test_shape_midspan_matches_max(self):
        L, w, E, I = 40.0, 5.0, 2.0e6, 1.5
        _, delta = beam_deflection_uniform(L, w, E, I)
        assert beam_deflection_uniform_at(L, w, E, I, L / 2) == pytest.approx(delta)

    def test_shape_symmetric(self):
        L, w, E, I = 40.0, 5.0, 2.0e6, 1.5
        left = beam_deflection_uniform_at(L, w, E, I, 10.0)
        right = beam_deflection_uniform_at(L, w, E, I, 30.0)
        assert left == pytest.approx(right)

    def test_rectangle_inertia_and_stress(self):
        I = rectangular_moment_of_inertia(12.0, 1.0)
        assert I == pytest.approx(1.0)
        assert bending_stress(M=100.0, c=0.5, I=I) == pytest.approx(50.0)


class TestModeShape:
    """sin(pi u) sin(pi v) mode shape."""

    def test_center_is_exactly_one(self):
        assert mode_shape(0.5, 0.5) == 1.0

    @pytest.mark.parametrize("u, v", [(0.0, 0.5), (1.0, 0.5), (0.5, 0.0), (0.5, 1.0), (1.0, 1.0)])
    def test_edges_are_zero(self, u, v):
        assert mode_shape(u, v) == 0.0

    def test_interior_value(self):
        expected = math.sin(math.pi * 0.25) * math.sin(math.pi * 0.5)
        assert mode_shape(0.25, 0.5) == pytest.approx(expected)

    def test_symmetry(self):
        assert mode_shape(0.05, 0.2) == pytest.approx(mode_shape(0.95, 0.8))
