"""Tests for cubetest.defaults — the example systems from the talk."""

import numpy as np
import pytest

from cubetest.cube import largest_cube_edge, unit_cube_test
from cubetest.defaults import (
    POLYGON_A,
    POLYGON_B,
    SETTING_A,
    SETTING_B,
    SETTING_RESET_A,
    default_system,
)
from cubetest.hull import hull_volume
from cubetest.lattice import is_feasible


class TestSetting:
    def test_shapes(self):
        assert SETTING_A.shape == (6, 3)
        assert SETTING_RESET_A.shape == (6, 3)
        assert SETTING_B.shape == (6,)

    def test_default_system_is_bounded_prism(self):
        vertices = default_system().vertices()
        assert vertices.shape == (8, 3)
        np.testing.assert_allclose(np.abs(vertices[:, 1]), 1.0)

    def test_default_system_volume(self):
        # Quadrilateral cross-section of area 68/9 swept over |y| <= 1.
        assert hull_volume(default_system().vertices()) == pytest.approx(136.0 / 9.0)

    def test_reset_system_is_cube(self):
        vertices = default_system(reset=True).vertices()
        assert vertices.shape == (8, 3)
        assert hull_volume(vertices) == pytest.approx(8.0)

    def test_default_system_is_a_copy(self):
        default_system().A[0, 0] = 99.0
        assert SETTING_A[0, 0] == 1.0


class TestPolygon:
    def test_origin_is_interior(self):
        assert is_feasible(POLYGON_A, POLYGON_B, [0.0, 0.0])
        assert largest_cube_edge(POLYGON_A, POLYGON_B, [0.0, 0.0]) > 1.0

    def test_integer_point_from_unit_cube(self):
        x = unit_cube_test(POLYGON_A, POLYGON_B, [1.2, 0.7])
        assert x is not None
        assert is_feasible(POLYGON_A, POLYGON_B, x)
