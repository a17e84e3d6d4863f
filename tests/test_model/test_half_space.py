"""Tests for HalfSpace construction, validation and evaluation."""

import dataclasses

import numpy as np
import pytest

from cubetest.errors import ConfigurationError
from cubetest.model.half_space import HalfSpace


class TestHalfSpace:
    def test_converts_to_float_array(self):
        h = HalfSpace(normal=[1, 2, 3], offset=4)
        assert h.normal.dtype == float
        assert isinstance(h.offset, float)

    def test_frozen(self):
        h = HalfSpace(normal=(1.0, 0.0, 0.0), offset=0.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            h.offset = 1.0

    def test_normal_is_read_only(self):
        h = HalfSpace(normal=(1.0, 0.0, 0.0), offset=0.0)
        with pytest.raises(ValueError):
            h.normal[0] = 5.0

    def test_caller_array_not_aliased(self):
        normal = np.array([1.0, 0.0, 0.0])
        h = HalfSpace(normal=normal, offset=0.0)
        normal[0] = 9.0
        assert h.normal[0] == 1.0
        assert normal.flags.writeable

    def test_equality_and_hash(self):
        a = HalfSpace(normal=(1.0, 2.0, 3.0), offset=-1.0)
        b = HalfSpace(normal=np.array([1.0, 2.0, 3.0]), offset=-1)
        c = HalfSpace(normal=(1.0, 2.0, 3.0), offset=0.0)
        assert a == b
        assert hash(a) == hash(b)
        assert a != c
        assert len({a, b, c}) == 2

    def test_is_degenerate(self):
        assert HalfSpace(normal=(0.0, 0.0, 0.0), offset=1.0).is_degenerate
        assert not HalfSpace(normal=(0.0, 0.0, 1e-12), offset=1.0).is_degenerate


class TestHalfSpaceValidation:
    def test_wrong_shape_raises(self):
        with pytest.raises(ConfigurationError, match="shape"):
            HalfSpace(normal=(1.0, 0.0), offset=0.0)

    def test_matrix_normal_raises(self):
        with pytest.raises(ConfigurationError, match="shape"):
            HalfSpace(normal=np.eye(3), offset=0.0)

    def test_non_finite_normal_raises(self):
        with pytest.raises(ConfigurationError, match="finite"):
            HalfSpace(normal=(np.nan, 0.0, 0.0), offset=0.0)

    def test_non_finite_offset_raises(self):
        with pytest.raises(ConfigurationError, match="finite"):
            HalfSpace(normal=(1.0, 0.0, 0.0), offset=np.inf)

    def test_non_numeric_offset_raises(self):
        with pytest.raises(ConfigurationError, match="numeric"):
            HalfSpace(normal=(1.0, 0.0, 0.0), offset="x")

    def test_non_numeric_normal_raises(self):
        with pytest.raises(ConfigurationError, match="numeric"):
            HalfSpace(normal=("a", 0.0, 0.0), offset=0.0)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            HalfSpace(normal=(1.0,), offset=0.0)


class TestHalfSpaceEvaluate:
    def test_single_point(self):
        h = HalfSpace(normal=(1.0, 2.0, 3.0), offset=-6.0)
        assert h.evaluate([1.0, 1.0, 1.0]) == pytest.approx(0.0)

    def test_many_points(self):
        h = HalfSpace(normal=(1.0, 0.0, 0.0), offset=-1.0)
        points = np.array([[0.0, 0.0, 0.0], [2.0, 5.0, 5.0]])
        np.testing.assert_allclose(h.evaluate(points), [-1.0, 1.0])
        np.testing.assert_array_equal(h.contains(points), [True, False])

    def test_contains_returns_bool_for_point(self):
        h = HalfSpace(normal=(1.0, 0.0, 0.0), offset=-1.0)
        assert h.contains([1.0, 0.0, 0.0]) is True
        assert h.contains([1.0 + 1e-7, 0.0, 0.0]) is False
        assert h.contains([1.0 + 1e-7, 0.0, 0.0], tol=1e-6) is True
