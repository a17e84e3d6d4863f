"""Tests for ConstraintSystem validation, projection and serialisation."""

import numpy as np
import pytest

from cubetest.defaults import SETTING_RESET_A
from cubetest.errors import ConfigurationError
from cubetest.model import ConstraintSystem, HalfSpace


def _reset_system(**kwargs) -> ConstraintSystem:
    return ConstraintSystem(A=SETTING_RESET_A.copy(), b=np.ones(6), **kwargs)


class TestConstraintSystem:
    def test_defaults(self):
        system = _reset_system()
        assert system.axes == (0, 1, 2)
        assert system.fixed_values == {}
        assert system.scale == 1.0
        assert system.n_constraints == 6
        assert system.n_dims == 3

    def test_column_bounds_flattened(self):
        system = ConstraintSystem(A=SETTING_RESET_A, b=[[1.0]] * 6)
        assert system.b.shape == (6,)

    def test_half_spaces(self):
        planes = _reset_system().half_spaces()
        assert len(planes) == 6
        assert all(isinstance(h, HalfSpace) for h in planes)
        assert planes[0] == HalfSpace(normal=(1.0, 0.0, 0.0), offset=-1.0)

    def test_vertices_form_cube(self):
        vertices = _reset_system().vertices()
        assert vertices.shape == (8, 3)
        np.testing.assert_allclose(np.abs(vertices), 1.0)

    def test_scale_multiplies_bounds(self):
        system = _reset_system(scale=2.0)
        np.testing.assert_allclose(system.scaled_bounds, 2.0)
        np.testing.assert_allclose(np.abs(system.vertices()), 2.0)

    def test_fixed_variable_shifts_bounds(self):
        # A fourth variable w enters the first row as x + w <= 1.
        A = np.hstack([SETTING_RESET_A, [[1.0], [0.0], [0.0], [0.0], [0.0], [0.0]]])
        system = ConstraintSystem(A=A, b=np.ones(6), fixed_values={3: 0.5})
        vertices = system.vertices()
        assert vertices.shape == (8, 3)
        np.testing.assert_allclose(sorted(set(vertices[:, 0].round(9))), [-1.0, 0.5])

    def test_other_axes(self):
        A = np.hstack([np.zeros((6, 1)), SETTING_RESET_A])
        system = ConstraintSystem(A=A, b=np.ones(6), axes=(1, 2, 3))
        assert system.vertices().shape == (8, 3)

    def test_cube_transformed(self):
        shrunk = _reset_system().cube_transformed(1.0)
        np.testing.assert_allclose(shrunk.b, 0.5)
        np.testing.assert_allclose(np.abs(shrunk.vertices()), 0.5)

    def test_cube_transformed_uses_scaled_bounds(self):
        shrunk = _reset_system(scale=2.0).cube_transformed(1.0)
        np.testing.assert_allclose(shrunk.b, 1.5)
        assert shrunk.scale == 1.0

    def test_with_bounds_copies(self):
        system = _reset_system(fixed_values={})
        other = system.with_bounds(np.full(6, 3.0))
        other.A[0, 0] = 5.0
        assert system.A[0, 0] == 1.0
        np.testing.assert_allclose(system.b, 1.0)


class TestConstraintSystemValidation:
    def test_one_dimensional_matrix_raises(self):
        with pytest.raises(ConfigurationError, match="2-dimensional"):
            ConstraintSystem(A=np.ones(3), b=[1.0])

    def test_too_few_columns_raises(self):
        with pytest.raises(ConfigurationError, match="at least 3 columns"):
            ConstraintSystem(A=np.eye(2), b=[1.0, 1.0])

    def test_bound_length_mismatch_raises(self):
        with pytest.raises(ConfigurationError, match="b must have 6"):
            ConstraintSystem(A=SETTING_RESET_A, b=np.ones(5))

    def test_non_finite_raises(self):
        b = np.ones(6)
        b[2] = np.nan
        with pytest.raises(ConfigurationError, match="finite"):
            ConstraintSystem(A=SETTING_RESET_A, b=b)

    def test_duplicate_axes_raise(self):
        with pytest.raises(ConfigurationError, match="distinct"):
            _reset_system(axes=(0, 1, 1))

    def test_axis_out_of_range_raises(self):
        with pytest.raises(ConfigurationError, match="out of range"):
            _reset_system(axes=(0, 1, 3))

    def test_fixed_value_out_of_range_raises(self):
        with pytest.raises(ConfigurationError, match="fixed value index"):
            _reset_system(fixed_values={7: 1.0})

    def test_non_finite_scale_raises(self):
        with pytest.raises(ConfigurationError, match="scale"):
            _reset_system(scale=np.inf)

    @pytest.mark.parametrize("value", [np.nan, np.inf, -np.inf])
    def test_non_finite_fixed_value_raises(self, value):
        with pytest.raises(ConfigurationError, match="finite"):
            _reset_system(fixed_values={1: value})

    def test_non_integer_fixed_key_raises(self):
        with pytest.raises(ConfigurationError, match="integer indices"):
            _reset_system(fixed_values={"x": 1.0})

    def test_non_numeric_fixed_value_raises(self):
        with pytest.raises(ConfigurationError, match="integer indices"):
            _reset_system(fixed_values={1: "one"})

    def test_non_numeric_scale_raises(self):
        with pytest.raises(ConfigurationError, match="scale must be a number"):
            _reset_system(scale="big")

    def test_non_numeric_bounds_raise(self):
        with pytest.raises(ConfigurationError, match="numeric"):
            ConstraintSystem(A=SETTING_RESET_A.copy(), b=["a"] * 6)


class TestConstraintSystemDict:
    def test_defaults_omitted(self):
        d = _reset_system().to_dict()
        assert set(d) == {"A", "b"}
        assert d["b"] == [1.0] * 6

    def test_round_trip(self):
        A = np.hstack([SETTING_RESET_A, np.ones((6, 1))])
        system = ConstraintSystem(
            A=A, b=np.arange(6.0), axes=(3, 0, 1), fixed_values={2: 0.25}, scale=0.5,
        )
        d = system.to_dict()
        assert d["fixed_values"] == {"2": 0.25}
        restored = ConstraintSystem.from_dict(d)
        np.testing.assert_array_equal(restored.A, system.A)
        np.testing.assert_array_equal(restored.b, system.b)
        assert restored.axes == (3, 0, 1)
        assert restored.fixed_values == {2: 0.25}
        assert restored.scale == 0.5

    def test_missing_matrix_raises(self):
        with pytest.raises(ConfigurationError, match="'A'"):
            ConstraintSystem.from_dict({"b": [1.0]})
