"""Shared test fixtures for cubetest."""

import numpy as np
import pytest

from cubetest.model import HalfSpace

_AXIS_NORMALS = [
    (1.0, 0.0, 0.0),
    (-1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, -1.0, 0.0),
    (0.0, 0.0, 1.0),
    (0.0, 0.0, -1.0),
]


@pytest.fixture
def unit_cube():
    """Half-spaces of the cube ``|x|, |y|, |z| <= 1``."""
    return [HalfSpace(normal=n, offset=-1.0) for n in _AXIS_NORMALS]


@pytest.fixture
def tetrahedron():
    """Half-spaces of the simplex ``x, y, z >= 0``, ``x + y + z <= 1``."""
    return [
        HalfSpace(normal=(-1.0, 0.0, 0.0), offset=0.0),
        HalfSpace(normal=(0.0, -1.0, 0.0), offset=0.0),
        HalfSpace(normal=(0.0, 0.0, -1.0), offset=0.0),
        HalfSpace(normal=(1.0, 1.0, 1.0), offset=-1.0),
    ]


@pytest.fixture
def cube_corners():
    """The eight corners of ``[-1, 1]^3``."""
    return np.array(
        [[x, y, z] for x in (-1.0, 1.0) for y in (-1.0, 1.0) for z in (-1.0, 1.0)]
    )
