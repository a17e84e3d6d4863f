"""Example constraint systems used throughout the talk.

All systems read ``A x <= b``.  The 3D setting has six rows: two
sheared ``x`` bounds, two ``z`` bounds and the slab ``|y| <= 1``.
"""

from __future__ import annotations

import numpy as np

from cubetest.model import ConstraintSystem

SETTING_A: np.ndarray = np.array([
    [1.0, 0.0, -0.7],
    [-0.5, 0.0, 0.1],
    [0.0, 0.0, 1.0],
    [0.0, 0.0, -0.6],
    [0.0, 1.0, 0.0],
    [0.0, -1.0, 0.0],
])
"""Constraint matrix of the 3D setting."""

SETTING_RESET_A: np.ndarray = np.array([
    [1.0, 0.0, 0.0],
    [-1.0, 0.0, 0.0],
    [0.0, 0.0, 1.0],
    [0.0, 0.0, -1.0],
    [0.0, 1.0, 0.0],
    [0.0, -1.0, 0.0],
])
"""Axis-aligned variant of :data:`SETTING_A`; with unit bounds, ``[-1, 1]^3``."""

SETTING_B: np.ndarray = np.ones(6)
"""Bounds shared by both setting matrices."""

POLYGON_A: np.ndarray = np.array([
    [-5.6, 2.4],
    [-0.4, 4.8],
    [2.8, 2.4],
    [4.0, -1.6],
    [0.4, -4.0],
    [-1.2, -4.0],
])
"""Edge normals of the 2D hexagon used to introduce the cube transform."""

POLYGON_B: np.ndarray = np.array([21.12, 16.32, 15.36, 17.92, 14.08, 15.36])
"""Bounds of the 2D hexagon; the origin is interior."""


def default_system(*, reset: bool = False) -> ConstraintSystem:
    """Return the 3D setting as a :class:`ConstraintSystem`.

    Args:
        reset: Use the axis-aligned matrix :data:`SETTING_RESET_A`.
    """
    A = SETTING_RESET_A if reset else SETTING_A
    return ConstraintSystem(A=A.copy(), b=SETTING_B.copy())
