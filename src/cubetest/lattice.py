"""Integer points: rounding, feasibility checks and lattice grids."""

from __future__ import annotations

import itertools
from collections.abc import Sequence

import numpy as np

from cubetest._constants import FEASIBILITY_TOL
from cubetest.errors import ConfigurationError
from cubetest.model import HalfSpace, Tolerances


def round_to_lattice(z: np.ndarray) -> np.ndarray:
    """Return the nearest integer point to *z*.

    Halves round up (``floor(z + 1/2)``), so ``-0.5`` maps to ``0``
    and ``0.5`` to ``1``.  The result is a float array.
    """
    return np.floor(np.asarray(z, dtype=float) + 0.5)


def is_feasible(
    A: np.ndarray,
    b: np.ndarray,
    x: np.ndarray,
    *,
    tol: float = FEASIBILITY_TOL,
) -> bool:
    """Test ``A x <= b + tol`` component-wise.

    Raises:
        ConfigurationError: If the shapes of *A*, *b* and *x* disagree.
    """
    A = np.asarray(A, dtype=float)
    b = np.asarray(b, dtype=float).reshape(-1)
    x = np.asarray(x, dtype=float).reshape(-1)
    if A.ndim != 2 or A.shape != (b.size, x.size):
        raise ConfigurationError(
            f"shapes do not match: A {A.shape}, b ({b.size},), x ({x.size},)"
        )
    return bool(np.all(A @ x <= b + tol))


def integer_points(
    half_spaces: Sequence[HalfSpace],
    lower: Sequence[int],
    upper: Sequence[int],
    *,
    tolerances: Tolerances | None = None,
) -> np.ndarray:
    """List the integer points of a box that satisfy every half-space.

    Args:
        half_spaces: 3D half-spaces, e.g. from
            :func:`~cubetest.projection.project_rows`.
        lower: Inclusive lower corner of the box, three integers.
        upper: Inclusive upper corner of the box, three integers.
        tolerances: Only ``feasibility_tol`` is used.

    Returns:
        Array of shape ``(n, 3)`` in lexicographic order.

    Raises:
        ConfigurationError: If the box corners are not 3-vectors of
            integers.
    """
    lo = _box_corner(lower, "lower")
    hi = _box_corner(upper, "upper")
    tol = (tolerances or Tolerances()).feasibility_tol

    ranges = [range(l, h + 1) for l, h in zip(lo, hi)]
    grid = np.array(list(itertools.product(*ranges)), dtype=float)
    if grid.size == 0:
        return np.empty((0, 3))
    mask = np.ones(len(grid), dtype=bool)
    for h in half_spaces:
        mask &= h.contains(grid, tol)
    return grid[mask]


def _box_corner(corner: Sequence[int], name: str) -> tuple[int, int, int]:
    values = np.asarray(corner)
    if values.shape != (3,):
        raise ConfigurationError(
            f"{name} must have 3 entries, got shape {values.shape}"
        )
    if not np.all(np.equal(np.mod(values, 1), 0)):
        raise ConfigurationError(f"{name} must be integers, got {corner}")
    return int(values[0]), int(values[1]), int(values[2])
