"""Cube tests for integer feasibility of ``A x <= b``.

The cube of edge ``e`` centred at ``z`` is

    C_e(z) = {x : ||x - z||_inf <= e / 2}.

The largest value of ``a . x`` over that cube is
``a . z + e / 2 * ||a||_1``, so the cube lies inside the polyhedron
``{x : A x <= b}`` exactly when ``A z <= b'`` with the *linear cube
transform* ``b'_i = b_i - e / 2 * ||a_i||_1``.  If a cube of edge 1
fits, the rounded centre is an integer point of the polyhedron.
"""

from __future__ import annotations

import itertools
import math

import numpy as np

from cubetest._constants import FEASIBILITY_TOL
from cubetest.errors import ConfigurationError
from cubetest.lattice import is_feasible, round_to_lattice

_MAX_CUBE_VERTEX_DIMS = 16


def max_over_cube(a: np.ndarray, z: np.ndarray, e: float) -> float:
    """Return the maximum of ``a . x`` over the cube ``C_e(z)``.

    Args:
        a: Objective coefficients, length ``N``.
        z: Cube centre, length ``N``.
        e: Edge length, non-negative.

    Raises:
        ConfigurationError: If the lengths differ or *e* is negative.
    """
    a = np.asarray(a, dtype=float).reshape(-1)
    z = np.asarray(z, dtype=float).reshape(-1)
    if a.shape != z.shape:
        raise ConfigurationError(
            f"a and z must have equal length, got {a.size} and {z.size}"
        )
    _check_edge(e)
    return float(a @ z + 0.5 * e * np.abs(a).sum())


def cube_vertices(z: np.ndarray, e: float) -> np.ndarray:
    """Return the ``2**N`` corners ``z +/- e/2`` of the cube ``C_e(z)``.

    Corners are ordered like binary counting, with the last
    coordinate varying fastest and ``-e/2`` before ``+e/2``.

    Raises:
        ConfigurationError: If *e* is negative or ``N`` is too large
            to enumerate.
    """
    z = np.asarray(z, dtype=float).reshape(-1)
    _check_edge(e)
    if z.size > _MAX_CUBE_VERTEX_DIMS:
        raise ConfigurationError(
            f"refusing to list 2**{z.size} cube corners; "
            f"use max_over_cube for N > {_MAX_CUBE_VERTEX_DIMS}"
        )
    signs = np.array(list(itertools.product((-1.0, 1.0), repeat=z.size)))
    return z + 0.5 * e * signs.reshape(-1, z.size)


def cube_transform(A: np.ndarray, b: np.ndarray, e: float) -> np.ndarray:
    """Return the shrunk bounds ``b'_i = b_i - e/2 * ||a_i||_1``.

    Args:
        A: Constraint matrix, shape ``(M, N)``.
        b: Bounds, length ``M`` (a ``(M, 1)`` column is accepted).
        e: Cube edge length, non-negative.

    Returns:
        Array of shape ``(M,)``.

    Raises:
        ConfigurationError: If the shapes disagree or *e* is negative.
    """
    A, b = _check_system(A, b)
    _check_edge(e)
    return b - 0.5 * e * np.abs(A).sum(axis=1)


def cube_fits(
    A: np.ndarray,
    b: np.ndarray,
    z: np.ndarray,
    e: float,
    *,
    tol: float = FEASIBILITY_TOL,
) -> bool:
    """Test whether ``C_e(z)`` lies inside ``{x : A x <= b}``.

    Raises:
        ConfigurationError: If the shapes disagree or *e* is negative.
    """
    A, b = _check_system(A, b)
    z = _check_point(A, z)
    return is_feasible(A, cube_transform(A, b, e), z, tol=tol)


def unit_cube_test(
    A: np.ndarray,
    b: np.ndarray,
    z: np.ndarray,
    *,
    tol: float = FEASIBILITY_TOL,
) -> np.ndarray | None:
    """Look for an integer solution of ``A x <= b`` near *z*.

    If the cube of edge 1 centred at *z* fits in the polyhedron, the
    rounded centre lies in that cube and therefore in the polyhedron.

    Returns:
        The integer point ``round(z)`` as a float array, or ``None``
        if the unit cube does not fit.  ``None`` does not prove that
        no integer solution exists.
    """
    if not cube_fits(A, b, z, 1.0, tol=tol):
        return None
    return round_to_lattice(z)


def largest_cube_edge(A: np.ndarray, b: np.ndarray, z: np.ndarray) -> float:
    """Return the largest edge ``e`` for which ``C_e(z)`` fits.

    Rows with ``a_i = 0`` never restrict the cube and are skipped.

    Returns:
        ``min_i 2 * (b_i - a_i . z) / ||a_i||_1``.  ``inf`` when no
        row restricts the cube; negative when *z* itself violates a
        constraint.
    """
    A, b = _check_system(A, b)
    z = _check_point(A, z)
    norms = np.abs(A).sum(axis=1)
    active = norms > 0
    if not np.any(active):
        return math.inf
    slack = b[active] - A[active] @ z
    return float(np.min(2.0 * slack / norms[active]))


def _check_edge(e: float) -> None:
    if not math.isfinite(e) or e < 0:
        raise ConfigurationError(
            f"cube edge must be finite and non-negative, got {e}"
        )


def _check_system(A: np.ndarray, b: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    A = np.asarray(A, dtype=float)
    if A.ndim != 2:
        raise ConfigurationError(
            f"A must be 2-dimensional, got shape {A.shape}"
        )
    b = np.asarray(b, dtype=float).reshape(-1)
    if b.shape != (A.shape[0],):
        raise ConfigurationError(
            f"b has {b.size} entries but A has {A.shape[0]} rows"
        )
    return A, b


def _check_point(A: np.ndarray, z: np.ndarray) -> np.ndarray:
    z = np.asarray(z, dtype=float).reshape(-1)
    if z.shape != (A.shape[1],):
        raise ConfigurationError(
            f"point has {z.size} coordinates but A has {A.shape[1]} columns"
        )
    return z
