"""Vertex enumeration for 3D polyhedra given as half-spaces.

Every triple of bounding planes is intersected; intersection points
that satisfy all half-spaces are the polyhedron's vertices.  The work
grows as ``C(M, 3)`` in the number of half-spaces, which is fine for
the handful of constraints shown in a single 3D view.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from itertools import combinations

import numpy as np

from cubetest.errors import ConfigurationError
from cubetest.model import HalfSpace, Tolerances

logger = logging.getLogger(__name__)


def enumerate_vertices(
    half_spaces: Iterable[HalfSpace | tuple[Sequence[float], float]],
    *,
    tolerances: Tolerances | None = None,
) -> np.ndarray:
    """Compute the vertices of the polyhedron ``{x : n_t . x + d_t <= 0}``.

    For each triple ``a < b < c`` of half-spaces the three boundary
    planes are intersected.  Singular triples are skipped, as are
    intersection points that violate any half-space by more than
    ``tolerances.feasibility_tol``.  Points within
    ``tolerances.dedup_dist_sq`` (squared distance) of an accepted
    vertex are dropped.

    Args:
        half_spaces: :class:`HalfSpace` objects, or ``(normal, offset)``
            pairs that are converted to them.
        tolerances: Numerical thresholds.  ``None`` uses the defaults
            (``1e-8``, ``1e-6``, ``1e-10``).

    Returns:
        Array of shape ``(n, 3)`` with one row per vertex, ordered by
        the first triple that produced it.  Empty (shape ``(0, 3)``)
        when fewer than three half-spaces are given or the region has
        no vertices, e.g. when it is empty or unbounded.

    Raises:
        ConfigurationError: If an entry is not a valid 3D half-space.
    """
    planes = [_as_half_space(h) for h in half_spaces]
    tol = tolerances if tolerances is not None else Tolerances()

    m = len(planes)
    if m < 3:
        return np.empty((0, 3))

    normals = np.array([h.normal for h in planes])
    offsets = np.array([h.offset for h in planes])

    vertices: list[np.ndarray] = []
    n_singular = 0
    n_infeasible = 0
    for a, b, c in combinations(range(m), 3):
        candidate = _solve_3x3(
            normals[[a, b, c]],
            -offsets[[a, b, c]],
            tol.singular_eps,
        )
        if candidate is None:
            n_singular += 1
            continue
        if np.any(normals @ candidate + offsets > tol.feasibility_tol):
            n_infeasible += 1
            continue
        if any(
            np.sum((v - candidate) ** 2) < tol.dedup_dist_sq
            for v in vertices
        ):
            continue
        vertices.append(candidate)

    logger.debug(
        "%d half-spaces: %d singular triples, %d infeasible points, "
        "%d vertices",
        m, n_singular, n_infeasible, len(vertices),
    )
    if not vertices:
        return np.empty((0, 3))
    return np.array(vertices)


def _as_half_space(
    item: HalfSpace | tuple[Sequence[float], float],
) -> HalfSpace:
    if isinstance(item, HalfSpace):
        return item
    try:
        normal, offset = item
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(
            f"expected a HalfSpace or (normal, offset) pair, got {item!r}"
        ) from exc
    return HalfSpace(normal=normal, offset=offset)


def _solve_3x3(
    m: np.ndarray, rhs: np.ndarray, singular_eps: float,
) -> np.ndarray | None:
    """Solve ``m @ x = rhs`` for a 3x3 system by Cramer's rule.

    Args:
        m: Coefficient matrix, shape ``(3, 3)``.
        rhs: Right-hand side, shape ``(3,)``.
        singular_eps: Threshold on ``|det(m)|`` below which the
            system is treated as singular.

    Returns:
        The solution, or ``None`` if the system is singular.
    """
    (a00, a01, a02), (a10, a11, a12), (a20, a21, a22) = m.tolist()
    b0, b1, b2 = rhs.tolist()

    # Cofactors along the first row.
    c0 = a11 * a22 - a12 * a21
    c1 = a10 * a22 - a12 * a20
    c2 = a10 * a21 - a11 * a20
    det = a00 * c0 - a01 * c1 + a02 * c2
    if abs(det) < singular_eps:
        return None

    x = b0 * c0 - a01 * (b1 * a22 - a12 * b2) + a02 * (b1 * a21 - a11 * b2)
    y = a00 * (b1 * a22 - a12 * b2) - b0 * c1 + a02 * (a10 * b2 - b1 * a20)
    z = a00 * (a11 * b2 - b1 * a21) - a01 * (a10 * b2 - b1 * a20) + b0 * c2
    return np.array([x, y, z]) / det
