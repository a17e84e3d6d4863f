"""Convex-hull meshes for enumerated polyhedron vertices."""

from __future__ import annotations

import logging
import numpy as np
from scipy.spatial import ConvexHull, QhullError

from cubetest.model import FeasibleHull

logger = logging.getLogger(__name__)


def feasible_hull(vertices: np.ndarray) -> FeasibleHull | None:
    """Build the convex-hull mesh spanned by a vertex set.

    Renderers draw the feasible volume from this mesh.  An empty
    vertex set means there is no bounded volume to draw, which is a
    normal outcome rather than an error.

    Args:
        vertices: Array of shape ``(n, 3)``, typically the output of
            :func:`~cubetest.vertices.enumerate_vertices`.

    Returns:
        A :class:`FeasibleHull`, or ``None`` if there are fewer than
        four vertices or they are coplanar (no enclosed volume).
    """
    coords = np.asarray(vertices, dtype=float).reshape(-1, 3)
    if len(coords) < 4:
        return None

    try:
        hull = ConvexHull(coords)
    except QhullError:
        logger.debug("no hull for %d vertices: points are flat", len(coords))
        return None

    # Keep only hull vertices so that faces index a compact array.
    used = np.sort(hull.vertices)
    remap = np.full(len(coords), -1, dtype=int)
    remap[used] = np.arange(len(used))
    hull_coords = coords[used]
    faces = _polygon_faces(hull_coords, remap[hull.simplices], hull.equations)
    return FeasibleHull(
        vertices=hull_coords, faces=faces, volume=float(hull.volume),
    )


def hull_volume(vertices: np.ndarray) -> float:
    """Volume enclosed by a vertex set, 0.0 when it spans no volume."""
    hull = feasible_hull(vertices)
    return hull.volume if hull is not None else 0.0


def _polygon_faces(
    coords: np.ndarray,
    simplices: np.ndarray,
    equations: np.ndarray,
    plane_tol: float = 1e-9,
) -> list[np.ndarray]:
    """Collect hull triangles that share a facet plane into polygons.

    Qhull reports each triangle with its outward plane equation
    ``(n_x, n_y, n_z, c)``, normalised so that ``|n| = 1``.  Triangles
    on the same facet carry the same equation up to rounding.

    Args:
        coords: Hull vertex coordinates, shape ``(n, 3)``.
        simplices: Triangles indexing *coords*, shape ``(n_tri, 3)``.
        equations: Plane equation per triangle, shape ``(n_tri, 4)``.
        plane_tol: Largest per-component difference between two
            equations on the same plane.

    Returns:
        One index array per facet, ordered counter-clockwise when
        seen from outside.  Facets appear in order of their first
        triangle.
    """
    planes: list[np.ndarray] = []
    members: list[set[int]] = []
    for tri, eq in zip(simplices, equations):
        for plane, verts in zip(planes, members):
            if np.max(np.abs(plane - eq)) <= plane_tol:
                verts.update(int(v) for v in tri)
                break
        else:
            planes.append(eq)
            members.append({int(v) for v in tri})

    return [
        _wind(coords, np.array(sorted(verts)), plane[:3])
        for plane, verts in zip(planes, members)
    ]


def _wind(coords: np.ndarray, indices: np.ndarray, normal: np.ndarray) -> np.ndarray:
    """Sort the vertices of a convex planar polygon by angle about *normal*."""
    points = coords[indices] - coords[indices].mean(axis=0)
    u = points[0] / np.linalg.norm(points[0])
    v = np.cross(normal, u)
    angles = np.arctan2(points @ v, points @ u)
    return indices[np.argsort(angles, kind="stable")]
