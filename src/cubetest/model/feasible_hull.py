from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class FeasibleHull:
    """A convex-hull mesh built from enumerated vertices.

    Attributes:
        vertices: Hull vertex coordinates, shape ``(n, 3)``.
        faces: List of faces, each a 1-D array of indices into
            *vertices* ordered as a polygon loop.  Coplanar triangles
            are merged, so a cube has six quadrilateral faces.
        volume: Enclosed volume.
    """

    vertices: np.ndarray
    faces: list[np.ndarray]
    volume: float
