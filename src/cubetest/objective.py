"""Linear objectives evaluated over enumerated vertices.

A linear objective attains its maximum over a bounded polyhedron at
one of its vertices, so scanning the vertex set is enough.
"""

from __future__ import annotations

import numpy as np

from cubetest.errors import ConfigurationError


def objective_values(vertices: np.ndarray, c: np.ndarray) -> np.ndarray:
    """Return ``c . v`` for each vertex ``v``.

    Args:
        vertices: Array of shape ``(n, 3)``.
        c: Objective direction, shape ``(3,)``.

    Returns:
        Array of shape ``(n,)``.

    Raises:
        ConfigurationError: If the shapes are not ``(n, 3)`` and ``(3,)``.
    """
    vertices = np.asarray(vertices, dtype=float).reshape(-1, 3)
    c = np.asarray(c, dtype=float)
    if c.shape != (3,):
        raise ConfigurationError(f"c must have shape (3,), got {c.shape}")
    return vertices @ c


def maximise(
    vertices: np.ndarray, c: np.ndarray,
) -> tuple[np.ndarray, float] | None:
    """Find the vertex with the greatest objective value.

    Ties go to the vertex that comes first.

    Returns:
        ``(vertex, value)``, or ``None`` for an empty vertex set.
    """
    values = objective_values(vertices, c)
    if values.size == 0:
        return None
    best = int(np.argmax(values))
    vertex = np.asarray(vertices, dtype=float).reshape(-1, 3)[best]
    return vertex, float(values[best])


def objective_range(
    vertices: np.ndarray, c: np.ndarray,
) -> tuple[float, float] | None:
    """Return ``(f_min, f_max)`` over the vertices, or ``None`` if empty."""
    values = objective_values(vertices, c)
    if values.size == 0:
        return None
    return float(values.min()), float(values.max())


def normalised_objective(vertices: np.ndarray, c: np.ndarray) -> np.ndarray:
    """Objective values rescaled to ``[0, 1]`` for colour ramps.

    When every vertex has the same value (including ``c = 0``) the
    result is all zeros.
    """
    values = objective_values(vertices, c)
    if values.size == 0:
        return values
    span = values.max() - values.min()
    if span <= 0:
        return np.zeros_like(values)
    return (values - values.min()) / span
