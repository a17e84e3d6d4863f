from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from cubetest.errors import ConfigurationError


@dataclass(frozen=True)
class HalfSpace:
    """A closed 3D half-space ``normal . x + offset <= 0``.

    Half-spaces are derived values: they are recomputed whenever the
    constraint data or the axis selection changes, and compare by
    value only.

    Attributes:
        normal: Normal vector, shape ``(3,)``.  A zero normal is
            allowed and describes either all of space or nothing,
            depending on the sign of *offset*.
        offset: Signed scalar offset ``d``.

    Raises:
        ConfigurationError: If *normal* is not a finite 3-vector or
            *offset* is not finite.
    """

    normal: np.ndarray
    offset: float

    def __post_init__(self) -> None:
        try:
            normal = np.array(self.normal, dtype=float)
            offset = float(self.offset)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(
                f"half-space needs a numeric normal and offset, got "
                f"{self.normal!r}, {self.offset!r}"
            ) from exc
        if normal.shape != (3,):
            raise ConfigurationError(
                f"normal must have shape (3,), got {normal.shape}"
            )
        if not np.all(np.isfinite(normal)):
            raise ConfigurationError(f"normal must be finite, got {normal}")
        if not math.isfinite(offset):
            raise ConfigurationError(f"offset must be finite, got {offset}")
        normal.setflags(write=False)
        object.__setattr__(self, "normal", normal)
        object.__setattr__(self, "offset", offset)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HalfSpace):
            return NotImplemented
        return (
            bool(np.array_equal(self.normal, other.normal))
            and self.offset == other.offset
        )

    def __hash__(self) -> int:
        return hash((tuple(self.normal.tolist()), self.offset))

    @property
    def is_degenerate(self) -> bool:
        """Whether the normal is the zero vector."""
        return not np.any(self.normal)

    def evaluate(self, points: np.ndarray) -> np.ndarray | float:
        """Return ``normal . x + offset`` for one point or an ``(n, 3)`` array."""
        return np.asarray(points, dtype=float) @ self.normal + self.offset

    def contains(self, points: np.ndarray, tol: float = 0.0) -> np.ndarray | bool:
        """Test ``normal . x + offset <= tol`` for one point or many."""
        result = self.evaluate(points) <= tol
        if np.ndim(result) == 0:
            return bool(result)
        return result
