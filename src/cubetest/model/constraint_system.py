from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from cubetest.errors import ConfigurationError

if TYPE_CHECKING:
    from cubetest.model.half_space import HalfSpace
    from cubetest.model.tolerances import Tolerances


@dataclass
class ConstraintSystem:
    """A linear constraint system ``A x <= b * scale`` and a 3D view of it.

    The system lives in ``N`` dimensions.  Three of them, the *axes*,
    are kept free for visualisation; every other variable is held at
    the value given in *fixed_values* (0 when absent).

    Attributes:
        A: Constraint matrix, shape ``(M, N)`` with ``N >= 3``.
        b: Bound vector, length ``M``.  A column vector of shape
            ``(M, 1)`` is flattened.
        axes: Ordered triple of distinct variable indices in ``[0, N)``.
        fixed_values: Values for variables outside *axes*, keyed by
            variable index.
        scale: Multiplier applied to every bound.

    Raises:
        ConfigurationError: If the shapes disagree, the axes are not
            three distinct indices in range, a fixed-value key is out
            of range, or any entry is not finite.
    """

    A: np.ndarray
    b: np.ndarray
    axes: tuple[int, int, int] = (0, 1, 2)
    fixed_values: dict[int, float] = field(default_factory=dict)
    scale: float = 1.0

    def __post_init__(self) -> None:
        try:
            self.A = np.asarray(self.A, dtype=float)
            self.b = np.asarray(self.b, dtype=float).reshape(-1)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(
                f"A and b must be numeric arrays: {exc}"
            ) from exc
        if self.A.ndim != 2:
            raise ConfigurationError(
                f"A must be 2-dimensional, got shape {self.A.shape}"
            )
        n_rows, n_dims = self.A.shape
        if n_dims < 3:
            raise ConfigurationError(
                f"A must have at least 3 columns, got {n_dims}"
            )
        if self.b.shape != (n_rows,):
            raise ConfigurationError(
                f"b must have {n_rows} entries to match A, got {self.b.size}"
            )
        if not (np.all(np.isfinite(self.A)) and np.all(np.isfinite(self.b))):
            raise ConfigurationError("A and b must be finite")

        from cubetest.projection import validate_axes

        self.axes = validate_axes(self.axes, n_dims)
        fixed: dict[int, float] = {}
        for key, value in dict(self.fixed_values).items():
            try:
                index = int(key)
                fixed_value = float(value)
            except (TypeError, ValueError) as exc:
                raise ConfigurationError(
                    f"fixed values must map integer indices to numbers, "
                    f"got {key!r}: {value!r}"
                ) from exc
            if not 0 <= index < n_dims:
                raise ConfigurationError(
                    f"fixed value index {key!r} out of range for "
                    f"{n_dims} variables"
                )
            if not math.isfinite(fixed_value):
                raise ConfigurationError(
                    f"fixed value for index {index} must be finite, "
                    f"got {fixed_value}"
                )
            fixed[index] = fixed_value
        self.fixed_values = fixed

        try:
            self.scale = float(self.scale)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(
                f"scale must be a number, got {self.scale!r}"
            ) from exc
        if not math.isfinite(self.scale):
            raise ConfigurationError(f"scale must be finite, got {self.scale}")

    @property
    def n_constraints(self) -> int:
        """Number of rows ``M``."""
        return self.A.shape[0]

    @property
    def n_dims(self) -> int:
        """Problem dimension ``N``."""
        return self.A.shape[1]

    @property
    def scaled_bounds(self) -> np.ndarray:
        """The effective bounds ``b * scale``."""
        return self.b * self.scale

    def half_spaces(self) -> list[HalfSpace]:
        """Project every row into the 3D subspace spanned by *axes*."""
        from cubetest.projection import project_rows

        return project_rows(
            self.A, self.b, self.axes, self.fixed_values, scale=self.scale,
        )

    def vertices(self, tolerances: Tolerances | None = None) -> np.ndarray:
        """Vertices of the projected polyhedron, shape ``(n, 3)``.

        See Also:
            :func:`cubetest.vertices.enumerate_vertices`
        """
        from cubetest.vertices import enumerate_vertices

        return enumerate_vertices(self.half_spaces(), tolerances=tolerances)

    def with_bounds(self, b: np.ndarray) -> ConstraintSystem:
        """Return a copy with bounds *b* and unit scale."""
        return ConstraintSystem(
            A=self.A.copy(),
            b=b,
            axes=self.axes,
            fixed_values=dict(self.fixed_values),
        )

    def cube_transformed(self, e: float) -> ConstraintSystem:
        """Return the system whose solutions are centres of fitting cubes.

        A point ``z`` satisfies the returned system exactly when the
        axis-aligned cube of edge *e* centred at ``z`` lies inside
        this system's polyhedron.

        See Also:
            :func:`cubetest.cube.cube_transform`
        """
        from cubetest.cube import cube_transform

        return self.with_bounds(cube_transform(self.A, self.scaled_bounds, e))

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        ``axes``, ``fixed_values`` and ``scale`` are omitted at their
        defaults.  Fixed-value keys become strings, as JSON requires.
        """
        d: dict = {"A": self.A.tolist(), "b": self.b.tolist()}
        if self.axes != (0, 1, 2):
            d["axes"] = list(self.axes)
        if self.fixed_values:
            d["fixed_values"] = {
                str(k): v for k, v in sorted(self.fixed_values.items())
            }
        if self.scale != 1.0:
            d["scale"] = self.scale
        return d

    @classmethod
    def from_dict(cls, d: dict) -> ConstraintSystem:
        """Deserialise from a dictionary."""
        for key in ("A", "b"):
            if key not in d:
                raise ConfigurationError(f"constraint system needs {key!r}")
        kwargs: dict = {"A": d["A"], "b": d["b"]}
        if "axes" in d:
            kwargs["axes"] = tuple(d["axes"])
        if "fixed_values" in d:
            kwargs["fixed_values"] = {
                int(k): v for k, v in d["fixed_values"].items()
            }
        if "scale" in d:
            kwargs["scale"] = d["scale"]
        return cls(**kwargs)
