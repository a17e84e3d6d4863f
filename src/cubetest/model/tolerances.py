from __future__ import annotations

import math
from dataclasses import dataclass

from cubetest._constants import DEDUP_DIST_SQ, FEASIBILITY_TOL, SINGULAR_EPS
from cubetest.errors import ConfigurationError
from cubetest.model._util import _field_defaults


@dataclass(frozen=True)
class Tolerances:
    """Numerical thresholds used by vertex enumeration.

    The defaults are part of the observable behaviour of
    :func:`~cubetest.vertices.enumerate_vertices`; change them only
    when the scale of the input data calls for it.

    Attributes:
        singular_eps: Triples of planes whose 3x3 determinant has
            absolute value below this are skipped as parallel or
            degenerate.
        feasibility_tol: A candidate is feasible when
            ``normal . x + offset <= feasibility_tol`` for every
            half-space.
        dedup_dist_sq: A feasible candidate closer than this
            (squared Euclidean distance) to an accepted vertex is
            dropped as a duplicate.
    """

    singular_eps: float = SINGULAR_EPS
    feasibility_tol: float = FEASIBILITY_TOL
    dedup_dist_sq: float = DEDUP_DIST_SQ

    def __post_init__(self) -> None:
        for name in ("singular_eps", "feasibility_tol", "dedup_dist_sq"):
            raw = getattr(self, name)
            try:
                value = float(raw)
            except (TypeError, ValueError) as exc:
                raise ConfigurationError(
                    f"{name} must be a number, got {raw!r}"
                ) from exc
            if not math.isfinite(value) or value < 0:
                raise ConfigurationError(
                    f"{name} must be finite and non-negative, got {value}"
                )
            object.__setattr__(self, name, value)

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Fields at their default values are omitted.
        """
        return {
            name: getattr(self, name)
            for name, default in _field_defaults(type(self)).items()
            if getattr(self, name) != default
        }

    @classmethod
    def from_dict(cls, d: dict) -> Tolerances:
        """Deserialise from a dictionary.

        Raises:
            ConfigurationError: If *d* contains unknown keys or a value
                is not a non-negative number.
        """
        known = _field_defaults(cls)
        unknown = set(d) - set(known)
        if unknown:
            raise ConfigurationError(
                f"unknown tolerance keys: {sorted(unknown)}"
            )
        return cls(**d)
