"""Projection of N-dimensional constraint rows onto a 3D axis subspace.

Each constraint ``row . x <= bound`` becomes a :class:`HalfSpace`
``normal . y + offset <= 0`` over the three selected variables ``y``.
With the remaining variables held at fixed values::

    normal = (row[i], row[j], row[k])
    offset = sum(row[m] * fixed[m] for m not in (i, j, k)) - bound

so that ``normal . y + offset = row . x - bound``.
"""

from __future__ import annotations

import operator
from collections.abc import Mapping, Sequence

import numpy as np

from cubetest.errors import ConfigurationError
from cubetest.model.half_space import HalfSpace


def validate_axes(
    axes: Sequence[int], n_dims: int | None = None,
) -> tuple[int, int, int]:
    """Check an axis selection and return it as a tuple of ints.

    Args:
        axes: Three variable indices.
        n_dims: Problem dimension.  When given, every index must be
            below it.

    Returns:
        The axes as a ``(i, j, k)`` tuple.

    Raises:
        ConfigurationError: If *axes* is not three distinct
            non-negative integers (below *n_dims* when given).
    """
    try:
        indices = tuple(operator.index(a) for a in axes)
    except TypeError as exc:
        raise ConfigurationError(
            f"axes must be integers, got {axes!r}"
        ) from exc
    if len(indices) != 3:
        raise ConfigurationError(
            f"axes must select exactly 3 variables, got {len(indices)}"
        )
    if len(set(indices)) != 3:
        raise ConfigurationError(f"axes must be distinct, got {indices}")
    for index in indices:
        if index < 0 or (n_dims is not None and index >= n_dims):
            raise ConfigurationError(
                f"axis {index} out of range for {n_dims} variables"
                if n_dims is not None
                else f"axis {index} must be non-negative"
            )
    return indices[0], indices[1], indices[2]


def project(
    row: Sequence[float],
    bound: float,
    axes: Sequence[int],
    fixed_values: Mapping[int, float] | None = None,
) -> HalfSpace:
    """Project one constraint row onto the subspace spanned by *axes*.

    An axis index beyond the end of *row* reads as a zero coefficient,
    so rows shorter than the problem dimension are accepted.  Fixed
    values for selected axes are ignored; variables missing from
    *fixed_values* are held at 0.

    Args:
        row: Coefficients of ``row . x <= bound``.
        bound: Right-hand side of the inequality.
        axes: Three distinct variable indices ``(i, j, k)``.
        fixed_values: Values for the non-selected variables.

    Returns:
        The half-space ``normal . y + offset <= 0``.

    Raises:
        ConfigurationError: If *axes* is not three distinct
            non-negative integers.
    """
    i, j, k = validate_axes(axes)
    coeffs = np.asarray(row, dtype=float).reshape(-1)
    fixed = fixed_values or {}

    def coeff(index: int) -> float:
        return float(coeffs[index]) if index < coeffs.size else 0.0

    normal = np.array([coeff(i), coeff(j), coeff(k)])
    offset = -float(bound)
    for m in range(coeffs.size):
        if m in (i, j, k):
            continue
        offset += float(coeffs[m]) * float(fixed.get(m, 0.0))
    return HalfSpace(normal=normal, offset=offset)


def project_rows(
    A: np.ndarray,
    b: np.ndarray,
    axes: Sequence[int],
    fixed_values: Mapping[int, float] | None = None,
    *,
    scale: float = 1.0,
) -> list[HalfSpace]:
    """Project every row of ``A x <= b * scale``.

    Args:
        A: Constraint matrix, shape ``(M, N)``.
        b: Bounds, length ``M`` (a ``(M, 1)`` column is accepted).
        axes: Three distinct variable indices in ``[0, N)``.
        fixed_values: Values for the non-selected variables.
        scale: Multiplier applied to every bound.

    Returns:
        One half-space per row, in row order.

    Raises:
        ConfigurationError: If the shapes of *A* and *b* disagree or
            *axes* is invalid for ``N`` variables.
    """
    A = np.asarray(A, dtype=float)
    if A.ndim != 2:
        raise ConfigurationError(
            f"A must be 2-dimensional, got shape {A.shape}"
        )
    b = np.asarray(b, dtype=float).reshape(-1)
    if b.shape[0] != A.shape[0]:
        raise ConfigurationError(
            f"b has {b.shape[0]} entries but A has {A.shape[0]} rows"
        )
    validate_axes(axes, A.shape[1])
    return [
        project(row, bound * scale, axes, fixed_values)
        for row, bound in zip(A, b)
    ]
