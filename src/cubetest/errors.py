"""Exceptions raised by cubetest."""


class ConfigurationError(ValueError):
    """Caller supplied inputs that violate a function's contract.

    Raised at the boundary, before any numeric work: duplicate or
    out-of-range axes, mismatched matrix shapes, half-spaces that are
    not three-dimensional, and invalid tolerances.
    """
