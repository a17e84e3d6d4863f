"""Core data model for cubetest: half-spaces, constraint systems, tolerances.

Everything is re-exported here so that ``from cubetest.model import
HalfSpace`` works.
"""

from cubetest.model.constraint_system import ConstraintSystem
from cubetest.model.feasible_hull import FeasibleHull
from cubetest.model.half_space import HalfSpace
from cubetest.model.tolerances import Tolerances

__all__ = [
    "ConstraintSystem",
    "FeasibleHull",
    "HalfSpace",
    "Tolerances",
]
