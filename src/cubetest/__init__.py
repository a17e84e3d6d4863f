"""Cubetest: vertex enumeration and cube tests for linear constraint systems.

Cubetest computes the 3D picture of a polyhedron ``A x <= b``: each
constraint row is projected onto three chosen variables, the feasible
vertices are found by intersecting triples of bounding planes, and the
convex hull of those vertices is ready for a renderer.  The cube tests
check whether an axis-aligned cube fits inside the polyhedron, which
certifies an integer solution.

Example usage::

    from cubetest import ConstraintSystem, feasible_hull

    system = ConstraintSystem(A=A, b=b, axes=(0, 1, 2))
    hull = feasible_hull(system.vertices())
"""

from cubetest.construction.problems import ProblemFile, load_problem, save_problem
from cubetest.cube import (
    cube_fits,
    cube_transform,
    cube_vertices,
    largest_cube_edge,
    max_over_cube,
    unit_cube_test,
)
from cubetest.defaults import default_system
from cubetest.errors import ConfigurationError
from cubetest.hull import feasible_hull, hull_volume
from cubetest.lattice import integer_points, is_feasible, round_to_lattice
from cubetest.model import ConstraintSystem, FeasibleHull, HalfSpace, Tolerances
from cubetest.objective import (
    maximise,
    normalised_objective,
    objective_range,
    objective_values,
)
from cubetest.projection import project, project_rows
from cubetest.vertices import enumerate_vertices

__all__ = [
    "ConfigurationError",
    "ConstraintSystem",
    "FeasibleHull",
    "HalfSpace",
    "ProblemFile",
    "Tolerances",
    "cube_fits",
    "cube_transform",
    "cube_vertices",
    "default_system",
    "enumerate_vertices",
    "feasible_hull",
    "hull_volume",
    "integer_points",
    "is_feasible",
    "largest_cube_edge",
    "load_problem",
    "max_over_cube",
    "maximise",
    "normalised_objective",
    "objective_range",
    "objective_values",
    "project",
    "project_rows",
    "round_to_lattice",
    "save_problem",
    "unit_cube_test",
]
