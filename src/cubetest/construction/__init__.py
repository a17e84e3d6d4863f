"""Problem construction: file I/O for constraint systems and tolerances."""

from cubetest.construction.problems import ProblemFile, load_problem, save_problem

__all__ = [
    "ProblemFile",
    "load_problem",
    "save_problem",
]
