"""Numerical thresholds shared by the projection and enumeration code."""

SINGULAR_EPS: float = 1e-8
"""Determinants with absolute value below this are treated as singular."""

FEASIBILITY_TOL: float = 1e-6
"""Slack admitted when testing ``normal . x + offset <= 0``."""

DEDUP_DIST_SQ: float = 1e-10
"""Squared distance below which two vertices are the same point."""
