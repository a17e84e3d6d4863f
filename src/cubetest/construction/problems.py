"""Problem save/load for JSON files."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from cubetest.errors import ConfigurationError
from cubetest.model import ConstraintSystem, Tolerances

logger = logging.getLogger(__name__)

_VALID_SECTIONS = frozenset({"system", "tolerances"})


@dataclass
class ProblemFile:
    """A constraint system and tolerances loaded from or saved to a file.

    Both fields are optional.  A file that only contains
    ``"system"`` loads with ``tolerances`` set to ``None``.

    Attributes:
        system: The constraint system and its 3D view.
        tolerances: Numerical thresholds for vertex enumeration.
    """

    system: ConstraintSystem | None = None
    tolerances: Tolerances | None = None


def save_problem(
    path: str | Path,
    *,
    system: ConstraintSystem | None = None,
    tolerances: Tolerances | None = None,
) -> None:
    """Save a problem to a JSON file.

    Only sections that are not ``None`` are written.  The file is
    human-readable with two-space indentation.

    Args:
        path: Destination file path.
        system: Constraint system to store.
        tolerances: Numerical thresholds to store.
    """
    data: dict = {}
    if system is not None:
        data["system"] = system.to_dict()
    if tolerances is not None:
        data["tolerances"] = tolerances.to_dict()

    Path(path).write_text(json.dumps(data, indent=2) + "\n")
    logger.debug("saved problem sections %s to %s", sorted(data), path)


def load_problem(path: str | Path) -> ProblemFile:
    """Load a problem from a JSON file.

    All sections are optional.

    Args:
        path: Source file path.

    Returns:
        A :class:`ProblemFile` with the parsed sections.

    Raises:
        ConfigurationError: If the file is not a JSON object, contains
            unknown top-level keys, or a section is invalid.
    """
    data = json.loads(Path(path).read_text())
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"problem file must contain a JSON object, got {type(data).__name__}"
        )

    unknown = set(data) - _VALID_SECTIONS
    if unknown:
        raise ConfigurationError(
            f"unknown top-level keys in problem file: {sorted(unknown)}"
        )

    system = None
    if "system" in data:
        system = ConstraintSystem.from_dict(data["system"])

    tolerances = None
    if "tolerances" in data:
        tolerances = Tolerances.from_dict(data["tolerances"])

    logger.debug("loaded problem sections %s from %s", sorted(data), path)
    return ProblemFile(system=system, tolerances=tolerances)
