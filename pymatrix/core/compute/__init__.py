"""
Shared compute infrastructure for pymatrix.

Submodules:
    tolerances: Tolerance tiers (the 1e-7 equality contract)
    timing: Execution timing utilities
"""

from pymatrix.core.compute.timing import Timer, timed
from pymatrix.core.compute.tolerances import (
    EQUALITY,
    SINGULARITY,
    ToleranceTier,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "EQUALITY",
    "SINGULARITY",
    "select_tolerance",
]
