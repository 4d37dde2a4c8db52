"""
Tolerance tiers for numerical comparison.

Defines the precision expectations used by the matrix library:
- EQUALITY: cell-wise comparison in equals() and the test helpers
- SINGULARITY: determinant threshold below which inverse() refuses

The 1e-7 absolute tolerance is part of the public contract of equals();
existing fixtures compare against exactly this value.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Named absolute tolerance for numerical comparison."""
    atol: float
    name: str
    description: str

    def close(self, a: float, b: float) -> bool:
        """True if |a - b| is strictly below atol."""
        return abs(a - b) < self.atol


# Cell-wise matrix equality: |A[i][j] - B[i][j]| < 1e-7
EQUALITY = ToleranceTier(
    atol=1e-7,
    name='equality',
    description='Cell-wise matrix equality (strict less-than)',
)

# A determinant this close to zero makes the matrix non-invertible
SINGULARITY = ToleranceTier(
    atol=1e-7,
    name='singularity',
    description='Determinant magnitude below which a matrix is singular',
)

_TIERS = {tier.name: tier for tier in (EQUALITY, SINGULARITY)}


def select_tolerance(name: str) -> ToleranceTier:
    """Look up a tolerance tier by name."""
    try:
        return _TIERS[name]
    except KeyError:
        raise KeyError(
            f"Unknown tolerance tier {name!r}. "
            f"Available: {sorted(_TIERS)}"
        ) from None
