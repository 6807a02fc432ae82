"""
Tolerance tiers for numerical comparison and conditioning checks.

Defines precision expectations for results derived from the LAPACK
backend:
- exact: direct copies (transpose, concatenation, tiling)
- derived: products, inverses and factorizations of well-conditioned input
- ill-conditioned: derived results where cond(A) > ILL_CONDITIONED_THRESHOLD

Used by Matrix.allclose(), the test suite, and the singularity checks in
linalg and regression.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Element copies only, no arithmetic',
)

DERIVED = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='derived',
    description='Double precision arithmetic on well-conditioned input',
)

DERIVED_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='derived_ill_conditioned',
    description='Double precision, ill-conditioned (cond > 1e8)',
)

# Reciprocal condition number below which a matrix is treated as singular.
SINGULARITY_RCOND = float(np.finfo(np.float64).eps)

# Invertible, but results lose roughly half the significant digits.
ILL_CONDITIONED_THRESHOLD = 1e8


def select_tolerance(condition_number: float | None = None) -> ToleranceTier:
    """Select the comparison tier appropriate for a given condition number."""
    if condition_number is not None and condition_number > ILL_CONDITIONED_THRESHOLD:
        return DERIVED_ILL_CONDITIONED
    return DERIVED
