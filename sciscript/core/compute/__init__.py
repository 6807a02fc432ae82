"""
Shared compute infrastructure for sciscript.

This module provides timing utilities, tolerance tiers and the LAPACK
kernels that are shared across the domain-specific operation modules.

IMPORTANT: This is NOT where domain backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Comparison tolerances and conditioning thresholds
    linalg: Linear algebra kernels (QR, inversion)
"""

from sciscript.core.compute.timing import Timer
from sciscript.core.compute.tolerances import (
    ToleranceTier,
    EXACT,
    DERIVED,
    DERIVED_ILL_CONDITIONED,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "DERIVED",
    "DERIVED_ILL_CONDITIONED",
    "select_tolerance",
]
