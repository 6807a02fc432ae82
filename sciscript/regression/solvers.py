"""
Solver dispatch for regression.

This module provides regress() (public API) and backend selection.
"""

from __future__ import annotations

import logging
from typing import Any, Literal

from sciscript.regression.design import RegressionDesign
from sciscript.regression.solution import RegressionSolution
from sciscript.regression.backends.cpu import CPUQRBackend

logger = logging.getLogger(__name__)

BackendChoice = Literal['auto', 'cpu', 'cpu_qr']


def regress(
    x: Any,
    y: Any,
    *,
    intercept: bool = True,
    backend: BackendChoice = 'auto',
) -> RegressionSolution:
    """
    Fit an ordinary least squares model.

    Solves min_β ||y - Xβ||² where X is x with a leading column of ones
    (unless intercept=False).

    Args:
        x: Predictor vector (one value per observation) or matrix (one
            observation per row, one predictor per column)
        y: Response vector, same number of observations as x
        intercept: Fit an intercept term
        backend: Computational backend ('auto', 'cpu', 'cpu_qr')

    Returns:
        RegressionSolution with coefficients (intercept first), r_squared and
        coefficient inference

    Raises:
        DimensionError: If x and y have different numbers of observations
        ValidationError: Fewer than two observations
        SingularMatrixError: If the design is rank-deficient (predictors
            cannot be distinguished)

    Example:
        >>> result = regress([1, 2, 3], [2, 4, 6])
        >>> round(result.as_dict()['slope'], 10)
        2.0
    """
    # This is the boundary - validate here, trust everywhere else
    design = RegressionDesign.build(x, y, intercept=intercept)

    backend_impl = _get_backend(backend)
    logger.debug("regress: n=%d, p=%d via %s", design.n, design.p, backend_impl.name)

    result = backend_impl.solve(design)

    return RegressionSolution(result, design)


fit = regress


def _get_backend(choice: BackendChoice):
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_qr'):
        return CPUQRBackend()
    raise ValueError(f"Unknown backend: {choice!r}")
