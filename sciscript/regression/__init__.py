"""
Linear regression.

Public API:
    regress(x, y, ...) -> RegressionSolution   (alias: fit)

regress() handles:
    - Input validation
    - Design construction
    - Backend selection
    - Result wrapping

Example:
    >>> from sciscript.regression import regress
    >>> result = regress([1, 2, 3], [2, 4, 6])
    >>> print(result.summary())
"""

from sciscript.regression.design import RegressionDesign
from sciscript.regression.solution import RegressionSolution, RegressionParams
from sciscript.regression.solvers import regress, fit

__all__ = [
    "regress",
    "fit",
    "RegressionDesign",
    "RegressionSolution",
    "RegressionParams",
]
