"""
Regression design.

RegressionDesign turns the dynamic x and y arguments of regress() into a
validated design matrix X (with an optional leading intercept column) and
response vector y.

Orientation of x:
    - any vector (flat, row or column) is a single predictor, one value
      per observation
    - a matrix holds one observation per row, one predictor per column
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from sciscript.core.conversion import build_matrix, build_vector
from sciscript.core.validation import check_consistent_length, check_min_samples

MIN_OBSERVATIONS = 2


@dataclass(frozen=True)
class RegressionDesign:
    """
    Ordinary least squares design. Immutable after construction.

    Construction:
        RegressionDesign.build(x, y)                   # intercept prepended
        RegressionDesign.build(x, y, intercept=False)  # regression through origin
    """
    _X: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    _p: int
    _intercept: bool

    @classmethod
    def build(cls, x: Any, y: Any, *, intercept: bool = True) -> RegressionDesign:
        """
        Validate dynamic inputs and assemble the design.

        Raises:
            ShapeError / ConversionError: Malformed x or y
            DimensionError: If x and y hold different numbers of observations
            ValidationError: Fewer than two observations, or fewer
                observations than parameters
        """
        x_matrix = build_matrix(x, 'x')
        y_arr = build_vector(y, 'y')

        if x_matrix.is_vector:
            X = np.asarray(x_matrix.flatten(), dtype=np.float64).reshape(-1, 1)
        else:
            X = x_matrix.to_numpy()

        check_consistent_length(X, y_arr, names=('x', 'y'))
        check_min_samples(X, MIN_OBSERVATIONS, 'x')

        if intercept:
            X = np.column_stack([np.ones(X.shape[0]), X])

        n, p = X.shape
        check_min_samples(X, p, 'x')

        X.setflags(write=False)
        y_arr.setflags(write=False)
        return cls(_X=X, _y=y_arr, _n=n, _p=p, _intercept=intercept)

    # === Properties ===

    @property
    def X(self) -> NDArray[np.floating[Any]]:
        """Design matrix (n x p), intercept column first if present."""
        return self._X

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response vector (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def p(self) -> int:
        """Number of parameters, intercept included."""
        return self._p

    @property
    def intercept(self) -> bool:
        return self._intercept

    @property
    def n_predictors(self) -> int:
        """Number of predictors, intercept excluded."""
        return self._p - 1 if self._intercept else self._p

    def XtX(self) -> NDArray[np.floating[Any]]:
        """Compute X'X (for standard errors)."""
        return self._X.T @ self._X
