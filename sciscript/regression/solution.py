"""
Regression results.

RegressionParams is what the backend computes; RegressionSolution derives
goodness of fit and coefficient inference from it on demand.
"""

from dataclasses import dataclass
from functools import cached_property
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray
from scipy import linalg as sp_linalg
from scipy import stats as sp_stats

from sciscript.core.dynamic import from_named_results
from sciscript.core.result import Result

if TYPE_CHECKING:
    from sciscript.regression.design import RegressionDesign


@dataclass(frozen=True)
class RegressionParams:
    """
    Raw output of a least squares backend.

    Attributes:
        coefficients: β, intercept first when one was fitted
        residuals: y - X·β
        fitted_values: X·β
        rss: Residual sum of squares
        tss: Total sum of squares (centered only with an intercept)
        rank: Numerical rank of X
        df_residual: n - rank
    """
    coefficients: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    rss: float
    tss: float
    rank: int
    df_residual: int


class RegressionSolution:
    """
    Fitted ordinary least squares model.

    Inference uses the t distribution with df_residual degrees of freedom.
    With no residual degrees of freedom (n equal to the number of
    parameters) the fit is exact, and standard errors, t statistics and
    p values are NaN.
    """

    def __init__(self, result: Result[RegressionParams], design: 'RegressionDesign'):
        self._result = result
        self._design = design

    @property
    def _params(self) -> RegressionParams:
        return self._result.params

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        return self._params.coefficients

    @property
    def intercept(self) -> float | None:
        """None for regression through the origin."""
        if self._design.intercept:
            return float(self.coefficients[0])
        return None

    @property
    def slopes(self) -> NDArray[np.floating[Any]]:
        start = 1 if self._design.intercept else 0
        return self.coefficients[start:]

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._params.residuals

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._params.fitted_values

    @property
    def rss(self) -> float:
        return self._params.rss

    @property
    def tss(self) -> float:
        return self._params.tss

    @property
    def rank(self) -> int:
        return self._params.rank

    @property
    def df_residual(self) -> int:
        return self._params.df_residual

    @cached_property
    def _round_off(self) -> float:
        """Largest sum of squares indistinguishable from zero at the scale of y."""
        y = self._design.y
        scale = 100.0 * y.size * np.finfo(np.float64).eps * float(np.max(np.abs(y)))
        return scale * scale

    @property
    def r_squared(self) -> float:
        # constant response: perfect when also fitted exactly
        if self.tss <= self._round_off:
            return float(self.rss <= self._round_off)
        return 1.0 - self.rss / self.tss

    @property
    def adjusted_r_squared(self) -> float:
        n, k = self._design.n, self.rank
        if self.df_residual <= 0 or self.tss <= self._round_off:
            return self.r_squared
        return 1.0 - (1.0 - self.r_squared) * (n - 1) / (n - k)

    @property
    def residual_std_error(self) -> float:
        """σ̂; NaN when no residual degrees of freedom remain."""
        if self.df_residual <= 0:
            return float('nan')
        return float(np.sqrt(self.rss / self.df_residual))

    @cached_property
    def covariance(self) -> NDArray[np.floating[Any]]:
        """
        Coefficient covariance σ̂² · (XᵀX)⁻¹.

        XᵀX is inverted through its Cholesky factor; full column rank is
        guaranteed by the backend.
        """
        p = len(self.coefficients)
        if self.df_residual <= 0:
            return np.full((p, p), np.nan)
        sigma_sq = self.rss / self.df_residual
        factor = sp_linalg.cho_factor(self._design.XtX())
        return sigma_sq * sp_linalg.cho_solve(factor, np.eye(p))

    @cached_property
    def standard_errors(self) -> NDArray[np.floating[Any]]:
        return np.sqrt(np.diag(self.covariance))

    @cached_property
    def t_statistics(self) -> NDArray[np.floating[Any]]:
        with np.errstate(divide='ignore', invalid='ignore'):
            t = self.coefficients / self.standard_errors
        # exact fits divide by zero
        t[~np.isfinite(t)] = np.nan
        return t

    @cached_property
    def p_values(self) -> NDArray[np.floating[Any]]:
        """Two-sided p values."""
        if self.df_residual <= 0:
            return np.full(len(self.coefficients), np.nan)
        return 2.0 * sp_stats.t.sf(np.abs(self.t_statistics), self.df_residual)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def term_names(self) -> list[str]:
        """'(Intercept)' then x1, x2, ... in coefficient order."""
        names = [f"x{i}" for i in range(1, self._design.n_predictors + 1)]
        return ['(Intercept)', *names] if self._design.intercept else names

    def as_dict(self) -> dict[str, Any]:
        """
        The fit as a dynamic map.

        'intercept' appears only when one was fitted and 'slope' only for a
        single predictor.
        """
        fields: dict[str, Any] = {'coefficients': self.coefficients}
        if self.intercept is not None:
            fields['intercept'] = self.intercept
        if self._design.n_predictors == 1:
            fields['slope'] = float(self.slopes[0])
        fields['r_squared'] = self.r_squared
        fields['adjusted_r_squared'] = self.adjusted_r_squared
        fields['residual_std_error'] = self.residual_std_error
        fields['standard_errors'] = self.standard_errors
        fields['t_statistics'] = self.t_statistics
        fields['p_values'] = self.p_values
        fields['residuals'] = self.residuals
        fields['fitted_values'] = self.fitted_values
        fields['df_residual'] = self.df_residual
        fields['rank'] = self.rank
        return from_named_results(fields)

    def summary(self) -> str:
        """Coefficient table with fit statistics underneath."""
        header = f"{'':<12}{'Estimate':>13}{'Std. Error':>13}{'t value':>10}{'Pr(>|t|)':>11}"
        rows = [
            f"OLS fit: n = {self._design.n}, parameters = {self._design.p}",
            "",
            header,
        ]
        for name, est, se, t, pv in zip(
            self.term_names(), self.coefficients,
            self.standard_errors, self.t_statistics, self.p_values,
        ):
            rows.append(
                f"{name:<12}{est:>13.6g}{_fmt(se, '.6g', 13)}"
                f"{_fmt(t, '.3f', 10)}{_fmt(pv, '.4g', 11)}"
            )
        rows += [
            "",
            f"Residual standard error: {self.residual_std_error:.6g} "
            f"on {self.df_residual} degrees of freedom",
            f"Multiple R-squared: {self.r_squared:.6f}, "
            f"Adjusted R-squared: {self.adjusted_r_squared:.6f}",
            f"Backend: {self.backend_name}",
        ]
        if self.timing:
            rows.append(f"Time: {self.timing['total_seconds']:.4f}s")
        return "\n".join(rows)

    def __repr__(self) -> str:
        return (
            f"RegressionSolution(n={self._design.n}, p={self._design.p}, "
            f"r_squared={self.r_squared:.4f})"
        )


def _fmt(value: float, spec: str, width: int) -> str:
    if np.isnan(value):
        return f"{'NA':>{width}}"
    return f"{value:>{width}{spec}}"
