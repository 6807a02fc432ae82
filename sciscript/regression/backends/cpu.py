"""
CPU backend for ordinary least squares.

Solves through a Householder QR of the design (never the normal
equations), so conditioning is that of X rather than XᵀX.
"""

from typing import Any
import numpy as np

from sciscript.core.result import Result
from sciscript.core.compute.timing import Timer
from sciscript.core.compute.linalg.qr import qr_solve_cpu
from sciscript.regression.design import RegressionDesign
from sciscript.regression.solution import RegressionParams


class CPUQRBackend:
    """
    QR least squares; RegressionDesign -> RegressionParams.

    A rank-deficient design raises instead of producing coefficients that
    depend on pivoting accidents.
    """

    @property
    def name(self) -> str:
        return 'cpu_qr'

    def solve(self, design: RegressionDesign) -> Result[RegressionParams]:
        """
        Fit β = R⁻¹ · Qᵀ · y and the sums of squares around it.

        Raises:
            SingularMatrixError: If X does not have full column rank
        """
        X, y = design.X, design.y

        with Timer() as timer:
            with timer.section('qr_solve'):
                beta, factors = qr_solve_cpu(X, y, check_rank=True)

            with timer.section('fit'):
                fitted = X @ beta
                resid = y - fitted
                rss = float(resid @ resid)
                # through the origin the total sum of squares is uncentered
                centre = float(np.mean(y)) if design.intercept else 0.0
                tss = float(np.sum((y - centre) ** 2))

        info: dict[str, Any] = {
            'method': 'qr',
            'rank': factors.rank,
            'intercept': design.intercept,
        }

        return Result(
            params=RegressionParams(
                coefficients=beta,
                residuals=resid,
                fitted_values=fitted,
                rss=rss,
                tss=tss,
                rank=factors.rank,
                df_residual=design.n - factors.rank,
            ),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
        )
