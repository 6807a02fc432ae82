"""
CPU backends for matrix decompositions.

Each backend wraps one LAPACK routine (through SciPy), times it, and
translates LAPACK failures into sciscript's NumericalError family.
"""

from typing import Any
import numpy as np
from scipy import linalg as sp_linalg

from sciscript.core.result import Result
from sciscript.core.matrix import Matrix
from sciscript.core.compute.timing import Timer
from sciscript.core.compute.linalg.qr import qr_cpu
from sciscript.core.exceptions import ConvergenceError
from sciscript.decomposition.solution import SVDParams, QRParams, HessenbergParams


class CPUSVDBackend:
    """Full SVD via LAPACK gesdd."""

    @property
    def name(self) -> str:
        return 'cpu_svd'

    def solve(self, design: Matrix) -> Result[SVDParams]:
        """
        Compute A = U · diag(S) · Vᵀ.

        Raises:
            ConvergenceError: If the LAPACK routine does not converge
        """
        with Timer() as timer:
            with timer.section('svd'):
                try:
                    u, s, vh = sp_linalg.svd(
                        design.to_numpy(), full_matrices=True, lapack_driver='gesdd'
                    )
                except sp_linalg.LinAlgError as e:
                    raise ConvergenceError(
                        f"SVD did not converge for {design.rows}x{design.columns} matrix: {e}",
                        routine='svd',
                        reason=str(e),
                    ) from e

        cutoff = max(design.shape) * np.finfo(np.float64).eps * s[0]
        info: dict[str, Any] = {
            'method': 'gesdd',
            'rank': int(np.count_nonzero(s > cutoff)),
            'condition_number': float(s[0] / s[-1]) if s[-1] > 0 else float('inf'),
        }

        return Result(
            params=SVDParams(
                u=Matrix.from_array(u),
                s=Matrix.from_array(s),
                v=Matrix.from_array(vh.T),
            ),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
        )


class CPUQRBackend:
    """Reduced Householder QR via LAPACK geqrf/orgqr."""

    @property
    def name(self) -> str:
        return 'cpu_qr'

    def solve(self, design: Matrix) -> Result[QRParams]:
        """Compute A = Q · R (economy size)."""
        with Timer() as timer:
            with timer.section('qr'):
                factors = qr_cpu(design.to_numpy(), mode='reduced')

        full_rank = min(design.shape)
        warnings: tuple[str, ...] = ()
        if factors.rank < full_rank:
            warnings = (
                f"matrix is rank-deficient: rank={factors.rank}, expected={full_rank}",
            )

        return Result(
            params=QRParams(q=Matrix.from_array(factors.Q), r=Matrix.from_array(factors.R)),
            info={'method': 'householder', 'rank': factors.rank},
            timing=timer.result(),
            backend_name=self.name,
            warnings=warnings,
        )


class CPUHessenbergBackend:
    """Hessenberg reduction via LAPACK gehrd/orghr."""

    @property
    def name(self) -> str:
        return 'cpu_hessenberg'

    def solve(self, design: Matrix) -> Result[HessenbergParams]:
        """
        Compute A = P · H · Pᵀ for square A.

        Raises:
            ConvergenceError: If the LAPACK routine reports failure
        """
        with Timer() as timer:
            with timer.section('hessenberg'):
                try:
                    h, p = sp_linalg.hessenberg(design.to_numpy(), calc_q=True)
                except (sp_linalg.LinAlgError, ValueError) as e:
                    raise ConvergenceError(
                        f"Hessenberg reduction failed for {design.rows}x{design.columns} matrix: {e}",
                        routine='hessenberg',
                        reason=str(e),
                    ) from e

        return Result(
            params=HessenbergParams(p=Matrix.from_array(p), h=Matrix.from_array(h)),
            info={'method': 'householder'},
            timing=timer.result(),
            backend_name=self.name,
        )
