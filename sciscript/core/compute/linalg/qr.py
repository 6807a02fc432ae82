"""
Householder QR kernels.

qr_cpu() backs the qr() decomposition; qr_solve_cpu() backs the least
squares solve in regress(). Both work on plain float64 ndarrays.
"""

from dataclasses import dataclass
from typing import Literal, Any
import numpy as np
from numpy.typing import NDArray
from scipy import linalg as sp_linalg

from sciscript.core.exceptions import SingularMatrixError


@dataclass(frozen=True)
class QRResult:
    """
    Factors of A = Q · R.

    Attributes:
        Q: Orthonormal columns; m x k when reduced (k = min(m, n)), m x m when complete
        R: Upper triangular; k x n when reduced, m x n when complete
        rank: Count of diagonal entries of R above the rank tolerance
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]
    rank: int


def numerical_rank(R: NDArray[np.floating[Any]], shape: tuple[int, int]) -> int:
    """
    Rank of the factored matrix, read off the diagonal of R.

    An entry counts when it exceeds max(m, n) · eps · max|diag(R)|.
    """
    pivots = np.abs(np.diagonal(R))
    if pivots.size == 0 or not pivots.max() > 0:
        return 0
    cutoff = max(shape) * np.finfo(np.float64).eps * pivots.max()
    return int(np.count_nonzero(pivots > cutoff))


def qr_cpu(
    A: NDArray[np.floating[Any]],
    mode: Literal['reduced', 'complete'] = 'reduced'
) -> QRResult:
    """
    Factor A = Q · R through LAPACK geqrf/orgqr.

    Args:
        A: m x n matrix
        mode: 'reduced' for the economy factorization, 'complete' for square Q

    Returns:
        QRResult with both factors and the numerical rank
    """
    Q, R = sp_linalg.qr(A, mode='economic' if mode == 'reduced' else 'full')
    return QRResult(Q=Q, R=R, rank=numerical_rank(R, A.shape))


def qr_solve_cpu(
    X: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    check_rank: bool
) -> tuple[NDArray[np.floating[Any]], QRResult]:
    """
    Least squares min ||y - X·β||² by back substitution on R·β = Qᵀ·y.

    Args:
        X: n x p design, n >= p
        y: length-n response
        check_rank: Refuse rank-deficient designs

    Returns:
        (β, the factorization it came from)

    Raises:
        SingularMatrixError: If check_rank and rank(X) < p
    """
    p = X.shape[1]
    factors = qr_cpu(X, mode='reduced')

    if check_rank and factors.rank < p:
        raise SingularMatrixError(
            f"X is rank-deficient: rank={factors.rank}, expected={p}. "
            f"The predictors cannot be distinguished.",
            matrix_name='X',
            rank=factors.rank,
            expected_rank=p,
        )

    rhs = factors.Q.T @ y
    beta = sp_linalg.solve_triangular(factors.R[:p, :p], rhs[:p])
    return beta, factors
