"""
Matrix inversion kernel.

Singularity is judged from LAPACK's own signal (a zero pivot in the LU
factorization) and from the reciprocal condition number, never from an
exact determinant comparison.
"""

from dataclasses import dataclass
from typing import Any
import warnings

import numpy as np
from numpy.typing import NDArray
from scipy import linalg as sp_linalg

from sciscript.core.exceptions import SingularMatrixError
from sciscript.core.compute.tolerances import SINGULARITY_RCOND


@dataclass(frozen=True)
class InverseResult:
    """
    Result of matrix inversion.

    Attributes:
        inverse: A⁻¹ (n x n)
        condition_number: 1-norm condition number estimate of A
    """
    inverse: NDArray[np.floating[Any]]
    condition_number: float


def inv_cpu(A: NDArray[np.floating[Any]], name: str = 'A') -> InverseResult:
    """
    Invert a square matrix via LU factorization.

    Args:
        A: Square matrix (n x n)
        name: Matrix name for error messages

    Returns:
        InverseResult with the inverse and condition number

    Raises:
        SingularMatrixError: If A is exactly or numerically singular
    """
    try:
        with warnings.catch_warnings():
            # exact singularity is reported below with pivot context
            warnings.simplefilter('ignore', sp_linalg.LinAlgWarning)
            lu, piv = sp_linalg.lu_factor(A, check_finite=True)
    except sp_linalg.LinAlgError as e:
        raise SingularMatrixError(
            f"{name}: LU factorization failed: {e}",
            matrix_name=name,
        ) from e

    # lu_factor reports exact singularity with a warning, not an exception
    if np.any(np.diag(lu) == 0.0):
        raise SingularMatrixError(
            f"{name}: matrix is singular (zero pivot in LU factorization)",
            matrix_name=name,
            condition_number=float('inf'),
        )

    anorm = np.linalg.norm(A, 1)
    rcond = _rcond_from_lu(lu, anorm)
    condition_number = float('inf') if rcond == 0.0 else 1.0 / rcond

    if rcond < SINGULARITY_RCOND:
        raise SingularMatrixError(
            f"{name}: matrix is numerically singular "
            f"(reciprocal condition number {rcond:.3e} < {SINGULARITY_RCOND:.3e})",
            matrix_name=name,
            condition_number=condition_number,
        )

    inverse = sp_linalg.lu_solve((lu, piv), np.eye(A.shape[0]))
    return InverseResult(inverse=inverse, condition_number=condition_number)


def _rcond_from_lu(lu: NDArray[np.floating[Any]], anorm: float) -> float:
    """Reciprocal 1-norm condition number from an LU factorization (LAPACK gecon)."""
    gecon, = sp_linalg.get_lapack_funcs(('gecon',), (lu,))
    rcond, info = gecon(lu, anorm, norm='1')
    if info != 0:
        raise SingularMatrixError(
            f"condition estimate failed (LAPACK gecon info={info})",
        )
    return float(rcond)
