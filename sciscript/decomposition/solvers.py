"""
Solver dispatch for decompositions.

Public API: svd(), qr(), hessenberg(). Each validates its operand, picks
the backend and wraps the Result in a DecompositionSolution.
"""

from __future__ import annotations

import logging
from typing import Any, Literal

from sciscript.core.conversion import build_matrix
from sciscript.core.matrix import Matrix
from sciscript.core.validation import check_square
from sciscript.decomposition.solution import (
    DecompositionSolution,
    SVDParams,
    QRParams,
    HessenbergParams,
)
from sciscript.decomposition.backends.cpu import (
    CPUSVDBackend,
    CPUQRBackend,
    CPUHessenbergBackend,
)

logger = logging.getLogger(__name__)

BackendChoice = Literal['auto', 'cpu']


def svd(m: Matrix | Any, *, backend: BackendChoice = 'auto') -> DecompositionSolution[SVDParams]:
    """
    Singular value decomposition of any M x N matrix.

    Returns:
        Solution with components u (M x M), s (singular values),
        v (N x N) such that m = u · diag(s) · vᵀ

    Raises:
        ShapeError: Empty or malformed input
        ConvergenceError: If LAPACK fails to converge

    Example:
        >>> result = svd([[3, 0], [0, 4]])
        >>> result.as_dict()['s']
        [4.0, 3.0]
    """
    m = build_matrix(m, 'm')
    impl = _get_backend(backend, CPUSVDBackend)
    logger.debug("svd: %dx%d via %s", m.rows, m.columns, impl.name)
    return DecompositionSolution(_result=impl.solve(m))


def qr(m: Matrix | Any, *, backend: BackendChoice = 'auto') -> DecompositionSolution[QRParams]:
    """
    Reduced QR decomposition.

    Returns:
        Solution with components q (M x K, orthonormal columns) and
        r (K x N, upper triangular), K = min(M, N). info['rank'] holds the
        numerical rank.
    """
    m = build_matrix(m, 'm')
    impl = _get_backend(backend, CPUQRBackend)
    logger.debug("qr: %dx%d via %s", m.rows, m.columns, impl.name)
    return DecompositionSolution(_result=impl.solve(m))


def hessenberg(m: Matrix | Any, *, backend: BackendChoice = 'auto') -> DecompositionSolution[HessenbergParams]:
    """
    Hessenberg reduction of a square matrix.

    Returns:
        Solution with components p (orthogonal) and h (upper Hessenberg)
        such that m = p · h · pᵀ

    Raises:
        DimensionError: If m is not square
    """
    m = build_matrix(m, 'm')
    check_square(m, 'm')
    impl = _get_backend(backend, CPUHessenbergBackend)
    logger.debug("hessenberg: %dx%d via %s", m.rows, m.columns, impl.name)
    return DecompositionSolution(_result=impl.solve(m))


def _get_backend(choice: BackendChoice, cpu_backend: type):
    """
    Instantiate the backend for a decomposition.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'cpu'):
        return cpu_backend()
    raise ValueError(f"Unknown backend: {choice!r}")
