"""
Matrix decompositions.

Public API:
    svd(m)        -> DecompositionSolution with u, s, v
    qr(m)         -> DecompositionSolution with q, r
    hessenberg(m) -> DecompositionSolution with p, h

Example:
    >>> from sciscript.decomposition import qr
    >>> result = qr([[1, 2], [3, 4]])
    >>> result.q.shape, result.r.shape
    ((2, 2), (2, 2))
"""

from sciscript.decomposition.solution import (
    DecompositionSolution,
    SVDParams,
    QRParams,
    HessenbergParams,
)
from sciscript.decomposition.solvers import svd, qr, hessenberg

__all__ = [
    "svd",
    "qr",
    "hessenberg",
    "DecompositionSolution",
    "SVDParams",
    "QRParams",
    "HessenbergParams",
]
