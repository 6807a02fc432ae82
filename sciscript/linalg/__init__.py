"""
Linear-algebra operations.

Public API:
    inv(m)            -> Matrix
    mtimes(a, b)      -> Matrix
    horzcat(a, b)     -> Matrix
    vertcat(a, b)     -> Matrix
    repmat(m, nx, ny) -> Matrix
    transpose(m)      -> Matrix
    meshgrid(x, y)    -> {'x': Matrix, 'y': Matrix}
    diag(m)           -> Matrix

Example:
    >>> from sciscript.linalg import mtimes
    >>> mtimes([[1, 2]], [[3], [4]]).get(0, 0)
    11.0
"""

from sciscript.linalg.solvers import (
    inv,
    mtimes,
    horzcat,
    vertcat,
    repmat,
    transpose,
    meshgrid,
    diag,
)

__all__ = [
    "inv",
    "mtimes",
    "horzcat",
    "vertcat",
    "repmat",
    "transpose",
    "meshgrid",
    "diag",
]
