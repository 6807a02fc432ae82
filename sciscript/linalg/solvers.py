"""
Linear-algebra operations on Matrix.

Every function validates its operands before touching the numeric
backend, returns a newly allocated Matrix and never mutates its inputs.
Arguments may be Matrix instances or dynamic values; dynamic values go
through build_matrix() first.
"""

from __future__ import annotations

import logging
import warnings
from typing import Any
import numpy as np

from sciscript.core.conversion import build_matrix, build_vector
from sciscript.core.matrix import Matrix
from sciscript.core.compute.linalg.inverse import inv_cpu
from sciscript.core.compute.tolerances import ILL_CONDITIONED_THRESHOLD
from sciscript.core.validation import (
    check_square,
    check_inner_dimensions,
    check_same_rows,
    check_same_columns,
    check_positive_int,
    check_finite_result,
)

logger = logging.getLogger(__name__)


def inv(m: Matrix | Any) -> Matrix:
    """
    Inverse of a square matrix.

    Args:
        m: Square matrix

    Returns:
        m⁻¹

    Raises:
        DimensionError: If m is not square
        SingularMatrixError: If m is singular to working precision
        NonFiniteResultError: If an entry of the inverse overflows

    Example:
        >>> inv([[1, 2], [3, 4]]).to_numpy()
        array([[-2. ,  1. ],
               [ 1.5, -0.5]])
    """
    m = build_matrix(m, 'm')
    check_square(m, 'm')

    result = inv_cpu(m.to_numpy(), name='m')
    check_finite_result(result.inverse, 'inv', (m.shape,))
    logger.debug("inv: %dx%d, cond=%.3e", m.rows, m.columns, result.condition_number)

    if result.condition_number > ILL_CONDITIONED_THRESHOLD:
        warnings.warn(
            f"inv: matrix is ill-conditioned (condition number "
            f"{result.condition_number:.3e}); result may be inaccurate"
        )

    return Matrix.from_array(result.inverse)


def mtimes(a: Matrix | Any, b: Matrix | Any) -> Matrix:
    """
    Matrix product a @ b.

    Raises:
        DimensionError: If a.columns != b.rows, naming both shapes
        NonFiniteResultError: If the product overflows
    """
    a = build_matrix(a, 'a')
    b = build_matrix(b, 'b')
    check_inner_dimensions(a, b, ('a', 'b'))
    with np.errstate(over='ignore', invalid='ignore'):
        product = a.to_numpy() @ b.to_numpy()
    check_finite_result(product, 'mtimes', (a.shape, b.shape))
    return Matrix.from_array(product)


def horzcat(a: Matrix | Any, b: Matrix | Any) -> Matrix:
    """
    Concatenate side by side: [a, b].

    Raises:
        DimensionError: If the row counts differ
    """
    a = build_matrix(a, 'a')
    b = build_matrix(b, 'b')
    check_same_rows(a, b, ('a', 'b'))
    return Matrix.from_array(np.hstack([a.to_numpy(), b.to_numpy()]))


def vertcat(a: Matrix | Any, b: Matrix | Any) -> Matrix:
    """
    Stack vertically: [a; b].

    Raises:
        DimensionError: If the column counts differ
    """
    a = build_matrix(a, 'a')
    b = build_matrix(b, 'b')
    check_same_columns(a, b, ('a', 'b'))
    return Matrix.from_array(np.vstack([a.to_numpy(), b.to_numpy()]))


def repmat(m: Matrix | Any, nx: Any, ny: Any) -> Matrix:
    """
    Tile m nx times along the rows and ny times along the columns.

    The result has shape (m.rows * nx, m.columns * ny).

    Raises:
        DomainError: If nx or ny is not a positive integer
    """
    m = build_matrix(m, 'm')
    nx = check_positive_int(nx, 'nx')
    ny = check_positive_int(ny, 'ny')
    return Matrix.from_array(np.tile(m.to_numpy(), (nx, ny)))


def transpose(m: Matrix | Any) -> Matrix:
    """Transpose; always valid."""
    return build_matrix(m, 'm').transpose()


def meshgrid(x: Matrix | Any, y: Matrix | Any) -> dict[str, Matrix]:
    """
    Rectangular grid coordinates from two vectors.

    Both grids have len(y) rows and len(x) columns: every row of the 'x'
    grid is x, every column of the 'y' grid is y. x and y may each be
    flat, row or column vectors.

    Returns:
        {'x': X, 'y': Y}

    Raises:
        ShapeError: If x or y is not a vector

    Example:
        >>> grid = meshgrid([1, 2, 3], [4, 5])
        >>> grid['y'].to_numpy().tolist()
        [[4.0, 4.0, 4.0], [5.0, 5.0, 5.0]]
    """
    xs = build_vector(x, 'x')
    ys = build_vector(y, 'y')
    gx, gy = np.meshgrid(xs, ys)
    return {'x': Matrix.from_array(gx), 'y': Matrix.from_array(gy)}


def diag(m: Matrix | Any) -> Matrix:
    """
    Diagonal matrix from a vector, or the diagonal of a matrix.

    A vector of any orientation becomes the square matrix with it on the
    main diagonal. Any other matrix yields its main diagonal as a column
    vector of length min(rows, columns).

    Example:
        >>> diag([1, 2]).to_numpy().tolist()
        [[1.0, 0.0], [0.0, 2.0]]
        >>> diag([[1, 2], [3, 4]]).to_numpy().tolist()
        [[1.0], [4.0]]
    """
    m = build_matrix(m, 'm')
    if m.is_vector:
        return Matrix.from_array(np.diag(m.flatten()))
    return Matrix.from_array(np.diagonal(m.to_numpy()).reshape(-1, 1))
