"""
Conversion and validation from dynamic values to Matrix.

build_matrix() is the boundary: everything the host passes in goes through
it exactly once, and downstream code trusts the Matrix it returns.

Accepted shapes:
    [1, 2, 3]                 -> 1 x 3 row vector
    [[1, 2], [3, 4]]          -> 2 x 2, row by row
    [[1], [2], [3]]           -> 3 x 1 column vector

Rejected (ShapeError):
    []                        -> undefined shape
    [[1, 2], [3]]             -> jagged
    [1, [2, 3]]               -> mixed scalars and rows
    [[[1]]]                   -> more than two dimensions
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from sciscript.core.dynamic import KIND_FLOAT, KIND_INT, kind_of, to_float, is_array
from sciscript.core.exceptions import ShapeError, ConversionError
from sciscript.core.matrix import Matrix


def build_matrix(value: Any, name: str = 'matrix') -> Matrix:
    """
    Build a Matrix from a dynamic value.

    Args:
        value: Flat sequence (row vector) or sequence of equal-length
            sequences (one per row). A Matrix is returned unchanged.
        name: Operand name for error messages

    Returns:
        Validated Matrix

    Raises:
        ShapeError: Empty, jagged, mixed or too deeply nested input
        ConversionError: First element that is not a finite number; no
            partial matrix is produced
    """
    if isinstance(value, Matrix):
        return value

    if not is_array(value):
        raise ShapeError(
            f"{name}: expected an array, got {kind_of(value)} {value!r}",
            expected='array',
            actual=kind_of(value),
        )
    if len(value) == 0:
        raise ShapeError(
            f"{name}: empty array has undefined shape",
            expected='at least one row',
            actual=0,
        )

    row_flags = [is_array(item) for item in value]

    if not any(row_flags):
        data = [_element(item, name, (0, j)) for j, item in enumerate(value)]
        return Matrix.from_rows(1, len(data), data)

    if not all(row_flags):
        bad = row_flags.index(False)
        raise ShapeError(
            f"{name}: row {bad} is a {kind_of(value[bad])}, but other rows are arrays; "
            f"cannot mix scalars and rows",
            row=bad,
            expected='array',
            actual=kind_of(value[bad]),
        )

    n_columns = len(value[0])
    data: list[float] = []
    for i, row in enumerate(value):
        if len(row) != n_columns:
            raise ShapeError(
                f"{name}: jagged matrix, row {i} has length {len(row)} "
                f"but row 0 has length {n_columns}",
                row=i,
                expected=n_columns,
                actual=len(row),
            )
        if n_columns == 0:
            raise ShapeError(
                f"{name}: row {i} is empty",
                row=i,
                expected='at least one column',
                actual=0,
            )
        for j, item in enumerate(row):
            if is_array(item):
                raise ShapeError(
                    f"{name}: element ({i}, {j}) is an array; only 2-D matrices are supported",
                    row=i,
                    expected=2,
                    actual=3,
                )
            data.append(_element(item, name, (i, j)))

    return Matrix.from_rows(len(value), n_columns, data)


def build_vector(value: Any, name: str = 'vector') -> NDArray[np.floating[Any]]:
    """
    Build a 1-D array from a dynamic vector.

    Accepts a flat sequence, a row vector [[...]] or a column vector
    [[a], [b], ...]. A Matrix argument must itself be a vector.

    Raises:
        ShapeError: If the value is not a vector
    """
    matrix = build_matrix(value, name)
    if not matrix.is_vector:
        raise ShapeError(
            f"{name}: expected a vector, got {matrix.rows}x{matrix.columns} matrix",
            expected='1xN or Nx1',
            actual=matrix.shape,
        )
    return np.asarray(matrix.flatten(), dtype=np.float64)


def _element(item: Any, name: str, position: tuple[int, int]) -> float:
    try:
        return to_float(item, position=position)
    except ConversionError as e:
        raise ConversionError(
            f"{name}: {e}",
            value=e.value,
            kind=e.kind,
            position=e.position,
        ) from e


# === Shape queries on raw dynamic values ===


def matrix_size(value: Any) -> list[int]:
    """
    Dimensions of a nested dynamic array, following the first element
    at each level. Scalars have size [].
    """
    dims: list[int] = []
    current = value
    while is_array(current):
        dims.append(len(current))
        if len(current) == 0:
            break
        current = current[0]
    return dims


def numel(value: Any) -> int:
    """Total number of scalar elements in a nested dynamic array."""
    if not is_array(value):
        return 1
    return sum(numel(item) for item in value)


def is_list(value: Any) -> bool:
    """True for a flat (one-level) array."""
    return is_array(value) and len(matrix_size(value)) == 1


def is_numeric_list(value: Any) -> bool:
    """
    True for a flat array of numbers of one kind.

    [1, 2, 3] and [1.0, 2.5] qualify; [1, 2.5] mixes ints with floats
    and does not.
    """
    if not is_list(value):
        return False
    kinds = {kind_of(item) for item in value}
    return kinds <= {KIND_INT} or kinds <= {KIND_FLOAT}


def is_matrix(value: Any) -> bool:
    """True for a rectangular, two-level numeric array."""
    if not is_array(value) or not value or not all(is_array(row) for row in value):
        return False
    try:
        build_matrix(value)
    except (ShapeError, ConversionError):
        return False
    return True


def is_row_vector(value: Any) -> bool:
    """True for a 1 x N two-level array such as [[1, 2, 3]]."""
    return is_matrix(value) and len(value) == 1


def is_column_vector(value: Any) -> bool:
    """True for an N x 1 two-level array such as [[1], [2], [3]]."""
    return is_matrix(value) and len(value[0]) == 1
