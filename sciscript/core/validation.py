"""
Operand validation utilities for sciscript.

These validators follow the "fail fast, fail loud" principle. They run
before any numeric backend is invoked and raise immediately with clear
error messages rather than letting LAPACK fail opaquely.

Design principles:
    - No silent type coercion
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Operand/parameter names included in all error messages
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from sciscript.core.dynamic import kind_of, to_int
from sciscript.core.exceptions import (
    ConversionError,
    DimensionError,
    DomainError,
    NonFiniteResultError,
    ValidationError,
)
from sciscript.core.matrix import Matrix


def _fmt(shape: tuple[int, int]) -> str:
    return f"{shape[0]}x{shape[1]}"


def check_square(matrix: Matrix, name: str) -> None:
    """
    Verify a matrix is square.

    Raises:
        DimensionError: If rows != columns
    """
    if not matrix.is_square:
        raise DimensionError(
            f"{name}: expected a square matrix, got {_fmt(matrix.shape)}",
            shapes=(matrix.shape,),
        )


def check_inner_dimensions(a: Matrix, b: Matrix, names: tuple[str, str]) -> None:
    """
    Verify a.columns == b.rows for a matrix product.

    Raises:
        DimensionError: Naming both shapes
    """
    if a.columns != b.rows:
        raise DimensionError(
            f"inner dimensions must agree: {names[0]} is {_fmt(a.shape)}, "
            f"{names[1]} is {_fmt(b.shape)} ({a.columns} != {b.rows})",
            shapes=(a.shape, b.shape),
        )


def check_same_rows(a: Matrix, b: Matrix, names: tuple[str, str]) -> None:
    """
    Verify two matrices have the same number of rows.

    Raises:
        DimensionError: Naming both shapes
    """
    if a.rows != b.rows:
        raise DimensionError(
            f"Matrices must have the same number of rows: {names[0]} is "
            f"{_fmt(a.shape)}, {names[1]} is {_fmt(b.shape)}",
            shapes=(a.shape, b.shape),
        )


def check_same_columns(a: Matrix, b: Matrix, names: tuple[str, str]) -> None:
    """
    Verify two matrices have the same number of columns.

    Raises:
        DimensionError: Naming both shapes
    """
    if a.columns != b.columns:
        raise DimensionError(
            f"Matrices must have the same number of columns: {names[0]} is "
            f"{_fmt(a.shape)}, {names[1]} is {_fmt(b.shape)}",
            shapes=(a.shape, b.shape),
        )


def check_positive_int(value: Any, name: str) -> int:
    """
    Validate a positive integer parameter.

    Accepts ints and integral floats (2.0). Returns the value as int.

    Raises:
        DomainError: If the value is not a positive integer
    """
    try:
        result = to_int(value)
    except ConversionError as e:
        raise DomainError(
            f"{name}: expected a positive integer, got {kind_of(value)} {value!r}",
            parameter=name,
            value=value,
        ) from e
    if result < 1:
        raise DomainError(
            f"{name}: expected a positive integer, got {result}",
            parameter=name,
            value=value,
        )
    return result


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Raises:
        ValidationError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} observations, got {n}"
        )


def check_finite_result(
    values: Any,
    operation: str,
    shapes: tuple[tuple[int, int], ...] = (),
) -> None:
    """
    Verify a backend result holds only finite numbers.

    Operands are finite by construction, so inf or NaN here means the
    computation overflowed.

    Raises:
        NonFiniteResultError: Naming the operation, the operand shapes and
            the first offending entry
    """
    arr = np.atleast_2d(np.asarray(values, dtype=np.float64))
    bad = ~np.isfinite(arr)
    if not bad.any():
        return
    i, j = (int(k) for k in np.argwhere(bad)[0])
    operands = " and ".join(_fmt(s) for s in shapes)
    on = f" on {operands}" if operands else ""
    raise NonFiniteResultError(
        f"{operation}: result overflowed{on}; entry ({i}, {j}) is {arr[i, j]}",
        operation=operation,
        shapes=shapes or None,
        position=(i, j),
    )
