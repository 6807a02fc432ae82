"""
Matrix model.

Matrix is the typed 2-D container every operation works on: a flat,
row-major, read-only float64 buffer plus explicit row and column counts.
It is built from dynamic values only through the conversion layer
(sciscript.core.conversion) or the vector constructors here, so a Matrix
in hand always satisfies its invariants.

Invariants:
    - rows >= 1 and columns >= 1
    - buffer.size == rows * columns
    - every element is finite
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from sciscript.core.dynamic import to_float, kind_of
from sciscript.core.exceptions import DimensionError, ShapeError
from sciscript.core.compute.tolerances import DERIVED


@dataclass(frozen=True, eq=False)
class Matrix:
    """
    Dense 2-D float64 matrix. Immutable.

    Construct via the classmethods, not directly:
        Matrix.row_vector([1, 2, 3])         # 1 x 3
        Matrix.column_vector([1, 2, 3])      # 3 x 1
        Matrix.from_rows(2, 2, [1, 2, 3, 4]) # [[1, 2], [3, 4]]
        Matrix.from_array(ndarray)
    """
    _data: NDArray[np.floating[Any]]
    _rows: int
    _columns: int

    def __post_init__(self) -> None:
        if self._rows < 1 or self._columns < 1:
            raise ShapeError(
                f"matrix dimensions must be positive, got {self._rows}x{self._columns}",
                expected='rows >= 1 and columns >= 1',
                actual=(self._rows, self._columns),
            )
        if self._data.ndim != 1 or self._data.size != self._rows * self._columns:
            raise ShapeError(
                f"buffer of size {self._data.size} does not hold a "
                f"{self._rows}x{self._columns} matrix",
                expected=self._rows * self._columns,
                actual=self._data.size,
            )
        bad = np.flatnonzero(~np.isfinite(self._data))
        if bad.size:
            row, column = divmod(int(bad[0]), self._columns)
            raise ShapeError(
                f"matrix elements must be finite, got {self._data[bad[0]]} at ({row}, {column})",
                row=row,
                expected='finite',
                actual=float(self._data[bad[0]]),
            )

    # === Constructors ===

    @classmethod
    def _from_buffer(cls, data: NDArray, rows: int, columns: int) -> Matrix:
        buf = np.array(data, dtype=np.float64).reshape(-1)
        buf.setflags(write=False)
        return cls(_data=buf, _rows=rows, _columns=columns)

    @classmethod
    def row_vector(cls, values: Sequence[Any]) -> Matrix:
        """Build a 1 x N matrix from a flat sequence of numbers."""
        data = _convert_flat(values, 'row_vector')
        return cls._from_buffer(data, 1, len(data))

    @classmethod
    def column_vector(cls, values: Sequence[Any]) -> Matrix:
        """Build an N x 1 matrix from a flat sequence of numbers."""
        data = _convert_flat(values, 'column_vector')
        return cls._from_buffer(data, len(data), 1)

    @classmethod
    def from_rows(cls, rows: int, columns: int, data: Sequence[Any]) -> Matrix:
        """
        Build a rows x columns matrix from flat row-major data.

        Raises:
            ShapeError: If len(data) != rows * columns or a dimension is < 1
        """
        if rows < 1 or columns < 1:
            raise ShapeError(
                f"matrix dimensions must be positive, got {rows}x{columns}",
                expected='rows >= 1 and columns >= 1',
                actual=(rows, columns),
            )
        values = _convert_flat(data, 'from_rows', allow_empty=True)
        if len(values) != rows * columns:
            raise ShapeError(
                f"from_rows: {rows}x{columns} matrix needs {rows * columns} "
                f"elements, got {len(values)}",
                expected=rows * columns,
                actual=len(values),
            )
        return cls._from_buffer(values, rows, columns)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Build from a numeric ndarray. 1-D input becomes a row vector.

        Intended for backend results, not for dynamic values.
        """
        arr = np.asarray(array, dtype=np.float64)
        if arr.ndim == 0:
            arr = arr.reshape(1, 1)
        elif arr.ndim == 1:
            arr = arr.reshape(1, -1)
        elif arr.ndim != 2:
            raise ShapeError(
                f"expected a 1-D or 2-D array, got {arr.ndim}-D with shape {arr.shape}",
                expected=2,
                actual=arr.ndim,
            )
        rows, columns = arr.shape
        return cls._from_buffer(arr, rows, columns)

    @classmethod
    def identity(cls, n: int) -> Matrix:
        return cls.from_array(np.eye(n))

    # === Accessors ===

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._columns)

    @property
    def size(self) -> int:
        return self._data.size

    @property
    def is_row_vector(self) -> bool:
        return self._rows == 1

    @property
    def is_column_vector(self) -> bool:
        return self._columns == 1

    @property
    def is_vector(self) -> bool:
        return self._rows == 1 or self._columns == 1

    @property
    def is_scalar(self) -> bool:
        return self._rows == 1 and self._columns == 1

    @property
    def is_square(self) -> bool:
        return self._rows == self._columns

    def get(self, i: int, j: int) -> float:
        """Element at row i, column j (zero-based)."""
        if not (0 <= i < self._rows and 0 <= j < self._columns):
            raise DimensionError(
                f"index ({i}, {j}) out of range for {self._rows}x{self._columns} matrix",
                shapes=(self.shape,),
            )
        return float(self._data[i * self._columns + j])

    def row(self, i: int) -> list[float]:
        return [self.get(i, j) for j in range(self._columns)]

    def column(self, j: int) -> list[float]:
        return [self.get(i, j) for i in range(self._rows)]

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Fresh, writable rows x columns copy of the data."""
        return self._data.reshape(self._rows, self._columns).copy()

    def flatten(self) -> list[float]:
        """Row-major list of all elements."""
        return self._data.tolist()

    # === Orientation ===

    def transpose(self) -> Matrix:
        """Swap dimensions and re-lay the data. Always valid."""
        return Matrix.from_array(self._data.reshape(self._rows, self._columns).T)

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def as_row(self) -> Matrix:
        """
        Return this vector as a 1 x N row vector.

        Raises:
            ShapeError: If the matrix is not a vector
        """
        self._require_vector('as_row')
        return Matrix._from_buffer(self._data, 1, self.size)

    def as_column(self) -> Matrix:
        """
        Return this vector as an N x 1 column vector.

        Raises:
            ShapeError: If the matrix is not a vector
        """
        self._require_vector('as_column')
        return Matrix._from_buffer(self._data, self.size, 1)

    def _require_vector(self, operation: str) -> None:
        if not self.is_vector:
            raise ShapeError(
                f"{operation}: requires a row or column vector, "
                f"got {self._rows}x{self._columns} matrix",
                expected='1xN or Nx1',
                actual=self.shape,
            )

    # === Comparison ===

    def allclose(
        self,
        other: Matrix,
        rtol: float = DERIVED.rtol,
        atol: float = DERIVED.atol,
    ) -> bool:
        """Same shape and element-wise equal within tolerance."""
        if not isinstance(other, Matrix) or self.shape != other.shape:
            return False
        return bool(np.allclose(self._data, other._data, rtol=rtol, atol=atol))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        return hash((self.shape, self._data.tobytes()))

    def __repr__(self) -> str:
        body = np.array2string(self.to_numpy(), separator=', ', precision=6)
        return f"Matrix({self._rows}x{self._columns}, {body})"


def _convert_flat(values: Sequence[Any], name: str, allow_empty: bool = False) -> list[float]:
    if kind_of(values) != 'array':
        raise ShapeError(
            f"{name}: expected a sequence of numbers, got {kind_of(values)}",
            expected='array',
            actual=kind_of(values),
        )
    if not values and not allow_empty:
        raise ShapeError(f"{name}: empty sequence has undefined shape", expected='>= 1', actual=0)
    return [to_float(v, position=i) for i, v in enumerate(values)]
