"""
Tests for the Matrix model.

Validates:
    - Constructors and their shape rules
    - Invariants (positive dimensions, buffer size, finite elements)
    - Read-only storage
    - Orientation helpers (transpose always valid, as_row/as_column on vectors only)
    - Tolerance-based comparison
"""

import numpy as np
import pytest

from sciscript.core.exceptions import ConversionError, DimensionError, ShapeError
from sciscript.core.matrix import Matrix


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstructors:

    def test_row_vector(self):
        m = Matrix.row_vector([1, 2, 3])
        assert m.shape == (1, 3)
        assert m.is_row_vector
        assert not m.is_column_vector

    def test_column_vector(self):
        m = Matrix.column_vector([1, 2, 3])
        assert m.shape == (3, 1)
        assert m.is_column_vector

    def test_from_rows_is_row_major(self):
        m = Matrix.from_rows(2, 3, [1, 2, 3, 4, 5, 6])
        assert m.row(0) == [1.0, 2.0, 3.0]
        assert m.column(2) == [3.0, 6.0]
        assert m.get(1, 0) == 4.0

    def test_from_rows_length_mismatch(self):
        with pytest.raises(ShapeError, match="needs 6 elements, got 5"):
            Matrix.from_rows(2, 3, [1, 2, 3, 4, 5])

    def test_from_rows_zero_dimension(self):
        with pytest.raises(ShapeError, match="positive"):
            Matrix.from_rows(0, 3, [])

    def test_empty_vector_rejected(self):
        with pytest.raises(ShapeError, match="undefined shape"):
            Matrix.row_vector([])

    def test_element_conversion_error_names_index(self):
        with pytest.raises(ConversionError, match="at index 1"):
            Matrix.row_vector([1, "two", 3])

    def test_from_array_1d_is_row(self):
        assert Matrix.from_array(np.arange(4.0)).shape == (1, 4)

    def test_from_array_0d_is_scalar(self):
        m = Matrix.from_array(np.float64(2.0))
        assert m.is_scalar
        assert m.get(0, 0) == 2.0

    def test_from_array_3d_rejected(self):
        with pytest.raises(ShapeError, match="3-D"):
            Matrix.from_array(np.zeros((2, 2, 2)))

    def test_non_finite_rejected(self):
        with pytest.raises(ShapeError, match=r"finite, got nan at \(1, 0\)") as exc_info:
            Matrix.from_array(np.array([[1.0], [np.nan]]))
        assert exc_info.value.row == 1

    def test_identity(self):
        np.testing.assert_array_equal(Matrix.identity(3).to_numpy(), np.eye(3))


class TestStorage:

    def test_buffer_is_read_only(self):
        m = Matrix.from_rows(2, 2, [1, 2, 3, 4])
        with pytest.raises(ValueError):
            m._data[0] = 99.0

    def test_to_numpy_is_independent_copy(self):
        m = Matrix.from_rows(2, 2, [1, 2, 3, 4])
        arr = m.to_numpy()
        arr[0, 0] = 99.0
        assert m.get(0, 0) == 1.0

    def test_from_array_copies_input(self):
        arr = np.ones((2, 2))
        m = Matrix.from_array(arr)
        arr[0, 0] = 5.0
        assert m.get(0, 0) == 1.0

    def test_get_out_of_range(self):
        m = Matrix.from_rows(2, 2, [1, 2, 3, 4])
        with pytest.raises(DimensionError, match=r"\(2, 0\) out of range for 2x2"):
            m.get(2, 0)


# ═══════════════════════════════════════════════════════════════════════
# Orientation
# ═══════════════════════════════════════════════════════════════════════


class TestOrientation:

    def test_transpose_swaps_dimensions(self):
        m = Matrix.from_rows(2, 3, [1, 2, 3, 4, 5, 6])
        t = m.transpose()
        assert t.shape == (3, 2)
        assert t.row(0) == [1.0, 4.0]

    def test_double_transpose_is_identity(self, rng):
        m = Matrix.from_array(rng.standard_normal((3, 5)))
        assert m.T.T == m

    def test_row_column_round_trip(self):
        v = Matrix.row_vector([1, 2, 3])
        assert v.as_column().as_row() == v
        assert v.as_column().shape == (3, 1)

    def test_as_row_on_row_vector_is_same(self):
        v = Matrix.row_vector([1, 2])
        assert v.as_row() == v

    def test_as_column_rejects_non_vector(self):
        m = Matrix.from_rows(2, 2, [1, 2, 3, 4])
        with pytest.raises(ShapeError, match="as_column: requires a row or column vector"):
            m.as_column()

    def test_as_row_rejects_non_vector(self):
        with pytest.raises(ShapeError, match="got 2x2"):
            Matrix.from_rows(2, 2, [1, 2, 3, 4]).as_row()


# ═══════════════════════════════════════════════════════════════════════
# Comparison
# ═══════════════════════════════════════════════════════════════════════


class TestComparison:

    def test_exact_equality(self):
        assert Matrix.row_vector([1, 2]) == Matrix.row_vector([1.0, 2.0])

    def test_shape_matters(self):
        assert Matrix.row_vector([1, 2]) != Matrix.column_vector([1, 2])
        assert not Matrix.row_vector([1, 2]).allclose(Matrix.column_vector([1, 2]))

    def test_allclose_tolerates_rounding(self):
        a = Matrix.row_vector([0.1 + 0.2, 1.0])
        b = Matrix.row_vector([0.3, 1.0])
        assert a != b
        assert a.allclose(b)

    def test_allclose_custom_tolerance(self):
        a = Matrix.row_vector([1.0])
        b = Matrix.row_vector([1.001])
        assert not a.allclose(b)
        assert a.allclose(b, rtol=1e-2)

    def test_hash_consistent_with_eq(self):
        assert hash(Matrix.row_vector([1, 2])) == hash(Matrix.row_vector([1.0, 2.0]))

    def test_repr_shows_shape(self):
        assert repr(Matrix.row_vector([1, 2])).startswith("Matrix(1x2")
