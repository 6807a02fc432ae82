"""
Tests for the sciscript exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via SciScriptError)
    - Validation errors and numerical errors are separate branches
    - Diagnostic attributes on every attribute-carrying exception
    - Default attribute values (None for optional attributes)
"""

import pytest

from sciscript.core.exceptions import (
    ConversionError,
    ConvergenceError,
    DataSourceError,
    DimensionError,
    DomainError,
    NonFiniteResultError,
    NumericalError,
    SciScriptError,
    ShapeError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via SciScriptError."""

    @pytest.mark.parametrize("exc_type", [
        ConversionError, ShapeError, DimensionError, DomainError,
    ])
    def test_input_errors_are_validation_errors(self, exc_type):
        with pytest.raises(ValidationError):
            raise exc_type("bad input")

    @pytest.mark.parametrize("exc_type", [SingularMatrixError, ConvergenceError, NonFiniteResultError])
    def test_backend_errors_are_numerical_errors(self, exc_type):
        with pytest.raises(NumericalError):
            raise exc_type("backend failed")

    @pytest.mark.parametrize("exc_type", [
        ValidationError, ConversionError, ShapeError, DimensionError,
        DomainError, NumericalError, SingularMatrixError, ConvergenceError,
        NonFiniteResultError, DataSourceError,
    ])
    def test_everything_is_sciscript_error(self, exc_type):
        with pytest.raises(SciScriptError):
            raise exc_type("failure")

    def test_numerical_error_is_not_validation_error(self):
        assert not isinstance(SingularMatrixError("singular"), ValidationError)

    def test_datasource_error_is_not_validation_error(self):
        """IO failures are their own branch."""
        err = DataSourceError("unreachable")
        assert not isinstance(err, ValidationError)
        assert not isinstance(err, NumericalError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestConversionError:

    def test_attributes(self):
        err = ConversionError("expected a number", value="x", kind="string", position=(1, 2))
        assert err.value == "x"
        assert err.kind == "string"
        assert err.position == (1, 2)
        assert str(err) == "expected a number"

    def test_defaults(self):
        err = ConversionError("bad")
        assert err.value is None
        assert err.kind is None
        assert err.position is None


class TestShapeError:

    def test_attributes(self):
        err = ShapeError("jagged", row=1, expected=2, actual=1)
        assert err.row == 1
        assert err.expected == 2
        assert err.actual == 1

    def test_defaults(self):
        err = ShapeError("empty")
        assert err.row is None
        assert err.expected is None
        assert err.actual is None


class TestDimensionError:

    def test_shapes(self):
        err = DimensionError("mismatch", shapes=((2, 3), (2, 3)))
        assert err.shapes == ((2, 3), (2, 3))

    def test_default_shapes(self):
        assert DimensionError("mismatch").shapes is None


class TestDomainError:

    def test_attributes(self):
        err = DomainError("nx must be positive", parameter="nx", value=0)
        assert err.parameter == "nx"
        assert err.value == 0


class TestSingularMatrixError:

    def test_all_attributes(self):
        err = SingularMatrixError(
            "rank-deficient",
            matrix_name="X",
            condition_number=float("inf"),
            rank=2,
            expected_rank=3,
        )
        assert err.matrix_name == "X"
        assert err.condition_number == float("inf")
        assert err.rank == 2
        assert err.expected_rank == 3

    def test_defaults(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.condition_number is None
        assert err.rank is None
        assert err.expected_rank is None


class TestConvergenceError:

    def test_attributes(self):
        err = ConvergenceError("no convergence", routine="svd", reason="info=3")
        assert err.routine == "svd"
        assert err.reason == "info=3"


class TestNonFiniteResultError:

    def test_attributes(self):
        err = NonFiniteResultError(
            "mtimes: result overflowed", operation="mtimes",
            shapes=((1, 2), (2, 1)), position=(0, 0),
        )
        assert err.operation == "mtimes"
        assert err.shapes == ((1, 2), (2, 1))
        assert err.position == (0, 0)

    def test_defaults(self):
        err = NonFiniteResultError("overflow")
        assert (err.operation, err.shapes, err.position) == (None, None, None)


class TestDataSourceError:

    def test_source(self):
        err = DataSourceError("HTTP 404", source="https://example.org/a.csv")
        assert err.source == "https://example.org/a.csv"
        assert "404" in str(err)
