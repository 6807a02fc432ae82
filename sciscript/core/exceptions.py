"""
Exception hierarchy for sciscript.

All exceptions inherit from SciScriptError so a host can catch any
library-specific failure in one place. Domain modules raise the most
specific class available here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from typing import Any


class SciScriptError(Exception):
    """Base exception for all sciscript errors."""
    pass


class ValidationError(SciScriptError):
    """
    Input validation failed.

    Raised when caller-provided inputs fail validation checks, before any
    numeric backend is invoked.
    """
    pass


class ConversionError(ValidationError):
    """
    A dynamic value could not be coerced to the requested type.

    Attributes:
        value: The offending value
        kind: Dynamic kind of the value ('string', 'bool', 'array', ...)
        position: Index of the value inside its container, if known.
            An int for flat sequences, (row, column) for matrices.
    """

    def __init__(
        self,
        message: str,
        value: Any = None,
        kind: str | None = None,
        position: int | tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.value = value
        self.kind = kind
        self.position = position


class ShapeError(ValidationError):
    """
    A dynamic value does not describe a well-formed matrix.

    Raised for empty, jagged or too deeply nested input, and for
    orientation requests on non-vectors.

    Attributes:
        row: Offending row index, if the problem is row-specific
        expected: Expected length or shape
        actual: Observed length or shape
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        expected: Any = None,
        actual: Any = None,
    ):
        super().__init__(message)
        self.row = row
        self.expected = expected
        self.actual = actual


class DimensionError(ValidationError):
    """
    Operand dimensions are incompatible.

    Raised when an algebraic operation receives matrices whose shapes
    cannot be combined (e.g. inner dimensions of a product differ).

    Attributes:
        shapes: Tuple of the operand shapes involved, if known
    """

    def __init__(self, message: str, shapes: tuple[tuple[int, int], ...] | None = None):
        super().__init__(message)
        self.shapes = shapes


class DomainError(ValidationError):
    """
    A scalar parameter is outside its valid domain.

    Attributes:
        parameter: Parameter name
        value: Rejected value
    """

    def __init__(self, message: str, parameter: str | None = None, value: Any = None):
        super().__init__(message)
        self.parameter = parameter
        self.value = value


class NumericalError(SciScriptError):
    """
    Numerical computation failed.

    Base class for failures signalled by the numeric backend: singularity,
    non-convergence, rank deficiency.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when an operation requires invertibility or full rank but the
    matrix is singular or numerically rank-deficient.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        rank: Numerical rank, if computed
        expected_rank: Expected rank (typically min(n, p))
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank


class ConvergenceError(NumericalError):
    """
    Iterative LAPACK routine failed to converge.

    Attributes:
        routine: Name of the failing routine ('svd', 'hessenberg', ...)
        reason: Backend-provided failure description
    """

    def __init__(self, message: str, routine: str | None = None, reason: str | None = None):
        super().__init__(message)
        self.routine = routine
        self.reason = reason


class NonFiniteResultError(NumericalError):
    """
    The backend produced inf or NaN from finite operands (overflow).

    Attributes:
        operation: Name of the operation ('mtimes', 'inv', 'rand', ...)
        shapes: Operand shapes, if the operation has matrix operands
        position: (row, column) of the first non-finite entry
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        shapes: tuple[tuple[int, int], ...] | None = None,
        position: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.shapes = shapes
        self.position = position


class DataSourceError(SciScriptError):
    """
    External tabular data could not be read.

    Wraps file, network and parse failures from the ingestion adapter.

    Attributes:
        source: Path or URL that failed
    """

    def __init__(self, message: str, source: str | None = None):
        super().__init__(message)
        self.source = source
