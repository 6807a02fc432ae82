"""
Core infrastructure for sciscript.

This module provides the matrix model, the dynamic-value boundary and the
shared abstractions used by all operation modules (linalg, decomposition,
regression, sampling).

Key components:
    dynamic: Dynamic value <-> typed primitive conversion
    matrix: The Matrix model
    conversion: build_matrix() and shape queries on dynamic values
    validation: Operand validators
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    datasource: Tabular ingestion
    compute: Timing, tolerances, LAPACK kernels
"""

from sciscript.core.exceptions import (
    SciScriptError,
    ValidationError,
    ConversionError,
    ShapeError,
    DimensionError,
    DomainError,
    NumericalError,
    SingularMatrixError,
    ConvergenceError,
    NonFiniteResultError,
    DataSourceError,
)
from sciscript.core.matrix import Matrix
from sciscript.core.dynamic import (
    to_float,
    to_int,
    from_matrix,
    from_named_results,
)
from sciscript.core.conversion import build_matrix, build_vector
from sciscript.core.result import Result
from sciscript.core.protocols import Backend
from sciscript.core.datasource import DataSource, read_table, read_matrix

__all__ = [
    # Model
    "Matrix",
    "Result",
    "Backend",
    "DataSource",
    # Boundary
    "to_float",
    "to_int",
    "from_matrix",
    "from_named_results",
    "build_matrix",
    "build_vector",
    "read_table",
    "read_matrix",
    # Exceptions
    "SciScriptError",
    "ValidationError",
    "ConversionError",
    "ShapeError",
    "DimensionError",
    "DomainError",
    "NumericalError",
    "SingularMatrixError",
    "ConvergenceError",
    "NonFiniteResultError",
    "DataSourceError",
]
