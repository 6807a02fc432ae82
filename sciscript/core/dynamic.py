"""
Dynamic value adapter.

A dynamic value is whatever a host scripting environment hands over:
Python ints, floats, bools, strings, None, lists/tuples of dynamic values,
and string-keyed dicts. This module converts explicitly between those
values and typed numeric primitives, and back.

Design principles:
    - One explicit conversion function per target type
    - No implicit coercion: bool is not a number, "3" is not a number
    - Every failure names the offending value, its kind and its position
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, TYPE_CHECKING
import numpy as np

from sciscript.core.exceptions import ConversionError

if TYPE_CHECKING:
    from sciscript.core.matrix import Matrix


Position = int | tuple[int, int] | None

KIND_INT = 'int'
KIND_FLOAT = 'float'
KIND_BOOL = 'bool'
KIND_STRING = 'string'
KIND_UNIT = 'unit'
KIND_ARRAY = 'array'
KIND_MAP = 'map'


def kind_of(value: Any) -> str:
    """
    Classify a dynamic value.

    Returns one of 'int', 'float', 'bool', 'string', 'unit', 'array', 'map',
    or the Python type name for anything the host model does not know.
    """
    # bool before int: bool is an int subclass in Python
    if isinstance(value, (bool, np.bool_)):
        return KIND_BOOL
    if isinstance(value, (int, np.integer)):
        return KIND_INT
    if isinstance(value, (float, np.floating)):
        return KIND_FLOAT
    if isinstance(value, str):
        return KIND_STRING
    if value is None:
        return KIND_UNIT
    if isinstance(value, (list, tuple)):
        return KIND_ARRAY
    if isinstance(value, Mapping):
        return KIND_MAP
    return type(value).__name__


def is_array(value: Any) -> bool:
    """True for sequence dynamic values."""
    return kind_of(value) == KIND_ARRAY


def _where(position: Position) -> str:
    if position is None:
        return ""
    if isinstance(position, tuple):
        return f" at row {position[0]}, column {position[1]}"
    return f" at index {position}"


def to_float(value: Any, *, position: Position = None) -> float:
    """
    Convert a dynamic value to a finite float.

    Args:
        value: Dynamic value; must be an int or float
        position: Location of the value in its container, for error messages

    Returns:
        The value as a Python float

    Raises:
        ConversionError: If the value is not numeric or not finite
    """
    kind = kind_of(value)
    if kind not in (KIND_INT, KIND_FLOAT):
        raise ConversionError(
            f"expected INT or FLOAT{_where(position)}, got {kind} {value!r}",
            value=value,
            kind=kind,
            position=position,
        )
    result = float(value)
    if not math.isfinite(result):
        raise ConversionError(
            f"expected a finite number{_where(position)}, got {value!r}",
            value=value,
            kind=kind,
            position=position,
        )
    return result


def to_int(value: Any, *, position: Position = None) -> int:
    """
    Convert a dynamic value to an int.

    Floats are accepted only when they hold an integral value (3.0 -> 3).

    Raises:
        ConversionError: If the value is not an int or integral float
    """
    kind = kind_of(value)
    if kind == KIND_INT:
        return int(value)
    if kind == KIND_FLOAT and math.isfinite(value) and float(value).is_integer():
        return int(value)
    raise ConversionError(
        f"expected INT{_where(position)}, got {kind} {value!r}",
        value=value,
        kind=kind,
        position=position,
    )


def from_matrix(matrix: Matrix) -> float | list[float] | list[list[float]]:
    """
    Convert a Matrix to its dynamic representation.

    1x1 -> scalar float; row or column vector -> flat list;
    anything else -> list of row lists.
    """
    if matrix.is_scalar:
        return matrix.get(0, 0)
    if matrix.is_vector:
        return matrix.flatten()
    return to_nested(matrix)


def to_nested(matrix: Matrix) -> list[list[float]]:
    """Convert a Matrix to a list of row lists, whatever its shape."""
    return matrix.to_numpy().tolist()


def from_named_results(mapping: Mapping[str, Any], *, nested: bool = False) -> dict[str, Any]:
    """
    Convert a named result mapping to a dynamic map.

    Matrix values go through from_matrix() (or to_nested() when nested is
    True), ndarrays become (nested) lists, numpy scalars become Python
    scalars, nested mappings recurse. Key order is preserved.
    """
    from sciscript.core.matrix import Matrix

    convert = to_nested if nested else from_matrix
    out: dict[str, Any] = {}
    for key, value in mapping.items():
        if not isinstance(key, str):
            raise ConversionError(
                f"result keys must be strings, got {kind_of(key)} {key!r}",
                value=key,
                kind=kind_of(key),
            )
        out[key] = _to_dynamic(value, Matrix, convert, nested)
    return out


def _to_dynamic(value: Any, matrix_type: type, convert, nested: bool) -> Any:
    if isinstance(value, matrix_type):
        return convert(value)
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, Mapping):
        return from_named_results(value, nested=nested)
    if isinstance(value, (list, tuple)):
        return [_to_dynamic(v, matrix_type, convert, nested) for v in value]
    return value
