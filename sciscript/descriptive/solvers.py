"""
Reductions over vectors.

Every function accepts any dynamic vector: a flat list, a row vector
[[...]] or a column vector [[a], [b], ...], and returns plain Python
values. argmin() and argmax() resolve ties to the first occurrence.
"""

from __future__ import annotations

from typing import Any
import numpy as np

from sciscript.core.conversion import build_vector
from sciscript.core.validation import check_positive_int


def argmin(values: Any) -> int:
    """
    Index of the smallest element.

    Example:
        >>> argmin([43, 42, -500])
        2

    Raises:
        ShapeError: If values is empty or not a vector
        ConversionError: If an element is not a number
    """
    return int(np.argmin(build_vector(values, 'values')))


def argmax(values: Any) -> int:
    """
    Index of the largest element.

    Example:
        >>> argmax([[1], [9], [3]])
        1
    """
    return int(np.argmax(build_vector(values, 'values')))


def movmean(values: Any, k: Any) -> list[float]:
    """
    Centered moving average over a window of k elements.

    For odd k the window spans (k - 1) / 2 elements on each side; for even
    k it spans k / 2 before and k / 2 - 1 after. Windows are truncated at
    the ends, so the first and last means use fewer elements.

    Args:
        values: Vector of any orientation
        k: Window length, a positive integer (may exceed len(values))

    Returns:
        Flat list of len(values) means

    Raises:
        DomainError: If k is not a positive integer
        ShapeError: If values is not a vector

    Example:
        >>> movmean([[1], [2], [3], [4]], 3)
        [1.5, 2.0, 3.0, 3.5]
    """
    v = build_vector(values, 'values')
    k = check_positive_int(k, 'k')
    before, after = k // 2, (k - 1) // 2

    idx = np.arange(v.size)
    lo = np.maximum(idx - before, 0)
    hi = np.minimum(idx + after + 1, v.size)
    totals = np.concatenate(([0.0], np.cumsum(v)))
    return ((totals[hi] - totals[lo]) / (hi - lo)).tolist()
