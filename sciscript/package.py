"""
Loadable function set for scripting hosts.

SciPackage bundles every operation as a dynamic-value function: each one
accepts plain Python values (numbers, lists, dicts) and returns plain
Python values, so a host engine can register the set without knowing
about Matrix or numpy.

Functions are grouped into features (sciscript.core.capabilities).
Disabling a feature removes exactly its functions:

    >>> package = SciPackage(disabled={'io'})
    >>> 'read_matrix' in package
    False
    >>> package['argmin']([43, 42, -500])
    2
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Iterable
from typing import Any
import numpy as np

from sciscript.constants import CONSTANTS
from sciscript.core import conversion
from sciscript.core.datasource import DEFAULT_TIMEOUT, read_matrix
from sciscript.core.dynamic import from_matrix, from_named_results, to_nested
from sciscript.core.matrix import Matrix
from sciscript.core.capabilities import (
    ALL_FEATURES,
    FEATURE_STATS,
    FEATURE_LINALG,
    FEATURE_DECOMPOSITION,
    FEATURE_REGRESSION,
    FEATURE_RANDOM,
    FEATURE_IO,
    FEATURE_VALIDATE,
)
from sciscript import linalg, decomposition, descriptive, regression, sampling

logger = logging.getLogger(__name__)


class SciPackage:
    """
    Feature-gated set of dynamic-value functions.

    Args:
        features: Features to enable; None enables all of them
        disabled: Features to remove from the enabled set
        preserve_orientation: Return every matrix result as a list of rows,
            so a transposed row vector comes back as [[1], [2], [3]]. When
            False, vectors come back as flat lists and 1x1 results as
            scalars.
        timeout: Seconds allowed for each read_matrix() fetch
        rng: Generator used by rand(); None means each call seeds from its
            own spec (or OS entropy)

    Raises:
        ValueError: If a feature name is unknown
    """

    def __init__(
        self,
        features: Iterable[str] | None = None,
        *,
        disabled: Iterable[str] = (),
        preserve_orientation: bool = True,
        timeout: float = DEFAULT_TIMEOUT,
        rng: np.random.Generator | None = None,
    ):
        enabled = ALL_FEATURES if features is None else frozenset(features)
        disabled = frozenset(disabled)
        unknown = (enabled | disabled) - ALL_FEATURES
        if unknown:
            raise ValueError(
                f"Unknown feature(s) {sorted(unknown)}. Available: {sorted(ALL_FEATURES)}"
            )

        self._features = enabled - disabled
        self._preserve_orientation = preserve_orientation
        self._timeout = timeout
        self._rng = rng
        self._functions = self._build_functions()
        logger.debug(
            "SciPackage: %d functions from features %s",
            len(self._functions), sorted(self._features),
        )

    @property
    def features(self) -> frozenset[str]:
        return self._features

    def functions(self) -> dict[str, Callable[..., Any]]:
        """Name -> callable for every enabled function."""
        return dict(self._functions)

    def names(self) -> tuple[str, ...]:
        return tuple(sorted(self._functions))

    def constants(self) -> dict[str, float]:
        """Named constants (pi, c, e, g, h, phi, G), always available."""
        return dict(CONSTANTS)

    def __contains__(self, name: object) -> bool:
        return name in self._functions

    def __getitem__(self, name: str) -> Callable[..., Any]:
        if name not in self._functions:
            raise KeyError(
                f"SciPackage has no function '{name}'. Available: {list(self.names())}"
            )
        return self._functions[name]

    def call(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Invoke a registered function by name."""
        return self[name](*args, **kwargs)

    # === Function table ===

    def _to_dynamic(self, matrix: Matrix) -> Any:
        if self._preserve_orientation:
            return to_nested(matrix)
        return from_matrix(matrix)

    def _matrix_function(self, op: Callable[..., Matrix]) -> Callable[..., Any]:
        @functools.wraps(op)
        def wrapper(*args: Any) -> Any:
            return self._to_dynamic(op(*args))
        return wrapper

    def _decomposition_function(self, op: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(op)
        def wrapper(m: Any) -> dict[str, Any]:
            return op(m).as_dict(nested=self._preserve_orientation)
        return wrapper

    def _build_functions(self) -> dict[str, Callable[..., Any]]:
        def regress(x: Any, y: Any) -> dict[str, Any]:
            return regression.regress(x, y).as_dict()

        def rand(spec: Any = None) -> Any:
            result = sampling.rand(spec, rng=self._rng)
            return self._to_dynamic(result) if isinstance(result, Matrix) else result

        def meshgrid(x: Any, y: Any) -> dict[str, Any]:
            return from_named_results(linalg.meshgrid(x, y), nested=self._preserve_orientation)

        def read(path: str) -> list[list[float]]:
            return read_matrix(path, timeout=self._timeout)

        regress.__doc__ = regression.regress.__doc__
        rand.__doc__ = sampling.rand.__doc__
        meshgrid.__doc__ = linalg.meshgrid.__doc__
        read.__doc__ = read_matrix.__doc__

        table: dict[str, dict[str, Callable[..., Any]]] = {
            FEATURE_STATS: {
                'argmin': descriptive.argmin,
                'argmax': descriptive.argmax,
                'movmean': descriptive.movmean,
            },
            FEATURE_LINALG: {
                'inv': self._matrix_function(linalg.inv),
                'mtimes': self._matrix_function(linalg.mtimes),
                'horzcat': self._matrix_function(linalg.horzcat),
                'vertcat': self._matrix_function(linalg.vertcat),
                'repmat': self._matrix_function(linalg.repmat),
                'transpose': self._matrix_function(linalg.transpose),
                'diag': self._matrix_function(linalg.diag),
                'meshgrid': meshgrid,
                'size': conversion.matrix_size,
                'numel': conversion.numel,
            },
            FEATURE_DECOMPOSITION: {
                'svd': self._decomposition_function(decomposition.svd),
                'qr': self._decomposition_function(decomposition.qr),
                'hessenberg': self._decomposition_function(decomposition.hessenberg),
            },
            FEATURE_REGRESSION: {
                'regress': regress,
            },
            FEATURE_RANDOM: {
                'rand': rand,
            },
            FEATURE_IO: {
                'read_matrix': read,
            },
            FEATURE_VALIDATE: {
                'is_row_vector': conversion.is_row_vector,
                'is_column_vector': conversion.is_column_vector,
                'is_matrix': conversion.is_matrix,
                'is_list': conversion.is_list,
                'is_numeric_list': conversion.is_numeric_list,
            },
        }

        functions: dict[str, Callable[..., Any]] = {}
        for feature in sorted(self._features):
            functions.update(table[feature])
        return functions
