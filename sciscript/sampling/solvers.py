"""
Uniform random generation.

rand() draws from an injectable numpy Generator. Seeding is opt-in: with
neither an explicit rng nor spec.seed, every call uses fresh OS entropy.
"""

from __future__ import annotations

import logging
from typing import Any
import numpy as np

from sciscript.core.exceptions import NonFiniteResultError
from sciscript.core.matrix import Matrix
from sciscript.core.validation import check_finite_result
from sciscript.sampling.design import RandomSpec

logger = logging.getLogger(__name__)


def rand(spec: Any = None, *, rng: np.random.Generator | None = None) -> float | Matrix:
    """
    Uniform random draws over [low, high).

    Args:
        spec: None for one scalar in [0, 1); otherwise anything
            RandomSpec.build() accepts (int n, [rows, columns], a map,
            or a RandomSpec)
        rng: Generator to draw from. Takes precedence over spec.seed.

    Returns:
        A float for a scalar request, else a Matrix of independent draws

    Raises:
        DomainError: Invalid spec
        NonFiniteResultError: If high - low overflows a float

    Example:
        >>> rand({"shape": [2, 3], "seed": 42}).shape
        (2, 3)
    """
    spec = RandomSpec.build(spec)
    if rng is None:
        rng = np.random.default_rng(spec.seed)

    size = None if spec.is_scalar else spec.shape
    try:
        draws = rng.uniform(spec.low, spec.high, size=size)
    except OverflowError as e:
        # numpy refuses ranges wider than the largest float
        raise NonFiniteResultError(
            f"rand: range [{spec.low:g}, {spec.high:g}) overflows: {e}",
            operation='rand',
            shapes=None if size is None else (spec.shape,),
        ) from e
    check_finite_result(draws, 'rand', () if size is None else (spec.shape,))

    if spec.is_scalar:
        return float(draws)

    logger.debug("rand: %dx%d in [%g, %g)", spec.shape[0], spec.shape[1], spec.low, spec.high)
    return Matrix.from_array(draws)
