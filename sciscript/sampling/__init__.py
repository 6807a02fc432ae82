"""
Random generation.

Public API:
    rand(spec=None, *, rng=None) -> float | Matrix
    RandomSpec

Example:
    >>> import numpy as np
    >>> from sciscript.sampling import rand
    >>> rand([2, 2], rng=np.random.default_rng(0)).shape
    (2, 2)
"""

from sciscript.sampling.design import RandomSpec
from sciscript.sampling.solvers import rand

__all__ = [
    "rand",
    "RandomSpec",
]
