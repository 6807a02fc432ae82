"""
Descriptive reductions.

Public API:
    argmin(values)     -> int
    argmax(values)     -> int
    movmean(values, k) -> list[float]
"""

from sciscript.descriptive.solvers import argmin, argmax, movmean

__all__ = [
    "argmin",
    "argmax",
    "movmean",
]
