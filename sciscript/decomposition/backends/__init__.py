"""Decomposition backends."""

from sciscript.decomposition.backends.cpu import (
    CPUSVDBackend,
    CPUQRBackend,
    CPUHessenbergBackend,
)

__all__ = [
    "CPUSVDBackend",
    "CPUQRBackend",
    "CPUHessenbergBackend",
]
