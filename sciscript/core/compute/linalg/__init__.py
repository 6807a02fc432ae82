"""
Linear algebra kernels for sciscript.

All functions follow these conventions:
    - NumPy/SciPy (LAPACK under the hood) on plain float64 ndarrays
    - Each operation returns a structured result dataclass
    - Errors are raised immediately with clear messages

Submodules:
    qr: QR decomposition and least-squares solve
    inverse: LU-based inversion with condition estimate
"""

from sciscript.core.compute.linalg.qr import (
    QRResult,
    numerical_rank,
    qr_cpu,
    qr_solve_cpu,
)
from sciscript.core.compute.linalg.inverse import (
    InverseResult,
    inv_cpu,
)

__all__ = [
    # QR decomposition
    "QRResult",
    "numerical_rank",
    "qr_cpu",
    "qr_solve_cpu",
    # Inversion
    "InverseResult",
    "inv_cpu",
]
