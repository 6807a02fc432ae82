"""
Result envelope shared by every backend.

Decompositions and regression produce several named arrays at once. The
backend hands them back inside a Result, which also records which backend
ran, how long each phase took, and anything worth flagging that did not
stop the computation.
"""

from dataclasses import dataclass
from typing import TypeVar, Generic, Any

P = TypeVar('P')


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    What a backend returns.

    Attributes:
        params: Operation-specific payload, e.g. QRParams or RegressionParams
        info: Method name, numerical rank, condition number and the like
        timing: Timer.result() output; None when the caller built the
            Result by hand
        backend_name: Backend.name of the producer
        warnings: Non-fatal diagnostics, e.g. a rank-deficient QR input
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = ()

    def has_warning(self, substring: str) -> bool:
        return any(substring in message for message in self.warnings)
