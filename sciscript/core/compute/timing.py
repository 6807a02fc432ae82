"""
Execution timing for backends.

Every backend runs inside a Timer so the Result it returns carries the
wall-clock cost of each phase next to the numbers.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Wall-clock timer with named phases.

    Usage:
        with Timer() as timer:
            with timer.section('factorization'):
                lu, piv = scipy.linalg.lu_factor(a)
        timer.result()
        # {'total_seconds': 0.0004, 'factorization': 0.0003}

    Phases entered more than once add up.
    """

    def __init__(self) -> None:
        self._phases: dict[str, float] = {}
        self._began: float | None = None
        self._elapsed: float | None = None

    def __enter__(self) -> 'Timer':
        self._began = time.perf_counter()
        self._elapsed = None
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._elapsed = time.perf_counter() - self._began

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time one named phase."""
        began = time.perf_counter()
        try:
            yield
        finally:
            self._phases[name] = self._phases.get(name, 0.0) + time.perf_counter() - began

    def result(self) -> dict[str, float]:
        """
        Total and per-phase seconds.

        Raises:
            RuntimeError: If the timer has not finished
        """
        if self._elapsed is None:
            raise RuntimeError("Timer.result() called before the timed block finished")
        return {'total_seconds': self._elapsed, **self._phases}
