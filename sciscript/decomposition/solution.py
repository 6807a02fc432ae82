"""
Decomposition solution types.

Each factorization has an immutable parameter payload holding its named
factors, wrapped by the backend in Result[P]. DecompositionSolution is the
user-facing view: named component access plus as_dict() for the dynamic
boundary.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Generic, TypeVar

from sciscript.core.dynamic import from_named_results
from sciscript.core.matrix import Matrix
from sciscript.core.result import Result


@dataclass(frozen=True)
class SVDParams:
    """
    Singular value decomposition A = U · diag(S) · Vᵀ.

    u: m x m orthogonal, s: 1 x k singular values (descending,
    k = min(m, n)), v: n x n orthogonal.
    """
    u: Matrix
    s: Matrix
    v: Matrix


@dataclass(frozen=True)
class QRParams:
    """Reduced QR decomposition A = Q · R; q is m x k, r is k x n."""
    q: Matrix
    r: Matrix


@dataclass(frozen=True)
class HessenbergParams:
    """Hessenberg reduction A = P · H · Pᵀ; p orthogonal, h upper Hessenberg."""
    p: Matrix
    h: Matrix


P = TypeVar('P', SVDParams, QRParams, HessenbergParams)


@dataclass(frozen=True)
class DecompositionSolution(Generic[P]):
    """
    User-facing decomposition result.

    Components are reachable by attribute (solution.u) or by name
    (solution['u']); as_dict() returns the dynamic map form.
    """
    _result: Result[P]

    @property
    def params(self) -> P:
        return self._result.params

    @property
    def components(self) -> tuple[str, ...]:
        """Component names in canonical order."""
        return tuple(f.name for f in fields(self._result.params))

    def __getattr__(self, name: str) -> Matrix:
        # Only reached for names not defined on the class itself
        if name.startswith('_'):
            raise AttributeError(name)
        params = self._result.params
        if name in {f.name for f in fields(params)}:
            return getattr(params, name)
        raise AttributeError(
            f"{type(params).__name__} has no component '{name}'"
        )

    def __getitem__(self, name: str) -> Matrix:
        if name not in self.components:
            raise KeyError(
                f"no component '{name}'. Available: {list(self.components)}"
            )
        return getattr(self._result.params, name)

    def as_matrices(self) -> dict[str, Matrix]:
        """Name -> Matrix mapping, in canonical order."""
        return {name: self[name] for name in self.components}

    def as_dict(self, *, nested: bool = False) -> dict[str, Any]:
        """
        Name -> dynamic value mapping.

        By default vectors (such as s) become flat lists; nested=True keeps
        every component as a list of rows.
        """
        return from_named_results(self.as_matrices(), nested=nested)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def __repr__(self) -> str:
        shapes = ", ".join(
            f"{name}={m.rows}x{m.columns}" for name, m in self.as_matrices().items()
        )
        return f"DecompositionSolution({self.backend_name}: {shapes})"
