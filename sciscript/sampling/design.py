"""
Random generation request.

RandomSpec encapsulates everything rand() needs: output shape, value range
and an optional seed. Immutable, validated at construction.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from sciscript.core.dynamic import kind_of, to_float, to_int, is_array
from sciscript.core.exceptions import ConversionError, DomainError
from sciscript.core.validation import check_positive_int

DEFAULT_LOW = 0.0
DEFAULT_HIGH = 1.0

_SPEC_KEYS = frozenset({'shape', 'low', 'high', 'seed'})


@dataclass(frozen=True)
class RandomSpec:
    """
    Frozen description of a uniform random draw over [low, high).

    Attributes:
        shape: None for a single scalar, else (rows, columns)
        low: Inclusive lower bound
        high: Exclusive upper bound
        seed: Seed for a fresh generator; None draws from OS entropy
    """
    shape: tuple[int, int] | None = None
    low: float = DEFAULT_LOW
    high: float = DEFAULT_HIGH
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.shape is not None:
            if len(self.shape) != 2:
                raise DomainError(
                    f"shape must be (rows, columns), got {self.shape!r}",
                    parameter='shape',
                    value=self.shape,
                )
            object.__setattr__(self, 'shape', (
                check_positive_int(self.shape[0], 'rows'),
                check_positive_int(self.shape[1], 'columns'),
            ))
        if not self.low < self.high:
            raise DomainError(
                f"low must be less than high, got low={self.low}, high={self.high}",
                parameter='low',
                value=(self.low, self.high),
            )

    @property
    def is_scalar(self) -> bool:
        return self.shape is None

    @classmethod
    def build(cls, value: Any = None) -> RandomSpec:
        """
        Create a RandomSpec from a dynamic value.

        Accepts:
            None                    -> scalar in [0, 1)
            RandomSpec              -> itself
            n (int)                 -> n x n matrix
            [rows, columns]         -> rows x columns matrix
            {"shape": [r, c], "low": a, "high": b, "seed": s}
                                    -> every key optional

        Raises:
            DomainError: Invalid dimensions, range, seed or unknown keys
        """
        if value is None:
            return cls()
        if isinstance(value, RandomSpec):
            return value

        kind = kind_of(value)
        if kind == 'int':
            n = check_positive_int(value, 'n')
            return cls(shape=(n, n))
        if kind == 'array':
            return cls(shape=_parse_shape(value))
        if kind == 'map':
            return cls._from_mapping(value)

        raise DomainError(
            f"rand: expected an int, a [rows, columns] array or a map, got {kind} {value!r}",
            parameter='spec',
            value=value,
        )

    @classmethod
    def _from_mapping(cls, value: Mapping[str, Any]) -> RandomSpec:
        unknown = set(value) - _SPEC_KEYS
        if unknown:
            raise DomainError(
                f"rand: unknown option(s) {sorted(unknown)}; expected {sorted(_SPEC_KEYS)}",
                parameter='spec',
                value=dict(value),
            )

        shape = value.get('shape')
        if shape is not None:
            if is_array(shape):
                shape = _parse_shape(shape)
            else:
                n = check_positive_int(shape, 'n')
                shape = (n, n)

        try:
            low = to_float(value.get('low', DEFAULT_LOW))
            high = to_float(value.get('high', DEFAULT_HIGH))
        except ConversionError as e:
            raise DomainError(f"rand: {e}", parameter='low/high', value=e.value) from e

        seed = value.get('seed')
        if seed is not None:
            try:
                seed = to_int(seed)
            except ConversionError as e:
                raise DomainError(f"rand: seed {e}", parameter='seed', value=seed) from e
            if seed < 0:
                raise DomainError(
                    f"rand: seed must be non-negative, got {seed}",
                    parameter='seed',
                    value=seed,
                )

        return cls(shape=shape, low=low, high=high, seed=seed)


def _parse_shape(value: Any) -> tuple[int, int]:
    if len(value) != 2:
        raise DomainError(
            f"rand: shape must be [rows, columns], got {value!r}",
            parameter='shape',
            value=value,
        )
    return (check_positive_int(value[0], 'rows'), check_positive_int(value[1], 'columns'))
