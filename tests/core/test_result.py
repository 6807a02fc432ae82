"""
Tests for the Result envelope.

Validates:
    - Payloads of any type ride along unchanged
    - Results cannot be modified after construction
    - Warning lookup by substring
"""

from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from sciscript.core.matrix import Matrix
from sciscript.core.result import Result
from sciscript.decomposition.solution import QRParams


def _qr_result(warnings=()):
    r = Matrix.from_array(np.array([[2.0, 1.0], [0.0, 3.0]]))
    params = QRParams(q=Matrix.identity(2), r=r)
    return Result(
        params=params,
        info={'method': 'householder', 'rank': 2},
        timing=None,
        backend_name='cpu_qr',
        warnings=warnings,
    )


class TestResult:

    def test_payload_kept(self):
        result = _qr_result()
        assert result.params.r.shape == (2, 2)
        assert result.info['rank'] == 2
        assert result.backend_name == 'cpu_qr'
        assert result.timing is None

    def test_any_payload_type(self):
        result = Result(params={'beta': [1.0]}, info={}, timing={'total_seconds': 0.5},
                        backend_name='manual')
        assert result.params['beta'] == [1.0]
        assert result.warnings == ()

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            _qr_result().info = {}


class TestWarnings:

    def test_substring_lookup(self):
        result = _qr_result(warnings=("matrix is rank-deficient: rank=1, expected=2",))
        assert result.has_warning("rank-deficient")
        assert not result.has_warning("singular")

    def test_empty(self):
        assert not _qr_result().has_warning("rank")
