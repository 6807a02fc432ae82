"""
Tests for the SciPackage function set.

Validates:
    - All features enabled by default, every stable function name present
    - Disabling a feature removes exactly its functions
    - Unknown features are rejected
    - Registered functions take and return plain Python values
    - Orientation handling at the dynamic boundary
    - Constants
"""

import io
import math
import urllib.request

import numpy as np
import pytest

import sciscript
from sciscript import SciPackage
from sciscript.core.capabilities import (
    ALL_FEATURES,
    FEATURE_DECOMPOSITION,
    FEATURE_IO,
    FEATURE_LINALG,
    FEATURE_RANDOM,
    FEATURE_REGRESSION,
    FEATURE_STATS,
    FEATURE_VALIDATE,
)
from sciscript.core.exceptions import DimensionError, SciScriptError, ShapeError

STABLE_NAMES = {
    'argmin', 'inv', 'mtimes', 'horzcat', 'vertcat', 'repmat',
    'svd', 'hessenberg', 'qr', 'regress', 'rand', 'read_matrix',
}

FEATURE_FUNCTIONS = {
    FEATURE_STATS: {'argmin', 'argmax', 'movmean'},
    FEATURE_LINALG: {
        'inv', 'mtimes', 'horzcat', 'vertcat', 'repmat', 'transpose',
        'diag', 'meshgrid', 'size', 'numel',
    },
    FEATURE_DECOMPOSITION: {'svd', 'hessenberg', 'qr'},
    FEATURE_REGRESSION: {'regress'},
    FEATURE_RANDOM: {'rand'},
    FEATURE_IO: {'read_matrix'},
    FEATURE_VALIDATE: {'is_row_vector', 'is_column_vector', 'is_matrix', 'is_list', 'is_numeric_list'},
}


@pytest.fixture
def package():
    return SciPackage()


# ═══════════════════════════════════════════════════════════════════════
# Feature gating
# ═══════════════════════════════════════════════════════════════════════


class TestFeatures:

    def test_all_features_by_default(self, package):
        assert package.features == ALL_FEATURES
        assert STABLE_NAMES <= set(package.names())

    def test_every_feature_covered(self):
        assert set(FEATURE_FUNCTIONS) == ALL_FEATURES

    @pytest.mark.parametrize("feature", sorted(ALL_FEATURES))
    def test_disabling_removes_exactly_its_functions(self, feature):
        full = set(SciPackage().names())
        reduced = set(SciPackage(disabled={feature}).names())
        assert full - reduced == FEATURE_FUNCTIONS[feature]

    @pytest.mark.parametrize("feature", sorted(ALL_FEATURES))
    def test_single_feature(self, feature):
        assert set(SciPackage(features={feature}).names()) == FEATURE_FUNCTIONS[feature]

    def test_no_features(self):
        assert SciPackage(features=()).names() == ()

    def test_unknown_feature(self):
        with pytest.raises(ValueError, match="Unknown feature"):
            SciPackage(features={'gpu'})

    def test_unknown_disabled_feature(self):
        with pytest.raises(ValueError, match="Unknown feature"):
            SciPackage(disabled={'plotting'})

    def test_missing_function(self):
        package = SciPackage(disabled={FEATURE_IO})
        assert 'read_matrix' not in package
        with pytest.raises(KeyError, match="no function 'read_matrix'"):
            package['read_matrix']

    def test_functions_is_a_copy(self, package):
        functions = package.functions()
        functions.clear()
        assert 'inv' in package


# ═══════════════════════════════════════════════════════════════════════
# Dynamic in, dynamic out
# ═══════════════════════════════════════════════════════════════════════


class TestDynamicBoundary:

    def test_argmin(self, package):
        assert package.call('argmin', [43, 42, -500]) == 2

    def test_inv_returns_nested_lists(self, package):
        result = package.call('inv', [[1, 2], [3, 4]])
        np.testing.assert_allclose(result, [[-2.0, 1.0], [1.5, -0.5]], rtol=1e-12)
        assert isinstance(result, list) and isinstance(result[0], list)

    def test_horzcat(self, package):
        assert package.call('horzcat', [1, 2], [3, 4]) == [[1.0, 2.0, 3.0, 4.0]]

    def test_transpose_keeps_orientation(self, package):
        assert package.call('transpose', [1, 2, 3]) == [[1.0], [2.0], [3.0]]

    def test_flat_orientation(self):
        package = SciPackage(preserve_orientation=False)
        assert package.call('transpose', [1, 2, 3]) == [1.0, 2.0, 3.0]
        assert package.call('mtimes', [1, 2], [[3], [4]]) == 11.0

    def test_repmat(self, package):
        assert package.call('repmat', [[1, 2]], 2, 1) == [[1.0, 2.0], [1.0, 2.0]]

    def test_size_and_numel(self, package):
        assert package.call('size', [[1, 2, 3], [4, 5, 6]]) == [2, 3]
        assert package.call('numel', [[1, 2, 3], [4, 5, 6]]) == 6

    @pytest.mark.parametrize("x, y", [
        ([1, 2, 3], [4, 5]),
        ([[1, 2, 3]], [4, 5]),
        ([[1], [2], [3]], [[4], [5]]),
    ])
    def test_meshgrid_any_orientation(self, package, x, y):
        grid = package.call('meshgrid', x, y)
        assert package.call('size', grid['x']) == [2, 3]
        assert package.call('size', grid['y']) == [2, 3]
        assert grid['x'] == [[1.0, 2.0, 3.0], [1.0, 2.0, 3.0]]
        assert grid['y'] == [[4.0, 4.0, 4.0], [5.0, 5.0, 5.0]]

    def test_diag(self, package):
        assert package.call('diag', [1, 2]) == [[1.0, 0.0], [0.0, 2.0]]
        assert package.call('diag', [[1, 2], [3, 4]]) == [[1.0], [4.0]]

    @pytest.mark.parametrize("values", [[[1, 2, 3, 4]], [[1], [2], [3], [4]]])
    def test_movmean_row_and_column(self, package, values):
        assert package.call('movmean', values, 3) == [1.5, 2.0, 3.0, 3.5]

    def test_svd_map(self, package):
        out = package.call('svd', [[3, 0], [0, 4]])
        assert set(out) == {'u', 's', 'v'}
        assert out['s'] == [pytest.approx([4.0, 3.0])]

    def test_svd_map_flat(self):
        out = SciPackage(preserve_orientation=False).call('svd', [[3, 0], [0, 4]])
        assert out['s'] == pytest.approx([4.0, 3.0])

    def test_qr_map(self, package):
        out = package.call('qr', [[1, 2], [3, 4]])
        q, r = np.array(out['q']), np.array(out['r'])
        np.testing.assert_allclose(q @ r, [[1, 2], [3, 4]], atol=1e-12)

    def test_hessenberg_map(self, package):
        assert set(package.call('hessenberg', [[1, 2], [3, 4]])) == {'p', 'h'}

    def test_regress_map(self, package):
        out = package.call('regress', [1, 2, 3], [2, 4, 6])
        assert out['slope'] == pytest.approx(2.0)
        assert out['intercept'] == pytest.approx(0.0, abs=1e-12)
        assert isinstance(out['coefficients'], list)

    def test_rand_scalar(self, package):
        assert isinstance(package.call('rand'), float)

    def test_rand_with_injected_rng(self):
        a = SciPackage(rng=np.random.default_rng(1)).call('rand', [2, 2])
        b = SciPackage(rng=np.random.default_rng(1)).call('rand', [2, 2])
        assert a == b
        assert len(a) == 2 and len(a[0]) == 2

    def test_validate_predicates(self, package):
        assert package.call('is_matrix', [[1, 2], [3, 4]])
        assert package.call('is_row_vector', [[1, 2, 3]])
        assert package.call('is_column_vector', [[1], [2]])
        assert package.call('is_list', [1, 2])
        assert not package.call('is_numeric_list', [1, "a"])

    def test_read_matrix(self, package, tmp_path):
        path = tmp_path / "m.csv"
        path.write_text("a,b\n1,2\n3,4\n")
        assert package.call('read_matrix', str(path)) == [[1.0, 2.0], [3.0, 4.0]]

    def test_read_matrix_uses_package_timeout(self, monkeypatch):
        seen = {}

        def fake_urlopen(req, timeout):
            seen['timeout'] = timeout
            return io.BytesIO(b"1,2\n")

        monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen)
        SciPackage(timeout=2.5).call('read_matrix', "https://example.org/m.csv")
        assert seen['timeout'] == 2.5

    def test_functions_keep_names(self, package):
        assert package['inv'].__name__ == 'inv'
        assert package['svd'].__name__ == 'svd'


class TestErrorsPropagate:

    def test_dimension_error(self, package):
        with pytest.raises(DimensionError):
            package.call('mtimes', [[1, 2]], [[1, 2]])

    def test_shape_error(self, package):
        with pytest.raises(ShapeError, match="jagged"):
            package.call('inv', [[1, 2], [3]])

    def test_all_errors_share_a_base(self, package):
        with pytest.raises(SciScriptError):
            package.call('hessenberg', [[1, 2, 3]])


# ═══════════════════════════════════════════════════════════════════════
# Constants
# ═══════════════════════════════════════════════════════════════════════


class TestConstants:

    def test_names(self, package):
        assert set(package.constants()) == {'pi', 'c', 'e', 'g', 'h', 'phi', 'G'}

    def test_values(self, package):
        constants = package.constants()
        assert constants['pi'] == math.pi
        assert constants['c'] == 299_792_458.0
        assert constants['phi'] == pytest.approx(1.618033988749895)

    def test_available_without_features(self):
        assert SciPackage(features=()).constants()['e'] == math.e


def test_version():
    assert sciscript.__version__ == "0.1.0"
