"""
Feature (capability) names for sciscript.

This module is the SINGLE SOURCE OF TRUTH for feature strings used by
SciPackage to decide which functions are exposed. Import from here, never
use raw strings.

Usage:
    from sciscript.core.capabilities import FEATURE_LINALG, FEATURE_IO

    package = SciPackage(disabled={FEATURE_IO})
"""

# argmin, argmax, movmean
FEATURE_STATS = 'stats'

# inv, mtimes, horzcat, vertcat, repmat, transpose, diag, meshgrid, size, numel
FEATURE_LINALG = 'linalg'

# svd, qr, hessenberg
FEATURE_DECOMPOSITION = 'decomposition'

# regress
FEATURE_REGRESSION = 'regression'

# rand
FEATURE_RANDOM = 'random'

# read_matrix (blocking file/network access)
FEATURE_IO = 'io'

# is_row_vector, is_column_vector, is_matrix, is_list, is_numeric_list
FEATURE_VALIDATE = 'validate'

ALL_FEATURES = frozenset({
    FEATURE_STATS,
    FEATURE_LINALG,
    FEATURE_DECOMPOSITION,
    FEATURE_REGRESSION,
    FEATURE_RANDOM,
    FEATURE_IO,
    FEATURE_VALIDATE,
})

__all__ = [
    'FEATURE_STATS',
    'FEATURE_LINALG',
    'FEATURE_DECOMPOSITION',
    'FEATURE_REGRESSION',
    'FEATURE_RANDOM',
    'FEATURE_IO',
    'FEATURE_VALIDATE',
    'ALL_FEATURES',
]
