"""
sciscript: strict matrix computation for dynamically-typed scripting hosts.

Bridges loosely-typed values (numbers, nested lists, dicts) to a
shape-checked Matrix model and the linear algebra, decomposition,
regression and random generation built on it.

Submodules:
    core: Matrix model, dynamic-value conversion, exceptions, ingestion
    linalg: inv, mtimes, horzcat, vertcat, repmat, transpose
    descriptive: argmin, argmax
    decomposition: svd, qr, hessenberg
    regression: regress
    sampling: rand
    package: SciPackage, the feature-gated function set for hosts
"""

__version__ = "0.1.0"

from sciscript import linalg
from sciscript import descriptive
from sciscript import decomposition
from sciscript import regression
from sciscript import sampling
from sciscript.core import (
    Matrix,
    build_matrix,
    read_matrix,
    SciScriptError,
)
from sciscript.package import SciPackage

__all__ = [
    "__version__",
    "linalg",
    "descriptive",
    "decomposition",
    "regression",
    "sampling",
    "Matrix",
    "build_matrix",
    "read_matrix",
    "SciScriptError",
    "SciPackage",
]
