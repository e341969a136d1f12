# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
densemat
========

A dense, column-major, two-dimensional float64 container with value
semantics and whole-matrix descriptive statistics.

Public API
~~~~~~~~~~
- Container
    - `Matrix`
- Errors
    - `OutOfRange`
- Statistics (also available as `Matrix` methods)
    - `statistics.sum`, `statistics.mean`, `statistics.variance`,
      `statistics.stddev`, `statistics.mean_and_variance`,
      `statistics.min`, `statistics.max`

Everything else lives in sub-modules and is **not** considered part of the
stable interface.

Example
-------
>>> from densemat import Matrix
>>> m = Matrix.from_data(2, 3, [1, 2, 3, 4, 5, 6])
>>> m[2, 0], m[0, 1]
(3.0, 4.0)
>>> m.mean()
3.5
"""

from importlib.metadata import version as _pkg_version

from . import statistics
from .errors import OutOfRange
from .matrix import Matrix
from .utils import DTYPE, EPS, random_matrix_data, scale_tol

__all__ = [
    "Matrix",
    "OutOfRange",
    "statistics",
    "DTYPE",
    "EPS",
    "scale_tol",
    "random_matrix_data",
]

try:
    __version__ = _pkg_version(__name__)
except Exception:  # source checkout without installed metadata
    __version__ = "0.0.0.dev0"

# buffer reuse/reallocation is logged at DEBUG; silent until configured
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
