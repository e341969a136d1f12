# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Whole-matrix descriptive statistics.

Every reduction runs over the raw column-major buffer of a `Matrix` and
returns a Python float. An empty matrix yields 0.0 for all of them,
including `min` and `max`.
"""

import math
from typing import Tuple

import numpy as np


def _values(matrix) -> np.ndarray:
    return matrix.const_data()


def sum(matrix) -> float:
    values = _values(matrix)
    if values is None:
        return 0.0
    return float(np.sum(values))


def mean(matrix) -> float:
    n = matrix.elems
    if n == 0:
        return 0.0
    return sum(matrix) / float(n)


def mean_and_variance(matrix) -> Tuple[float, float]:
    """
    Return (mean, population variance) of all elements.

    The mean is computed first; the variance is then
    (1/n) * sum((x_i - mean)^2), i.e. the biased estimator.
    """
    n = matrix.elems
    if n == 0:
        return 0.0, 0.0

    mu = mean(matrix)
    deviations = _values(matrix) - mu
    var = float(np.sum(np.square(deviations))) / float(n)
    return mu, var


def variance(matrix) -> float:
    _mu, var = mean_and_variance(matrix)
    return var


def stddev(matrix) -> float:
    return math.sqrt(variance(matrix))


def max(matrix) -> float:
    """
    Largest element, scanning from the first one.

    A NaN after the first element never compares greater and is skipped;
    a NaN in the first position is returned as is.
    """
    values = _values(matrix)
    if values is None:
        return 0.0
    if np.isnan(values[0]):
        return float(values[0])
    return float(np.nanmax(values))


def min(matrix) -> float:
    values = _values(matrix)
    if values is None:
        return 0.0
    if np.isnan(values[0]):
        return float(values[0])
    return float(np.nanmin(values))
