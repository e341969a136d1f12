# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
import math

import numpy as np

from densemat import statistics
from densemat.matrix import Matrix
from densemat.utils import random_matrix_data, scale_tol

TEST_ITERATIONS = 50
logger = logging.getLogger(__name__)


def test_empty_statistics_are_zero():
    for m in (Matrix(), Matrix(0, 4), Matrix.from_data(3, 3, None)):
        assert m.sum() == 0.0
        assert m.mean() == 0.0
        assert m.variance() == 0.0
        assert m.stddev() == 0.0
        assert m.max() == 0.0
        assert m.min() == 0.0
        assert m.mean_and_variance() == (0.0, 0.0)


def test_known_values():
    m = Matrix.from_data(2, 3, [1, 2, 3, 4, 5, 6])
    assert m.sum() == 21.0
    assert m.mean() == 3.5
    assert math.isclose(m.variance(), 35 / 12)
    assert math.isclose(m.stddev(), 1.7078251276599330)
    assert m.max() == 6.0
    assert m.min() == 1.0

    mu, var = m.mean_and_variance()
    assert mu == 3.5
    assert math.isclose(var, 35 / 12)
    assert m.distribution() == m.mean_and_variance()


def test_single_element():
    m = Matrix(1, 1, -4.0)
    assert m.sum() == -4.0
    assert m.mean() == -4.0
    assert m.variance() == 0.0
    assert m.max() == m.min() == -4.0


def test_constant_matrix_has_zero_variance():
    m = Matrix(7, 5, 3.25)
    assert math.isclose(m.mean(), 3.25)
    assert math.isclose(m.variance(), 0.0, abs_tol=1e-12)
    assert math.isclose(m.stddev(), 0.0, abs_tol=1e-6)


def test_against_numpy():
    for i in range(TEST_ITERATIONS):
        w, h = np.random.randint(1, 30, size=2)
        buf = random_matrix_data(w, h, seed=i)
        m = Matrix.from_data(w, h, buf)
        tol = scale_tol(buf)
        logger.debug(f"{w}x{h}: mean={m.mean()} var={m.variance()}")

        assert math.isclose(m.sum(), np.sum(buf), rel_tol=1e-9, abs_tol=tol)
        assert math.isclose(m.mean(), np.mean(buf), rel_tol=1e-9, abs_tol=tol)
        assert math.isclose(m.variance(), np.var(buf), rel_tol=1e-9)
        assert math.isclose(m.stddev(), np.std(buf), rel_tol=1e-9)
        assert m.max() == np.max(buf)
        assert m.min() == np.min(buf)


def test_sum_does_not_depend_on_shape():
    buf = random_matrix_data(4, 6, seed=1)
    tol = scale_tol(buf)
    sums = [Matrix.from_data(w, h, buf).sum() for w, h in [(4, 6), (6, 4), (24, 1), (1, 24)]]
    for s in sums[1:]:
        assert math.isclose(s, sums[0], abs_tol=tol)


def test_min_max_skip_nan_after_first_element():
    m = Matrix.from_data(3, 1, [1.0, np.nan, 3.0])
    assert m.max() == 3.0
    assert m.min() == 1.0

    m = Matrix.from_data(3, 1, [np.nan, 2.0, 5.0])
    assert math.isnan(m.max())
    assert math.isnan(m.min())


def test_module_functions_match_methods():
    m = Matrix.from_data(3, 2, [2, -1, 0.5, 8, 4, 4])
    assert statistics.sum(m) == m.sum()
    assert statistics.mean(m) == m.mean()
    assert statistics.variance(m) == m.variance()
    assert statistics.stddev(m) == m.stddev()
    assert statistics.max(m) == 8.0
    assert statistics.min(m) == -1.0
    assert isinstance(statistics.max(m), float)


def test_statistics_follow_mutation():
    m = Matrix(2, 2, 1.0)
    m.set(1, 1, 5.0)
    assert m.sum() == 8.0
    assert m.max() == 5.0
    np.testing.assert_allclose(m.mean_and_variance(), (2.0, 3.0))
