# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import operator

import numpy as np

DTYPE = np.float64
EPS: float = 1e-12


def scale_tol(values: np.ndarray) -> float:
    """Return an absolute tolerance scaled to the buffer magnitude."""
    if values is None or values.size == 0:
        return EPS
    return EPS * max(1.0, float(np.abs(values).sum()))


def as_dimension(value, name: str) -> int:
    """Coerce a width/height argument to a non-negative int."""
    n = operator.index(value)
    if n < 0:
        raise ValueError(f"{name} must be non-negative, got {n}")
    return n


def copy_buffer(data, count: int) -> np.ndarray:
    """
    Copy the first `count` values of `data` into a fresh float64 buffer.

    `data` may be any array-like; multi-dimensional input is flattened in
    its own memory order before the values are taken.
    """
    flat = np.asarray(data, dtype=DTYPE).ravel(order="K")
    if flat.size < count:
        raise ValueError(f"expected at least {count} values, got {flat.size}")
    return np.array(flat[:count], dtype=DTYPE, copy=True)


def check_adoptable(buffer: np.ndarray, count: int) -> None:
    """Validate that `buffer` can be stored as-is as a matrix backing array."""
    if not isinstance(buffer, np.ndarray):
        raise TypeError("buffer must be a NumPy ndarray")
    if buffer.dtype != DTYPE or buffer.ndim != 1 or not buffer.flags.c_contiguous:
        raise TypeError("buffer must be a 1-D contiguous float64 ndarray")
    if not buffer.flags.writeable or buffer.base is not None:
        raise TypeError("buffer must be a writable array that owns its memory")
    if buffer.size != count:
        raise ValueError(f"buffer holds {buffer.size} values, expected {count}")


def random_matrix_data(width, height, low=-100, high=100, seed=None) -> np.ndarray:
    """
    Build a flat column-major buffer of `width * height` uniform values
    in [low, high).

    Returns
    -------
    1-D array with float64 dtype
    """
    rng = np.random.default_rng(seed)
    return rng.uniform(low, high, size=width * height).astype(DTYPE)
