# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Dense column-major float64 matrix with value semantics.

Element (row, col) is stored at offset ``row + col * height`` of a flat
buffer. A matrix either owns a buffer of exactly ``width * height`` values,
or is empty: zero width, zero height and no buffer at all.
"""

import logging
import operator
from typing import Optional, Tuple

import numpy as np

from . import statistics
from .errors import OutOfRange
from .utils import DTYPE, as_dimension, check_adoptable, copy_buffer

logger = logging.getLogger(__name__)


class Matrix:
    """
    Resizable 2-D buffer of doubles.

    Parameters
    ----------
    width : int
        Number of columns.
    height : int
        Number of rows.
    value : float
        Initial value of every element.

    A zero width or height produces the empty matrix rather than an error.
    Use `from_data` to copy existing values and `adopt` to take ownership
    of an existing buffer.
    """

    def __init__(self, width: int = 0, height: int = 0, value: float = 0.0):
        self._width = 0
        self._height = 0
        self._data: Optional[np.ndarray] = None

        width = as_dimension(width, "width")
        height = as_dimension(height, "height")
        self._store(width, height, float(value))

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------
    @classmethod
    def from_data(cls, width: int, height: int, data) -> "Matrix":
        """
        Copy `width * height` values from `data` (column-major order).

        `data` is left untouched and no reference to it is kept. Zero
        dimensions or ``data=None`` give the empty matrix.
        """
        width = as_dimension(width, "width")
        height = as_dimension(height, "height")
        m = cls()
        if width == 0 or height == 0 or data is None:
            return m
        m._width = width
        m._height = height
        m._data = copy_buffer(data, width * height)
        return m

    @classmethod
    def adopt(cls, width: int, height: int, buffer: np.ndarray) -> "Matrix":
        """
        Take ownership of `buffer` without copying it.

        The caller hands the buffer over and must not read or write it
        afterwards. It has to be a 1-D contiguous float64 ndarray holding
        exactly ``width * height`` values in column-major order.
        """
        width = as_dimension(width, "width")
        height = as_dimension(height, "height")
        m = cls()
        if width == 0 or height == 0 or buffer is None:
            if buffer is not None:
                logger.debug(
                    "adopt(): discarding buffer for degenerate %dx%d matrix",
                    height,
                    width,
                )
            return m

        check_adoptable(buffer, width * height)
        m._width = width
        m._height = height
        m._data = buffer
        return m

    @classmethod
    def from_ndarray(cls, array) -> "Matrix":
        """Copy a (height, width) array into a new matrix."""
        array = np.asarray(array, dtype=DTYPE)
        if array.ndim != 2:
            raise ValueError("array must be two-dimensional")
        height, width = array.shape
        if width == 0 or height == 0:
            return cls()
        buffer = np.ascontiguousarray(np.ravel(array, order="F")).copy()
        return cls.adopt(width, height, buffer)

    @classmethod
    def moved(cls, other: "Matrix") -> "Matrix":
        """Move-construct: take `other`'s buffer, leaving `other` empty."""
        m = cls()
        cls.swap(m, other)
        return m

    # ------------------------------------------------------------------
    # Copy / move
    # ------------------------------------------------------------------
    def copy(self) -> "Matrix":
        m = type(self)()
        m.assign(self)
        return m

    def __copy__(self) -> "Matrix":
        return self.copy()

    def __deepcopy__(self, memo) -> "Matrix":
        return self.copy()

    def assign(self, other: "Matrix") -> "Matrix":
        """
        Copy-assign `other` into this matrix.

        When this matrix already owns a buffer with the same element count
        as `other`, that buffer is overwritten in place and stays the same
        object. Otherwise it is replaced by a new allocation.
        """
        if other is self:
            return self
        if other._data is None:
            self._release()
            return self
        self._store(other._width, other._height, other._data)
        return self

    def move_from(self, other: "Matrix") -> "Matrix":
        """
        Move-assign by exchange: afterwards this matrix holds `other`'s
        previous state and `other` holds this matrix's previous state.
        """
        type(self).swap(self, other)
        return self

    @staticmethod
    def swap(lhs: "Matrix", rhs: "Matrix") -> None:
        lhs._width, rhs._width = rhs._width, lhs._width
        lhs._height, rhs._height = rhs._height, lhs._height
        lhs._data, rhs._data = rhs._data, lhs._data

    def reset(self, width: int, height: int, value: float = 0.0) -> "Matrix":
        """Resize to `width` x `height` and fill every element with `value`."""
        width = as_dimension(width, "width")
        height = as_dimension(height, "height")
        self._store(width, height, float(value))
        return self

    def _store(self, width: int, height: int, values) -> None:
        # `values` is a scalar fill or a buffer of width * height elements
        count = width * height
        if count == 0:
            self._release()
            return

        if self._data is not None and self._data.size == count:
            logger.debug("reusing %d-element buffer in place", count)
            self._data[:] = values
        else:
            if self._data is not None:
                logger.debug(
                    "reallocating buffer: %d -> %d elements", self._data.size, count
                )
            data = np.empty(count, dtype=DTYPE)
            data[:] = values
            self._data = data

        self._width = width
        self._height = height

    def _release(self) -> None:
        self._width = 0
        self._height = 0
        self._data = None

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------
    def _offset(self, row: int, col: int) -> int:
        row = operator.index(row)
        col = operator.index(col)
        if row < 0 or col < 0 or row >= self._height or col >= self._width:
            raise OutOfRange(row, col, self._height, self._width)
        return row + col * self._height

    def get(self, row: int, col: int) -> float:
        return float(self._data[self._offset(row, col)])

    def set(self, row: int, col: int, value: float) -> None:
        offset = self._offset(row, col)
        self._data[offset] = float(value)

    def __getitem__(self, index: Tuple[int, int]) -> float:
        row, col = index
        return self.get(row, col)

    def __setitem__(self, index: Tuple[int, int], value: float) -> None:
        row, col = index
        self.set(row, col, value)

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------
    def is_empty(self) -> bool:
        return self._data is None

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def rows(self) -> int:
        return self._height

    @property
    def cols(self) -> int:
        return self._width

    @property
    def elems(self) -> int:
        return self._width * self._height

    @property
    def shape(self) -> Tuple[int, int]:
        return self._height, self._width

    # ------------------------------------------------------------------
    # Raw buffer
    # ------------------------------------------------------------------
    @property
    def data(self) -> Optional[np.ndarray]:
        """Mutable column-major backing buffer, or None when empty."""
        return self._data

    def const_data(self) -> Optional[np.ndarray]:
        """Read-only view of the backing buffer, or None when empty."""
        if self._data is None:
            return None
        view = self._data.view()
        view.flags.writeable = False
        return view

    def to_ndarray(self) -> np.ndarray:
        """Return a new (height, width) array with the matrix contents."""
        if self._data is None:
            return np.empty((0, 0), dtype=DTYPE)
        return self._data.reshape((self._height, self._width), order="F").copy()

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------
    def sum(self) -> float:
        return statistics.sum(self)

    def mean(self) -> float:
        return statistics.mean(self)

    def mean_and_variance(self) -> Tuple[float, float]:
        return statistics.mean_and_variance(self)

    distribution = mean_and_variance

    def variance(self) -> float:
        return statistics.variance(self)

    def stddev(self) -> float:
        return statistics.stddev(self)

    def max(self) -> float:
        return statistics.max(self)

    def min(self) -> float:
        return statistics.min(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={self._width}, height={self._height})"
