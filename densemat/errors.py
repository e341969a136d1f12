# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>


class OutOfRange(IndexError):
    """Raised when an element index falls outside the matrix."""

    def __init__(self, row: int, col: int, rows: int, cols: int):
        self.row = row
        self.col = col
        self.rows = rows
        self.cols = cols
        super().__init__(
            f"Row index or col index out of range: ({row}, {col}) "
            f"not in ({rows} x {cols})"
        )
