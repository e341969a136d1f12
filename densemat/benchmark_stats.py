#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import time

import numpy as np
import pandas as pd

from densemat import Matrix, random_matrix_data

REPEATS = 5  # best of 5 runs leads to stable numbers
sizes = [(300, 300), (1000, 1000), (5000, 1000)]


def wall(f, *args, **kwargs):
    t0 = time.perf_counter()
    f(*args, **kwargs)
    return time.perf_counter() - t0


def main():
    records = []
    for w, h in sizes:
        buf = random_matrix_data(w, h, seed=0)
        m = Matrix.from_data(w, h, buf)

        for name, ours, ref in [
            ("sum", m.sum, lambda: np.sum(buf)),
            ("mean", m.mean, lambda: np.mean(buf)),
            ("variance", m.variance, lambda: np.var(buf)),
            ("stddev", m.stddev, lambda: np.std(buf)),
            ("max", m.max, lambda: np.max(buf)),
            ("min", m.min, lambda: np.min(buf)),
        ]:
            t_np = min(wall(ref) for _ in range(REPEATS))
            t_ours = min(wall(ours) for _ in range(REPEATS))
            err = abs(ours() - float(ref()))
            records.append((name, f"{w}×{h}", t_ours, t_ours / t_np, err))

        # copy-assign with and without buffer reuse
        same = Matrix(w, h)
        t_reuse = min(wall(same.assign, m) for _ in range(REPEATS))
        t_alloc = min(wall(lambda: Matrix().assign(m)) for _ in range(REPEATS))
        records.append(("assign-reuse", f"{w}×{h}", t_reuse, t_reuse / t_alloc, 0.0))

    df = pd.DataFrame(
        records,
        columns=["op", "size", "sec", "sec/ref", "abs_err"],
    )
    print(df.to_string(index=False))

    df.to_csv("bench_results.csv", index=False)


if __name__ == "__main__":
    main()
