"""Numba-accelerated fitting backend."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

try:
    from numba import njit
except Exception as exc:  # pragma: no cover - optional dependency
    njit = None
    _NUMBA_IMPORT_ERROR = exc
else:
    _NUMBA_IMPORT_ERROR = None


if njit is not None:

    @njit(cache=True)
    def _fit_rows_numba(x: np.ndarray, values: np.ndarray) -> np.ndarray:
        m, n = values.shape
        out = np.zeros((m, n), dtype=np.float64)
        c = np.empty(n, dtype=np.float64)
        for r in range(m):
            for i in range(n):
                c[i] = values[r, i]
            for j in range(1, n):
                for i in range(n - 1, j - 1, -1):
                    c[i] = (c[i] - c[i - 1]) / (x[i] - x[i - j])
            out[r, 0] = c[n - 1]
            # Multiply by (t - x_k) in place, highest power first.
            for k in range(n - 2, -1, -1):
                for p in range(n - 1, 0, -1):
                    out[r, p] = out[r, p - 1] - x[k] * out[r, p]
                out[r, 0] = c[k] - x[k] * out[r, 0]
        return out

    # Prime JIT cache once to avoid a latency spike on the first frame.
    _fit_rows_numba(np.array([-1.0, 1.0], dtype=np.float64), np.zeros((1, 2), dtype=np.float64))


@dataclass(frozen=True)
class NumbaFitKernel:
    name: str = "numba"

    def fit(self, nodes: np.ndarray, values: np.ndarray) -> np.ndarray:
        return _fit_rows_numba(
            np.ascontiguousarray(nodes, dtype=np.float64),
            np.ascontiguousarray(values, dtype=np.float64),
        )


def build_numba_backend() -> NumbaFitKernel:
    if njit is None:
        raise RuntimeError(
            f"Numba backend unavailable: {_NUMBA_IMPORT_ERROR}"
        ) from _NUMBA_IMPORT_ERROR
    return NumbaFitKernel()
