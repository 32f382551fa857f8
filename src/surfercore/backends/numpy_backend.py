"""Default NumPy backend: Newton divided differences expanded to monomials."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


def divided_differences(nodes: np.ndarray, values: np.ndarray) -> np.ndarray:
    """Newton coefficients ``f[x0], f[x0,x1], ...`` for every row of ``values``."""
    x = np.asarray(nodes, dtype=np.float64)
    c = np.array(values, dtype=np.float64, copy=True)
    n = x.shape[0]
    for j in range(1, n):
        c[:, j:] = (c[:, j:] - c[:, j - 1 : n - 1]) / (x[j:] - x[: n - j])
    return c


def newton_to_monomial(nodes: np.ndarray, newton: np.ndarray) -> np.ndarray:
    x = np.asarray(nodes, dtype=np.float64)
    m, n = newton.shape
    coeffs = np.zeros((m, n), dtype=np.float64)
    coeffs[:, 0] = newton[:, n - 1]
    for k in range(n - 2, -1, -1):
        shifted = np.zeros_like(coeffs)
        shifted[:, 1:] = coeffs[:, :-1]
        coeffs = shifted - x[k] * coeffs
        coeffs[:, 0] += newton[:, k]
    return coeffs


def lagrange_coefficients(nodes: np.ndarray) -> np.ndarray:
    """Row ``i`` holds the monomial coefficients of the ``i``-th Lagrange basis polynomial."""
    n = np.asarray(nodes).shape[0]
    eye = np.eye(n, dtype=np.float64)
    return newton_to_monomial(nodes, divided_differences(nodes, eye))


@dataclass(frozen=True)
class NumpyFitKernel:
    name: str = "numpy"

    def fit(self, nodes: np.ndarray, values: np.ndarray) -> np.ndarray:
        return newton_to_monomial(nodes, divided_differences(nodes, values))


def build_numpy_backend() -> NumpyFitKernel:
    return NumpyFitKernel()
