"""Polynomial interpolation along a ray.

``PolynomialInterpolation`` binds a node generator to a degree. It hands
out node sets (geometry, usable before any sampling) and turns a vector
of samples taken at those nodes into monomial coefficients in the ray
parameter for a downstream root solver.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

import numpy as np
from numpy.polynomial import polynomial as P

from .backends import FitKernel, build_backend
from .backends.numpy_backend import lagrange_coefficients
from .constants import BACKEND_NAMES, DEFAULT_BACKEND, DEFAULT_DEGREE
from .errors import DimensionMismatch
from .nodes import Interval, NodeGenerator, validate_degree


def barycentric_weights(nodes: np.ndarray) -> np.ndarray:
    """Barycentric weights ``w_i = 1 / prod_{j != i} (x_i - x_j)`` scaled to ``max|w| = 1``."""
    x = np.asarray(nodes, dtype=np.float64)
    diff = x[:, np.newaxis] - x[np.newaxis, :]
    np.fill_diagonal(diff, 1.0)
    # Scale each factor by the interval size to keep the products in range.
    scale = max(float(np.ptp(x)), 1.0) if x.size > 1 else 1.0
    w = 1.0 / np.prod(diff / scale, axis=1)
    return w / np.max(np.abs(w))


@dataclass(frozen=True, eq=False)
class InterpolatingPolynomial:
    """Fitted polynomial with coefficients in ascending powers of ``t``."""

    nodes: np.ndarray
    values: np.ndarray
    coefficients: np.ndarray

    @property
    def degree(self) -> int:
        return int(self.coefficients.shape[0]) - 1

    def __call__(self, t):
        return P.polyval(t, self.coefficients)

    def derivative(self, t):
        return P.polyval(t, P.polyder(self.coefficients))


@dataclass(frozen=True)
class PolynomialInterpolation:
    """Interpolation strategy: a node generator plus a target degree.

    Instances never change after construction. Use :meth:`with_degree` or
    :meth:`with_generator` to obtain a reconfigured copy.
    """

    generator: NodeGenerator
    degree: int = DEFAULT_DEGREE
    backend: str = DEFAULT_BACKEND
    _kernel: FitKernel = field(init=False, repr=False, compare=False)
    _nodes: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.generator is None:
            raise TypeError("PolynomialInterpolation requires a node generator")
        object.__setattr__(self, "degree", validate_degree(self.degree))
        if self.backend not in BACKEND_NAMES:
            raise ValueError(f"backend must be one of: {', '.join(BACKEND_NAMES)}")
        object.__setattr__(self, "_kernel", build_backend(self.backend))
        object.__setattr__(self, "_nodes", self.generator.generate(self.degree))

    @property
    def interval(self) -> Interval:
        return self.generator.interval

    @property
    def num_nodes(self) -> int:
        return self.degree + 1

    def generate_nodes(self, degree: int) -> np.ndarray:
        return self.generator.generate(degree)

    def nodes(self) -> np.ndarray:
        return self.generate_nodes(self.degree)

    def barycentric_weights(self, degree: int | None = None) -> np.ndarray:
        nodes = self._nodes if degree is None else self.generate_nodes(degree)
        w = barycentric_weights(nodes)
        w.setflags(write=False)
        return w

    def basis_matrix(self) -> np.ndarray:
        """Matrix ``M`` with ``coefficients = M @ values`` for the bound nodes."""
        return lagrange_coefficients(self._nodes).T

    def _as_samples(self, values) -> np.ndarray:
        arr = np.asarray(values, dtype=np.float64)
        if arr.ndim == 1:
            arr = arr[np.newaxis, :]
        if arr.ndim != 2 or arr.shape[1] != self.num_nodes:
            actual = int(arr.shape[1]) if arr.ndim == 2 else tuple(arr.shape)
            raise DimensionMismatch(self.num_nodes, actual)
        return arr

    def fit(self, values) -> InterpolatingPolynomial:
        """Fit the samples taken at :meth:`nodes` to a polynomial."""
        arr = np.asarray(values, dtype=np.float64)
        if arr.ndim != 1 or arr.shape[0] != self.num_nodes:
            actual = int(arr.shape[0]) if arr.ndim == 1 else tuple(arr.shape)
            raise DimensionMismatch(self.num_nodes, actual)
        coeffs = self._kernel.fit(self._nodes, arr[np.newaxis, :])[0]
        samples = arr.copy()
        for a in (coeffs, samples):
            a.setflags(write=False)
        return InterpolatingPolynomial(
            nodes=self._nodes,
            values=samples,
            coefficients=coeffs,
        )

    def fit_many(self, values) -> np.ndarray:
        """Fit one row of samples per ray; returns ``(n_rays, degree + 1)`` coefficients."""
        return self._kernel.fit(self._nodes, self._as_samples(values))

    def with_degree(self, degree: int) -> "PolynomialInterpolation":
        return replace(self, degree=degree)

    def with_generator(self, generator: NodeGenerator) -> "PolynomialInterpolation":
        return replace(self, generator=generator)
