"""JAX-backed fitting backend applying a precomputed basis matrix."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .numpy_backend import lagrange_coefficients

try:
    import jax
    from jax import config as jax_config
    import jax.numpy as jnp
except Exception as exc:  # pragma: no cover - optional dependency
    jax = None
    jax_config = None
    jnp = None
    _JAX_IMPORT_ERROR = exc
else:
    _JAX_IMPORT_ERROR = None
    # Keep float64 nodes and samples; the root solver is sensitive to rounding.
    jax_config.update("jax_enable_x64", True)


if jax is not None:

    @jax.jit
    def _apply_basis(values: jnp.ndarray, lagrange_coeffs: jnp.ndarray) -> jnp.ndarray:
        return values @ lagrange_coeffs


@dataclass(eq=False)
class JaxFitKernel:
    name: str = "jax"
    _basis_nodes: np.ndarray | None = field(default=None, repr=False)
    _basis_matrix: object = field(default=None, repr=False)

    def _basis(self, nodes: np.ndarray):
        # One algorithm fits one node set, so only the latest basis is kept.
        if self._basis_nodes is None or not np.array_equal(self._basis_nodes, nodes):
            self._basis_matrix = jnp.asarray(lagrange_coefficients(nodes))
            self._basis_nodes = np.array(nodes, dtype=np.float64)
        return self._basis_matrix

    def fit(self, nodes: np.ndarray, values: np.ndarray) -> np.ndarray:
        out = _apply_basis(jnp.asarray(values, dtype=jnp.float64), self._basis(nodes))
        return np.asarray(out, dtype=np.float64)


def build_jax_backend() -> JaxFitKernel:
    if jax is None:
        raise RuntimeError(f"JAX backend unavailable: {_JAX_IMPORT_ERROR}") from _JAX_IMPORT_ERROR
    return JaxFitKernel()
