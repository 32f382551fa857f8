"""Backend factory for coefficient fitting kernels."""

from __future__ import annotations

import logging

from .jax_backend import build_jax_backend
from .numba_backend import build_numba_backend
from .numpy_backend import build_numpy_backend

logger = logging.getLogger(__name__)


def build_backend(name: str = "numpy"):
    if name == "numpy":
        return build_numpy_backend()
    if name == "numba":
        return build_numba_backend()
    if name == "jax":
        return build_jax_backend()
    if name == "auto":
        try:
            return build_numba_backend()
        except RuntimeError as exc:
            logger.debug("Skipping numba fitting backend: %s", exc)
        try:
            return build_jax_backend()
        except RuntimeError as exc:
            logger.debug("Skipping jax fitting backend: %s", exc)
        return build_numpy_backend()
    raise ValueError(f"Unknown backend: {name}")
