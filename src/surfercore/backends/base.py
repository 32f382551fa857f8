"""Backend protocol for coefficient fitting kernels."""

from __future__ import annotations

from typing import Protocol

import numpy as np


class FitKernel(Protocol):
    name: str

    def fit(self, nodes: np.ndarray, values: np.ndarray) -> np.ndarray:
        """Return monomial coefficients (ascending powers) for each row of ``values``."""
        ...
