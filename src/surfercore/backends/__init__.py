"""Coefficient fitting kernels selectable at runtime."""

from .base import FitKernel
from .factory import build_backend

__all__ = ["FitKernel", "build_backend"]
