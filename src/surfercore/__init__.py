"""Polynomial interpolation engine for ray casting implicit surfaces."""

from . import constants
from .bridge import RenderingContext, ScriptRuntime, to_script_number_list
from .config import SurferConfig
from .errors import DimensionMismatch, InterpolationError, InvalidDegree, InvalidInterval, UnknownStrategy
from .nodes import CANONICAL_INTERVAL, ChebyshevNodes, EquispacedNodes, Interval, NodeGenerator
from .polynomial import InterpolatingPolynomial, PolynomialInterpolation, barycentric_weights
from .selector import AlgorithmSelector, Strategy, available_strategies, build_algorithm

__all__ = [
    "constants",
    "AlgorithmSelector",
    "CANONICAL_INTERVAL",
    "ChebyshevNodes",
    "DimensionMismatch",
    "EquispacedNodes",
    "InterpolatingPolynomial",
    "InterpolationError",
    "Interval",
    "InvalidDegree",
    "InvalidInterval",
    "NodeGenerator",
    "PolynomialInterpolation",
    "RenderingContext",
    "ScriptRuntime",
    "Strategy",
    "SurferConfig",
    "UnknownStrategy",
    "available_strategies",
    "barycentric_weights",
    "build_algorithm",
    "to_script_number_list",
]
