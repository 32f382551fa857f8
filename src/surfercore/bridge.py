"""Adapter between the interpolation engine and a script rendering runtime.

The runtime evaluates the surface per ray and only needs node arrays from
us. It calls registered functions with tagged values and expects tagged
values back; this module owns that translation and the reference to the
algorithm in use. The runtime is passed in explicitly, so several
rendering contexts can coexist without any shared lookup table.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Protocol, Sequence

from .constants import DEFAULT_DEGREE, DEFAULT_STRATEGY, NODES_FUNCTION_ARITY, NODES_FUNCTION_NAME, REINIT_SCRIPT
from .nodes import validate_degree
from .polynomial import PolynomialInterpolation
from .selector import AlgorithmSelector, Strategy

logger = logging.getLogger(__name__)


class ScriptRuntime(Protocol):
    def evoke(self, script: str) -> None:
        ...


def to_script_number(value: float) -> dict[str, Any]:
    return {"ctype": "number", "value": {"real": float(value), "imag": 0}}


def to_script_number_list(values: Sequence[float]) -> dict[str, Any]:
    return {"ctype": "list", "value": [to_script_number(v) for v in values]}


def script_number_value(arg: Any) -> float:
    """Real part of a tagged script number, or the number itself."""
    if isinstance(arg, dict):
        if arg.get("ctype") != "number":
            raise TypeError(f"expected a script number, got ctype {arg.get('ctype')!r}")
        value = arg["value"]
        return float(value["real"]) if isinstance(value, dict) else float(value)
    return float(arg)


class RenderingContext:
    """Serves interpolation nodes to one runtime instance."""

    def __init__(self, runtime: ScriptRuntime, selector: AlgorithmSelector | None = None) -> None:
        self.runtime = runtime
        self.selector = selector if selector is not None else AlgorithmSelector()
        if not self.selector.is_configured:
            self.selector.select(DEFAULT_STRATEGY, DEFAULT_DEGREE)

    @property
    def algorithm(self) -> PolynomialInterpolation:
        return self.selector.current

    def get_interpolation_nodes(self, degree_arg: Any) -> dict[str, Any]:
        degree = validate_degree(script_number_value(degree_arg))
        return to_script_number_list(self.algorithm.generate_nodes(degree).tolist())

    def handlers(self) -> dict[str, tuple[int, Callable[..., Any]]]:
        return {NODES_FUNCTION_NAME: (NODES_FUNCTION_ARITY, self.get_interpolation_nodes)}

    def set_algorithm(self, algorithm: PolynomialInterpolation) -> PolynomialInterpolation:
        self.selector.adopt(algorithm)
        logger.debug("Switched interpolation algorithm to %r", algorithm)
        self.runtime.evoke(REINIT_SCRIPT)
        return algorithm

    def select(self, strategy: Strategy | str, degree: int) -> PolynomialInterpolation:
        algorithm = self.selector.select(strategy, degree)
        logger.debug("Selected %s interpolation of degree %d", Strategy.parse(strategy).value, algorithm.degree)
        self.runtime.evoke(REINIT_SCRIPT)
        return algorithm
