"""Runtime selection of node strategies and interpolation degree."""

from __future__ import annotations

from enum import Enum

from .config import SurferConfig
from .constants import DEFAULT_BACKEND, DEFAULT_DEGREE, DEFAULT_STRATEGY
from .errors import UnknownStrategy
from .nodes import CANONICAL_INTERVAL, ChebyshevNodes, EquispacedNodes, Interval, NodeGenerator
from .polynomial import PolynomialInterpolation


class Strategy(Enum):
    EQUISPACED = EquispacedNodes.name
    CHEBYSHEV = ChebyshevNodes.name

    @classmethod
    def parse(cls, value: "Strategy | str") -> "Strategy":
        if isinstance(value, Strategy):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        raise UnknownStrategy(value, available_strategies())

    def node_generator(self, interval: Interval = CANONICAL_INTERVAL) -> NodeGenerator:
        if self is Strategy.EQUISPACED:
            return EquispacedNodes(interval=interval)
        return ChebyshevNodes(interval=interval)


def available_strategies() -> tuple[str, ...]:
    return tuple(member.value for member in Strategy)


def build_algorithm(
    strategy: Strategy | str = DEFAULT_STRATEGY,
    degree: int = DEFAULT_DEGREE,
    *,
    interval: Interval = CANONICAL_INTERVAL,
    backend: str = DEFAULT_BACKEND,
) -> PolynomialInterpolation:
    generator = Strategy.parse(strategy).node_generator(interval)
    return PolynomialInterpolation(generator, degree, backend=backend)


class AlgorithmSelector:
    """Holds the algorithm the renderer currently uses.

    Reconfiguring builds a fresh :class:`PolynomialInterpolation` and swaps
    the reference; instances handed out earlier are left untouched.
    """

    def __init__(self, *, interval: Interval = CANONICAL_INTERVAL, backend: str = DEFAULT_BACKEND) -> None:
        self.interval = interval
        self.backend = backend
        self._algorithm: PolynomialInterpolation | None = None
        self._strategy: Strategy | None = None

    @classmethod
    def from_config(cls, cfg: SurferConfig) -> "AlgorithmSelector":
        selector = cls(interval=cfg.interval(), backend=cfg.backend)
        selector.select(cfg.strategy, cfg.degree)
        return selector

    @property
    def is_configured(self) -> bool:
        return self._algorithm is not None

    @property
    def current(self) -> PolynomialInterpolation:
        if self._algorithm is None:
            raise LookupError("no interpolation algorithm has been selected")
        return self._algorithm

    @property
    def strategy(self) -> Strategy:
        if self._strategy is None:
            raise LookupError("no interpolation algorithm has been selected")
        return self._strategy

    def select(self, strategy: Strategy | str, degree: int) -> PolynomialInterpolation:
        parsed = Strategy.parse(strategy)
        algorithm = build_algorithm(parsed, degree, interval=self.interval, backend=self.backend)
        self._algorithm = algorithm
        self._strategy = parsed
        return algorithm

    def set_degree(self, degree: int) -> PolynomialInterpolation:
        algorithm = self.current.with_degree(degree)
        self._algorithm = algorithm
        return algorithm

    def set_strategy(self, strategy: Strategy | str) -> PolynomialInterpolation:
        return self.select(strategy, self.current.degree)

    def adopt(self, algorithm: PolynomialInterpolation) -> PolynomialInterpolation:
        """Install an externally built algorithm as the current one."""
        self._strategy = Strategy.parse(algorithm.generator.name)
        self.interval = algorithm.interval
        self.backend = algorithm.backend
        self._algorithm = algorithm
        return algorithm
