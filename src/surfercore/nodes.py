"""Interpolation node placement over the ray-parameter interval."""

from __future__ import annotations

from dataclasses import dataclass
import math
from numbers import Integral, Real
from typing import ClassVar, Protocol

import numpy as np

from .constants import CANONICAL_LOWER, CANONICAL_UPPER, NODE_DTYPE
from .errors import InvalidDegree, InvalidInterval


def validate_degree(degree: object) -> int:
    """Return ``degree`` as an ``int`` or raise :class:`InvalidDegree`.

    Integral floats such as ``7.0`` are accepted because script runtimes
    hand every number over as a double.
    """
    if isinstance(degree, bool):
        raise InvalidDegree(degree)
    if isinstance(degree, Integral):
        value = int(degree)
    elif isinstance(degree, Real) and math.isfinite(float(degree)) and float(degree).is_integer():
        value = int(degree)
    else:
        raise InvalidDegree(degree)
    if value < 0:
        raise InvalidDegree(degree)
    return value


@dataclass(frozen=True)
class Interval:
    """Closed interval ``[lower, upper]`` on which nodes are placed."""

    lower: float
    upper: float

    def __post_init__(self) -> None:
        try:
            lo = float(self.lower)
            hi = float(self.upper)
        except (TypeError, ValueError) as exc:
            raise InvalidInterval(self.lower, self.upper) from exc
        if not (math.isfinite(lo) and math.isfinite(hi)) or lo >= hi:
            raise InvalidInterval(self.lower, self.upper)
        object.__setattr__(self, "lower", lo)
        object.__setattr__(self, "upper", hi)

    @property
    def midpoint(self) -> float:
        return 0.5 * (self.lower + self.upper)

    @property
    def half_width(self) -> float:
        return 0.5 * (self.upper - self.lower)

    @property
    def width(self) -> float:
        return self.upper - self.lower

    def contains(self, x: float) -> bool:
        return self.lower <= x <= self.upper


CANONICAL_INTERVAL = Interval(CANONICAL_LOWER, CANONICAL_UPPER)


class NodeGenerator(Protocol):
    name: ClassVar[str]
    interval: Interval

    def generate(self, degree: int) -> np.ndarray:
        ...


def _freeze(nodes: np.ndarray) -> np.ndarray:
    nodes.setflags(write=False)
    return nodes


@dataclass(frozen=True)
class EquispacedNodes:
    """Uniformly spaced nodes including both interval endpoints.

    Nodes are returned in ascending order. Degree 0 yields the interval
    midpoint.
    """

    name: ClassVar[str] = "equispaced"
    interval: Interval = CANONICAL_INTERVAL

    def generate(self, degree: int) -> np.ndarray:
        d = validate_degree(degree)
        iv = self.interval
        if d == 0:
            return _freeze(np.array([iv.midpoint], dtype=NODE_DTYPE))
        return _freeze(np.linspace(iv.lower, iv.upper, d + 1, dtype=NODE_DTYPE))


@dataclass(frozen=True)
class ChebyshevNodes:
    """Chebyshev points of the first kind mapped onto ``interval``.

    ``node[i] = mid + half * cos((2i + 1) / (2(d + 1)) * pi)``, so nodes run
    from just below ``upper`` down to just above ``lower``. The cosines are
    antisymmetrized before mapping so mirrored nodes agree to rounding.
    """

    name: ClassVar[str] = "chebyshev"
    interval: Interval = CANONICAL_INTERVAL

    def generate(self, degree: int) -> np.ndarray:
        d = validate_degree(degree)
        iv = self.interval
        if d == 0:
            return _freeze(np.array([iv.midpoint], dtype=NODE_DTYPE))
        n = d + 1
        k = np.arange(n, dtype=NODE_DTYPE)
        x = np.cos((2.0 * k + 1.0) / (2.0 * n) * np.pi)
        x = 0.5 * (x - x[::-1])
        return _freeze(iv.midpoint + iv.half_width * x)
