"""Configuration for an interpolation session."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    BACKEND_NAMES,
    CANONICAL_LOWER,
    CANONICAL_UPPER,
    DEFAULT_BACKEND,
    DEFAULT_DEGREE,
    DEFAULT_STRATEGY,
)
from .nodes import Interval, validate_degree


@dataclass(frozen=True)
class SurferConfig:
    """User-controlled interpolation parameters."""

    strategy: str = DEFAULT_STRATEGY
    degree: int = DEFAULT_DEGREE
    interval_lower: float = CANONICAL_LOWER
    interval_upper: float = CANONICAL_UPPER
    backend: str = DEFAULT_BACKEND

    def __post_init__(self) -> None:
        from .selector import Strategy

        object.__setattr__(self, "strategy", Strategy.parse(self.strategy).value)
        validate_degree(self.degree)
        self.interval()
        if self.backend not in BACKEND_NAMES:
            raise ValueError(f"backend must be one of: {', '.join(BACKEND_NAMES)}")

    def interval(self) -> Interval:
        return Interval(self.interval_lower, self.interval_upper)
