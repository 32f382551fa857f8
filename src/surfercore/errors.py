"""Exception types raised by the interpolation engine."""

from __future__ import annotations


class InterpolationError(ValueError):
    """Base class for invalid input reaching the interpolation engine."""


class InvalidDegree(InterpolationError):
    """Degree is negative, non-integral or otherwise unusable."""

    def __init__(self, degree: object) -> None:
        super().__init__(f"degree must be a non-negative integer, got {degree!r}")
        self.degree = degree


class InvalidInterval(InterpolationError):
    """Interval bounds are not finite or not strictly increasing."""

    def __init__(self, lower: object, upper: object) -> None:
        super().__init__(f"interval requires finite lower < upper, got [{lower!r}, {upper!r}]")
        self.lower = lower
        self.upper = upper


class DimensionMismatch(InterpolationError):
    """Sample vector length does not match the node count."""

    def __init__(self, expected: int, actual: int | tuple[int, ...]) -> None:
        got = f"an array of shape {actual}" if isinstance(actual, tuple) else str(actual)
        super().__init__(f"expected {expected} sample values (degree + 1), got {got}")
        self.expected = expected
        self.actual = actual


class UnknownStrategy(InterpolationError):
    def __init__(self, name: object, available: tuple[str, ...]) -> None:
        super().__init__(f"unknown node strategy {name!r}; expected one of: {', '.join(available)}")
        self.name = name
        self.available = available
