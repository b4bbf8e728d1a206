import logging

from collections.abc import Callable, Iterable
from typing import Protocol

import gift_wrapping

from errors import HullError, HullPreconditionError, InvalidPointsError, UnknownAlgorithmError
from geometry import Point

__all__ = [
    "ALGORITHMS",
    "HullAlgorithm",
    "HullCalculator",
    "HullError",
    "HullPreconditionError",
    "InvalidPointsError",
    "UnknownAlgorithmError",
    "convex_hull",
]

logger = logging.getLogger(__name__)


class HullAlgorithm(Protocol):
    def compute(self, points: Iterable[Point]) -> list[Point]:
        """
        Compute the hull of at least two points.
        """
        ...


ALGORITHMS: dict[str, Callable[[], HullAlgorithm]] = {
    "jarvis": lambda: gift_wrapping.JarvisMarch(exact=True),
    "jarvis-trig": lambda: gift_wrapping.JarvisMarch(exact=False),
}


class HullCalculator:
    """
    Entry point for hull computation. Handles trivial inputs itself and
    hands everything else to the configured algorithm.
    """

    def __init__(self, algorithm: HullAlgorithm | None = None):
        if algorithm is None:
            algorithm = gift_wrapping.DEFAULT
        if not callable(getattr(algorithm, "compute", None)):
            raise TypeError(f"{algorithm!r} does not provide a compute(points) method")
        self._algorithm = algorithm

    @property
    def algorithm(self) -> HullAlgorithm:
        return self._algorithm

    def calculate(self, points: Iterable[Point] | None) -> list[Point]:
        if points is None:
            raise InvalidPointsError("Points collection must not be None")

        points = list(points)
        if len(points) <= 1:
            return points

        logger.debug("Computing hull of %d points with %r", len(points), self._algorithm)
        return self._algorithm.compute(points)


def convex_hull(points: Iterable[Point] | None, algorithm: str = "jarvis") -> list[Point]:
    """
    Compute the convex hull of points with a registered algorithm.
    """
    try:
        factory = ALGORITHMS[algorithm]
    except KeyError:
        raise UnknownAlgorithmError(
            f"Unknown hull algorithm {algorithm!r}, expected one of {sorted(ALGORITHMS)}"
        ) from None
    return HullCalculator(factory()).calculate(points)
