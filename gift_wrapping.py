import logging

from collections.abc import Iterable
from enum import IntEnum

from errors import HullPreconditionError
from geometry import ORIGIN, Point, cross, dot

logger = logging.getLogger(__name__)


class Turn(IntEnum):
    """
    Position of a candidate point relative to the ray origin -> current.
    """
    RIGHT = -1
    NONE = 0
    LEFT = 1


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


class JarvisMarch:
    """
    Gift wrapping (Jarvis march) convex hull.

    The hull is returned counter-clockwise, starting from the point with
    the smallest x (ties broken by the smallest y), and closed by repeating
    that point. Segments (all points collinear) are returned open.

    With `exact=True` turns are decided by the integer cross product.
    With `exact=False` the candidate is rotated onto the current edge
    and the sign of its angle is used; rotated coordinates are truncated,
    so nearly collinear points may be misclassified.

    Time complexity: O(n*h), where h is the number of hull vertices.
    """

    def __init__(self, exact: bool = True):
        self.exact: bool = exact

    def __repr__(self):
        return f"{type(self).__name__}(exact={self.exact})"

    def compute(self, points: Iterable[Point]) -> list[Point]:
        if points is None:
            raise HullPreconditionError("Points collection must not be None")
        points = tuple(points)

        start, count = self.starting_point(points)
        if count < 2:
            raise HullPreconditionError(
                f"At least two points are required to wrap a hull, got {count}"
            )
        logger.debug("Wrapping %d points starting from %s", count, start)

        hull = [start]
        origin = start
        consumed = 0
        while consumed < count:
            current = self.next_edge_point(points, origin)
            consumed += 1
            if current == start:
                # origin no longer moves, the remaining iterations would repeat this one
                logger.debug("Wrapped back to %s after %d iterations", start, consumed)
                break
            hull.append(current)
            origin = current
            logger.debug("Hull vertex #%d: %s", len(hull) - 1, current)

        # a segment or a single point is not closed
        if len(hull) > 2:
            hull.append(start)

        logger.debug("Hull of %d points has %d vertices", count, len(hull))
        return hull

    @staticmethod
    def starting_point(points: Iterable[Point]) -> tuple[Point | None, int]:
        """
        Find the point with the smallest x (then the smallest y) and count
        the points in the same pass. This point always lies on the hull.
        """
        start = None
        count = 0
        for point in points:
            if start is None or point.x < start.x or point.x == start.x and point.y < start.y:
                start = point
            count += 1
        return start, count

    def next_edge_point(self, points: Iterable[Point], origin: Point) -> Point:
        """
        Find the hull vertex following origin: the point no other point is
        to the right of, seen from origin. Among collinear candidates
        the farthest one wins, so points lying on a hull edge are skipped.
        """
        current = origin
        for candidate in points:
            turn = self.turn(origin, current, candidate)
            if turn == Turn.RIGHT or turn == Turn.NONE and self.farther(origin, candidate, current):
                current = candidate
        return current

    def turn(self, origin: Point, current: Point, candidate: Point) -> Turn:
        if origin == current:
            return Turn.NONE
        if self.exact:
            return self.cross_turn(origin, current, candidate)
        return self.rotation_turn(origin, current, candidate)

    @staticmethod
    def cross_turn(origin: Point, current: Point, candidate: Point) -> Turn:
        direction = _sign(cross(origin, current, candidate))
        if direction == 0 and dot(origin, current, candidate) < 0:
            # collinear, but behind origin: the angle to it is 180 degrees
            return Turn.LEFT
        return Turn(direction)

    @staticmethod
    def rotation_turn(origin: Point, current: Point, candidate: Point) -> Turn:
        """
        Move origin to (0, 0) and rotate so that current lies on the positive
        x axis; the sign of the candidate's angle then gives the turn.
        """
        angle = origin.angle_from(current)

        rotated_current = current.offset_from(origin).rotate(ORIGIN, -angle)
        rotated_candidate = candidate.offset_from(origin).rotate(ORIGIN, -angle)

        assert ORIGIN.angle_from(rotated_current) == 0, (
            f"{current} is not on the x axis after rotation around {origin}: {rotated_current}"
        )
        return Turn(_sign(ORIGIN.angle_from(rotated_candidate)))

    def farther(self, origin: Point, candidate: Point, current: Point) -> bool:
        if self.exact:
            return origin.squared_distance_to(candidate) > origin.squared_distance_to(current)
        return origin.distance_to(candidate) > origin.distance_to(current)


DEFAULT = JarvisMarch()
