import math
import numbers

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __post_init__(self):
        for name in ("x", "y"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise TypeError(f"Point.{name} must be an integer, got {value!r}")
            # numpy integer scalars are stored as plain ints
            object.__setattr__(self, name, int(value))

    def __lt__(self, other):
        return self.x < other.x or self.x == other.x and self.y < other.y

    def __le__(self, other):
        return self == other or self < other

    def __gt__(self, other):
        return other < self

    def __ge__(self, other):
        return self == other or other < self

    def is_dominated_by(self, other: "Point") -> bool:
        """
        Per-axis dominance: other is not smaller on any axis and differs from self.
        Points where neither dominates the other are incomparable.
        """
        return (
            self.x < other.x and self.y < other.y
            or self.x < other.x and self.y == other.y
            or self.x == other.x and self.y < other.y
        )

    def dominates(self, other: "Point") -> bool:
        return other.is_dominated_by(self)

    def distance_to(self, other: "Point") -> float:
        dx = max(self.x, other.x) - min(self.x, other.x)
        dy = max(self.y, other.y) - min(self.y, other.y)
        return math.sqrt(dx ** 2 + dy ** 2)

    def squared_distance_to(self, other: "Point") -> int:
        return (self.x - other.x) ** 2 + (self.y - other.y) ** 2

    def angle_from(self, origin: "Point") -> float:
        """
        Angle in degrees of the ray going from self to origin.
        Note the reversed operands: `a.angle_from(b)` is the direction of b seen from a.
        """
        if self == origin:
            return 0.0
        return math.degrees(math.atan2(origin.y - self.y, origin.x - self.x))

    def offset_from(self, origin: "Point") -> "Point":
        return Point(self.x - origin.x, self.y - origin.y)

    def rotate(self, origin: "Point", angle: float) -> "Point":
        """
        Rotate around origin by angle (degrees).
        Coordinates are truncated toward zero, so the result is only
        good for sign comparisons, not as an exact position.
        """
        if not math.isfinite(angle):
            raise ValueError(f"Rotation angle must be finite, got {angle}")

        radians = math.radians(angle)
        sin = math.sin(radians)
        cos = math.cos(radians)

        x = self.x - origin.x
        y = self.y - origin.y
        return Point(
            int(x * cos - y * sin) + origin.x,
            int(x * sin + y * cos) + origin.y,
        )


ORIGIN = Point(0, 0)


def cross(o: Point, a: Point, b: Point) -> int:
    """
    Cross product of segments oa and ob.
    Positive if b lies to the left of the ray o -> a, negative if to the right.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def dot(o: Point, a: Point, b: Point) -> int:
    """
    Dot product of segments oa and ob.
    """
    return (a.x - o.x) * (b.x - o.x) + (a.y - o.y) * (b.y - o.y)
