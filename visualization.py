import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from geometry import Point


def plot_points(points: list[Point], ax: Axes | None = None, s: float = 4):
    x = [p.x for p in points]
    y = [p.y for p in points]
    if ax is None:
        plt.scatter(x, y, s=s)
    else:
        ax.scatter(x, y, s=s)


def plot_hull(hull: list[Point], ax: Axes | None = None, color: str = 'r'):
    """
    Draw hull edges. A closed ring is drawn as a polygon outline,
    a two point hull as a segment.
    """
    if ax is None:
        ax = plt.gca()

    xs = [p.x for p in hull]
    ys = [p.y for p in hull]
    ax.plot(xs, ys, c=color)
    ax.scatter(xs, ys, c=color, s=12)
