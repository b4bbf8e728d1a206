import argparse
import logging
import time

import matplotlib.pyplot as plt
import numpy as np

from convex_hull import ALGORITHMS, HullCalculator
from geometry import Point
from visualization import plot_hull, plot_points

logger = logging.getLogger("program")

DISTRIBUTIONS = ("uniform", "circle", "gaussian", "clusters")


def generate_random_points(n: int, distribution: str, bound: int = 1000, seed: int = 42) -> list[Point]:
    """
    Generate n integer points inside [-bound, bound]^2.
    """
    np.random.seed(seed)

    if distribution == "uniform":
        coords = np.random.uniform(-bound, bound, size=(n, 2))
    elif distribution == "circle":
        angle = np.random.uniform(0, 2 * np.pi, size=n)
        r = bound * np.sqrt(np.random.uniform(0, 1, size=n))
        coords = np.column_stack((r * np.cos(angle), r * np.sin(angle)))
    elif distribution == "gaussian":
        coords = np.random.normal(0, bound / 3, size=(n, 2))
    elif distribution == "clusters":
        n_clusters = 5
        centers = np.random.uniform(-0.8 * bound, 0.8 * bound, size=(n_clusters, 2))
        labels = np.random.randint(0, n_clusters, size=n)
        coords = centers[labels] + np.random.normal(0, bound / 20, size=(n, 2))
    else:
        raise ValueError(f"Unknown distribution {distribution!r}, expected one of {DISTRIBUTIONS}")

    coords = np.clip(np.trunc(coords), -bound, bound).astype(np.int64)
    return [Point(int(x), int(y)) for x, y in coords]


def run(points: list[Point], algorithm_name: str) -> tuple[list[Point], float]:
    calculator = HullCalculator(ALGORITHMS[algorithm_name]())

    start_time = time.perf_counter()
    hull = calculator.calculate(points)
    execution_time = time.perf_counter() - start_time

    logger.info(
        "%s: %d points -> %d hull vertices in %.6f s",
        algorithm_name, len(points), len(hull), execution_time,
    )
    return hull, execution_time


def compare_algorithms(points: list[Point]) -> dict[str, dict]:
    results = {}
    for name in ALGORITHMS:
        hull, exec_time = run(points, name)
        results[name] = {
            'time': exec_time,
            'hull_size': len(hull),
        }
    return results


def show_plot(points: list[Point], hull: list[Point], title: str):
    fig, ax = plt.subplots()
    plot_points(points, ax=ax)
    plot_hull(hull, ax=ax)
    ax.set_title(title)
    ax.grid()
    plt.show()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convex hull of random integer points")
    parser.add_argument("-n", type=int, default=100, help="number of points")
    parser.add_argument("--distribution", choices=DISTRIBUTIONS, default="uniform")
    parser.add_argument("--bound", type=int, default=1000, help="coordinate bound")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--algorithm", choices=sorted(ALGORITHMS), default="jarvis")
    parser.add_argument("--compare", action="store_true", help="run every registered algorithm")
    parser.add_argument("--plot", action="store_true", help="show the hull with matplotlib")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    points = generate_random_points(args.n, args.distribution, bound=args.bound, seed=args.seed)
    logger.info("Generated %d points (%s, bound %d)", len(points), args.distribution, args.bound)

    if args.compare:
        for name, res in compare_algorithms(points).items():
            speed = len(points) / res['time'] if res['time'] > 0 else 0
            print(f"{name}\t{res['time']:.6f}s\t{res['hull_size']} vertices\t{speed:.0f} points/s")
        return 0

    hull, _ = run(points, args.algorithm)
    for point in hull:
        print(point.x, point.y)

    if args.plot:
        show_plot(points, hull, f"{args.algorithm}: {len(hull)} hull vertices")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
