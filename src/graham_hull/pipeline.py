"""
Graham Scan Hull and Diameter Pipeline

Orchestrates pivot selection, polar-angle sorting, hull extraction and the
diameter search for one fixed point set, and packages the outputs for a
rendering harness: the points, the hull vertex indices in drawing order, the
diameter endpoints and a per-point color array.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from dataclasses import field

import numpy as np

from .config import Config
from .diameter import DiameterFinder
from .diameter import DiameterPair
from .hull import HullBuilder
from .points import DEFAULT_BOUND
from .points import PointSet
from .polar_sort import SortStrategy
from .polar_sort import create_sort_strategy

logger = logging.getLogger(__name__)

WHITE = (1.0, 1.0, 1.0, 1.0)
GREEN = (0.0, 1.0, 0.0, 1.0)
RED = (1.0, 0.0, 0.0, 1.0)


@dataclass
class GrahamScanConfig:
    """
    Algorithm options for a pipeline run.

    Attributes:
        sort_strategy: Name of the polar-angle sort strategy
            ("merge", "array" or "sorted_list").
    """

    sort_strategy: str = "merge"

    @classmethod
    def from_config(cls, cfg: Config) -> GrahamScanConfig:
        scan = cfg['scan'] or {}
        return cls(sort_strategy=scan.get('sort_strategy', cls.sort_strategy))


@dataclass(frozen=True)
class HullResult:
    """
    Read-only outputs of one pipeline run.

    Attributes:
        cloud: The input point set.
        order: Pivot-first permutation of 0..N-1 in polar-angle order.
        hull: Hull vertex point indices, counter-clockwise from the pivot.
        diameter: Farthest pair, as positions into ``hull``.
        timings: Seconds spent in the "sort", "hull" and "diameter" stages.
    """

    cloud: PointSet
    order: np.ndarray
    hull: np.ndarray
    diameter: DiameterPair
    timings: dict[str, float] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.hull)

    @property
    def hull_points(self) -> np.ndarray:
        """(M, 2) hull coordinates in traversal order, for a line loop."""
        return self.cloud.points[self.hull]

    @property
    def diameter_indices(self) -> tuple[int, int]:
        return self.diameter.point_indices(self.hull)


class GrahamScan:
    """
    Convex hull and hull diameter of a 2D point set.

    Example:
        >>> scanner = GrahamScan(GrahamScanConfig(sort_strategy="array"))
        >>> result = scanner(PointSet.random(1000, seed=7))
        >>> result.hull, result.diameter

    Attributes:
        config: Algorithm configuration options.
    """

    __slots__ = ("config", "_sort_strategy", "_hull_builder", "_diameter_finder")

    def __init__(self, config: GrahamScanConfig | None = None) -> None:
        self.config = config or GrahamScanConfig()
        self._sort_strategy: SortStrategy = create_sort_strategy(
            self.config.sort_strategy
        )
        self._hull_builder = HullBuilder()
        self._diameter_finder = DiameterFinder()

    def __call__(self, points: PointSet | np.ndarray) -> HullResult:
        """Enable callable syntax: scanner(points)."""
        return self.compute(points)

    def compute(self, points: PointSet | np.ndarray) -> HullResult:
        """
        Run the full pipeline once.

        Args:
            points: A PointSet, or an (N, 2) array-like of coordinates.

        Returns:
            HullResult with the sorted order, hull and diameter pair.
        """
        cloud = points if isinstance(points, PointSet) else PointSet(points)
        timings: dict[str, float] = {}

        start = time.perf_counter()
        order = self._sort_strategy.sort(cloud, cloud.initial_order())
        timings["sort"] = time.perf_counter() - start
        logger.info("Duration to sort: %dus", timings["sort"] * 1e6)

        start = time.perf_counter()
        hull = self._hull_builder.build(cloud, order)
        timings["hull"] = time.perf_counter() - start
        logger.info("Duration to calculate convex hull: %dus", timings["hull"] * 1e6)

        start = time.perf_counter()
        diameter = self._diameter_finder.find(cloud, hull)
        timings["diameter"] = time.perf_counter() - start
        logger.info(
            "Duration to find the furthest points: %dus", timings["diameter"] * 1e6
        )

        order.setflags(write=False)
        hull.setflags(write=False)
        return HullResult(cloud, order, hull, diameter, timings)


def point_colors(result: HullResult) -> np.ndarray:
    """
    Per-point RGBA colors for drawing a result.

    Points default to white, hull vertices are green and the two diameter
    endpoints are red.

    Returns:
        (N, 4) float32 array.
    """
    colors = np.empty((len(result.cloud), 4), dtype=np.float32)
    colors[:] = WHITE
    colors[result.hull] = GREEN
    colors[list(result.diameter_indices)] = RED
    return colors


def convex_hull_diameter(
    points: np.ndarray,
    sort_strategy: str = "merge",
) -> HullResult:
    """
    Compute the convex hull and its diameter pair.

    Functional interface wrapping GrahamScan.

    Args:
        points: (N, 2) array of 2D point coordinates, N >= 1.
        sort_strategy: Polar-angle sort strategy name.

    Returns:
        HullResult for the points.
    """
    scanner = GrahamScan(GrahamScanConfig(sort_strategy=sort_strategy))
    return scanner(points)


def run_random(
    count: int,
    bound: float = DEFAULT_BOUND,
    seed: int | None = None,
    config: GrahamScanConfig | None = None,
) -> HullResult:
    """Generate ``count`` random points and run the pipeline on them."""
    cloud = PointSet.random(count, bound=bound, seed=seed)
    return GrahamScan(config)(cloud)
