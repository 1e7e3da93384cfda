"""
Point Set Model

Immutable 2D points, the read-only point set they live in, pivot selection
and the pivot-first index permutation used by the rest of the pipeline.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from dataclasses import field

import numpy as np
from numba import njit

logger = logging.getLogger(__name__)

DEFAULT_BOUND = 0.975

# Largest finite float64; stands in for infinite slope and for the proxy key
# of points on the pivot's horizontal line.
SLOPE_SENTINEL = float(np.finfo(np.float64).max)


@njit
def _lowest_point_index(points: np.ndarray) -> int:
    """
    Scan for the lowest y coordinate, breaking ties by the highest x.

    A later point only wins a tie with strictly greater x, so among
    identical points the first one encountered is kept.
    """
    start = 0
    lowest_y = points[0, 1]
    for i in range(1, points.shape[0]):
        y = points[i, 1]
        if y > lowest_y:
            continue
        if y < lowest_y:
            lowest_y = y
            start = i
        elif points[i, 0] > points[start, 0]:
            start = i
    return start


@njit
def _reciprocal_slope_keys(
    points: np.ndarray,
    pivot_x: float,
    pivot_y: float,
) -> np.ndarray:
    """
    Negative reciprocal slope of every point as seen from the pivot.

    Increases monotonically with the counter-clockwise angle from the
    positive x axis over [0, 180] degrees, which is the whole range once
    the pivot is the lowest point. Vertical lines use SLOPE_SENTINEL as
    their slope; horizontal ones get a signed sentinel key so points left
    of the pivot land at 180 degrees instead of 0.
    """
    n = points.shape[0]
    keys = np.empty(n, dtype=np.float64)
    for i in range(n):
        dx = points[i, 0] - pivot_x
        dy = points[i, 1] - pivot_y
        if dx == 0.0:
            slope = SLOPE_SENTINEL
        else:
            slope = dy / dx
        if slope == 0.0:
            keys[i] = -SLOPE_SENTINEL if dx > 0.0 else SLOPE_SENTINEL
        else:
            keys[i] = -1.0 / slope
    return keys


@njit
def _distances_sq(points: np.ndarray, pivot_x: float, pivot_y: float) -> np.ndarray:
    n = points.shape[0]
    distances = np.empty(n, dtype=np.float64)
    for i in range(n):
        dx = points[i, 0] - pivot_x
        dy = points[i, 1] - pivot_y
        distances[i] = dx * dx + dy * dy
    return distances


@dataclass(slots=True, frozen=True)
class Point:
    """
    Immutable 2D point tagged with its index in the owning PointSet.

    Attributes:
        x: X-coordinate.
        y: Y-coordinate.
        index: Position in the PointSet, -1 if untracked.
    """

    x: float
    y: float
    index: int = -1

    def __iter__(self):
        """Enable tuple unpacking: x, y = point."""
        return iter((self.x, self.y))

    def __getitem__(self, idx: int) -> float:
        return (self.x, self.y)[idx]

    def __sub__(self, other: Point) -> tuple[float, float]:
        return (self.x - other.x, self.y - other.y)

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        dx, dy = self - other
        return float(np.sqrt(dx * dx + dy * dy))


@dataclass
class PointSet:
    """
    Fixed, read-only set of 2D points with lazily cached pivot data.

    The coordinate array is copied into contiguous float64 storage and
    flagged non-writeable, so every stage of a run sees the same points.
    Pivot index, proxy keys and squared pivot distances are computed on
    first access and memoized.

    Attributes:
        points: (N, 2) array of point coordinates, N >= 1.
    """

    points: np.ndarray
    _pivot_idx: int | None = field(default=None, init=False, repr=False)
    _keys: np.ndarray | None = field(default=None, init=False, repr=False)
    _distances: np.ndarray | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        points = np.array(self.points, dtype=np.float64, copy=True)
        if points.size == 0:
            raise ValueError("A point set needs at least one point")
        if points.ndim != 2 or points.shape[1] != 2:
            raise ValueError(
                f"Expected an (N, 2) array of coordinates, got shape {points.shape}"
            )
        if not np.all(np.isfinite(points)):
            raise ValueError("Point coordinates must be finite")
        points = np.ascontiguousarray(points)
        points.setflags(write=False)
        self.points = points

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, idx: int | np.ndarray) -> np.ndarray:
        return self.points[idx]

    def point(self, idx: int) -> Point:
        """Return entry ``idx`` as a tagged Point."""
        x, y = self.points[idx]
        return Point(float(x), float(y), int(idx))

    @property
    def pivot_idx(self) -> int:
        """
        Index of the pivot: lowest y, ties broken by highest x.

        The pivot is guaranteed to be a hull vertex and is the origin for
        the polar-angle sort.
        """
        if self._pivot_idx is None:
            self._pivot_idx = int(_lowest_point_index(self.points))
        return self._pivot_idx

    @property
    def pivot(self) -> np.ndarray:
        return self.points[self.pivot_idx]

    @property
    def slope_keys(self) -> np.ndarray:
        """Polar-angle proxy of every point relative to the pivot."""
        if self._keys is None:
            self._keys = _reciprocal_slope_keys(
                self.points,
                self.pivot[0],
                self.pivot[1],
            )
        return self._keys

    @property
    def distances(self) -> np.ndarray:
        """Squared distances from the pivot to every point."""
        if self._distances is None:
            self._distances = _distances_sq(
                self.points,
                self.pivot[0],
                self.pivot[1],
            )
        return self._distances

    def initial_order(self) -> np.ndarray:
        """
        Identity permutation with the pivot moved to position 0.

        The value stored in the pivot's own slot is swapped with the value
        0, so the result is still a permutation of 0..N-1.
        """
        order = np.arange(len(self), dtype=np.int64)
        pivot = self.pivot_idx
        order[0], order[pivot] = pivot, 0
        return order

    @classmethod
    def random(
        cls,
        count: int,
        bound: float = DEFAULT_BOUND,
        seed: int | None = None,
    ) -> PointSet:
        """
        Draw ``count`` points uniformly from the square [-bound, bound]^2.

        Args:
            count: Number of points, at least 1.
            bound: Half the side length of the sampling square.
            seed: Seed for the generator; the current UNIX time when None.

        Returns:
            A new PointSet.
        """
        if count < 1:
            raise ValueError(f"Point count must be positive, got {count}")
        if bound <= 0:
            raise ValueError(f"Coordinate bound must be positive, got {bound}")
        if seed is None:
            seed = int(time.time())
        logger.info("Seed: %d", seed)
        rng = np.random.default_rng(seed)
        return cls(rng.uniform(-bound, bound, size=(count, 2)))
