"""
Farthest pair of hull vertices by exhaustive search.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np
from numba import njit

from .points import Point
from .points import PointSet

logger = logging.getLogger(__name__)


@njit
def _farthest_pair(points: np.ndarray, hull: np.ndarray) -> tuple[int, int, float]:
    m = hull.shape[0]
    best_i = 0
    best_j = 1 if m > 1 else 0
    max_dist = 0.0
    for i in range(m):
        for j in range(i, m):
            dx = points[hull[i], 0] - points[hull[j], 0]
            dy = points[hull[i], 1] - points[hull[j], 1]
            dist = math.sqrt(dx * dx + dy * dy)
            # strict comparison: the earliest (i, j) keeps a tie
            if dist > max_dist:
                max_dist = dist
                best_i = i
                best_j = j
    return best_i, best_j, max_dist


@dataclass(slots=True, frozen=True)
class DiameterPair:
    """
    Farthest-apart pair of hull vertices.

    Attributes:
        start: Position of the first endpoint in the hull vertex list.
        end: Position of the second endpoint, ``end >= start``.
        distance: Euclidean distance between the two endpoints.
    """

    start: int
    end: int
    distance: float

    def point_indices(self, hull: np.ndarray) -> tuple[int, int]:
        """Map the hull positions back to point indices."""
        return int(hull[self.start]), int(hull[self.end])

    def endpoints(self, cloud: PointSet, hull: np.ndarray) -> tuple[Point, Point]:
        first, second = self.point_indices(hull)
        return cloud.point(first), cloud.point(second)


class DiameterFinder:
    """
    Brute-force O(M^2) search over all pairs of hull positions.

    Pairs are visited in increasing (i, then j) order with i <= j and only a
    strictly larger distance replaces the current best.
    """

    def find(self, cloud: PointSet, hull: np.ndarray) -> DiameterPair:
        if len(hull) == 0:
            raise ValueError("Cannot search an empty hull")
        start, end, distance = _farthest_pair(cloud.points, hull)
        logger.debug("Checked %d hull vertex pairs", len(hull) * (len(hull) + 1) // 2)
        return DiameterPair(int(start), int(end), float(distance))
