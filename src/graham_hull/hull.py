"""
Graham scan hull extraction over a polar-sorted index array.
"""

from __future__ import annotations

import logging

import numpy as np
from numba import njit

from .points import PointSet

logger = logging.getLogger(__name__)


@njit
def _collapse_rays(
    order: np.ndarray,
    keys: np.ndarray,
    distances: np.ndarray,
) -> np.ndarray:
    """
    Keep the pivot plus the farthest point of every ray leaving it.

    Points on the same ray share a proxy key and are adjacent after the
    sort; points coincident with the pivot are dropped. On equal distance
    the first point of the run is kept.
    """
    n = order.shape[0]
    kept = np.empty(n, dtype=np.int64)
    kept[0] = order[0]
    size = 1
    run_key = 0.0
    in_run = False
    for pos in range(1, n):
        idx = order[pos]
        if distances[idx] == 0.0:
            continue
        if in_run and keys[idx] == run_key:
            if distances[idx] > distances[kept[size - 1]]:
                kept[size - 1] = idx
        else:
            kept[size] = idx
            size += 1
            run_key = keys[idx]
            in_run = True
    return kept[:size]


@njit
def _graham_stack(points: np.ndarray, candidates: np.ndarray) -> np.ndarray:
    """
    Scan candidates in order, backtracking over right turns.

    A negative cross product pops the last accepted vertex and retries the
    same candidate. When only the pivot would remain, the candidate is
    pushed instead, so the hull never has fewer than two vertices.
    Collinear turns (cross == 0) are accepted.
    """
    n = candidates.shape[0]
    hull = np.empty(n, dtype=np.int64)
    hull[0] = candidates[0]
    hull[1] = candidates[1]
    size = 2
    i = 2
    while i < n:
        p = hull[size - 2]
        q = hull[size - 1]
        r = candidates[i]
        cross = (
            (points[q, 0] - points[p, 0]) * (points[r, 1] - points[p, 1])
            - (points[r, 0] - points[p, 0]) * (points[q, 1] - points[p, 1])
        )
        if cross < 0.0:
            size -= 1
            if size > 1:
                continue
        hull[size] = r
        size += 1
        i += 1
    return hull[:size]


class HullBuilder:
    """
    Turns a pivot-first, polar-sorted index array into hull vertex indices.

    The returned vertices run counter-clockwise from the pivot. The input
    array is left untouched, so building twice from the same order gives
    the same hull.
    """

    def build(self, cloud: PointSet, order: np.ndarray) -> np.ndarray:
        if len(order) != len(cloud):
            raise ValueError(
                f"Index array has {len(order)} entries for {len(cloud)} points"
            )
        if len(order) == 1:
            return order.copy()
        candidates = _collapse_rays(order, cloud.slope_keys, cloud.distances)
        if len(candidates) < 2:
            # every point coincides with the pivot
            candidates = order[:2].copy()
        logger.debug(
            "Scanning %d of %d sorted points after ray collapse",
            len(candidates),
            len(order),
        )
        return _graham_stack(cloud.points, candidates)
