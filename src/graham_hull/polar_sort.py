"""
Polar-angle ordering of point indices around the pivot.

All strategies reorder positions 1..N-1 of a pivot-first index array by the
negative-reciprocal-slope proxy (see PointSet.slope_keys). They are stable,
so points sharing a proxy key keep their relative order and every strategy
yields the same permutation.
"""

from __future__ import annotations

import logging

import numpy as np
from numba import njit
from sortedcontainers import SortedList

from .points import PointSet

logger = logging.getLogger(__name__)


@njit
def _merge_sort_tail(order: np.ndarray, keys: np.ndarray) -> None:
    """
    Bottom-up merge sort of order[1:] by keys, in place.

    Runs of width 1, 2, 4, ... starting at position 1 are merged through a
    scratch buffer of size N. The left run wins ties, which keeps the sort
    stable.
    """
    n = order.shape[0]
    scratch = np.empty(n, dtype=np.int64)
    width = 1
    while width < n:
        for lo in range(1, n, 2 * width):
            mid = min(lo + width, n)
            hi = min(lo + 2 * width, n)
            left = lo
            right = mid
            out = lo
            while left < mid and right < hi:
                if keys[order[right]] < keys[order[left]]:
                    scratch[out] = order[right]
                    right += 1
                else:
                    scratch[out] = order[left]
                    left += 1
                out += 1
            while left < mid:
                scratch[out] = order[left]
                left += 1
                out += 1
            while right < hi:
                scratch[out] = order[right]
                right += 1
                out += 1
            for k in range(lo, hi):
                order[k] = scratch[k]
        width *= 2


class SortStrategy:
    """
    Base class for polar-angle sorting strategies.

    Subclasses implement ``_sort_tail``; ``sort`` takes care of the
    pivot-first contract shared by all of them.
    """

    name = ""

    def sort(self, cloud: PointSet, order: np.ndarray) -> np.ndarray:
        """
        Sort ``order`` in place by polar angle around ``order[0]``.

        Args:
            cloud: Point set whose pivot sits at ``order[0]``.
            order: Pivot-first permutation of the point indices.

        Returns:
            The same array, for chaining.
        """
        if order[0] != cloud.pivot_idx:
            raise ValueError(
                f"Index array must start with the pivot {cloud.pivot_idx}, "
                f"got {order[0]}"
            )
        if len(order) > 2:
            self._sort_tail(order, cloud.slope_keys)
        return order

    def _sort_tail(self, order: np.ndarray, keys: np.ndarray) -> None:
        raise NotImplementedError


class MergeSortStrategy(SortStrategy):
    """Iterative merge sort compiled with Numba."""

    name = "merge"

    def _sort_tail(self, order: np.ndarray, keys: np.ndarray) -> None:
        _merge_sort_tail(order, keys)


class ArraySortStrategy(SortStrategy):
    """NumPy stable argsort over the proxy keys."""

    name = "array"

    def _sort_tail(self, order: np.ndarray, keys: np.ndarray) -> None:
        tail = order[1:]
        order[1:] = tail[np.argsort(keys[tail], kind="stable")]


class SortedListSortStrategy(SortStrategy):
    """
    Keyed insertion into a SortedList.

    Equal keys are inserted to the right of existing ones, so insertion
    order breaks ties exactly like the stable strategies.
    """

    name = "sorted_list"

    def _sort_tail(self, order: np.ndarray, keys: np.ndarray) -> None:
        ranked = SortedList(key=lambda idx: keys[idx])
        for idx in order[1:].tolist():
            ranked.add(idx)
        order[1:] = np.fromiter(ranked, dtype=order.dtype, count=len(ranked))


SORT_STRATEGIES: dict[str, type[SortStrategy]] = {
    strategy.name: strategy
    for strategy in (MergeSortStrategy, ArraySortStrategy, SortedListSortStrategy)
}


def create_sort_strategy(name: str) -> SortStrategy:
    """Instantiate the strategy registered under ``name``."""
    try:
        return SORT_STRATEGIES[name]()
    except KeyError:
        valid = ", ".join(sorted(SORT_STRATEGIES))
        raise ValueError(
            f"Unknown sort strategy {name!r}, expected one of: {valid}"
        ) from None


def sort_by_polar_angle(cloud: PointSet, strategy: str = "merge") -> np.ndarray:
    """
    Build the pivot-first index array and sort it by polar angle.

    Args:
        cloud: Point set to order.
        strategy: Registered sort strategy name.

    Returns:
        Sorted permutation of 0..N-1 with the pivot at position 0.
    """
    order = cloud.initial_order()
    logger.debug("Sorting %d indices with %s strategy", len(order), strategy)
    return create_sort_strategy(strategy).sort(cloud, order)
