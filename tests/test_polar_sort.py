import numpy as np
import pytest

from graham_hull import (
    ArraySortStrategy,
    MergeSortStrategy,
    PointSet,
    SortedListSortStrategy,
    create_sort_strategy,
    sort_by_polar_angle,
)

STRATEGIES = ["merge", "array", "sorted_list"]


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_fan_is_sorted_by_angle(strategy):
    angles = np.deg2rad([10.0, 170.0, 90.0, 45.0, 135.0, 60.0, 120.0])
    fan = np.column_stack([np.cos(angles), np.sin(angles)])
    cloud = PointSet(np.vstack([fan, [[0.0, -1.0]]]))

    order = sort_by_polar_angle(cloud, strategy)

    pivot = cloud.pivot
    assert order[0] == cloud.pivot_idx == 7
    rest = cloud.points[order[1:]]
    swept = np.arctan2(rest[:, 1] - pivot[1], rest[:, 0] - pivot[0])
    assert np.all(np.diff(swept) > 0)


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_order_is_pivot_first_permutation(random_cloud, strategy):
    order = sort_by_polar_angle(random_cloud, strategy)
    assert order[0] == random_cloud.pivot_idx
    assert sorted(order.tolist()) == list(range(len(random_cloud)))
    keys = random_cloud.slope_keys[order[1:]]
    assert np.all(np.diff(keys) >= 0)


def test_strategies_agree(random_cloud):
    orders = [sort_by_polar_angle(random_cloud, name) for name in STRATEGIES]
    assert np.array_equal(orders[0], orders[1])
    assert np.array_equal(orders[0], orders[2])


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_equal_keys_keep_index_order(strategy):
    cloud = PointSet([(0.0, 0.0), (3.0, 3.0), (1.0, 1.0), (2.0, 2.0), (-1.0, 1.0)])
    order = sort_by_polar_angle(cloud, strategy)
    assert order.tolist() == [0, 1, 2, 3, 4]


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_points_left_of_pivot_sort_last(strategy):
    cloud = PointSet([(-2.0, 0.0), (0.0, 0.0), (0.0, 1.0), (-1.0, 1.0)])
    order = sort_by_polar_angle(cloud, strategy)
    assert order.tolist() == [1, 2, 3, 0]


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_tiny_inputs(strategy):
    assert sort_by_polar_angle(PointSet([(1.0, 1.0)]), strategy).tolist() == [0]
    two = PointSet([(0.0, 1.0), (0.0, 0.0)])
    assert sort_by_polar_angle(two, strategy).tolist() == [1, 0]


def test_sort_is_in_place(random_cloud):
    order = random_cloud.initial_order()
    result = MergeSortStrategy().sort(random_cloud, order)
    assert result is order


def test_sort_requires_pivot_first():
    cloud = PointSet([(0.0, 1.0), (0.0, 0.0), (1.0, 2.0)])
    with pytest.raises(ValueError, match="pivot"):
        ArraySortStrategy().sort(cloud, np.arange(3, dtype=np.int64))


def test_create_sort_strategy():
    assert isinstance(create_sort_strategy("merge"), MergeSortStrategy)
    assert isinstance(create_sort_strategy("array"), ArraySortStrategy)
    assert isinstance(create_sort_strategy("sorted_list"), SortedListSortStrategy)
    with pytest.raises(ValueError, match="Unknown sort strategy"):
        create_sort_strategy("quick")
