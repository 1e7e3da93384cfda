import math

import numpy as np
import pytest

from graham_hull import DiameterFinder, DiameterPair, PointSet, convex_hull_diameter


def test_square_diameter_is_diagonal():
    result = convex_hull_diameter([(-5.0, -5.0), (5.0, -5.0), (5.0, 5.0), (-5.0, 5.0)])
    assert len(result) == 4
    assert result.diameter.distance == pytest.approx(10.0 * math.sqrt(2.0))


def test_first_tie_wins():
    cloud = PointSet([(-5.0, -5.0), (5.0, -5.0), (5.0, 5.0), (-5.0, 5.0)])
    hull = np.array([1, 2, 3, 0], dtype=np.int64)
    pair = DiameterFinder().find(cloud, hull)
    # both diagonals are equally long; positions (0, 2) come before (1, 3)
    assert (pair.start, pair.end) == (0, 2)


def test_collinear_diameter_selects_extremes():
    result = convex_hull_diameter([(0.0, 0.0), (1.0, 1.0), (2.0, 2.0)])
    assert (result.diameter.start, result.diameter.end) == (0, 1)
    assert set(result.diameter_indices) == {0, 2}
    assert result.diameter.distance == pytest.approx(2.0 * math.sqrt(2.0))


def test_matches_brute_force(random_cloud):
    result = convex_hull_diameter(random_cloud.points)
    hull_points = result.hull_points
    best = max(
        math.dist(hull_points[i], hull_points[j])
        for i in range(len(hull_points))
        for j in range(i, len(hull_points))
    )
    assert result.diameter.distance == pytest.approx(best)
    assert result.diameter.start <= result.diameter.end

    # the hull diameter is also the diameter of the whole point set
    deltas = random_cloud.points[:, None, :] - random_cloud.points[None, :, :]
    assert result.diameter.distance == pytest.approx(np.sqrt((deltas ** 2).sum(-1)).max())


def test_single_vertex_hull():
    pair = DiameterFinder().find(PointSet([(1.0, 2.0)]), np.array([0], dtype=np.int64))
    assert pair == DiameterPair(0, 0, 0.0)


def test_coincident_hull_keeps_default_pair():
    cloud = PointSet([(1.0, 1.0), (1.0, 1.0)])
    pair = DiameterFinder().find(cloud, np.array([0, 1], dtype=np.int64))
    assert pair == DiameterPair(0, 1, 0.0)


def test_empty_hull_is_rejected():
    with pytest.raises(ValueError):
        DiameterFinder().find(PointSet([(0.0, 0.0)]), np.array([], dtype=np.int64))


def test_endpoints_map_to_points():
    cloud = PointSet([(0.0, 0.0), (3.0, 0.0), (0.0, 4.0)])
    hull = np.array([1, 2, 0], dtype=np.int64)
    pair = DiameterFinder().find(cloud, hull)
    first, second = pair.endpoints(cloud, hull)
    assert {first.index, second.index} == {1, 2}
    assert pair.distance == pytest.approx(5.0)
