import numpy as np
import pytest

from graham_hull import PointSet


@pytest.fixture
def square_points():
    """Corners of a 4x4 square plus its center, as in the textbook example."""
    return np.array([
        [0.0, 0.0],
        [4.0, 0.0],
        [4.0, 4.0],
        [0.0, 4.0],
        [2.0, 2.0],
    ])


@pytest.fixture(params=[0, 1, 42])
def random_cloud(request):
    return PointSet.random(500, seed=request.param)


@pytest.fixture
def cross():
    def _cross(o, a, b):
        return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])
    return _cross
