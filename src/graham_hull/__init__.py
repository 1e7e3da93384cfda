"""
Graham scan convex hull with hull diameter search.

Provides:
- PointSet / Point: read-only 2D point data with pivot selection
- sort strategies ordering indices by the reciprocal-slope polar proxy
- HullBuilder: Graham scan over the sorted index array
- DiameterFinder: farthest pair of hull vertices
- GrahamScan: the full pipeline, returning a HullResult

Usage:
    from graham_hull import GrahamScan, PointSet
    result = GrahamScan()(PointSet.random(3000, seed=1))
"""

from .config import Config
from .diameter import DiameterFinder, DiameterPair
from .hull import HullBuilder
from .logging_config import configure_logging
from .pipeline import (
    GrahamScan,
    GrahamScanConfig,
    HullResult,
    convex_hull_diameter,
    point_colors,
    run_random,
)
from .points import Point, PointSet
from .polar_sort import (
    ArraySortStrategy,
    MergeSortStrategy,
    SortedListSortStrategy,
    SortStrategy,
    create_sort_strategy,
    sort_by_polar_angle,
)

__all__ = [
    'Config',
    'DiameterFinder',
    'DiameterPair',
    'HullBuilder',
    'configure_logging',
    'GrahamScan',
    'GrahamScanConfig',
    'HullResult',
    'convex_hull_diameter',
    'point_colors',
    'run_random',
    'Point',
    'PointSet',
    'ArraySortStrategy',
    'MergeSortStrategy',
    'SortedListSortStrategy',
    'SortStrategy',
    'create_sort_strategy',
    'sort_by_polar_angle',
]
