"""matsel Ranges.

Index ranges select positions along one matrix axis. They are built without
knowing the axis size and bound to it by the matrix when a slice is taken.

Type Hierarchy:

    Range (ABC)
    ├── PointRange       point(i)          a single position
    ├── IntervalRange    interval(a, b)    a..b, both inclusive
    ├── IndicesRange     indices(list)     explicit positions
    │                    find(x)           nonzero positions of x
    └── AllRange         all()             every position, like ':'

Quick Start:
    >>> from matsel import DenseMatrix
    >>> from matsel.ranges import all, interval, point
    >>>
    >>> mat = DenseMatrix([[1, 2, 3], [4, 5, 6]])
    >>> mat.get(all(), point(0)).to_numpy()
    array([[1.],
           [4.]])
    >>> mat.get(point(1), interval(1, 2)).to_numpy()
    array([[5., 6.]])
"""

# =============================================================================
# Range Types
# =============================================================================
from ._base import Range
from ._point import PointRange
from ._interval import IntervalRange
from ._indices import IndicesRange
from ._all import AllRange

# =============================================================================
# Factory Functions
# =============================================================================
from ._factory import (
    point,
    interval,
    all,
    indices,
    find,
    as_range,
)

__all__ = [
    # Types
    'Range',
    'PointRange',
    'IntervalRange',
    'IndicesRange',
    'AllRange',
    # Factory
    'point',
    'interval',
    'all',
    'indices',
    'find',
    'as_range',
]
