"""
matsel - MATLAB-style sub-matrix selection

Select arbitrary rows and columns of a matrix and read or write the block as
a unit. A selection per axis is one of:

- point(i): a single position
- interval(a, b): positions a..b (both inclusive)
- indices([...]): explicit positions, repeats and any order allowed
- find(x): positions of the nonzero entries of x
- all(): every position, like ':' in MATLAB

Architecture:
    ┌──────────────────────────────────────────────┐
    │        DenseMatrix (slicing driver)          │
    │   get / put / [rows, cols]                   │
    ├──────────────────────────────────────────────┤
    │  Range: init(lower, upper) -> cursor walk    │
    │  Point | Interval | Indices | All            │
    └──────────────────────────────────────────────┘

Example:
    >>> import matsel
    >>> from matsel import DenseMatrix
    >>> from matsel.ranges import all, indices, interval, point
    >>>
    >>> A = DenseMatrix([[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]])
    >>> A.get(interval(0, 1), all()).shape
    (2, 4)
    >>> A.get(point(0), indices([3, 0, 0])).to_numpy()
    array([[4., 1., 1.]])
    >>>
    >>> # Validate point/indices ranges when they are bound
    >>> with matsel.strict():
    ...     A.get(indices([0, 5]), all())
    Traceback (most recent call last):
    ...
    matsel._errors.BoundsViolationError: ...
"""

__version__ = '0.1.0'

from . import ranges

from ._errors import (
    MatselError,
    InvalidArgumentError,
    DimensionMismatchError,
    BoundsViolationError,
    IndexOutOfBoundsError,
    RangeStateError,
    MatselTypeError,
    check_error,
)

from ._config import (
    RealType,
    get_config,
    set_precision,
    get_precision,
    set_strict_ranges,
    strict,
)

from .ranges import (
    Range,
    PointRange,
    IntervalRange,
    IndicesRange,
    AllRange,
)

from .matrix import DenseMatrix

__all__ = [
    # Version
    '__version__',

    # Modules
    'ranges',

    # Errors
    'MatselError',
    'InvalidArgumentError',
    'DimensionMismatchError',
    'BoundsViolationError',
    'IndexOutOfBoundsError',
    'RangeStateError',
    'MatselTypeError',
    'check_error',

    # Configuration
    'RealType',
    'get_config',
    'set_precision',
    'get_precision',
    'set_strict_ranges',
    'strict',

    # Ranges
    'Range',
    'PointRange',
    'IntervalRange',
    'IndicesRange',
    'AllRange',

    # Matrix
    'DenseMatrix',
]
