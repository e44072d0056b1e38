"""
Range Factory

Static helpers that make construction of ranges uniform:

    point(3)                 a PointRange
    interval(1, 2)           an IntervalRange (both ends inclusive)
    all()                    an AllRange
    indices([1, 2, 3])       an IndicesRange from a list, array or vector
    find(x)                  an IndicesRange over the nonzero entries of x

``as_range`` turns whatever a caller put between the brackets of
``mat[rows, cols]`` into one of the above.

Note that ``all`` shadows the builtin inside this module.
"""

import builtins
from typing import Optional

import numpy as np

from .._errors import IndexOutOfBoundsError, InvalidArgumentError, MatselTypeError
from .._typing import (
    IndexInput,
    RangeKey,
    VectorInput,
    is_dense_matrix,
    is_integer,
    is_numpy_array,
)
from ._all import AllRange
from ._base import Range
from ._indices import IndicesRange
from ._interval import IntervalRange
from ._point import PointRange

__all__ = ['point', 'interval', 'all', 'indices', 'find', 'as_range']


def point(i: int) -> PointRange:
    """Construct point range (constant range) with given position."""
    return PointRange(i)


def interval(a: int, b: int) -> IntervalRange:
    """Construct interval range ``a..b``, both ends inclusive."""
    return IntervalRange(a, b)


def all() -> AllRange:
    """Construct a range over every position of the axis it is bound to."""
    return AllRange()


def indices(positions: IndexInput) -> IndicesRange:
    """Construct a range over explicit positions.

    ``positions`` may be a list/tuple of ints, a numpy array or a
    DenseMatrix vector; non-integer entries are truncated toward zero.
    """
    return IndicesRange(positions)


def find(vector: VectorInput) -> IndicesRange:
    """Construct a range over the positions of the nonzero entries of ``vector``.

    Positions are ascending. For a full matrix they are column-major linear
    positions, as MATLAB's ``find``.

    Example:
        >>> find([0, 5, 0, 3]).positions(0, 4)
        array([1, 3])
    """
    return IndicesRange.from_nonzero(vector)


# =============================================================================
# Key Coercion
# =============================================================================

def _slice_to_range(key: slice, extent: Optional[int]) -> Range:
    if key.step not in (None, 1):
        raise InvalidArgumentError(f"Strided selections are not supported: {key}")

    if key.start is None and key.stop is None:
        return AllRange()

    if extent is not None:
        start, stop, _ = key.indices(extent)
        return IntervalRange(start, max(stop, start) - 1)

    for bound in (key.start, key.stop):
        if bound is None or not is_integer(bound) or bound < 0:
            raise InvalidArgumentError(
                f"Slice {key} needs the axis size to be resolved"
            )
    start, stop = int(key.start), int(key.stop)
    return IntervalRange(start, max(stop, start) - 1)


def as_range(key: RangeKey, extent: Optional[int] = None, axis: str = "index") -> Range:
    """
    Coerce an indexing key into a Range.

    Args:
        key: Range (returned unchanged), int, slice with step 1, boolean
            mask, list/tuple/array of positions, or a DenseMatrix (its
            nonzero entries are used).
        extent: Axis size when known. Enables negative ints and open slices.
        axis: Axis name used in error messages.

    Raises:
        InvalidArgumentError: For strided slices or unresolvable slices.
        IndexOutOfBoundsError: For a negative int that wraps below zero.
        MatselTypeError: For unsupported key types.
    """
    if isinstance(key, Range):
        return key

    if is_integer(key):
        pos = int(key)
        if pos < 0 and extent is not None:
            if pos + extent < 0:
                raise IndexOutOfBoundsError(axis, pos, extent)
            pos += extent
        return PointRange(pos)

    if isinstance(key, slice):
        return _slice_to_range(key, extent)

    if is_dense_matrix(key):
        return find(key)

    if is_numpy_array(key):
        if key.dtype == np.bool_:
            return find(key)
        return indices(key)

    if isinstance(key, (list, tuple)):
        if len(key) > 0 and builtins.all(isinstance(k, (bool, np.bool_)) for k in key):
            return find(key)
        return indices(key)

    raise MatselTypeError(f"Invalid {axis} selector: {type(key).__name__}")

