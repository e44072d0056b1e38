"""
matsel Type Definitions and Input Helpers.

Type aliases and conversion helpers shared by the range factory and the
matrix. They let callers pass indices and vectors in any of:

    - Python sequences (List, Tuple)
    - NumPy arrays (ndarray)
    - matsel DenseMatrix vectors

Example:
    >>> from matsel._typing import ensure_index_vector
    >>> ensure_index_vector([1.9, -2.7, 3])
    array([ 1, -2,  3])
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence, Union

import numpy as np

from ._errors import InvalidArgumentError, MatselTypeError

if TYPE_CHECKING:
    from .matrix import DenseMatrix
    from .ranges import Range


# =============================================================================
# Type Aliases
# =============================================================================

VectorInput = Union["np.ndarray", Sequence[float], "DenseMatrix"]
"""Numeric vector: ndarray, sequence of numbers, or a DenseMatrix vector."""

IndexInput = Union["np.ndarray", Sequence[int], "DenseMatrix"]
"""Explicit position list."""

RangeKey = Union["Range", int, slice, "np.ndarray", Sequence[int], "DenseMatrix"]
"""Anything the matrix accepts as a row or column selector."""


# =============================================================================
# Type Checking Functions
# =============================================================================

def is_numpy_array(obj: Any) -> bool:
    """Check if object is a numpy ndarray."""
    return isinstance(obj, np.ndarray)


def is_dense_matrix(obj: Any) -> bool:
    """Check if object is a matsel DenseMatrix."""
    from .matrix import DenseMatrix
    return isinstance(obj, DenseMatrix)


def is_integer(obj: Any) -> bool:
    """Python or numpy integer, excluding bool."""
    return isinstance(obj, (int, np.integer)) and not isinstance(obj, (bool, np.bool_))


# =============================================================================
# Conversion Functions
# =============================================================================

def ensure_vector(vec: VectorInput) -> np.ndarray:
    """Convert any vector input to a 1-D numpy array.

    Matrices and multi-dimensional arrays are flattened column-major, so
    positions agree with MATLAB linear indexing. For row and column vectors
    that is simply the element order.

    Raises:
        MatselTypeError: If the input is not array-like.
    """
    if is_dense_matrix(vec):
        return vec.to_numpy().ravel(order="F")

    if is_numpy_array(vec):
        return vec.ravel(order="F")

    if isinstance(vec, (str, bytes)) or not isinstance(vec, Sequence):
        raise MatselTypeError(f"Cannot convert {type(vec).__name__} to a vector")

    return np.asarray(vec).ravel(order="F")


def ensure_index_vector(vec: IndexInput) -> np.ndarray:
    """Convert any index input to an int64 array.

    Non-integer entries are truncated toward zero.
    """
    arr = ensure_vector(vec)
    if arr.size == 0:
        return np.zeros(0, dtype=np.int64)
    if arr.dtype == np.bool_ or not np.issubdtype(arr.dtype, np.number):
        raise MatselTypeError(f"Index vector must be numeric, got dtype {arr.dtype}")
    if np.issubdtype(arr.dtype, np.complexfloating):
        raise MatselTypeError("Index vector cannot be complex")
    if np.issubdtype(arr.dtype, np.floating) and not np.all(np.isfinite(arr)):
        raise InvalidArgumentError("Index vector contains NaN or infinite entries")
    # float -> int casting truncates toward zero
    return arr.astype(np.int64)


def nonzero_positions(vec: VectorInput) -> np.ndarray:
    """Ascending positions of the nonzero entries of a vector (int64)."""
    arr = ensure_vector(vec)
    return np.flatnonzero(arr).astype(np.int64)
