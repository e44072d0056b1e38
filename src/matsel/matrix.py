"""
DenseMatrix - numpy-backed matrix with MATLAB-style range selection.

The matrix is the slicing driver for index ranges. For every ``get`` or
``put`` it binds one range per axis to the actual axis size, walks each range
once, checks every position against the axis, and moves the selected block:

    >>> from matsel import DenseMatrix
    >>> from matsel.ranges import all, find, indices, interval, point
    >>>
    >>> A = DenseMatrix.from_columns(3, 4, range(1, 13))
    >>> A.get(all(), point(0)).to_numpy().ravel()
    array([1., 2., 3.])
    >>> A.get(interval(1, 2), point(3)).to_numpy().ravel()
    array([11., 12.])
    >>> _ = A.put(point(0), all(), 0.0)    # zero the first row
    >>> block = A[[0, 2], 1:3]              # plain keys work too

Ranges carry mutable cursor state; do not share one range between two calls
running at the same time, and do not mutate a matrix while a slice of it is
being read or written.
"""

from __future__ import annotations

import logging
import numbers
from typing import Any, Iterable, Optional, Tuple, Union

import numpy as np

from ._config import _get_real_dtype
from ._errors import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    InvalidArgumentError,
    MatselTypeError,
)
from ._typing import RangeKey, is_integer
from .ranges import AllRange, Range, as_range

logger = logging.getLogger("matsel.matrix")

__all__ = ['DenseMatrix']


def _drain(rng: Range, extent: int, axis: str) -> np.ndarray:
    """Bind ``rng`` to ``[0, extent)`` and collect its positions by ordinal.

    The range is walked exactly once. Every position is checked against the
    axis, since point and indices ranges are not validated when bound.
    """
    rng.init(0, extent)
    positions = np.empty(rng.length(), dtype=np.int64)
    while rng.has_more():
        positions[rng.index()] = rng.value()
        rng.next()

    bad = (positions < 0) | (positions >= extent)
    if bad.any():
        raise IndexOutOfBoundsError(axis, int(positions[bad][0]), extent)
    return positions


class DenseMatrix:
    """
    Two-dimensional dense matrix of reals.

    Data is held in an owned, C-contiguous numpy array. One-dimensional input
    becomes a column vector; scalars become 1x1 matrices. The element dtype
    defaults to the configured precision (see ``matsel.set_precision``).

    Selection methods accept, per axis, a Range from ``matsel.ranges`` or
    anything ``as_range`` understands (int, slice, list of positions,
    boolean mask, DenseMatrix of nonzero flags).

    Attributes:
        shape (tuple): (rows, columns)
        dtype (np.dtype): element type
    """

    __slots__ = ("_data",)

    def __init__(self, data: Any, dtype: Optional[Union[np.dtype, str]] = None):
        if dtype is None:
            dtype = _get_real_dtype()
        if isinstance(data, DenseMatrix):
            data = data._data
        arr = np.array(data, dtype=dtype, copy=True, order="C")

        if arr.ndim == 0:
            arr = arr.reshape(1, 1)
        elif arr.ndim == 1:
            arr = arr.reshape(-1, 1)
        elif arr.ndim != 2:
            raise InvalidArgumentError(f"Expected at most 2 dimensions, got {arr.ndim}")

        self._data = arr

    # =========================================================================
    # Factory Methods
    # =========================================================================

    @classmethod
    def zeros(cls, rows: int, columns: int, dtype: Optional[Union[np.dtype, str]] = None) -> "DenseMatrix":
        """Create a zero-filled ``rows x columns`` matrix."""
        if rows < 0 or columns < 0:
            raise InvalidArgumentError(f"Invalid shape: ({rows}, {columns})")
        return cls(np.zeros((rows, columns)), dtype=dtype)

    @classmethod
    def from_columns(
        cls,
        rows: int,
        columns: int,
        values: Iterable[float],
        dtype: Optional[Union[np.dtype, str]] = None,
    ) -> "DenseMatrix":
        """
        Create a matrix from values listed column by column.

        Example:
            >>> DenseMatrix.from_columns(2, 2, [1, 2, 3, 4]).to_numpy()
            array([[1., 3.],
                   [2., 4.]])

        Raises:
            DimensionMismatchError: If the number of values is not rows * columns.
        """
        flat = np.asarray(list(values))
        if flat.size != rows * columns:
            raise DimensionMismatchError(
                f"Expected {rows * columns} values for a {rows}x{columns} matrix, got {flat.size}"
            )
        return cls(flat.reshape((rows, columns), order="F"), dtype=dtype)

    @classmethod
    def from_scipy(cls, mat: Any, dtype: Optional[Union[np.dtype, str]] = None) -> "DenseMatrix":
        """Create a dense copy of a scipy sparse matrix."""
        try:
            import scipy.sparse as sp
        except ImportError:
            raise ImportError("scipy required for from_scipy()")

        if not sp.issparse(mat):
            raise MatselTypeError(f"Expected a scipy sparse matrix, got {type(mat).__name__}")
        return cls(mat.toarray(), dtype=dtype)

    def copy(self) -> "DenseMatrix":
        """Deep copy."""
        return DenseMatrix(self._data, dtype=self._data.dtype)

    # =========================================================================
    # Shape
    # =========================================================================

    @property
    def shape(self) -> Tuple[int, int]:
        return self._data.shape

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def columns(self) -> int:
        return self._data.shape[1]

    @property
    def length(self) -> int:
        """Total number of elements."""
        return self._data.size

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def is_empty(self) -> bool:
        return self._data.size == 0

    @property
    def is_row_vector(self) -> bool:
        return self.rows == 1

    @property
    def is_column_vector(self) -> bool:
        return self.columns == 1

    @property
    def is_vector(self) -> bool:
        return self.rows == 1 or self.columns == 1

    # =========================================================================
    # Element Access
    # =========================================================================

    def _check_element(self, row: int, col: int) -> Tuple[int, int]:
        if not is_integer(row) or not is_integer(col):
            raise MatselTypeError(f"Element index must be integers, got ({row!r}, {col!r})")
        if not 0 <= row < self.rows:
            raise IndexOutOfBoundsError("row", int(row), self.rows)
        if not 0 <= col < self.columns:
            raise IndexOutOfBoundsError("column", int(col), self.columns)
        return int(row), int(col)

    def get_element(self, row: int, col: int) -> float:
        """Get element at (row, col). Negative indices are not wrapped."""
        row, col = self._check_element(row, col)
        return self._data[row, col].item()

    def set_element(self, row: int, col: int, value: float) -> None:
        """Set element at (row, col). Negative indices are not wrapped."""
        row, col = self._check_element(row, col)
        self._data[row, col] = value

    # =========================================================================
    # Range Access
    # =========================================================================

    def _bind(self, rows: RangeKey, cols: RangeKey) -> Tuple[np.ndarray, np.ndarray]:
        row_range = as_range(rows, self.rows, axis="row")
        col_range = as_range(cols, self.columns, axis="column")
        row_pos = _drain(row_range, self.rows, "row")
        col_pos = _drain(col_range, self.columns, "column")
        return row_pos, col_pos

    def get(self, rows: RangeKey, cols: RangeKey) -> "DenseMatrix":
        """
        Get the block at the selected rows and columns.

        The result has shape ``(len(rows), len(cols))``; result element
        ``(i, j)`` is the source element at the i-th selected row and the
        j-th selected column.

        Raises:
            BoundsViolationError: If an interval does not fit its axis.
            IndexOutOfBoundsError: If a selected position is outside its axis.
        """
        row_pos, col_pos = self._bind(rows, cols)
        logger.debug(
            f"get {self.rows}x{self.columns} -> {row_pos.size}x{col_pos.size}"
        )
        return DenseMatrix(self._data[np.ix_(row_pos, col_pos)], dtype=self.dtype)

    def get_rows(self, rows: RangeKey) -> "DenseMatrix":
        """Get whole rows at the selected positions."""
        return self.get(rows, AllRange())

    def get_columns(self, cols: RangeKey) -> "DenseMatrix":
        """Get whole columns at the selected positions."""
        return self.get(AllRange(), cols)

    def put(self, rows: RangeKey, cols: RangeKey, x: Any) -> "DenseMatrix":
        """
        Write ``x`` into the selected rows and columns (in place).

        ``x`` is either a scalar, assigned to every selected element, or a
        block of shape ``(len(rows), len(cols))``. A 1-D block is accepted
        when one of the two selections has length 1. If a position is
        selected twice, the value written last in row-major order wins.

        Returns:
            self, so calls can be chained.

        Raises:
            DimensionMismatchError: If the block shape does not match.
            BoundsViolationError: If an interval does not fit its axis.
            IndexOutOfBoundsError: If a selected position is outside its axis.
        """
        row_pos, col_pos = self._bind(rows, cols)
        target = (row_pos.size, col_pos.size)

        if isinstance(x, numbers.Number) or (isinstance(x, np.ndarray) and x.ndim == 0):
            block = x
        else:
            block = np.asarray(x._data if isinstance(x, DenseMatrix) else x)
            if block.ndim == 1 and 1 in target and block.size == target[0] * target[1]:
                block = block.reshape(target)
            if block.shape != target:
                raise DimensionMismatchError(
                    f"Cannot put a block of shape {block.shape} into a {target[0]}x{target[1]} selection"
                )

        logger.debug(
            f"put {target[0]}x{target[1]} into {self.rows}x{self.columns}"
        )
        self._data[np.ix_(row_pos, col_pos)] = block
        return self

    # =========================================================================
    # Nonzero Query
    # =========================================================================

    def find_indices(self) -> np.ndarray:
        """Column-major linear positions of the nonzero elements (int64)."""
        return np.flatnonzero(self._data.ravel(order="F")).astype(np.int64)

    def to_int_array(self) -> np.ndarray:
        """Elements in column-major order, truncated toward zero (int64)."""
        return self._data.ravel(order="F").astype(np.int64)

    # =========================================================================
    # Conversion
    # =========================================================================

    def to_numpy(self) -> np.ndarray:
        """The underlying array (not a copy)."""
        return self._data

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        if dtype is not None:
            return self._data.astype(dtype)
        return self._data.copy() if copy else self._data

    def to_scipy(self, format: str = "csr") -> Any:
        """Convert to a scipy sparse matrix ('csr' or 'csc')."""
        try:
            import scipy.sparse as sp
        except ImportError:
            raise ImportError("scipy required for to_scipy()")

        if format == "csr":
            return sp.csr_matrix(self._data)
        if format == "csc":
            return sp.csc_matrix(self._data)
        raise InvalidArgumentError(f"Unsupported sparse format: {format!r}")

    # =========================================================================
    # Magic Methods
    # =========================================================================

    def __getitem__(self, key) -> Union["DenseMatrix", float]:
        """Support mat[i, j], mat[rows, cols] and mat[rows].

        Two plain ints return the element; anything else returns a block.
        """
        if isinstance(key, tuple):
            if len(key) != 2:
                raise MatselTypeError("Index must be a (rows, cols) tuple")
            row_key, col_key = key
            if is_integer(row_key) and is_integer(col_key):
                r, c = row_key, col_key
                if r < 0:
                    r += self.rows
                if c < 0:
                    c += self.columns
                return self.get_element(r, c)
            return self.get(row_key, col_key)
        return self.get_rows(key)

    def __setitem__(self, key, value: Any) -> None:
        if isinstance(key, tuple):
            if len(key) != 2:
                raise MatselTypeError("Index must be a (rows, cols) tuple")
            self.put(key[0], key[1], value)
        else:
            self.put(key, AllRange(), value)

    def __len__(self) -> int:
        return self.rows

    def __repr__(self) -> str:
        return f"<DenseMatrix {self.rows}x{self.columns} dtype={self.dtype}>"

    def __str__(self) -> str:
        return str(self._data)
