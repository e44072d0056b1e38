"""IndicesRange: an explicit, caller-supplied list of positions."""

import numpy as np

from .._config import get_config
from .._errors import BoundsViolationError
from .._typing import IndexInput, ensure_index_vector, nonzero_positions, VectorInput
from ._base import Range

__all__ = ['IndicesRange']


class IndicesRange(Range):
    """
    Range which varies over pre-specified positions.

    Duplicates and any order are allowed, so the same row can be selected
    twice or rows can be permuted. Numeric entries are truncated toward
    zero. Positions are not checked against the domain unless strict mode
    is on.

    Example:
        >>> r = IndicesRange([1, 1, 2, 3, 5, 8, 13])
        >>> r.positions(0, 20)
        array([ 1,  1,  2,  3,  5,  8, 13])
    """

    def __init__(self, positions: IndexInput):
        super().__init__()
        # Own copy: later changes to the caller's array must not leak in
        self._indices = np.array(ensure_index_vector(positions), dtype=np.int64)

    @classmethod
    def from_nonzero(cls, vector: VectorInput) -> "IndicesRange":
        """Range over the ascending positions of the nonzero entries of ``vector``."""
        return cls(nonzero_positions(vector))

    @property
    def indices(self) -> np.ndarray:
        """Read-only view of the position list."""
        view = self._indices.view()
        view.flags.writeable = False
        return view

    def _check_domain(self, lower: int, upper: int) -> None:
        if not get_config().strict_ranges or self._indices.size == 0:
            return
        lo = int(self._indices.min())
        hi = int(self._indices.max())
        if lo < lower or hi >= upper:
            raise BoundsViolationError(lower, upper, lo, hi)

    def length(self) -> int:
        return int(self._indices.size)

    def value(self) -> int:
        self._ensure_current()
        return int(self._indices[self._counter])

    def _describe(self) -> str:
        if self._indices.size > 8:
            shown = ", ".join(str(i) for i in self._indices[:8]) + ", ..."
        else:
            shown = ", ".join(str(i) for i in self._indices)
        return f"IndicesRange [{shown}]"
