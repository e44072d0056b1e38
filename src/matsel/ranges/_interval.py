"""IntervalRange: a contiguous block of positions, both ends inclusive."""

from .._errors import BoundsViolationError, InvalidArgumentError
from .._typing import is_integer
from ._base import Range

__all__ = ['IntervalRange']


class IntervalRange(Range):
    """
    Range over ``start, start + 1, ..., end``. Endpoints are both inclusive.

    ``IntervalRange(a, b)`` has ``b - a + 1`` positions; ``b == a - 1`` is
    the empty interval. Binding validates that the whole block lies in the
    domain ``[lower, upper)``.

    Example:
        >>> r = IntervalRange(1, 3)
        >>> r.positions(0, 4)
        array([1, 2, 3])
        >>> r.init(0, 3)
        Traceback (most recent call last):
        ...
        BoundsViolationError: ... Bounds 0 to 3 are beyond range interval 1 to 3
    """

    def __init__(self, start: int, end: int):
        if not is_integer(start) or not is_integer(end):
            raise InvalidArgumentError(
                f"Interval endpoints must be integers, got {start!r} and {end!r}"
            )
        start, end = int(start), int(end)
        if end < start - 1:
            raise InvalidArgumentError(
                f"Interval end {end} is before start {start}"
            )
        super().__init__()
        self._start = start
        self._end = end
        self._value = start

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        """Last position (inclusive)."""
        return self._end

    def _check_domain(self, lower: int, upper: int) -> None:
        if self._start < lower or self._end >= upper:
            raise BoundsViolationError(lower, upper, self._start, self._end)

    def _reset(self) -> None:
        self._value = self._start

    def length(self) -> int:
        return self._end - self._start + 1

    def next(self) -> None:
        super().next()
        self._value += 1

    def value(self) -> int:
        self._ensure_current()
        return self._value

    def _describe(self) -> str:
        return f"IntervalRange from {self._start} to {self._end}"
