"""PointRange: a single fixed position."""

from .._config import get_config
from .._errors import BoundsViolationError, InvalidArgumentError
from .._typing import is_integer
from ._base import Range

__all__ = ['PointRange']


class PointRange(Range):
    """
    Range with exactly one position, independent of the bound domain.

    The position is not checked against the domain unless strict mode is
    on; an out-of-range point surfaces when the matrix accesses it.

    Example:
        >>> r = PointRange(3)
        >>> r.init(0, 2)       # not validated by default
        >>> r.value(), r.length()
        (3, 1)
    """

    def __init__(self, position: int):
        if not is_integer(position):
            raise InvalidArgumentError(
                f"Point position must be an integer, got {position!r}"
            )
        super().__init__()
        self._position = int(position)

    @property
    def position(self) -> int:
        return self._position

    def _check_domain(self, lower: int, upper: int) -> None:
        if get_config().strict_ranges and not lower <= self._position < upper:
            raise BoundsViolationError(lower, upper, self._position, self._position)

    def length(self) -> int:
        return 1

    def value(self) -> int:
        self._ensure_current()
        return self._position

    def _describe(self) -> str:
        return f"PointRange at {self._position}"
