"""AllRange: every position of the bound domain."""

from ._base import Range

__all__ = ['AllRange']


class AllRange(Range):
    """
    A range over all available positions, like ``:`` in MATLAB.

    Has no span of its own: ``init(lower, upper)`` yields
    ``lower, lower + 1, ..., upper - 1``, so binding an axis of size N with
    ``init(0, N)`` yields exactly N positions. Must be bound before use.
    """

    requires_domain = True

    def length(self) -> int:
        self._require_domain()
        return self._upper - self._lower

    def value(self) -> int:
        self._ensure_current()
        return self._lower + self._counter

    def _describe(self) -> str:
        if not self.is_bound:
            return "AllRange"
        return f"AllRange from {self._lower} to {self._upper}"
