"""
Range Base Class

A Range is a single-pass, stateful cursor over an ordered sequence of
integer positions along one matrix axis. It is built before the axis size is
known and bound to an actual domain later:

    build  ->  init(lower, upper)  ->  value()/index() ... next()  ->  done

Type Hierarchy:

    Range (ABC)
    ├── PointRange      # a single fixed position
    ├── IntervalRange   # start..end, both inclusive
    ├── IndicesRange    # explicit list, repeats and any order allowed
    └── AllRange        # every position of the bound domain

Typical use (this is what the matrix slicing driver does):

    >>> r = interval(1, 3)
    >>> r.init(0, 10)
    >>> while r.has_more():
    ...     print(r.index(), r.value())
    ...     r.next()
    0 1
    1 2
    2 3
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional, Tuple

import numpy as np

from .._errors import InvalidArgumentError, RangeStateError
from .._typing import is_integer

__all__ = ['Range']


class Range(ABC):
    """
    Abstract base class for all index ranges.

    Subclasses provide ``length()`` and ``value()``; the cursor (``index``,
    ``next``, ``has_more``) lives here. The domain passed to ``init`` is
    ``[lower, upper)``: the matrix binds an axis of size N with
    ``init(0, N)``.

    A Range is not thread-safe and must not be shared by two slicing calls
    at the same time.
    """

    # True for ranges whose length is only known once a domain is bound
    requires_domain = False

    def __init__(self):
        self._lower: Optional[int] = None
        self._upper: Optional[int] = None
        self._counter = 0

    # =========================================================================
    # Binding
    # =========================================================================

    def init(self, lower: int, upper: int) -> None:
        """Bind the range to the domain ``[lower, upper)`` and reset the cursor.

        May be called again to rebind the range or to restart iteration.

        Raises:
            InvalidArgumentError: If the bounds are not integers or
                ``lower > upper``.
            BoundsViolationError: If the range does not fit the domain
                (intervals always; points and indices in strict mode).
        """
        if not is_integer(lower) or not is_integer(upper):
            raise InvalidArgumentError(
                f"Range bounds must be integers, got {lower!r} and {upper!r}"
            )
        lower, upper = int(lower), int(upper)
        if lower > upper:
            raise InvalidArgumentError(f"Empty domain: lower {lower} > upper {upper}")

        self._check_domain(lower, upper)

        self._lower = lower
        self._upper = upper
        self._counter = 0
        self._reset()

    @property
    def is_bound(self) -> bool:
        """Whether ``init`` has been called."""
        return self._lower is not None

    @property
    def domain(self) -> Optional[Tuple[int, int]]:
        """The ``(lower, upper)`` pair from the last ``init``, or None."""
        if self._lower is None:
            return None
        return (self._lower, self._upper)

    def _check_domain(self, lower: int, upper: int) -> None:
        """Validate the range against a domain before binding. No-op by default."""

    def _reset(self) -> None:
        """Reset variant-specific cursor state after binding."""

    def _require_domain(self) -> None:
        if self.requires_domain and self._lower is None:
            raise RangeStateError(
                f"{type(self).__name__} must be bound with init() before use"
            )

    # =========================================================================
    # Iteration Contract
    # =========================================================================

    @abstractmethod
    def length(self) -> int:
        """Total number of positions this range yields."""
        ...

    @abstractmethod
    def value(self) -> int:
        """Domain position at the cursor. Only valid while ``has_more()``."""
        ...

    def index(self) -> int:
        """0-based ordinal of the current step."""
        self._require_domain()
        return self._counter

    def next(self) -> None:
        """Advance the cursor by one step."""
        if not self.has_more():
            raise RangeStateError(f"{type(self).__name__} is exhausted")
        self._counter += 1

    def has_more(self) -> bool:
        """True iff unconsumed positions remain."""
        self._require_domain()
        return self._counter < self.length()

    def _ensure_current(self) -> None:
        if not self.has_more():
            raise RangeStateError(
                f"{type(self).__name__} has no current value "
                f"(index {self._counter}, length {self.length()})"
            )

    # =========================================================================
    # Python Protocols
    # =========================================================================

    def __len__(self) -> int:
        return self.length()

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        """Yield ``(index, value)`` pairs from the cursor until exhausted.

        Consumes the range, just like a manual ``has_more``/``next`` loop.
        """
        while self.has_more():
            yield self._counter, self.value()
            self.next()

    def positions(self, lower: int, upper: int) -> np.ndarray:
        """Bind to ``[lower, upper)`` and return every position as int64."""
        self.init(lower, upper)
        out = np.empty(self.length(), dtype=np.int64)
        for i, v in self:
            out[i] = v
        return out

    def _describe(self) -> str:
        return type(self).__name__

    def __repr__(self) -> str:
        if self.requires_domain and not self.is_bound:
            return f"<{self._describe()}, unbound>"
        if self.has_more():
            cursor = f"index={self.index()}, value={self.value()}"
        else:
            cursor = f"index={self.index()}, exhausted"
        return f"<{self._describe()}, length {self.length()}, {cursor}>"
