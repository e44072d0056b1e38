"""
Error handling for matsel.

Every failure carries a numeric code from the table below, so callers can
either catch the specific exception class or switch on ``err.code``.
"""

from __future__ import annotations

from typing import Optional


# =============================================================================
# Error Codes
# =============================================================================

# Success
MATSEL_OK = 0

# General errors (1-9)
MATSEL_ERROR_UNKNOWN = 1
MATSEL_ERROR_INTERNAL = 2

# Argument errors (10-19)
MATSEL_ERROR_INVALID_ARGUMENT = 10
MATSEL_ERROR_DIMENSION_MISMATCH = 11
MATSEL_ERROR_RANGE_ERROR = 13
MATSEL_ERROR_INDEX_OUT_OF_BOUNDS = 14
MATSEL_ERROR_RANGE_STATE = 15

# Type errors (20-29)
MATSEL_ERROR_TYPE_ERROR = 20


_ERROR_MESSAGES = {
    MATSEL_OK: "Success",
    MATSEL_ERROR_UNKNOWN: "Unknown error",
    MATSEL_ERROR_INTERNAL: "Internal error",
    MATSEL_ERROR_INVALID_ARGUMENT: "Invalid argument",
    MATSEL_ERROR_DIMENSION_MISMATCH: "Dimension mismatch",
    MATSEL_ERROR_RANGE_ERROR: "Range error",
    MATSEL_ERROR_INDEX_OUT_OF_BOUNDS: "Index out of bounds",
    MATSEL_ERROR_RANGE_STATE: "Range not initialized or exhausted",
    MATSEL_ERROR_TYPE_ERROR: "Type error",
}


# =============================================================================
# Exception Classes
# =============================================================================

class MatselError(Exception):
    """
    Base exception for all matsel errors.

    Attributes:
        code: Numeric error code (one of the MATSEL_ERROR_* constants)
        message: Human readable description
    """

    code = MATSEL_ERROR_UNKNOWN

    OK = MATSEL_OK
    ERROR_UNKNOWN = MATSEL_ERROR_UNKNOWN
    ERROR_INTERNAL = MATSEL_ERROR_INTERNAL
    ERROR_INVALID_ARGUMENT = MATSEL_ERROR_INVALID_ARGUMENT
    ERROR_DIMENSION_MISMATCH = MATSEL_ERROR_DIMENSION_MISMATCH
    ERROR_RANGE_ERROR = MATSEL_ERROR_RANGE_ERROR
    ERROR_INDEX_OUT_OF_BOUNDS = MATSEL_ERROR_INDEX_OUT_OF_BOUNDS
    ERROR_RANGE_STATE = MATSEL_ERROR_RANGE_STATE
    ERROR_TYPE_ERROR = MATSEL_ERROR_TYPE_ERROR

    def __init__(self, message: Optional[str] = None, code: Optional[int] = None):
        if code is not None:
            self.code = code
        if message is None:
            message = _ERROR_MESSAGES.get(self.code, f"Unknown error (code={self.code})")
        self.message = message
        super().__init__(f"matsel error {self.code}: {message}")

    @classmethod
    def from_code(cls, code: int, context: str = "") -> "MatselError":
        """Create the exception class registered for ``code``."""
        base_msg = _ERROR_MESSAGES.get(code, "Unknown error")
        msg = f"{context}: {base_msg}" if context else base_msg
        klass = _CODE_TO_CLASS.get(code, cls)
        err = klass.__new__(klass)
        MatselError.__init__(err, msg, code)
        return err


class InvalidArgumentError(MatselError, ValueError):
    """A constructor argument or indexing key has an invalid value."""

    code = MATSEL_ERROR_INVALID_ARGUMENT


class DimensionMismatchError(MatselError, ValueError):
    """A block written with ``put`` does not match the selected shape."""

    code = MATSEL_ERROR_DIMENSION_MISMATCH


class BoundsViolationError(MatselError, ValueError):
    """
    A range does not fit into the axis domain it was bound to.

    Raised by ``IntervalRange.init`` (and, in strict mode, by point and
    indices ranges). The domain is ``[lower, upper)``; ``start``/``end`` are
    the range's own declared bounds (``end`` inclusive).
    """

    code = MATSEL_ERROR_RANGE_ERROR
    lower = upper = start = end = None

    def __init__(self, lower: int, upper: int, start: int, end: int):
        self.lower = lower
        self.upper = upper
        self.start = start
        self.end = end
        super().__init__(
            f"Bounds {lower} to {upper} are beyond range interval {start} to {end}"
        )


class IndexOutOfBoundsError(MatselError, IndexError):
    """A position produced by a range falls outside the matrix axis."""

    code = MATSEL_ERROR_INDEX_OUT_OF_BOUNDS
    axis = position = extent = None

    def __init__(self, axis: str, position: int, extent: int):
        self.axis = axis
        self.position = position
        self.extent = extent
        super().__init__(f"{axis} {position} out of bounds [0, {extent})")


class RangeStateError(MatselError, IndexError):
    """A range was queried before ``init`` or after it was exhausted."""

    code = MATSEL_ERROR_RANGE_STATE


class MatselTypeError(MatselError, TypeError):
    """An input of an unsupported type was passed."""

    code = MATSEL_ERROR_TYPE_ERROR


_CODE_TO_CLASS = {
    MATSEL_ERROR_INVALID_ARGUMENT: InvalidArgumentError,
    MATSEL_ERROR_DIMENSION_MISMATCH: DimensionMismatchError,
    MATSEL_ERROR_RANGE_ERROR: BoundsViolationError,
    MATSEL_ERROR_INDEX_OUT_OF_BOUNDS: IndexOutOfBoundsError,
    MATSEL_ERROR_RANGE_STATE: RangeStateError,
    MATSEL_ERROR_TYPE_ERROR: MatselTypeError,
}


# =============================================================================
# Error Checking Functions
# =============================================================================

def check_error(code: int, context: str = "") -> None:
    """
    Check error code and raise the matching exception if not OK.

    Args:
        code: Error code
        context: Optional context message for better error reporting

    Raises:
        MatselError: If code indicates an error
    """
    if code == MATSEL_OK:
        return
    raise MatselError.from_code(code, context)
