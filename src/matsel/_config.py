"""
Global configuration for matsel.

Provides:
- Default precision for newly created matrices
- Strict range mode (validate point/indices ranges when they are bound)
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Optional, Union

import numpy as np

logger = logging.getLogger("matsel.config")

STRICT_ENV_VAR = "MATSEL_STRICT_RANGES"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("", "0", "false", "no", "off")


# =============================================================================
# Precision Types
# =============================================================================

class RealType(Enum):
    """Real (floating-point) precision."""
    FLOAT32 = "f32"
    FLOAT64 = "f64"

    @property
    def numpy_dtype(self) -> np.dtype:
        return np.dtype(np.float32) if self == RealType.FLOAT32 else np.dtype(np.float64)


def _parse_real(value: Union[RealType, str]) -> RealType:
    if isinstance(value, RealType):
        return value
    lowered = value.lower()
    if lowered in ("f32", "float32", "single"):
        return RealType.FLOAT32
    if lowered in ("f64", "float64", "double"):
        return RealType.FLOAT64
    raise ValueError(f"Unsupported real type: {value!r}")


def _strict_from_env() -> bool:
    raw = os.environ.get(STRICT_ENV_VAR)
    if raw is None:
        return False
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered not in _FALSE_VALUES:
        logger.warning(f"Ignoring unrecognized {STRICT_ENV_VAR}={raw!r}")
    return False


# =============================================================================
# Global Configuration State
# =============================================================================

class _Config:
    """
    Global configuration singleton.

    Manages default precision and the strict range flag.
    """

    def __init__(self):
        # Default: float64 (most compatible)
        self._default_real = RealType.FLOAT64
        self._strict_ranges = _strict_from_env()

    @property
    def default_real(self) -> RealType:
        """Get default real type."""
        return self._default_real

    @default_real.setter
    def default_real(self, value: Union[RealType, str]):
        self._default_real = _parse_real(value)
        logger.debug(f"Default precision set to {self._default_real.value}")

    @property
    def default_dtype(self) -> np.dtype:
        """NumPy dtype for new matrices."""
        return self._default_real.numpy_dtype

    @property
    def strict_ranges(self) -> bool:
        """Whether point and indices ranges validate positions in ``init``."""
        return self._strict_ranges

    @strict_ranges.setter
    def strict_ranges(self, value: bool):
        self._strict_ranges = bool(value)
        logger.debug(f"Strict ranges {'enabled' if self._strict_ranges else 'disabled'}")

    def reset(self) -> None:
        """Restore defaults (environment is re-read)."""
        self._default_real = RealType.FLOAT64
        self._strict_ranges = _strict_from_env()


# Global config instance
_config = _Config()


# =============================================================================
# Public API
# =============================================================================

def get_config() -> _Config:
    """Get global configuration instance."""
    return _config


def set_precision(real: Optional[Union[RealType, str]] = None) -> None:
    """
    Set default precision for new matrices.

    Args:
        real: Real type ('float32', 'float64', 'f32', 'f64')

    Example:
        >>> matsel.set_precision('float32')
        >>> DenseMatrix.zeros(2, 2).dtype
        dtype('float32')
    """
    if real is not None:
        _config.default_real = real


def get_precision() -> RealType:
    """Get current default precision."""
    return _config.default_real


def set_strict_ranges(flag: bool) -> None:
    """Enable or disable validation of point/indices ranges at ``init``."""
    _config.strict_ranges = flag


@contextmanager
def strict(flag: bool = True) -> Iterator[None]:
    """
    Temporarily toggle strict range mode.

    Example:
        >>> with matsel.strict():
        ...     mat.get(indices([0, 7]), all())  # raises BoundsViolationError
    """
    previous = _config.strict_ranges
    _config.strict_ranges = flag
    try:
        yield
    finally:
        _config.strict_ranges = previous


# =============================================================================
# Internal Helpers
# =============================================================================

def _get_real_dtype() -> np.dtype:
    """Get NumPy dtype for current default real type."""
    return _config.default_dtype
