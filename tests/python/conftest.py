"""
Pytest configuration and shared fixtures for matsel tests.
"""

import pytest
import numpy as np
from pathlib import Path
import sys

# Add src to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root / "src"))

import matsel
from matsel import DenseMatrix


# Try to import scipy
try:
    import scipy.sparse as sp
    HAS_SCIPY = True
except ImportError:
    HAS_SCIPY = False


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(scope="session")
def requires_scipy():
    """Skip test if scipy is not available."""
    if not HAS_SCIPY:
        pytest.skip("scipy not available")


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Every test starts from the default configuration."""
    monkeypatch.delenv("MATSEL_STRICT_RANGES", raising=False)
    matsel.get_config().reset()
    yield
    matsel.get_config().reset()


@pytest.fixture
def dense_3x4():
    """The 3x4 test matrix as a numpy array.

    Matrix (values 1..12 filled column by column):
    [[1, 4, 7, 10],
     [2, 5, 8, 11],
     [3, 6, 9, 12]]
    """
    return np.arange(1.0, 13.0).reshape((3, 4), order="F")


@pytest.fixture
def matrix_3x4(dense_3x4):
    """Create the 3x4 test matrix."""
    return DenseMatrix(dense_3x4)

