"""
Pytest configuration and shared fixtures for incmerkle tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

from fixtures.common import make_letter_leaves  # noqa: E402
from incmerkle.config import set_default_config  # noqa: E402
from incmerkle.crypto.hashing import HashFunction  # noqa: E402


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture(
    params=[
        ("sha256", "raw"),
        ("sha256", "hex"),
        ("sha3_256", "raw"),
        ("sha3_256", "hex"),
    ],
    ids=lambda p: f"{p[0]}-{p[1]}",
)
def hasher(request):
    """Every supported algorithm/encoding combination."""
    algorithm, node_encoding = request.param
    return HashFunction(algorithm, node_encoding)


@pytest.fixture
def letter_leaves():
    """SHA-256 leaf digests of "a".."n" (14 leaves)."""
    return make_letter_leaves()


@pytest.fixture(autouse=True)
def _reset_default_config():
    """Keep the process-wide default config from leaking between tests."""
    set_default_config(None)
    yield
    set_default_config(None)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
