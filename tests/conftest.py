"""
Pytest configuration and shared fixtures for POD tests.

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

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

# Import fixture modules
_common = importlib.import_module("fixtures.common")

# Extract factory functions
make_sample_entries_1 = _common.make_sample_entries_1
make_sample_entries_2 = _common.make_sample_entries_2
make_hello_entries = _common.make_hello_entries

PRIVATE_KEY = _common.PRIVATE_KEY


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def private_key():
    """Provide the fixed test private key (hex)."""
    return PRIVATE_KEY


@pytest.fixture
def sample_entries_1():
    """Provide entries covering every value type and bound."""
    return make_sample_entries_1()


@pytest.fixture
def sample_entries_2():
    """Provide ticket-shaped entries."""
    return make_sample_entries_2()


@pytest.fixture
def hello_entries():
    """Provide the {"a": "hello", "b": 123} entries."""
    return make_hello_entries()


@pytest.fixture(scope="session")
def crypto_context():
    """Provide an explicitly built CryptoContext shared across the session."""
    from pod.crypto.context import build_crypto_context
    return build_crypto_context()


@pytest.fixture
def signed_pod(sample_entries_1):
    """Provide a POD signed with the fixed test key."""
    from pod import POD
    return POD.sign(sample_entries_1, PRIVATE_KEY)


@pytest.fixture
def clean_pod_env(monkeypatch):
    """Remove POD_* environment variables for the duration of a test."""
    for name in (
        "POD_PRIVATE_KEY",
        "POD_JSON_INDENT",
        "POD_SIMPLIFIED_JSON",
        "POD_LOG_LEVEL",
        "POD_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )


# =============================================================================
# Test Helpers (available to all tests via fixtures)
# =============================================================================

@pytest.fixture
def assert_format_error():
    """Helper to assert a call raises PODFormatException mentioning a label."""
    from pod import PODFormatException

    def _assert(fn, *args, label=None):
        with pytest.raises(PODFormatException) as exc_info:
            fn(*args)
        if label is not None:
            assert label in str(exc_info.value), (
                f"Expected '{label}' in error message: {exc_info.value}"
            )
        return exc_info.value
    return _assert
