"""Pytest configuration and shared fixtures.

This file sets up the Python path so tests can import from the backend
package, and provides fixtures used across the test layers.
"""

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Add backend directory to Python path for imports
backend_path = Path(__file__).parent / "backend"
sys.path.insert(0, str(backend_path))

from app.core.config import get_settings  # noqa: E402


@pytest.fixture
def backend_dir() -> Path:
    """Path to the backend directory holding alembic.ini."""
    return backend_path


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Drop cached settings so each test sees its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
