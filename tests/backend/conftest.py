"""
Backend-specific test fixtures.

These fixtures extend the global fixtures with helpers for the default
connection manager kept in ``mongo_mapper.database.connections``.
"""

import sys
from pathlib import Path

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


@pytest.fixture
def reset_default_manager():
    """Start and finish with no default ClientManager."""
    import mongo_mapper.database.connections as conn_module

    conn_module._client_manager = None
    yield conn_module
    conn_module._client_manager = None


@pytest.fixture
def clear_settings_cache():
    """Drop cached settings so environment changes are picked up."""
    from mongo_mapper.config import get_settings

    get_settings.cache_clear()
    yield get_settings
    get_settings.cache_clear()
