"""
Global test fixtures for mongo-mapper.

This module provides shared fixtures for all tests including:
- Mock async MongoDB client (mongomock-motor)
- ClientManager with a registered default client
- Raw user documents
"""

import sys
from pathlib import Path

import pytest
import pytest_asyncio
from bson import ObjectId

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    Collections behave like motor collections: methods are awaitable and
    ``find`` returns a cursor supporting ``async for`` and ``to_list``.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
        client = AsyncMongoMockClient()
        yield client
        client.close()
    except ImportError:
        pytest.skip("mongomock-motor not installed")


@pytest_asyncio.fixture
async def second_mongo_client():
    """A second, independent mock client."""
    try:
        from mongomock_motor import AsyncMongoMockClient
        client = AsyncMongoMockClient()
        yield client
        client.close()
    except ImportError:
        pytest.skip("mongomock-motor not installed")


@pytest.fixture
def client_manager(mock_async_mongo_client):
    """ClientManager with the mock client registered as "default"."""
    from mongo_mapper.database.registry import ClientManager

    manager = ClientManager()
    manager.register_client(mock_async_mongo_client, default_database="test_db")
    return manager


@pytest.fixture
def mock_test_db(mock_async_mongo_client):
    """Provide the default test database."""
    return mock_async_mongo_client["test_db"]


# =============================================================================
# Document Fixtures
# =============================================================================

@pytest.fixture
def user_fixtures() -> list[dict]:
    """Raw user documents as stored in MongoDB."""
    return [
        {
            "_id": ObjectId("507f1f77bcf86cd799439011"),
            "first_name": "Jordy",
            "last_name": "Smith",
        },
        {
            "_id": ObjectId("507f191e810c19729de860ea"),
            "first_name": "Kelly",
            "last_name": "Slater",
        },
    ]
