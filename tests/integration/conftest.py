"""
Integration test fixtures.

These tests require a running MongoDB server.
Run with: MONGO_MAPPER_TEST_URI=mongodb://localhost:27017 pytest -m integration
"""
import os
import uuid

import pytest
import pytest_asyncio


@pytest.fixture
def live_mongo_uri():
    """URI of the MongoDB server used by integration tests."""
    uri = os.getenv("MONGO_MAPPER_TEST_URI")
    if not uri:
        pytest.skip("MONGO_MAPPER_TEST_URI not set")
    return uri


@pytest_asyncio.fixture
async def live_client_manager(live_mongo_uri):
    """
    ClientManager bound to a throwaway database on the live server.

    The database is dropped after the test.
    """
    from motor.motor_asyncio import AsyncIOMotorClient
    from pymongo.errors import PyMongoError

    from mongo_mapper.database.registry import ClientManager

    client = AsyncIOMotorClient(live_mongo_uri, serverSelectionTimeoutMS=2000)
    try:
        await client.admin.command("ping")
    except PyMongoError:
        client.close()
        pytest.skip("MongoDB not reachable")

    database_name = f"mongo_mapper_test_{uuid.uuid4().hex[:8]}"
    manager = ClientManager().register_client(client, default_database=database_name)
    yield manager

    await manager.get_client().drop_database(database_name)
    manager.close()
