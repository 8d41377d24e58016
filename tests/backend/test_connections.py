"""
Tests for the default connection manager.

These tests cover:
- Client creation through connect()
- Repository creation bound to the default manager
- Closing connections
"""

import pytest
from unittest.mock import MagicMock, patch

from mongo_mapper.core.exceptions import DuplicateClientError
from mongo_mapper.decorators import Field, document


@document(collection_name="people")
class Person:
    _id = Field()
    name = Field()


class TestGetClientManager:
    def test_manager_is_created_once(self, reset_default_manager):
        from mongo_mapper.database.connections import get_client_manager

        first = get_client_manager()

        assert get_client_manager() is first
        assert reset_default_manager._client_manager is first


class TestConnect:
    @pytest.mark.asyncio
    async def test_connect_creates_and_registers_client(self, reset_default_manager):
        """connect should create a motor client and register it."""
        with patch("mongo_mapper.database.connections.AsyncIOMotorClient") as mock_client:
            mock_instance = MagicMock()
            mock_client.return_value = mock_instance

            from mongo_mapper.database.connections import connect, get_client_manager

            client = await connect("mongodb://test:27017", default_database="app")

            mock_client.assert_called_once_with("mongodb://test:27017")
            assert client is mock_instance
            assert get_client_manager().get_client("default") is mock_instance

    @pytest.mark.asyncio
    async def test_connect_falls_back_to_settings(self, reset_default_manager):
        with patch("mongo_mapper.database.connections.AsyncIOMotorClient") as mock_client, \
             patch("mongo_mapper.database.connections.get_settings") as mock_settings:

            mock_settings.return_value.mongo_uri = "mongodb://settings:27017"
            mock_settings.return_value.default_database = "from_settings"
            mock_settings.return_value.client_name = "primary"

            from mongo_mapper.database.connections import connect, get_client_manager

            await connect()

            mock_client.assert_called_once_with("mongodb://settings:27017")
            manager = get_client_manager()
            assert manager.has_client("primary")
            manager.get_collection("people", client_name="primary")
            mock_client.return_value.__getitem__.assert_called_once_with("from_settings")

    @pytest.mark.asyncio
    async def test_connect_twice_with_same_name_raises(self, reset_default_manager):
        with patch("mongo_mapper.database.connections.AsyncIOMotorClient") as mock_client:
            first, second = MagicMock(), MagicMock()
            mock_client.side_effect = [first, second]

            from mongo_mapper.database.connections import connect, get_client_manager

            await connect("mongodb://a", default_database="a")

            with pytest.raises(DuplicateClientError):
                await connect("mongodb://b", default_database="b")

            second.close.assert_called_once()
            first.close.assert_not_called()
            assert get_client_manager().get_client() is first

    @pytest.mark.asyncio
    async def test_connect_with_name(self, reset_default_manager):
        with patch("mongo_mapper.database.connections.AsyncIOMotorClient"):
            from mongo_mapper.database.connections import connect, get_client_manager

            await connect("mongodb://a", default_database="a")
            await connect("mongodb://b", default_database="b", name="analytics")

            assert get_client_manager().has_client("analytics")


class TestCreateRepository:
    def test_repository_uses_default_manager(self, reset_default_manager, mock_async_mongo_client):
        from mongo_mapper.database.connections import create_repository, get_client_manager
        from mongo_mapper.services.repository import Repository

        get_client_manager().register_client(mock_async_mongo_client, default_database="test_db")

        repository = create_repository(Person)

        assert isinstance(repository, Repository)
        assert repository.get_collection().name == "people"
        assert repository.get_collection().database.name == "test_db"


class TestCloseConnections:
    @pytest.mark.asyncio
    async def test_close_connections_cleans_up(self, reset_default_manager):
        """close_connections should close clients and drop the manager."""
        mock_mongo = MagicMock()

        from mongo_mapper.database.connections import close_connections, get_client_manager

        get_client_manager().register_client(mock_mongo, default_database="db")
        await close_connections()

        mock_mongo.close.assert_called_once()
        assert reset_default_manager._client_manager is None

    @pytest.mark.asyncio
    async def test_close_without_manager_is_a_noop(self, reset_default_manager):
        from mongo_mapper.database.connections import close_connections

        await close_connections()

        assert reset_default_manager._client_manager is None
