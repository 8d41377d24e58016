"""
Client models for the connection registry.
"""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ClientOptions(BaseModel):
    """Options given when registering a driver client."""
    name: str = Field(default="default", description="Logical client name")
    default_database: str = Field(..., description="Database used when none is requested")


class RegisteredClient(ClientOptions):
    """A registered client with its cached collection handles."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    client: Any = Field(..., description="Driver client, e.g. AsyncIOMotorClient")
    collection_cache: dict[tuple[str, str, str], Any] = Field(default_factory=dict)
