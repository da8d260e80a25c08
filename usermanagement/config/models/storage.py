"""Entity store configuration models."""

from typing import Literal

from pydantic import BaseModel, Field

BackendType = Literal["inmemory"]


class StorageConfig(BaseModel):
    """Configuration for the entity store backing users and audit entries."""

    backend: BackendType = Field(
        default="inmemory",
        description="Backend type",
    )
    seed_users: bool = Field(
        default=True,
        description="Pre-populate the store with the fixture users",
    )
