"""Base model for records managed by the entity store."""

from pydantic import BaseModel, Field


class Entity(BaseModel):
    """A record keyed by a store-assigned integer identity."""

    id: int | None = Field(
        default=None, description="Identity, assigned by the store on insert"
    )
