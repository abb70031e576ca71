"""Entity base model and the sample entities used by the demos."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Entity(BaseModel):
    """A record stored under a unique, non-empty string identifier."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(..., description="Unique identifier within one repository")

    @field_validator("id")
    @classmethod
    def _normalize_id(cls, value: str) -> str:
        identifier = value.strip()
        if not identifier:
            raise ValueError("id must be non-empty")
        return identifier


class User(Entity):
    name: str


class Product(Entity):
    name: str
    price: float = Field(..., ge=0)
