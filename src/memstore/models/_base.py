"""Base model for records parsed from JSON APIs.

Every wire model inherits from :class:`WireModel` which provides
``alias_generator=to_camel`` so camelCase API keys map automatically
to snake_case fields, and a ``raw`` dict that captures the original
payload.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for API response models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    raw: dict[str, Any] = Field(default_factory=dict, exclude=True)
    """Original API response dict."""

    @model_validator(mode="before")
    @classmethod
    def _stash_raw(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        # Keep the caller's raw when constructing with kwargs that include it.
        if "raw" in values:
            return values
        return {**values, "raw": dict(values)}
