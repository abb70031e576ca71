"""Generic tagged response envelope."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from memstore.models.entity import User

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """``{data, success, error?}`` envelope around a payload of type ``T``.

    Any combination of the three fields is accepted; :meth:`ok` and
    :meth:`fail` build the consistent ones.  ``data`` may be ``None``.
    """

    model_config = ConfigDict(frozen=True)

    data: T | None = None
    success: bool
    error: str | None = None

    @classmethod
    def ok(cls, data: T) -> ApiResponse[T]:
        return cls(data=data, success=True)

    @classmethod
    def fail(cls, error: str, data: T | None = None) -> ApiResponse[T]:
        return cls(data=data, success=False, error=error)


def example_responses() -> tuple[ApiResponse[User], ApiResponse[str]]:
    """Build the sample user and string envelopes shown by the demo CLI."""
    user_response = ApiResponse[User].ok(User(id="1", name="Putri"))
    string_response = ApiResponse[str].ok("Hello world!")
    return user_response, string_response
