"""Custom exception hierarchy for memstore."""

from __future__ import annotations


class MemstoreError(Exception):
    """Base exception for all memstore errors."""


class MemstoreConfigError(MemstoreError):
    """Invalid or missing configuration."""


class EntityNotFoundError(MemstoreError):
    """No entity is stored under the requested identifier.

    Only ``update`` raises this.  Lookups and deletes report absence
    through their return value (``None`` / ``False``) instead.
    """

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"Entity {identifier!r} not found")


class InvalidEntityError(MemstoreError):
    """Entity has no usable identifier or failed model validation."""


class FetchError(MemstoreError):
    """HTTP-level failure (network, non-2xx, invalid JSON or payload shape)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        url: str = "",
    ) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(message)
