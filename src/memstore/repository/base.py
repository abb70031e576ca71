"""Repository protocol and the helpers shared by both store forms.

Entities may be pydantic models, dataclass instances or plain mappings;
the only requirement is a non-empty string identifier under
``id_field``.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from typing import Any, Protocol, TypeVar

from pydantic import BaseModel, ValidationError

from memstore.exceptions import InvalidEntityError

_logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT")


class Repository(Protocol[EntityT]):
    """Structural CRUD interface implemented by every store form."""

    def find_by_id(self, entity_id: str) -> EntityT | None:
        ...

    def find_all(self) -> list[EntityT]:
        ...

    def create(self, entity: EntityT) -> EntityT:
        ...

    def update(self, entity_id: str, partial: Mapping[str, Any]) -> EntityT:
        ...

    def delete(self, entity_id: str) -> bool:
        ...

    def remove(self, entity_id: str) -> bool:
        ...


def entity_id_of(entity: Any, id_field: str) -> str:
    """Return the identifier of *entity*, or raise :class:`InvalidEntityError`."""
    if isinstance(entity, Mapping):
        value = entity.get(id_field)
    else:
        value = getattr(entity, id_field, None)
    if not isinstance(value, str) or not value:
        raise InvalidEntityError(f"entity has no usable {id_field!r} field: {value!r}")
    return value


def merge_entity(existing: Any, partial: Mapping[str, Any], *, id_field: str, entity_id: str) -> Any:
    """Shallow-merge *partial* over *existing*, keeping the identifier.

    Keys in *partial* overwrite; absent keys are preserved.  The merged
    identifier is always *entity_id*, whatever *partial* carries.
    """
    changes = dict(partial)
    if id_field in changes and changes[id_field] != entity_id:
        _logger.debug("Ignoring %s change %r -> %r on update", id_field, entity_id, changes[id_field])
    changes[id_field] = entity_id

    if isinstance(existing, BaseModel):
        # Keys are field names; by_name also covers models whose fields carry aliases.
        data = {**existing.model_dump(), **changes}
        try:
            return type(existing).model_validate(data, by_name=True)
        except ValidationError as exc:
            raise InvalidEntityError(f"update of {entity_id!r} produced an invalid entity: {exc}") from exc

    if dataclasses.is_dataclass(existing) and not isinstance(existing, type):
        try:
            return dataclasses.replace(existing, **changes)
        except (TypeError, ValueError) as exc:
            raise InvalidEntityError(f"update of {entity_id!r} has unknown or non-init fields: {exc}") from exc

    if isinstance(existing, Mapping):
        return {**existing, **changes}

    raise InvalidEntityError(f"cannot merge into entity of type {type(existing).__name__}")
