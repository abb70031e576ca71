"""Class-based in-memory repository."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any, Generic

from memstore._constants import DEFAULT_ID_FIELD
from memstore.exceptions import EntityNotFoundError
from memstore.repository.base import EntityT, entity_id_of, merge_entity

_logger = logging.getLogger(__name__)


class InMemoryRepository(Generic[EntityT]):
    """Identifier-keyed store living for the lifetime of the instance.

    Usage::

        users = InMemoryRepository[User]()
        users.create(User(id="1", name="Putri"))
        users.update("1", {"name": "Putri A."})

    Listing follows insertion order.  ``create`` on an existing
    identifier replaces the entity in place.
    """

    def __init__(self, *, id_field: str = DEFAULT_ID_FIELD) -> None:
        self._id_field = id_field
        self._store: dict[str, EntityT] = {}

    @property
    def id_field(self) -> str:
        return self._id_field

    def find_by_id(self, entity_id: str) -> EntityT | None:
        return self._store.get(entity_id)

    def find_all(self) -> list[EntityT]:
        return list(self._store.values())

    def create(self, entity: EntityT) -> EntityT:
        entity_id = entity_id_of(entity, self._id_field)
        if entity_id in self._store:
            _logger.debug("Overwriting entity %s=%s", self._id_field, entity_id)
        self._store[entity_id] = entity
        return entity

    def update(self, entity_id: str, partial: Mapping[str, Any]) -> EntityT:
        existing = self._store.get(entity_id)
        if existing is None:
            raise EntityNotFoundError(entity_id)
        updated: EntityT = merge_entity(existing, partial, id_field=self._id_field, entity_id=entity_id)
        self._store[entity_id] = updated
        return updated

    def delete(self, entity_id: str) -> bool:
        if entity_id not in self._store:
            return False
        del self._store[entity_id]
        _logger.debug("Deleted entity %s=%s", self._id_field, entity_id)
        return True

    def remove(self, entity_id: str) -> bool:
        """Alias of :meth:`delete`."""
        return self.delete(entity_id)

    def exists(self, entity_id: str) -> bool:
        return entity_id in self._store

    def count(self) -> int:
        return len(self._store)

    def clear(self) -> None:
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._store

    def __iter__(self) -> Iterator[EntityT]:
        # Iterate a snapshot so callers may mutate the store while looping.
        return iter(self.find_all())
