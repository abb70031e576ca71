"""Closure-based in-memory repository.

:func:`create_in_memory_repository` returns a bundle of plain functions
closing over a private ``dict``.  It satisfies the same
:class:`~memstore.repository.base.Repository` protocol as
:class:`~memstore.repository.memory.InMemoryRepository`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic

from memstore._constants import DEFAULT_ID_FIELD
from memstore.exceptions import EntityNotFoundError
from memstore.repository.base import EntityT, entity_id_of, merge_entity

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RepositoryFunctions(Generic[EntityT]):
    """Operations of one closure-backed store."""

    find_by_id: Callable[[str], EntityT | None]
    find_all: Callable[[], list[EntityT]]
    create: Callable[[EntityT], EntityT]
    update: Callable[[str, Mapping[str, Any]], EntityT]
    remove: Callable[[str], bool]
    delete: Callable[[str], bool]
    exists: Callable[[str], bool]
    count: Callable[[], int]
    clear: Callable[[], None]


def create_in_memory_repository(*, id_field: str = DEFAULT_ID_FIELD) -> RepositoryFunctions[Any]:
    """Create an independent store and return its operations."""
    store: dict[str, Any] = {}

    def find_by_id(entity_id: str) -> Any | None:
        return store.get(entity_id)

    def find_all() -> list[Any]:
        return list(store.values())

    def create(entity: Any) -> Any:
        entity_id = entity_id_of(entity, id_field)
        if entity_id in store:
            _logger.debug("Overwriting entity %s=%s", id_field, entity_id)
        store[entity_id] = entity
        return entity

    def update(entity_id: str, partial: Mapping[str, Any]) -> Any:
        existing = store.get(entity_id)
        if existing is None:
            raise EntityNotFoundError(entity_id)
        updated = merge_entity(existing, partial, id_field=id_field, entity_id=entity_id)
        store[entity_id] = updated
        return updated

    def remove(entity_id: str) -> bool:
        if store.pop(entity_id, None) is None:
            return False
        _logger.debug("Removed entity %s=%s", id_field, entity_id)
        return True

    def exists(entity_id: str) -> bool:
        return entity_id in store

    def count() -> int:
        return len(store)

    def clear() -> None:
        store.clear()

    return RepositoryFunctions(
        find_by_id=find_by_id,
        find_all=find_all,
        create=create,
        update=update,
        remove=remove,
        delete=remove,
        exists=exists,
        count=count,
        clear=clear,
    )
