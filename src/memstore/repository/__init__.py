"""Entity store layer.

Two interchangeable forms of the same identifier-keyed in-memory store:
a class (:class:`InMemoryRepository`) and a closure factory
(:func:`create_in_memory_repository`).
"""

from memstore.repository.base import Repository, entity_id_of, merge_entity
from memstore.repository.functional import RepositoryFunctions, create_in_memory_repository
from memstore.repository.memory import InMemoryRepository

__all__ = [
    "InMemoryRepository",
    "Repository",
    "RepositoryFunctions",
    "create_in_memory_repository",
    "entity_id_of",
    "merge_entity",
]
