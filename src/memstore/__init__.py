"""memstore - Generic in-memory entity repositories and an async JSON fetch client."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("memstore")
except PackageNotFoundError:
    __version__ = "0+local"
from memstore.client import JsonClient
from memstore.config import ClientConfig
from memstore.exceptions import (
    EntityNotFoundError,
    FetchError,
    InvalidEntityError,
    MemstoreConfigError,
    MemstoreError,
)
from memstore.models import ApiResponse, Entity, Product, Todo, User, example_responses
from memstore.repository import (
    InMemoryRepository,
    Repository,
    RepositoryFunctions,
    create_in_memory_repository,
)

__all__ = [
    "__version__",
    "ApiResponse",
    "ClientConfig",
    "Entity",
    "EntityNotFoundError",
    "FetchError",
    "InMemoryRepository",
    "InvalidEntityError",
    "JsonClient",
    "MemstoreConfigError",
    "MemstoreError",
    "Product",
    "Repository",
    "RepositoryFunctions",
    "Todo",
    "User",
    "create_in_memory_repository",
    "example_responses",
]
