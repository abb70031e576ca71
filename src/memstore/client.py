"""High-level async client for JSON APIs."""

from __future__ import annotations

import logging
from typing import Any, TypeVar, overload

import aiohttp
from pydantic import TypeAdapter, ValidationError

from memstore._transport import HttpTransport, Transport
from memstore.config import ClientConfig
from memstore.exceptions import FetchError, MemstoreError
from memstore.models.todo import Todo

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonClient:
    """Async client that fetches and validates JSON documents.

    Usage::

        async with JsonClient(ClientConfig()) as client:
            todos = await client.fetch_todos()
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config if config is not None else ClientConfig()
        self._external_session = session is not None
        self._http_session = session
        self._injected_transport = transport
        self._transport: Transport | None = None

    @property
    def config(self) -> ClientConfig:
        return self._config

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> JsonClient:
        if self._injected_transport is not None:
            self._transport = self._injected_transport
            return self
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise MemstoreError("Client not initialized. Use 'async with JsonClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------

    @overload
    async def fetch_json(self, path: str) -> Any: ...

    @overload
    async def fetch_json(self, path: str, model: type[T]) -> T: ...

    async def fetch_json(self, path: str, model: Any = None) -> Any:
        """Fetch *path* (relative to ``base_url`` or absolute) as JSON.

        When *model* is given the body is validated into it, e.g.
        ``list[Todo]``.  Validation failures raise :class:`FetchError`.
        """
        transport = self._require_transport()
        url = self._config.url_for(path)
        body = await transport.get_json(url)
        if model is None:
            return body
        try:
            return TypeAdapter(model).validate_python(body)
        except ValidationError as exc:
            raise FetchError(
                f"Unexpected payload shape from {url}: {exc.error_count()} validation error(s)",
                url=url,
            ) from exc

    async def fetch_todos(self) -> list[Todo]:
        """Fetch every todo from ``config.todos_path``."""
        todos = await self.fetch_json(self._config.todos_path, list[Todo])
        _logger.debug("Fetched %d todos", len(todos))
        return todos
