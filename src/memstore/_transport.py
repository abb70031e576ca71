"""HTTP transport for JSON GET requests."""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

import aiohttp

from memstore.config import ClientConfig
from memstore.exceptions import FetchError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by :class:`~memstore.client.JsonClient`.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def get_json(self, url: str) -> Any:
        ...


class HttpTransport:
    """Single-shot JSON GET over a shared ``aiohttp.ClientSession``.

    No retries: any failure surfaces as :class:`FetchError`.
    """

    def __init__(self, config: ClientConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.timeout)

    async def get_json(self, url: str) -> Any:
        """GET *url* and return the decoded JSON body.

        Raises
        ------
        FetchError
            On transport failure, timeout, a non-2xx status or a body
            that is not JSON.
        """
        headers = {
            "accept": "application/json",
            "user-agent": self._config.user_agent,
        }

        _logger.debug("GET %s", url)

        try:
            async with self._http.get(url, headers=headers, timeout=self._timeout) as resp:
                text = await resp.text()
                if not 200 <= resp.status < 300:
                    reason = f" {resp.reason}" if resp.reason else ""
                    raise FetchError(
                        f"HTTP {resp.status}{reason} from {url}: {text[:200]}",
                        status_code=resp.status,
                        url=url,
                    )
        except FetchError:
            raise
        except UnicodeDecodeError as exc:
            raise FetchError(f"Undecodable body from {url}: {exc}", url=url) from exc
        except TimeoutError as exc:
            raise FetchError(f"Request to {url} timed out after {self._config.timeout}s", url=url) from exc
        except aiohttp.ClientError as exc:
            raise FetchError(f"Request to {url} failed: {exc}", url=url) from exc

        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise FetchError(f"Invalid JSON from {url}: {text[:200]}", url=url) from exc
