"""Client configuration for memstore."""

from __future__ import annotations

import dataclasses
import math
import os
from typing import Any

from memstore._constants import BASE_URL, DEFAULT_TIMEOUT_S, TODOS_PATH, USER_AGENT
from memstore.exceptions import MemstoreConfigError


def _env_float(name: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise MemstoreConfigError(f"{name} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class ClientConfig:
    """Fetch client configuration.

    Parameters
    ----------
    base_url : str
        Base URL that relative paths are resolved against.
    todos_path : str
        Path of the todo listing endpoint.
    timeout : float
        Total request timeout in seconds.
    user_agent : str
        ``User-Agent`` header sent with every request.
    """

    base_url: str = BASE_URL
    todos_path: str = TODOS_PATH
    timeout: float = DEFAULT_TIMEOUT_S
    user_agent: str = USER_AGENT

    def __post_init__(self) -> None:
        if not math.isfinite(self.timeout) or self.timeout <= 0:
            raise MemstoreConfigError(f"timeout must be a finite positive number, got {self.timeout}")
        if not self.base_url:
            raise MemstoreConfigError("base_url must be non-empty")

    def url_for(self, path: str) -> str:
        """Resolve *path* against ``base_url``; absolute URLs pass through."""
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    @classmethod
    def from_env(cls, **overrides: Any) -> ClientConfig:
        """Create configuration from ``MEMSTORE_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "MEMSTORE_BASE_URL": "base_url",
            "MEMSTORE_TODOS_PATH": "todos_path",
            "MEMSTORE_USER_AGENT": "user_agent",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        # timeout is numeric, handle separately
        timeout_env = env.get("MEMSTORE_TIMEOUT")
        if timeout_env is not None and "timeout" not in overrides:
            config_kwargs["timeout"] = _env_float("MEMSTORE_TIMEOUT", timeout_env)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
