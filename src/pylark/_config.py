"""Per-request client configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace

DEFAULT_HEADERS: Mapping[str, str] = {"Accept": "application/json"}


@dataclass(frozen=True)
class ClientConfig:
    """Settings a request is executed with.

    ``timeout`` is handed to httpx, which applies it separately to connecting,
    each read, each write and acquiring a pooled connection. It bounds how
    long the call may stall, not its total duration. ``None`` leaves it
    unbounded, or to the timeout of a caller-supplied httpx client.
    """

    timeout: float | None = None
    headers: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))

    def with_timeout(self, timeout: float | None) -> ClientConfig:
        return replace(self, timeout=timeout)

    def with_headers(self, headers: Mapping[str, str]) -> ClientConfig:
        """Return a copy with ``headers`` merged over the current ones."""
        return replace(self, headers={**self.headers, **headers})
