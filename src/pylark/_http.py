"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from pylark._logging import log_request
from pylark.exceptions import (
    PylarkConnectionError,
    PylarkHTTPError,
    PylarkTimeoutError,
)


def _handle_response(response: httpx.Response) -> Any:
    """Validate response status and return parsed JSON."""
    if not response.is_success:
        raise PylarkHTTPError(
            status_code=response.status_code,
            message=response.text,
        )
    return response.json()


def _timeout(timeout: float | None) -> Any:
    # Without a per-request deadline the client's own timeout applies.
    if timeout is None:
        return httpx.USE_CLIENT_DEFAULT
    return timeout


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client.

    Without a client, a short-lived one with no timeout of its own that
    follows redirects is opened per call.
    """

    def __init__(self, client: httpx.Client | None = None) -> None:
        self._client = client

    @log_request
    def get(
        self,
        url: httpx.URL | str,
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> Any:
        """Perform a GET request and return parsed JSON."""
        try:
            if self._client is None:
                with httpx.Client(timeout=None, follow_redirects=True) as client:
                    response = client.get(url, headers=headers, timeout=_timeout(timeout))
            else:
                response = self._client.get(url, headers=headers, timeout=_timeout(timeout))
        except httpx.ConnectError as exc:
            raise PylarkConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise PylarkTimeoutError(str(exc)) from exc
        return _handle_response(response)


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient.

    Task cancellation propagates unchanged as ``asyncio.CancelledError``.
    """

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._client = client

    @log_request
    async def get(
        self,
        url: httpx.URL | str,
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> Any:
        """Perform an async GET request and return parsed JSON."""
        try:
            if self._client is None:
                async with httpx.AsyncClient(timeout=None, follow_redirects=True) as client:
                    response = await client.get(url, headers=headers, timeout=_timeout(timeout))
            else:
                response = await self._client.get(url, headers=headers, timeout=_timeout(timeout))
        except httpx.ConnectError as exc:
            raise PylarkConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise PylarkTimeoutError(str(exc)) from exc
        return _handle_response(response)
