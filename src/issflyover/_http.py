"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

import httpx

from issflyover.exceptions import (
    ISSAPIError,
    ISSConnectionError,
    ISSTimeoutError,
    ISSTransportError,
)

DEFAULT_TIMEOUT = 30.0

Params = list[tuple[str, str]] | None


def check_status(response: httpx.Response, message: str) -> httpx.Response:
    """Raise ISSAPIError unless the response status is exactly 200."""
    if response.status_code != 200:
        raise ISSAPIError(status_code=response.status_code, message=message)
    return response


def _transport_error(exc: httpx.RequestError) -> ISSTransportError:
    if isinstance(exc, httpx.TimeoutException):
        return ISSTimeoutError(str(exc))
    if isinstance(exc, httpx.ConnectError):
        return ISSConnectionError(str(exc))
    return ISSTransportError(str(exc))


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._client = httpx.Client(
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    def get(self, url: str, params: Params = None) -> httpx.Response:
        """Perform a GET request and return the raw response."""
        try:
            return self._client.get(url, params=params)
        except httpx.RequestError as exc:
            raise _transport_error(exc) from exc

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._client = httpx.AsyncClient(
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def get(self, url: str, params: Params = None) -> httpx.Response:
        """Perform an async GET request and return the raw response."""
        try:
            return await self._client.get(url, params=params)
        except httpx.RequestError as exc:
            raise _transport_error(exc) from exc

    async def close(self) -> None:
        await self._client.aclose()
