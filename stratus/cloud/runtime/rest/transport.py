"""REST transport delegating to HTTPClient."""

from __future__ import annotations

from typing import Any

import aiohttp

from .http_client import HTTPClient, ResponseHook


class RESTTransport:
    """Thin verb-oriented facade over ``HTTPClient``.

    Runners talk to the transport so tests can swap it for a mock without
    touching aiohttp.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        *,
        auth: aiohttp.BasicAuth | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._http = HTTPClient(base_url=base_url, timeout=timeout, auth=auth, headers=headers)

    @property
    def base_url(self) -> str | None:
        return self._http.base_url

    def add_response_hook(self, hook: ResponseHook) -> None:
        self._http.add_response_hook(hook)

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self._http.get(path, params=params, headers=headers)

    async def head(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self._http.head(path, params=params, headers=headers)

    async def delete(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self._http.delete(path, params=params, headers=headers)

    async def post(
        self,
        path: str,
        json_body: Any = None,
        data: Any = None,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return await self._http.post(
            path, params=params, json=json_body, data=data, headers=headers
        )

    async def put(
        self,
        path: str,
        json_body: Any = None,
        data: Any = None,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return await self._http.put(
            path, params=params, json=json_body, data=data, headers=headers
        )

    async def close(self) -> None:
        await self._http.close()
