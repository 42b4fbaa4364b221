"""Async HTTP client shared by every REST transport.

Responsibilities:
    - Lazy aiohttp session bound to the running event loop
    - Base URL joining (absolute URLs such as vCloud hrefs pass through)
    - Response hooks: callables that see every raw response and may ask
      for a throttle delay by returning a number of seconds
    - Rate-limit back-off on 429/418 honoring ``Retry-After``
    - Payload decoding by content type and mapping of HTTP errors onto
      the library's exception hierarchy
"""

from __future__ import annotations

import asyncio
import inspect
import json as jsonlib
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

import aiohttp

from ...core.exceptions import (
    AuthorizationError,
    ProviderError,
    RateLimitError,
    ResourceNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

ResponseHook = Callable[[aiohttp.ClientResponse], float | None | Awaitable[float | None]]

_RATE_LIMIT_STATUSES = frozenset({418, 429})


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        *,
        auth: aiohttp.BasicAuth | None = None,
        headers: dict[str, str] | None = None,
        max_retries: int = 3,
        fallback_retry_after: float = 1.0,
    ) -> None:
        self.base_url = base_url.rstrip("/") if base_url else None
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.auth = auth
        self.headers = dict(headers or {})
        self.max_retries = max_retries
        self.fallback_retry_after = fallback_retry_after
        self._session: aiohttp.ClientSession | None = None
        self._response_hooks: list[ResponseHook] = []
        self._throttle_until: float | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout, auth=self.auth, headers=self.headers
            )
        return self._session

    def add_response_hook(self, hook: ResponseHook) -> None:
        """Register a hook called with every raw response."""
        self._response_hooks.append(hook)

    def set_throttle(self, delay: float) -> None:
        """Hold the next request back for ``delay`` seconds.

        A shorter delay never shortens a throttle window already in place.
        """
        if delay <= 0:
            return
        until = time.time() + delay
        if self._throttle_until is None or until > self._throttle_until:
            self._throttle_until = until

    async def _wait_for_throttle(self) -> None:
        if self._throttle_until is None:
            return
        remaining = self._throttle_until - time.time()
        self._throttle_until = None
        if remaining > 0:
            await asyncio.sleep(remaining)

    def _resolve(self, url: str) -> str:
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def _run_hooks(self, response: aiohttp.ClientResponse) -> None:
        for hook in self._response_hooks:
            try:
                delay = hook(response)
                if inspect.isawaitable(delay):
                    delay = await delay
            except Exception:
                logger.warning("Response hook failed", exc_info=True)
                continue
            if delay:
                self.set_throttle(float(delay))

    def _retry_after(self, response: aiohttp.ClientResponse) -> float:
        raw = response.headers.get("Retry-After") if response.headers else None
        if raw is None:
            return self.fallback_retry_after
        try:
            return max(float(raw), 0.0)
        except (TypeError, ValueError):
            return self.fallback_retry_after

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        data: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Send a request and return the decoded payload.

        Raises:
            ResourceNotFoundError: on HTTP 404
            AuthorizationError: on HTTP 401/403
            RateLimitError: when rate limited more than ``max_retries`` times
            ProviderError: on any other HTTP error or transport failure
        """
        method = method.upper()
        url = self._resolve(url)
        kwargs: dict[str, Any] = {"params": params, "headers": headers}
        if json is not None:
            kwargs["json"] = json
        if data is not None:
            kwargs["data"] = data

        attempt = 0
        while True:
            await self._wait_for_throttle()
            logger.debug("HTTP request", extra={"method": method, "url": url})
            send = getattr(self.session, method.lower())
            try:
                async with send(url, **kwargs) as response:
                    await self._run_hooks(response)
                    if response.status in _RATE_LIMIT_STATUSES:
                        retry_after = self._retry_after(response)
                        if attempt >= self.max_retries:
                            raise RateLimitError(
                                f"{method} {url} rate limited", retry_after=retry_after
                            )
                        attempt += 1
                        logger.warning(
                            "Rate limited, backing off",
                            extra={"url": url, "retry_after": retry_after, "attempt": attempt},
                        )
                        self.set_throttle(retry_after)
                        continue
                    if response.status >= 400:
                        await self._raise_for_status(method, url, response)
                    return await self._decode(method, response)
            except (aiohttp.ClientConnectionError, asyncio.TimeoutError) as exc:
                raise ProviderError(f"{method} {url} failed: {exc}") from exc

    async def _raise_for_status(
        self, method: str, url: str, response: aiohttp.ClientResponse
    ) -> None:
        body = await response.text()
        message = f"{method} {url} failed with HTTP {response.status}"
        logger.debug("HTTP error", extra={"url": url, "status": response.status})
        if response.status == 404:
            raise ResourceNotFoundError(message, body=body)
        if response.status in (401, 403):
            raise AuthorizationError(message, status_code=response.status, body=body)
        raise ProviderError(message, status_code=response.status, body=body)

    async def _decode(self, method: str, response: aiohttp.ClientResponse) -> Any:
        if method == "HEAD":
            return True
        text = await response.text()
        if not text:
            return None
        if "json" in (response.content_type or ""):
            try:
                return jsonlib.loads(text)
            except ValueError as exc:
                raise ValidationError(
                    f"{method} {response.url} returned invalid JSON: {exc}"
                ) from exc
        return text

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET request."""
        return await self.request("GET", url, params=params, headers=headers)

    async def head(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """HEAD request; resolves to True on any 2xx/3xx."""
        return await self.request("HEAD", url, params=params, headers=headers)

    async def delete(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """DELETE request."""
        return await self.request("DELETE", url, params=params, headers=headers)

    async def post(
        self,
        url: str,
        json: Any = None,
        data: Any = None,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """POST request."""
        return await self.request(
            "POST", url, params=params, json=json, data=data, headers=headers
        )

    async def put(
        self,
        url: str,
        json: Any = None,
        data: Any = None,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """PUT request."""
        return await self.request(
            "PUT", url, params=params, json=json, data=data, headers=headers
        )

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
