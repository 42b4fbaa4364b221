"""Blocking twins of the async clients.

``SyncClient`` owns a private event loop and the async client it wraps.
Coroutine methods of the wrapped client become blocking calls; async
generator methods are drained into lists.
"""

from __future__ import annotations

import asyncio
import functools
import inspect
from typing import Any, ClassVar


async def _collect(agen: Any) -> list[Any]:
    return [item async for item in agen]


class SyncClient:
    """Run an async client's methods to completion on a private loop."""

    _async_client_cls: ClassVar[type]

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self._async_client = self._async_client_cls(*args, **kwargs)
        self._loop = asyncio.new_event_loop()

    @property
    def async_client(self) -> Any:
        """The wrapped async client."""
        return self._async_client

    def _run(self, awaitable: Any) -> Any:
        if self._loop.is_closed():
            if inspect.iscoroutine(awaitable):
                awaitable.close()
            raise RuntimeError(f"{type(self).__name__} is closed")
        return self._loop.run_until_complete(awaitable)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        attr = getattr(self._async_client, name)
        if inspect.isasyncgenfunction(attr):

            @functools.wraps(attr)
            def drain(*args: Any, **kwargs: Any) -> list[Any]:
                return self._run(_collect(attr(*args, **kwargs)))

            return drain
        if inspect.iscoroutinefunction(attr):

            @functools.wraps(attr)
            def call(*args: Any, **kwargs: Any) -> Any:
                return self._run(attr(*args, **kwargs))

            return call
        return attr

    def close(self) -> None:
        """Close the wrapped client and the private loop."""
        if self._loop.is_closed():
            return
        try:
            self._run(self._async_client.close())
        finally:
            self._loop.close()

    def __enter__(self) -> SyncClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
