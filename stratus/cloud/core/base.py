"""Base client abstract class.

Architecture:
    Every provider binding (``ChefAsyncClient``, ``ServerAsyncClient`` ...)
    derives from ``BaseClient``. The base owns nothing but a name and the
    async context manager protocol; transports and runners are created by
    the concrete client because each provider needs its own base URL,
    authentication and request filters.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseClient(ABC):
    """Abstract base class for all provider clients."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    async def close(self) -> None:
        """Close client connections and cleanup resources."""
        pass

    def validate_id(self, value: str, field: str = "id") -> str:
        """Validate a path identifier. Override if needed."""
        if not value or not isinstance(value, str):
            raise ValueError(f"{field} must be a non-empty string")
        return value

    async def __aenter__(self) -> BaseClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
