"""Core components."""

from .base import BaseClient
from .enums import HttpMethod, ServerState
from .exceptions import (
    AuthorizationError,
    CloudError,
    ProviderError,
    RateLimitError,
    ResourceNotFoundError,
    ValidationError,
)

__all__ = [
    "BaseClient",
    "HttpMethod",
    "ServerState",
    "CloudError",
    "ProviderError",
    "ResourceNotFoundError",
    "AuthorizationError",
    "RateLimitError",
    "ValidationError",
]
