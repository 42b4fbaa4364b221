"""Chef connector implementation."""

from .auth import SignedHeaderAuth
from .client import ChefClient
from .provider import ChefAsyncClient

__all__ = [
    "ChefAsyncClient",
    "ChefClient",
    "SignedHeaderAuth",
]
