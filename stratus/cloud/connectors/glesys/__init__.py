"""GleSYS connector implementation."""

from .client import ServerClient
from .options import (
    ServerCloneOptions,
    ServerCreateOptions,
    ServerDestroyOptions,
    ServerEditOptions,
    ServerStatusOptions,
    ServerStopOptions,
    StatusType,
    StopType,
)
from .provider import ServerAsyncClient

__all__ = [
    "ServerAsyncClient",
    "ServerClient",
    "ServerStatusOptions",
    "ServerStopOptions",
    "ServerCreateOptions",
    "ServerEditOptions",
    "ServerCloneOptions",
    "ServerDestroyOptions",
    "StatusType",
    "StopType",
]
