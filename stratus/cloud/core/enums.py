"""Core enumerations shared across provider bindings.

Key Types:
    - HttpMethod: verbs a binding may declare
    - ServerState: normalized power state of a GleSYS server
"""

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP verb of a provider binding."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value


class ServerState(str, Enum):
    """Power state reported by GleSYS for a server."""

    RUNNING = "running"
    STOPPED = "stopped"
    LOCKED = "locked"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def from_value(cls, value: str | None) -> "ServerState":
        """Map a raw state string, tolerating case and unknown values."""
        if not value:
            return cls.UNRECOGNIZED
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.UNRECOGNIZED

    def __str__(self) -> str:
        return self.value
