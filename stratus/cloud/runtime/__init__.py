"""Runtime components: REST binding runtime and sync wrappers."""

from .rest import (
    HTTPClient,
    RequestFilter,
    ResponseAdapter,
    RESTProvider,
    RestEndpointSpec,
    RestRequest,
    RestRunner,
    RESTTransport,
)
from .sync import SyncClient

__all__ = [
    "HTTPClient",
    "RESTTransport",
    "RESTProvider",
    "RestRunner",
    "RestEndpointSpec",
    "RestRequest",
    "RequestFilter",
    "ResponseAdapter",
    "SyncClient",
]
