"""REST runtime abstractions."""

from .fallbacks import return_false_on_not_found, return_none_on_not_found
from .http_client import HTTPClient
from .provider import EndpointRegistry, RESTProvider
from .runner import RequestFilter, ResponseAdapter, RestEndpointSpec, RestRequest, RestRunner
from .transport import RESTTransport

__all__ = [
    "HTTPClient",
    "RESTTransport",
    "RESTProvider",
    "EndpointRegistry",
    "RestRunner",
    "RestEndpointSpec",
    "RestRequest",
    "RequestFilter",
    "ResponseAdapter",
    "return_none_on_not_found",
    "return_false_on_not_found",
]
