"""Route 53 connector implementation."""

from .auth import RestAuthentication
from .client import ZoneClient
from .predicates import NameEquals, ZonePredicates, name_equals
from .provider import ZoneAsyncClient

__all__ = [
    "ZoneAsyncClient",
    "ZoneClient",
    "ZonePredicates",
    "NameEquals",
    "name_equals",
    "RestAuthentication",
]
