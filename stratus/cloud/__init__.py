"""Stratus Cloud - typed bindings for cloud provider REST APIs."""

from .connectors.chef import ChefAsyncClient, ChefClient
from .connectors.glesys import ServerAsyncClient, ServerClient
from .connectors.route53 import ZoneAsyncClient, ZoneClient, ZonePredicates, name_equals
from .connectors.terremark import TerremarkCatalogAsyncClient, TerremarkCatalogClient
from .core import (
    AuthorizationError,
    CloudError,
    ProviderError,
    RateLimitError,
    ResourceNotFoundError,
    ServerState,
    ValidationError,
)
from .models import (
    Catalog,
    CatalogItem,
    Change,
    Organization,
    ReferenceType,
    Server,
    ServerDetails,
    ServerStatus,
    TerremarkCatalogItem,
    User,
    Zone,
)

__version__ = "0.1.0"

__all__ = [
    # Clients
    "ChefAsyncClient",
    "ChefClient",
    "ServerAsyncClient",
    "ServerClient",
    "ZoneAsyncClient",
    "ZoneClient",
    "TerremarkCatalogAsyncClient",
    "TerremarkCatalogClient",
    # Predicates
    "ZonePredicates",
    "name_equals",
    # Models
    "User",
    "Organization",
    "Server",
    "ServerDetails",
    "ServerStatus",
    "ServerState",
    "Zone",
    "Change",
    "ReferenceType",
    "CatalogItem",
    "TerremarkCatalogItem",
    "Catalog",
    # Exceptions
    "CloudError",
    "ProviderError",
    "ResourceNotFoundError",
    "AuthorizationError",
    "RateLimitError",
    "ValidationError",
]
