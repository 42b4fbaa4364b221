"""Domain models for provider resources.

Architecture:
    This module exports the Pydantic v2 models returned by the provider
    bindings. All models are immutable (frozen=True); request options and
    create/update payloads are built from the same models.

Model Categories:
    - Chef: User, Organization
    - GleSYS: Server, ServerDetails, ServerStatus, ServerLimit, ServerConsole,
      ServerTemplate, ServerAllowedArguments, ResourceUsage
    - Route 53: Zone, Change, ZonePage, NewZone
    - vCloud/Terremark: ReferenceType, CatalogItem, TerremarkCatalogItem, Catalog
"""

from .chef import Organization, User
from .glesys import (
    Cost,
    Ip,
    ResourceStatus,
    ResourceUsage,
    ResourceUsageValue,
    Server,
    ServerAllowedArguments,
    ServerConsole,
    ServerDetails,
    ServerLimit,
    ServerStatus,
    ServerTemplate,
    Uptime,
)
from .route53 import Change, ChangeStatus, NewZone, Zone, ZonePage
from .vcloud import Catalog, CatalogItem, ReferenceType, TerremarkCatalogItem

__all__ = [
    "User",
    "Organization",
    "Server",
    "ServerDetails",
    "ServerStatus",
    "ServerLimit",
    "ServerConsole",
    "ServerTemplate",
    "ServerAllowedArguments",
    "ResourceStatus",
    "ResourceUsage",
    "ResourceUsageValue",
    "Cost",
    "Ip",
    "Uptime",
    "Zone",
    "Change",
    "ChangeStatus",
    "ZonePage",
    "NewZone",
    "ReferenceType",
    "CatalogItem",
    "TerremarkCatalogItem",
    "Catalog",
]
