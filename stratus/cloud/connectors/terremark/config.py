"""Shared Terremark vCloud Express connector constants."""

from __future__ import annotations

BASE_URL = "https://services.vcloudexpress.terremark.com/api"
API_VERSION = "v0.8"

DEFAULT_TIMEOUT = 30.0

# Session cookie set by /login and replayed on every later request
SESSION_COOKIE = "vcloud-token"
SESSION_HEADER = "x-vcloud-authorization"

ORG_LIST_TYPE = "application/vnd.vmware.vcloud.orgList+xml"
CATALOG_TYPE = "application/vnd.vmware.vcloud.catalog+xml"
CATALOG_ITEM_TYPE = "application/vnd.vmware.vcloud.catalogItem+xml"
COMPUTE_OPTIONS_TYPE = "application/vnd.vmware.vcloud.computeOptions+xml"
CUSTOMIZATION_OPTIONS_TYPE = "application/vnd.vmware.vcloud.customizationParameters+xml"

# Terremark labels the option links of a catalog item by name; the media type
# is usually plain application/xml
COMPUTE_OPTIONS_NAME = "Compute Options"
CUSTOMIZATION_OPTIONS_NAME = "Customization Options"


def login_path() -> str:
    return f"/{API_VERSION}/login"
