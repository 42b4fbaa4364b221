"""vCloud login and catalog endpoints.

Catalog resources are addressed by the absolute hrefs vCloud hands out,
so their paths are the hrefs themselves.
"""

from __future__ import annotations

from typing import Any

import aiohttp

from stratus.cloud.connectors.terremark.config import (
    CATALOG_ITEM_TYPE,
    CATALOG_TYPE,
    ORG_LIST_TYPE,
    login_path,
)
from stratus.cloud.runtime.rest import RestEndpointSpec
from stratus.cloud.runtime.rest.fallbacks import return_none_on_not_found


def build_href(params: dict[str, Any]) -> str:
    href = params.get("href")
    if not href:
        raise ValueError("href must be defined")
    return str(href)


def bind_basic_auth(params: dict[str, Any]) -> dict[str, str]:
    credentials = aiohttp.BasicAuth(params["user"], params["password"])
    return {"Authorization": credentials.encode(), "Accept": ORG_LIST_TYPE}


LOGIN_SPEC = RestEndpointSpec(
    id="login",
    method="POST",
    build_path=lambda _params: login_path(),
    build_headers=bind_basic_auth,
)

CATALOG_SPEC = RestEndpointSpec(
    id="catalog",
    method="GET",
    build_path=build_href,
    build_headers=lambda _params: {"Accept": CATALOG_TYPE},
    on_error=return_none_on_not_found,
)

CATALOG_ITEM_SPEC = RestEndpointSpec(
    id="catalog_item",
    method="GET",
    build_path=build_href,
    build_headers=lambda _params: {"Accept": CATALOG_ITEM_TYPE},
    on_error=return_none_on_not_found,
)
