"""Shared GleSYS connector constants."""

from __future__ import annotations

BASE_URL = "https://api.glesys.com"

# GleSYS selects the response encoding through a path suffix
FORMAT_SUFFIX = "/format/json"

# Server operations (create, clone) can take a while to answer
DEFAULT_TIMEOUT = 30.0

DEFAULT_HEADERS = {"Accept": "application/json"}

# Status texts GleSYS uses when the addressed object does not exist
NOT_FOUND_MARKERS = ("not found", "could not find")


def api_path(resource: str) -> str:
    """``server/list`` -> ``/server/list/format/json``."""
    return f"/{resource.strip('/')}{FORMAT_SUFFIX}"
