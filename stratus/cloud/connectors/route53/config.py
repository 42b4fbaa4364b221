"""Shared Route 53 connector constants."""

from __future__ import annotations

BASE_URL = "https://route53.amazonaws.com"

API_VERSION = "2012-02-29"
XML_NAMESPACE = f"https://route53.amazonaws.com/doc/{API_VERSION}/"

DEFAULT_TIMEOUT = 30.0

# Prefixes Route 53 puts in front of resource ids
ZONE_ID_PREFIX = "/hostedzone/"
CHANGE_ID_PREFIX = "/change/"

XML_HEADERS = {"Content-Type": "application/xml"}


def api_path(resource: str) -> str:
    """``hostedzone`` -> ``/2012-02-29/hostedzone``."""
    return f"/{API_VERSION}/{resource.strip('/')}"
