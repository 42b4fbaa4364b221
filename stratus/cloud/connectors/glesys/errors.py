"""GleSYS error classification.

GleSYS answers a request for a missing server with HTTP 400 (sometimes 404)
and a status text inside the usual envelope::

    {"response": {"status": {"code": 400, "text": "Could not find server"}}}
"""

from __future__ import annotations

import json

from stratus.cloud.core.exceptions import ProviderError
from stratus.cloud.runtime.rest.fallbacks import is_not_found

from .config import NOT_FOUND_MARKERS


def status_text(body: str | None) -> str:
    if not body:
        return ""
    try:
        payload = json.loads(body)
    except ValueError:
        return body
    try:
        return str(payload["response"]["status"]["text"])
    except (KeyError, TypeError):
        return ""


def is_missing(exc: ProviderError) -> bool:
    if is_not_found(exc):
        return True
    if exc.status_code != 400:
        return False
    text = status_text(exc.body).lower()
    return any(marker in text for marker in NOT_FOUND_MARKERS)


def return_none_on_missing(exc: ProviderError) -> None:
    if is_missing(exc):
        return None
    raise exc
