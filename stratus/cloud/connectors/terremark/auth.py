"""vCloud session handling.

``/login`` answers with a ``vcloud-token`` cookie. ``VCloudSession`` is
registered both as a response hook, to capture the token, and as a request
filter, to replay it.
"""

from __future__ import annotations

import logging
from typing import Any

from stratus.cloud.runtime.rest import RestRequest

from .config import SESSION_COOKIE, SESSION_HEADER

logger = logging.getLogger(__name__)


class VCloudSession:
    """Holds the session token of one vCloud login."""

    def __init__(self) -> None:
        self.token: str | None = None

    @property
    def authenticated(self) -> bool:
        return self.token is not None

    def capture(self, response: Any) -> None:
        """Response hook: remember a session token if the response carries one."""
        cookie = response.cookies.get(SESSION_COOKIE) if response.cookies else None
        token = cookie.value if cookie is not None else None
        if token is None and response.headers:
            token = response.headers.get(SESSION_HEADER)
        if token and token != self.token:
            logger.debug("vCloud session token captured")
            self.token = token

    def __call__(self, request: RestRequest) -> RestRequest:
        if self.token is not None:
            request.headers["Cookie"] = f"{SESSION_COOKIE}={self.token}"
        return request
