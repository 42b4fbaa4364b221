"""Chef signed header authentication.

Every request is signed with the client's RSA key. The signer hashes the
body, builds the canonical request below, signs it and spreads the base64
signature over ``X-Ops-Authorization-N`` headers::

    Method:<METHOD>
    Path:<canonical path>
    X-Ops-Content-Hash:<base64 sha256 of body>
    X-Ops-Sign:version=1.3
    X-Ops-Timestamp:<ISO-8601 UTC>
    X-Ops-UserId:<user id>
    X-Ops-Server-API-Version:<version>

JSON bodies are serialized here, once, so the bytes that were hashed are
exactly the bytes that go on the wire.
"""

from __future__ import annotations

import base64
import hashlib
import json
import re
from collections.abc import Callable
from datetime import UTC, datetime
from urllib.parse import urlsplit

from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from stratus.cloud.runtime.rest import RestRequest

from .config import AUTHORIZATION_CHUNK_SIZE, SERVER_API_VERSION, SIGNING_VERSION

_SLASHES = re.compile(r"/+")


def hash_body(body: str | bytes) -> str:
    if isinstance(body, str):
        body = body.encode("utf-8")
    return base64.b64encode(hashlib.sha256(body).digest()).decode("ascii")


def canonical_path(path: str) -> str:
    """Drop the query, collapse repeated slashes and strip a trailing slash."""
    path = _SLASHES.sub("/", urlsplit(path).path or "/")
    if len(path) > 1 and path.endswith("/"):
        path = path[:-1]
    return path


def load_private_key(key: str | bytes | rsa.RSAPrivateKey) -> rsa.RSAPrivateKey:
    if isinstance(key, rsa.RSAPrivateKey):
        return key
    if isinstance(key, str):
        key = key.encode("ascii")
    loaded = serialization.load_pem_private_key(key, password=None)
    if not isinstance(loaded, rsa.RSAPrivateKey):
        raise ValueError("Chef requests must be signed with an RSA private key")
    return loaded


class SignedHeaderAuth:
    """Request filter adding Chef's ``X-Ops-*`` signing headers."""

    def __init__(
        self,
        user_id: str,
        private_key: str | bytes | rsa.RSAPrivateKey,
        *,
        base_path: str = "",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        if not user_id:
            raise ValueError("user_id must be defined")
        self.user_id = user_id
        self._key = load_private_key(private_key)
        self._base_path = base_path.rstrip("/")
        self._clock = clock or (lambda: datetime.now(UTC))

    def canonical_request(
        self, method: str, path: str, content_hash: str, timestamp: str
    ) -> str:
        return "\n".join(
            [
                f"Method:{method.upper()}",
                f"Path:{canonical_path(self._base_path + path)}",
                f"X-Ops-Content-Hash:{content_hash}",
                f"X-Ops-Sign:version={SIGNING_VERSION}",
                f"X-Ops-Timestamp:{timestamp}",
                f"X-Ops-UserId:{self.user_id}",
                f"X-Ops-Server-API-Version:{SERVER_API_VERSION}",
            ]
        )

    def sign(self, canonical: str) -> str:
        signature = self._key.sign(canonical.encode("utf-8"), padding.PKCS1v15(), hashes.SHA256())
        return base64.b64encode(signature).decode("ascii")

    def __call__(self, request: RestRequest) -> RestRequest:
        body = ""
        if request.json_body is not None:
            body = json.dumps(request.json_body)
            request.data = body
            request.json_body = None
            request.headers["Content-Type"] = "application/json"
        elif isinstance(request.data, (str, bytes)):
            body = request.data

        timestamp = self._clock().strftime("%Y-%m-%dT%H:%M:%SZ")
        content_hash = hash_body(body)
        signature = self.sign(
            self.canonical_request(request.method, request.path, content_hash, timestamp)
        )

        request.headers.update(
            {
                "X-Ops-Sign": f"version={SIGNING_VERSION}",
                "X-Ops-Userid": self.user_id,
                "X-Ops-Timestamp": timestamp,
                "X-Ops-Content-Hash": content_hash,
                "X-Ops-Server-API-Version": SERVER_API_VERSION,
            }
        )
        for index, start in enumerate(range(0, len(signature), AUTHORIZATION_CHUNK_SIZE), 1):
            request.headers[f"X-Ops-Authorization-{index}"] = signature[
                start : start + AUTHORIZATION_CHUNK_SIZE
            ]
        return request
