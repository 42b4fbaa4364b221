"""Route 53 request authentication (AWS3-HTTPS).

Each request carries a ``Date`` header and an ``X-Amzn-Authorization``
header whose signature is the base64 HMAC-SHA256 of that date string,
keyed with the secret access key. Temporary credentials add an
``X-Amz-Security-Token`` header. Signing is delegated to botocore's
``SigV3Auth``.
"""

from __future__ import annotations

from botocore.auth import SigV3Auth
from botocore.awsrequest import AWSRequest
from botocore.credentials import Credentials

from stratus.cloud.runtime.rest import RestRequest

from .config import BASE_URL

SIGNED_HEADERS = ("Date", "X-Amz-Security-Token", "X-Amzn-Authorization")


class RestAuthentication:
    """Request filter signing Route 53 requests."""

    def __init__(
        self,
        access_key_id: str,
        secret_access_key: str,
        session_token: str | None = None,
        *,
        endpoint: str = BASE_URL,
    ) -> None:
        if not access_key_id or not secret_access_key:
            raise ValueError("access_key_id and secret_access_key must be defined")
        self.credentials = Credentials(access_key_id, secret_access_key, session_token)
        self._signer = SigV3Auth(self.credentials)
        self._endpoint = endpoint.rstrip("/")

    @property
    def access_key_id(self) -> str:
        return self.credentials.access_key

    def __call__(self, request: RestRequest) -> RestRequest:
        aws_request = AWSRequest(
            method=request.method,
            url=f"{self._endpoint}{request.path}",
            headers=dict(request.headers),
        )
        self._signer.add_auth(aws_request)
        for name in SIGNED_HEADERS:
            value = aws_request.headers.get(name)
            if value is not None:
                request.headers[name] = value
        return request
