"""Custom exception hierarchy."""

from __future__ import annotations


class CloudError(Exception):
    """Base exception for all library errors."""

    pass


class ProviderError(CloudError):
    """Error returned by a cloud provider endpoint.

    Carries the HTTP status and the raw response body so exception parsers
    and provider-specific classifiers can inspect what the server said.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ResourceNotFoundError(ProviderError):
    """The addressed resource does not exist (HTTP 404)."""

    def __init__(self, message: str, body: str | None = None) -> None:
        super().__init__(message, status_code=404, body=body)


class AuthorizationError(ProviderError):
    """Credentials were rejected or lack permission (HTTP 401/403)."""

    pass


class RateLimitError(ProviderError):
    """Provider rate limit exceeded."""

    def __init__(self, message: str, retry_after: float = 60) -> None:
        super().__init__(message, status_code=429)
        self.retry_after = retry_after


class ValidationError(CloudError):
    """Response payload could not be mapped onto a domain model."""

    pass
