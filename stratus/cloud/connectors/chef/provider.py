"""Asynchronous access to the Chef platform REST API.

Architecture:
    Each method maps onto one endpoint of the registry in ``endpoints``.
    Requests are signed by ``SignedHeaderAuth``, which runs as a request
    filter after the endpoint's binders have produced the body.

See Also:
    - ChefClient: blocking twin of this client
    - https://docs.chef.io/server/api_chef_server/
"""

from __future__ import annotations

from urllib.parse import urlsplit

from cryptography.hazmat.primitives.asymmetric import rsa

from stratus.cloud.models import Organization, User
from stratus.cloud.runtime.rest import RESTProvider, RESTTransport

from .auth import SignedHeaderAuth
from .config import BASE_URL, DEFAULT_HEADERS, DEFAULT_TIMEOUT
from .endpoints import ENDPOINTS


class ChefAsyncClient(RESTProvider):
    """Provides asynchronous access to Chef via its REST API."""

    def __init__(
        self,
        user_id: str,
        private_key: str | bytes | rsa.RSAPrivateKey,
        *,
        endpoint: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the Chef client.

        Args:
            user_id: Client or user name the requests are signed as
            private_key: PEM-encoded RSA key (or loaded key) of ``user_id``
            endpoint: Chef server URL, including any path prefix
            timeout: Total request timeout in seconds
        """
        transport = RESTTransport(base_url=endpoint, timeout=timeout, headers=DEFAULT_HEADERS)
        signer = SignedHeaderAuth(user_id, private_key, base_path=urlsplit(endpoint).path)
        super().__init__("chef", transport, ENDPOINTS, filters=[signer])

    async def create_client_in_org(self, orgname: str, clientname: str) -> str:
        """Register a new API client in an organization.

        Returns:
            The private key issued for the client
        """
        return await self.fetch("create_client", {"orgname": orgname, "clientname": clientname})

    async def generate_key_for_client_in_org(self, orgname: str, clientname: str) -> str:
        """Regenerate a client's key pair and return the new private key."""
        return await self.fetch(
            "generate_client_key", {"orgname": orgname, "clientname": clientname}
        )

    async def client_exists_in_org(self, orgname: str, clientname: str) -> bool:
        """Return False if the client does not exist."""
        return await self.fetch("client_exists", {"orgname": orgname, "clientname": clientname})

    async def delete_client_in_org(self, orgname: str, clientname: str) -> None:
        """Delete a client; deleting a missing client is not an error."""
        await self.fetch("delete_client", {"orgname": orgname, "clientname": clientname})

    async def list_clients_in_org(self, orgname: str) -> set[str]:
        """Return the names of all clients in an organization."""
        return await self.fetch("list_clients", {"orgname": orgname})

    async def create_user(self, user: User) -> str:
        """Create a user and return its private key."""
        return await self.fetch("create_user", {"user": user})

    async def update_user(self, user: User) -> User:
        return await self.fetch("update_user", {"user": user})

    async def get_user(self, username: str) -> User | None:
        """Return the user, or None if it does not exist."""
        return await self.fetch("get_user", {"username": username})

    async def delete_user(self, username: str) -> User:
        """Delete a user and return its last known state."""
        return await self.fetch("delete_user", {"username": username})

    async def create_org(self, org: Organization) -> str:
        """Create an organization and return the validator client's private key."""
        return await self.fetch("create_org", {"org": org})

    async def update_org(self, org: Organization) -> Organization:
        return await self.fetch("update_org", {"org": org})

    async def get_org(self, orgname: str) -> Organization | None:
        """Return the organization, or None if it does not exist."""
        return await self.fetch("get_org", {"orgname": orgname})

    async def delete_org(self, orgname: str) -> Organization:
        return await self.fetch("delete_org", {"orgname": orgname})
