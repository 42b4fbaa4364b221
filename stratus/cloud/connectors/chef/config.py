"""Shared Chef connector constants."""

from __future__ import annotations

BASE_URL = "https://api.opscode.com"

# Value of the X-Chef-Version header sent with every request
CHEF_VERSION = "0.9.8"

# Signed header protocol; 1.3 signs SHA-256 digests with RSA PKCS#1 v1.5
SIGNING_VERSION = "1.3"
SERVER_API_VERSION = "0"

# Authorization header values are split into chunks of this many characters
AUTHORIZATION_CHUNK_SIZE = 60

DEFAULT_TIMEOUT = 30.0

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "X-Chef-Version": CHEF_VERSION,
}
