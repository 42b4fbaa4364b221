"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_STRATUS_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_STRATUS_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_STRATUS_NETWORK_TESTS=1 to run",
)


def require_env(*names: str) -> list[str]:
    """Return the values of ``names`` or skip the test if any is unset."""
    values = [os.environ.get(name) for name in names]
    missing = [name for name, value in zip(names, values, strict=True) if not value]
    if missing:
        pytest.skip(f"Set {', '.join(missing)} to run")
    return values  # type: ignore[return-value]


@pytest.fixture
def glesys_credentials() -> list[str]:
    return require_env("GLESYS_ACCOUNT", "GLESYS_API_KEY")


@pytest.fixture
def route53_credentials() -> list[str]:
    return require_env("AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY")


@pytest.fixture
def chef_credentials() -> list[str]:
    user_id, key_path, orgname = require_env("CHEF_USER_ID", "CHEF_KEY_PATH", "CHEF_ORG")
    with open(key_path, encoding="ascii") as fh:
        return [user_id, fh.read(), orgname]
