"""Chef platform domain models: users and organizations."""

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """A Chef platform user account.

    Field names follow the wire format, so a model serializes directly
    into the request body for create/update.
    """

    username: str = Field(..., min_length=1)
    email: str | None = None
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    display_name: str | None = None
    twitter_account: str | None = None
    city: str | None = None
    country: str | None = None
    password: str | None = None
    salt: str | None = None
    public_key: str | None = None

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, extra="ignore")


class Organization(BaseModel):
    """A Chef platform organization."""

    name: str = Field(..., min_length=1)
    full_name: str | None = None
    guid: str | None = None
    org_type: str | None = None
    clientname: str | None = None

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, extra="ignore")
