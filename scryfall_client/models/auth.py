from enum import Enum

from pydantic import BaseModel

from scryfall_client.timestamps import Timestamp


class OAuthScope(str, Enum):
    """Level of access granted to an application."""

    # Inspect account data only
    READ = "read"
    # Full API access on behalf of the user
    READ_WRITE = "read_write"
    # Public account information, revoked immediately afterwards
    EPHEMERAL = "ephemeral"


class Account(BaseModel):
    id: str
    username: str
    display_name: str | None = None
    twitter: str | None = None
    full_featured: bool = False
    verified: bool = False


class Application(BaseModel):
    client_id: str
    name: str
    homepage_uri: str | None = None
    contact_uri: str | None = None
    contact_email: str | None = None


class OAuthGrant(BaseModel):
    """
    An OAuth grant for a Scryfall account.

    Store both grant_id and grant_secret; the secret authenticates future
    requests on the account's behalf.
    """

    grant_id: str
    created_at: Timestamp
    scope: str
    grant_secret: str | None = None
    revoked: bool = False
    account: Account


class OAuthConvertRequest(BaseModel):
    code: str


class OAuthGrantRequest(BaseModel):
    grant_id: str


class OAuthRevokeResponse(BaseModel):
    """Minimal revoked grant returned as confirmation."""

    grant_id: str
    created_at: Timestamp
    revoked: bool
