"""
Account, application, and OAuth grant management.

get_account needs a grant secret with read scope or higher. Every other
call here needs an application (client) secret.
"""

from scryfall_client.client import ScryfallClient
from scryfall_client.models.auth import (
    Account,
    Application,
    OAuthConvertRequest,
    OAuthGrant,
    OAuthGrantRequest,
    OAuthRevokeResponse,
)


async def get_account(client: ScryfallClient) -> Account:
    """Describe the account the client's grant secret belongs to."""
    return await client.get("account", Account)


async def get_application(client: ScryfallClient) -> Application:
    """Describe the application the client's secret belongs to."""
    return await client.get("application", Application)


async def oauth_convert(client: ScryfallClient, code: str) -> OAuthGrant:
    """
    Exchange an OAuth code for a full grant.

    Codes expire after 5 minutes and can be used once. Save the returned
    grant_id and grant_secret.
    """
    return await client.post("oauth/convert", OAuthConvertRequest(code=code), OAuthGrant)


async def oauth_downgrade(client: ScryfallClient, grant_id: str) -> OAuthGrant:
    """
    Downgrade a grant from read_write to read scope.

    Read grants are returned unchanged. The change is permanent.
    """
    return await client.post("oauth/downgrade", OAuthGrantRequest(grant_id=grant_id), OAuthGrant)


async def oauth_revoke(client: ScryfallClient, grant_id: str) -> OAuthRevokeResponse:
    """Revoke a grant immediately. Its ID and secret stop working."""
    return await client.post(
        "oauth/revoke", OAuthGrantRequest(grant_id=grant_id), OAuthRevokeResponse
    )
