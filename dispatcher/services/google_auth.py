"""
dispatcher/services/google_auth.py

Obtains short-lived Google OAuth access tokens for the FCM send scope.
Each call refreshes a private copy of the shared service-account credentials,
so a fresh token is requested every time and nothing is cached.
"""

import asyncio

import structlog
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2 import service_account

from dispatcher.constants import FCM_MESSAGING_SCOPE
from dispatcher.errors import AccessTokenError

logger = structlog.get_logger(__name__)


async def get_access_token(account: service_account.Credentials) -> str:
    """
    Exchange the service account's signed assertion for an access token.

    The token refresh is a blocking call and runs in a worker thread.
    Raises AccessTokenError if signing or the token endpoint fails.
    """
    credentials = account.with_scopes([FCM_MESSAGING_SCOPE])

    try:
        await asyncio.to_thread(credentials.refresh, Request())
    except GoogleAuthError as exc:
        logger.error(
            "access_token_request_failed",
            client_email=account.service_account_email,
            error=str(exc),
        )
        # RefreshError carries the token endpoint's parsed body as its second arg
        provider_response = exc.args[1] if len(exc.args) > 1 else None
        raise AccessTokenError(
            f"Could not obtain access token: {exc.args[0] if exc.args else exc}",
            provider_response=provider_response,
        ) from exc

    if not credentials.token:
        logger.error(
            "access_token_missing",
            client_email=account.service_account_email,
        )
        raise AccessTokenError("Token endpoint response has no access_token")

    return credentials.token
