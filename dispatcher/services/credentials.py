"""
dispatcher/services/credentials.py

Loads the Google service-account bundle used to authorize FCM sends.
The bundle is read once per process and never mutated.
"""

from functools import lru_cache

import structlog
from google.oauth2 import service_account

from config import settings
from dispatcher.constants import FCM_MESSAGING_SCOPE

logger = structlog.get_logger(__name__)


def load_service_account(path: str) -> service_account.Credentials:
    """Parse a service-account key file. Raises on a missing or malformed file."""
    account = service_account.Credentials.from_service_account_file(
        path,
        scopes=[FCM_MESSAGING_SCOPE],
    )
    logger.info(
        "service_account_loaded",
        path=path,
        project_id=account.project_id,
        client_email=account.service_account_email,
    )
    return account


@lru_cache(maxsize=1)
def get_service_account() -> service_account.Credentials:
    """Process-wide service account loaded from settings.fcm_service_account_path."""
    return load_service_account(settings.fcm_service_account_path)
