"""
tests/fixtures.py

Shared test data and helper functions for constructing test payloads.
All tests must use these fixtures instead of hardcoding test values.
"""

from unittest.mock import patch

import httpx
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from google.oauth2 import service_account

from dispatcher.constants import FCM_MESSAGING_SCOPE
from dispatcher.schemas import DeviceRecord, SmokeLogRecord

# ── Test identifiers ─────────────────────────────────────────

TEST_DEVICE_ID: str = "5f0c6d2e-8f3a-4b7e-9a41-2d6c1e0b7a90"
TEST_SMOKE_LOG_ID: str = "a3e1c9b4-1d2f-4e5a-8b6c-7d8e9f0a1b2c"
TEST_FCM_TOKEN: str = "fcm-device-token-123"
TEST_ACCESS_TOKEN: str = "ya29.test-access-token"
TEST_PROJECT_ID: str = "smoke-alert-test"
TEST_CLIENT_EMAIL: str = "dispatcher@smoke-alert-test.iam.gserviceaccount.com"
TEST_DETECTED_AT: str = "2024-03-05 08:15:00+00"
TEST_DETECTED_AT_DISPLAY: str = "04:15 PM, Mar 05, 2024"

# ── Service-account signing key ──────────────────────────────

TEST_RSA_KEY = rsa.generate_private_key(public_exponent=65537, key_size=2048)
TEST_PRIVATE_KEY_PEM: str = TEST_RSA_KEY.private_bytes(
    encoding=serialization.Encoding.PEM,
    format=serialization.PrivateFormat.PKCS8,
    encryption_algorithm=serialization.NoEncryption(),
).decode()


def build_service_account_info(private_key: str = TEST_PRIVATE_KEY_PEM) -> dict:
    """Build the contents of a service-account key file for the test project."""
    return {
        "type": "service_account",
        "project_id": TEST_PROJECT_ID,
        "private_key_id": "test-key-id",
        "private_key": private_key,
        "client_email": TEST_CLIENT_EMAIL,
        "client_id": "1234567890",
        "token_uri": "https://oauth2.googleapis.com/token",
    }


def build_service_account() -> service_account.Credentials:
    """Build service-account credentials signed with the in-memory test key."""
    return service_account.Credentials.from_service_account_info(
        build_service_account_info(),
        scopes=[FCM_MESSAGING_SCOPE],
    )


def build_smoke_log_record(
    device_id: str = TEST_DEVICE_ID,
    detected_at: str = TEST_DETECTED_AT,
    status: bool = True,
) -> dict:
    """Build a raw smoke_logs row as carried in the webhook record field."""
    return {
        "id": TEST_SMOKE_LOG_ID,
        "device_id": device_id,
        "detected_at": detected_at,
        "status": status,
    }


def build_webhook_payload(
    event_type: str = "INSERT",
    table: str = "smoke_logs",
    record: dict | None = None,
) -> dict:
    """Build a database webhook body with sensible defaults for testing."""
    return {
        "type": event_type,
        "table": table,
        "schema": "public",
        "record": record if record is not None else build_smoke_log_record(),
        "old_record": None,
    }


def build_smoke_log(**overrides) -> SmokeLogRecord:
    return SmokeLogRecord.model_validate(build_smoke_log_record(**overrides))


def build_device(
    fcm_token: str | None = TEST_FCM_TOKEN,
    area: str | None = "Kitchen, 2nd Floor",
    unit_no: str | None = "12B",
) -> DeviceRecord:
    """Build a DeviceRecord with sensible defaults for testing."""
    return DeviceRecord(fcm_token=fcm_token, area=area, unit_no=unit_no)


# ── Outbound HTTP ────────────────────────────────────────────

_REAL_ASYNC_CLIENT = httpx.AsyncClient


def patch_async_client(target: str, handler):
    """
    Patch httpx.AsyncClient at target so requests are answered by handler.

    The patched client keeps the caller's keyword arguments (timeout etc.)
    and routes every request through httpx.MockTransport.
    """
    transport = httpx.MockTransport(handler)
    return patch(
        target,
        side_effect=lambda **kwargs: _REAL_ASYNC_CLIENT(transport=transport, **kwargs),
    )
