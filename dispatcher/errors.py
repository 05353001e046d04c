"""
dispatcher/errors.py

Typed failures raised along the webhook-to-push pipeline.
Each carries the HTTP status the app's exception handler responds with.
"""

from typing import Any


class DispatchError(Exception):
    """Base class for failures that terminate a webhook invocation."""

    status_code: int = 500

    def to_content(self) -> dict[str, Any]:
        return {"error": str(self)}


class InvalidTimestampError(DispatchError):
    """detected_at could not be parsed after normalization."""

    status_code = 422

    def __init__(self, raw: str) -> None:
        super().__init__(f"Unrecognized detected_at timestamp: {raw!r}")
        self.raw = raw


class AccessTokenError(DispatchError):
    """The OAuth access token could not be obtained."""

    status_code = 500

    def __init__(
        self,
        message: str,
        provider_status: int | None = None,
        provider_response: Any = None,
    ) -> None:
        super().__init__(message)
        self.provider_status = provider_status
        self.provider_response = provider_response

    def to_content(self) -> dict[str, Any]:
        return {
            "error": str(self),
            "provider_status": self.provider_status,
            "provider_response": self.provider_response,
        }


class PushDeliveryError(DispatchError):
    """FCM rejected the send request, or could not be reached (no provider status)."""

    status_code = 502

    def __init__(
        self,
        provider_status: int | None,
        provider_response: Any,
        message: str | None = None,
    ) -> None:
        super().__init__(message or f"FCM send failed with status {provider_status}")
        self.provider_status = provider_status
        self.provider_response = provider_response

    def to_content(self) -> dict[str, Any]:
        return {
            "error": str(self),
            "provider_status": self.provider_status,
            "provider_response": self.provider_response,
        }
