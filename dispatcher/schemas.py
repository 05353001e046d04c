"""
dispatcher/schemas.py

Pydantic data models for the dispatcher.
- WebhookPayload: incoming change event from the database webhook
- SmokeLogRecord: the inserted smoke_logs row carried by a relevant event
- DeviceRecord: push target columns read from the device table
- PushNotification: outbound FCM message composed per event
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class WebhookPayload(BaseModel):
    """Change event posted by the database webhook for any table."""

    model_config = ConfigDict(populate_by_name=True)

    type: str  # INSERT / UPDATE / DELETE
    table: str
    db_schema: str = Field(default="public", alias="schema")
    # Kept loose: the same endpoint receives events for other tables
    record: Optional[dict[str, Any]] = None
    old_record: Optional[dict[str, Any]] = None


class SmokeLogRecord(BaseModel):
    """A row inserted into smoke_logs."""

    id: str
    device_id: str
    detected_at: str  # Postgres text, e.g. "2024-03-05 08:15:00+00"
    status: bool


class DeviceRecord(BaseModel):
    """Columns of the device table needed to address a push notification."""

    fcm_token: Optional[str] = None
    area: Optional[str] = None
    unit_no: Any = None


class PushNotification(BaseModel):
    """A single FCM notification addressed to one device token."""

    token: str = Field(min_length=1)
    title: str
    body: str

    def to_fcm_payload(self) -> dict[str, Any]:
        """Request body for the FCM HTTP v1 messages:send endpoint."""
        return {
            "message": {
                "token": self.token,
                "notification": {
                    "title": self.title,
                    "body": self.body,
                },
            }
        }
