"""
dispatcher/services/formatting.py

Builds the smoke alert notification from a smoke_logs row and its device.
Timestamps arrive as Postgres text and are rendered in the alert time zone.
"""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from dispatcher.constants import (
    ALERT_HEADLINE,
    ALERT_TIME_FORMAT,
    ALERT_TIMEZONE,
    ALERT_TITLE,
    POSTGRES_UTC_SUFFIX,
    UNKNOWN_AREA,
    UTC_MARKER,
)
from dispatcher.errors import InvalidTimestampError
from dispatcher.schemas import PushNotification, SmokeLogRecord

_ALERT_TZ = ZoneInfo(ALERT_TIMEZONE)


def normalize_detected_at(raw: str) -> datetime:
    """
    Parse a detected_at value as an absolute UTC instant.

    Accepts both "2024-03-05 08:15:00+00" (Postgres text output) and
    "2024-03-05T08:15:00Z". Anything else raises InvalidTimestampError.
    """
    value = raw.replace(" ", "T", 1)
    if value.endswith(POSTGRES_UTC_SUFFIX):
        value = value[: -len(POSTGRES_UTC_SUFFIX)] + UTC_MARKER
    if not value.endswith(UTC_MARKER):
        value += UTC_MARKER

    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as exc:
        raise InvalidTimestampError(raw) from exc

    return parsed.astimezone(timezone.utc)


def format_detected_at(instant: datetime) -> str:
    """Render an instant as "04:15 PM, Mar 05, 2024" in the alert time zone."""
    return instant.astimezone(_ALERT_TZ).strftime(ALERT_TIME_FORMAT)


def build_alert_body(area: str | None, detected_at: datetime) -> str:
    lines = [
        ALERT_HEADLINE,
        f"AT: {area or UNKNOWN_AREA}",
        f"ON: {format_detected_at(detected_at)}",
    ]
    return "\n".join(lines)


def build_smoke_alert(
    fcm_token: str,
    area: str | None,
    record: SmokeLogRecord,
) -> PushNotification:
    """Compose the push notification for one smoke detection on a device with a token."""
    detected_at = normalize_detected_at(record.detected_at)
    return PushNotification(
        token=fcm_token,
        title=ALERT_TITLE,
        body=build_alert_body(area, detected_at),
    )
