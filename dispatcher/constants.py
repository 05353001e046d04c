"""
dispatcher/constants.py

Fixed values used by the smoke alert pipeline.
Event filters, message text, and provider endpoints are referenced from this module;
literal strings in business logic are prohibited.
"""

# ── Change-event filter ──────────────────────────────────────
INSERT_EVENT_TYPE: str = "INSERT"
SMOKE_LOGS_TABLE: str = "smoke_logs"

# ── Webhook responses ────────────────────────────────────────
IGNORED_EVENT_MESSAGE: str = "Not a smoke_logs insert event."
DEVICE_TOKEN_MISSING_ERROR: str = "Device FCM token not found."

# ── Alert message ────────────────────────────────────────────
ALERT_TITLE: str = "Smoke Alert!"
ALERT_HEADLINE: str = "A SMOKE HAS BEEN DETECTED"
UNKNOWN_AREA: str = "Unknown"
ALERT_TIMEZONE: str = "Asia/Manila"
ALERT_TIME_FORMAT: str = "%I:%M %p, %b %d, %Y"  # 04:15 PM, Mar 05, 2024

# ── Timestamp normalization ──────────────────────────────────
POSTGRES_UTC_SUFFIX: str = "+00"
UTC_MARKER: str = "Z"

# ── Google OAuth ─────────────────────────────────────────────
FCM_MESSAGING_SCOPE: str = "https://www.googleapis.com/auth/firebase.messaging"

# ── FCM HTTP v1 ──────────────────────────────────────────────
FCM_SEND_URL_TEMPLATE: str = (
    "https://fcm.googleapis.com/v1/projects/{project_id}/messages:send"
)
