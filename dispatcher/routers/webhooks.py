"""
dispatcher/routers/webhooks.py

POST /webhooks/smoke-alert endpoint.
Receives database change events and forwards smoke_logs inserts to the
device's registered FCM token.
"""

import structlog
from fastapi import APIRouter, HTTPException, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from dispatcher.constants import (
    DEVICE_TOKEN_MISSING_ERROR,
    IGNORED_EVENT_MESSAGE,
    INSERT_EVENT_TYPE,
    SMOKE_LOGS_TABLE,
)
from dispatcher.schemas import SmokeLogRecord, WebhookPayload
from dispatcher.services.credentials import get_service_account
from dispatcher.services.devices import get_device
from dispatcher.services.formatting import build_smoke_alert
from dispatcher.services.google_auth import get_access_token
from dispatcher.services.notification import send_push_notification

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post("/")
@router.post("/webhooks/smoke-alert")
async def receive_smoke_alert(payload: WebhookPayload) -> Response:
    """
    Forward a smoke_logs insert to the originating device as a push notification.

    Flow:
    1. Ignore anything that is not an INSERT on smoke_logs (200)
    2. Look up the device's FCM token (404 if missing)
    3. Compose the alert in the alert time zone
    4. Obtain an access token and send via FCM
    5. Relay the FCM response body unchanged
    """
    if payload.type != INSERT_EVENT_TYPE or payload.table != SMOKE_LOGS_TABLE:
        logger.info(
            "webhook_event_ignored",
            event_type=payload.type,
            table=payload.table,
        )
        return JSONResponse(status_code=200, content={"message": IGNORED_EVENT_MESSAGE})

    try:
        record = SmokeLogRecord.model_validate(payload.record or {})
    except ValidationError as exc:
        logger.warning("smoke_log_record_invalid", errors=exc.error_count())
        raise HTTPException(
            status_code=422,
            detail=exc.errors(include_url=False, include_context=False),
        )

    logger.info(
        "smoke_log_received",
        smoke_log_id=record.id,
        device_id=record.device_id,
        detected_at=record.detected_at,
    )

    device = await get_device(record.device_id)
    if device is None or not device.fcm_token:
        logger.warning("device_token_missing", device_id=record.device_id)
        return JSONResponse(status_code=404, content={"error": DEVICE_TOKEN_MISSING_ERROR})

    notification = build_smoke_alert(device.fcm_token, device.area, record)

    account = get_service_account()
    access_token = await get_access_token(account)

    provider_response = await send_push_notification(
        account.project_id, access_token, notification
    )

    return Response(content=provider_response.content, media_type="application/json")
