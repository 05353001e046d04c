"""
dispatcher/services/notification.py

Push notification delivery through the FCM HTTP v1 API.
One POST per alert; failures are raised to the caller, never retried.
"""

import httpx
import structlog

from config import settings
from dispatcher.constants import FCM_SEND_URL_TEMPLATE
from dispatcher.errors import PushDeliveryError
from dispatcher.schemas import PushNotification

logger = structlog.get_logger(__name__)


def fcm_send_url(project_id: str) -> str:
    return FCM_SEND_URL_TEMPLATE.format(project_id=project_id)


async def send_push_notification(
    project_id: str,
    access_token: str,
    notification: PushNotification,
) -> httpx.Response:
    """
    Send one notification to a single device token.

    Returns the provider response on a 2xx status so the caller can relay
    its body unchanged. Any other status raises PushDeliveryError carrying
    the provider's status and body; a transport error raises it without one.
    """
    try:
        async with httpx.AsyncClient(timeout=settings.http_timeout_seconds) as client:
            response = await client.post(
                fcm_send_url(project_id),
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {access_token}",
                },
                json=notification.to_fcm_payload(),
            )
    except httpx.HTTPError as exc:
        logger.error(
            "push_delivery_failed",
            project_id=project_id,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        raise PushDeliveryError(
            None, None, message=f"FCM unreachable: {type(exc).__name__}"
        ) from exc

    if not response.is_success:
        try:
            body = response.json()
        except ValueError:
            body = response.text
        logger.error(
            "push_delivery_failed",
            project_id=project_id,
            status=response.status_code,
            response=body,
        )
        raise PushDeliveryError(response.status_code, body)

    logger.info(
        "push_notification_sent",
        project_id=project_id,
        status=response.status_code,
        message_length=len(notification.body),
    )
    return response
