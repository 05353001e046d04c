"""
dispatcher/services/devices.py

Reads push targets from the device table.
Uses SQLAlchemy 2.0 async sessions.
"""

import structlog
from sqlalchemy import select

from db.models import AsyncSessionLocal, Device
from dispatcher.schemas import DeviceRecord

logger = structlog.get_logger(__name__)


async def get_device(device_id: str) -> DeviceRecord | None:
    """
    Fetch the push token, area and unit number of exactly one device.

    Returns None when no row matches or the query fails; the caller
    reports both as a missing token.
    """
    try:
        async with AsyncSessionLocal() as session:
            result = await session.execute(
                select(Device.fcm_token, Device.area, Device.unit_no).where(
                    Device.id == device_id
                )
            )
            row = result.one_or_none()
    except Exception as exc:
        logger.error(
            "device_query_failed",
            device_id=device_id,
            error=str(exc),
        )
        return None

    if row is None:
        logger.warning("device_not_found", device_id=device_id)
        return None

    return DeviceRecord(fcm_token=row.fcm_token, area=row.area, unit_no=row.unit_no)
