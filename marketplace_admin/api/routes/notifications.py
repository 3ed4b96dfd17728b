"""Notification Routes — broadcast list, send, and mark-as-read."""

from fastapi import APIRouter, Depends, status

from marketplace_admin.api.deps import get_blob_store, get_current_actor, get_store
from marketplace_admin.schemas.notification import NotificationCreate
from marketplace_admin.services.notification_service import NotificationService

router = APIRouter(prefix="/api/v1/notifications", tags=["notifications"])


def get_notification_service(
    store=Depends(get_store),
    actor=Depends(get_current_actor),
    blobs=Depends(get_blob_store),
) -> NotificationService:
    return NotificationService(store, actor, blobs)


@router.get("")
async def list_notifications(
    service: NotificationService = Depends(get_notification_service),
):
    return await service.list_notifications()


@router.post("", status_code=status.HTTP_201_CREATED)
async def send_notification(
    body: NotificationCreate,
    service: NotificationService = Depends(get_notification_service),
):
    return await service.create(body)


@router.post("/{notification_id}/read")
async def mark_notification_read(
    notification_id: str,
    service: NotificationService = Depends(get_notification_service),
):
    return await service.mark_read(notification_id)
