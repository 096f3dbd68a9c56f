from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from ...handlers import AnnouncementReadApi, AnnouncementWriteApi
from ...models import AnnouncementCreate
from ..deps import get_announcement_read_api, get_announcement_write_api
from ..responses import error_response, success_body

router = APIRouter(prefix="/announcement", tags=["announcements"])


@router.post("")
def create_announcement(
    payload: Optional[AnnouncementCreate] = None,
    api: AnnouncementWriteApi = Depends(get_announcement_write_api),
):
    result = api.create(payload or AnnouncementCreate())
    if result.success:
        return success_body("data", result.data)
    return error_response()


@router.delete("/{announcement_id}")
def delete_announcement(
    announcement_id: str,
    api: AnnouncementWriteApi = Depends(get_announcement_write_api),
):
    result = api.delete(announcement_id)
    if result.success:
        return success_body("data", result.data)
    return error_response()


@router.get("")
def list_announcements(api: AnnouncementReadApi = Depends(get_announcement_read_api)):
    result = api.list_sorted()
    if result.success:
        return success_body("sortedData", result.data)
    return error_response()
