from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from ...handlers import ParticipantReadApi, ParticipantWriteApi
from ...models import ParticipantRegistration
from ..deps import get_participant_read_api, get_participant_write_api
from ..responses import error_response, success_body

router = APIRouter(prefix="/participant", tags=["participants"])


@router.post("")
def register_participant(
    payload: Optional[ParticipantRegistration] = None,
    api: ParticipantWriteApi = Depends(get_participant_write_api),
):
    result = api.register(payload or ParticipantRegistration())
    if result.success:
        return success_body("data", result.data)
    return error_response()


@router.delete("/{email}")
def delete_participant(
    email: str,
    api: ParticipantWriteApi = Depends(get_participant_write_api),
):
    result = api.delete_by_email(email)
    if result.success:
        return success_body("data", result.data)
    # Store errors are reported verbatim on this route only.
    return error_response(result.message)


@router.get("")
def list_participants(api: ParticipantReadApi = Depends(get_participant_read_api)):
    result = api.list_all()
    if result.success:
        return success_body("data", result.data)
    return error_response()


@router.get("/{email}")
def get_participant(
    email: str,
    api: ParticipantReadApi = Depends(get_participant_read_api),
):
    result = api.get_by_email(email)
    if result.success:
        return success_body("item", result.data)
    return error_response()
