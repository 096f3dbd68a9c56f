from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from ...handlers import ScheduleReadApi, ScheduleWriteApi
from ...models import ScheduleEntryCreate
from ..deps import get_schedule_read_api, get_schedule_write_api
from ..responses import error_response, success_body

router = APIRouter(prefix="/schedule", tags=["schedules"])


@router.post("")
def create_schedule_entry(
    payload: Optional[ScheduleEntryCreate] = None,
    api: ScheduleWriteApi = Depends(get_schedule_write_api),
):
    result = api.create(payload or ScheduleEntryCreate())
    if result.success:
        return success_body("data", result.data)
    return error_response()


@router.delete("")
def delete_schedule_entries(
    event: Optional[str] = None,
    team: Optional[str] = None,
    api: ScheduleWriteApi = Depends(get_schedule_write_api),
):
    result = api.delete_matching(event=event, team=team)
    if result.success:
        return success_body("data", result.data)
    return error_response()


@router.get("/{team}")
def list_team_schedule(
    team: str,
    api: ScheduleReadApi = Depends(get_schedule_read_api),
):
    result = api.list_by_team(team)
    if result.success:
        return success_body("teamData", result.data)
    return error_response()
