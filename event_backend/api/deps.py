"""FastAPI dependencies resolving the handlers built in :func:`create_app`."""
from __future__ import annotations

from fastapi import Request

from ..config import EventStoreConfig
from ..handlers import (
    AnnouncementReadApi,
    AnnouncementWriteApi,
    LoginApi,
    ParticipantReadApi,
    ParticipantWriteApi,
    ScheduleReadApi,
    ScheduleWriteApi,
)


def get_config(request: Request) -> EventStoreConfig:
    return request.app.state.config


def get_participant_read_api(request: Request) -> ParticipantReadApi:
    return request.app.state.participant_read_api


def get_participant_write_api(request: Request) -> ParticipantWriteApi:
    return request.app.state.participant_write_api


def get_announcement_read_api(request: Request) -> AnnouncementReadApi:
    return request.app.state.announcement_read_api


def get_announcement_write_api(request: Request) -> AnnouncementWriteApi:
    return request.app.state.announcement_write_api


def get_schedule_read_api(request: Request) -> ScheduleReadApi:
    return request.app.state.schedule_read_api


def get_schedule_write_api(request: Request) -> ScheduleWriteApi:
    return request.app.state.schedule_write_api


def get_login_api(request: Request) -> LoginApi:
    return request.app.state.login_api
