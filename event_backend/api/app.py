"""FastAPI application exposing the participant, announcement, schedule and login endpoints."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from .. import __version__
from ..config import EventStoreConfig
from ..core import StorageAdapter
from ..exceptions import EventStoreError
from ..handlers import (
    AnnouncementReadApi,
    AnnouncementWriteApi,
    LoginApi,
    ParticipantReadApi,
    ParticipantWriteApi,
    ScheduleReadApi,
    ScheduleWriteApi,
)
from .responses import error_response
from .routes import (
    announcements_router,
    health_router,
    login_router,
    participants_router,
    schedules_router,
)

logger = logging.getLogger(__name__)


def create_app(
    config: Optional[EventStoreConfig] = None,
    storage: Optional[StorageAdapter] = None,
) -> FastAPI:
    """Build the application around a single configuration and storage adapter."""

    config = config or EventStoreConfig.from_env()
    storage = storage or StorageAdapter(config)

    app = FastAPI(title="event-backend", version=__version__)

    app.state.config = config
    app.state.storage = storage
    app.state.participant_read_api = ParticipantReadApi(config, storage)
    app.state.participant_write_api = ParticipantWriteApi(config, storage)
    app.state.announcement_read_api = AnnouncementReadApi(config, storage)
    app.state.announcement_write_api = AnnouncementWriteApi(config, storage)
    app.state.schedule_read_api = ScheduleReadApi(config, storage)
    app.state.schedule_write_api = ScheduleWriteApi(config, storage)
    app.state.login_api = LoginApi(config, storage)

    app.include_router(health_router)
    app.include_router(participants_router)
    app.include_router(announcements_router)
    app.include_router(schedules_router)
    app.include_router(login_router)

    @app.exception_handler(EventStoreError)
    async def handle_store_error(request: Request, exc: EventStoreError):
        logger.error("Unhandled store error on %s %s: %s", request.method, request.url.path, exc)
        return error_response()

    @app.exception_handler(RequestValidationError)
    async def handle_unparseable_request(request: Request, exc: RequestValidationError):
        logger.warning("Unparseable request on %s %s: %s", request.method, request.url.path, exc.errors())
        return error_response()

    logger.info("Event backend configured with tables %s", config.table_names())
    return app
