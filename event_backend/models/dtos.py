"""
Write-side DTOs (request bodies)

These carry only what a client may supply. Server-assigned fields
(password, uuid, timestamp, checked_in) are added by the write APIs.
Every field is optional and untyped: absent input is stored as an absent
attribute and any JSON value is passed through to the store unchanged.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ParticipantRegistration(BaseModel):
    """Body of ``POST /participant``."""

    email: Optional[Any] = Field(None, description="Participant email")
    name: Optional[Any] = Field(None, description="Participant name")
    team: Optional[Any] = Field(None, description="Team name")
    hotel: Optional[Any] = Field(None, description="Hotel")
    stamp: Optional[Any] = Field(None, description="Stamp value")
    diet: Optional[Any] = Field(None, description="Dietary requirements")

    model_config = ConfigDict(extra='ignore')


class AnnouncementCreate(BaseModel):
    """Body of ``POST /announcement``."""

    message: Optional[Any] = Field(None, description="Announcement text")

    model_config = ConfigDict(extra='ignore')


class ScheduleEntryCreate(BaseModel):
    """Body of ``POST /schedule``."""

    team: Optional[Any] = Field(None, description="Team name")
    event: Optional[Any] = Field(None, description="Event name")

    model_config = ConfigDict(extra='ignore')
