"""
Resource handlers.

Each resource gets a read API (queries) and a write API (commands) that
call the shared StorageAdapter and return StoreResult values.
"""

from .announcements import AnnouncementReadApi, AnnouncementWriteApi
from .login import LoginApi
from .participants import ParticipantReadApi, ParticipantWriteApi
from .schedules import ScheduleReadApi, ScheduleWriteApi

__all__ = [
    "AnnouncementReadApi",
    "AnnouncementWriteApi",
    "LoginApi",
    "ParticipantReadApi",
    "ParticipantWriteApi",
    "ScheduleReadApi",
    "ScheduleWriteApi",
]
