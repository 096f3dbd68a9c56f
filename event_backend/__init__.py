"""
Event Backend

Participant registration, announcements and per-team schedules for an event,
served over HTTP with FastAPI and stored in three DynamoDB tables through a
thin boto3 gateway.
"""

__version__ = "1.0.0"

from .config import EventStoreConfig
from .exceptions import (
    ConflictError,
    ConnectionError,
    EventStoreError,
    ItemNotFoundError,
    RetryableError,
    ValidationError,
)
from .models import (
    Announcement,
    AnnouncementCreate,
    Participant,
    ParticipantRegistration,
    ScheduleEntry,
    ScheduleEntryCreate,
    ScheduleEntryView,
)
from .core import (
    StorageAdapter,
    StoreResult,
    TableGateway,
    create_table_gateway,
)
from .handlers import (
    AnnouncementReadApi,
    AnnouncementWriteApi,
    LoginApi,
    ParticipantReadApi,
    ParticipantWriteApi,
    ScheduleReadApi,
    ScheduleWriteApi,
)

__all__ = [
    # Configuration
    "EventStoreConfig",

    # Exceptions
    "ConflictError",
    "ConnectionError",
    "EventStoreError",
    "ItemNotFoundError",
    "RetryableError",
    "ValidationError",

    # Models
    "Announcement",
    "AnnouncementCreate",
    "Participant",
    "ParticipantRegistration",
    "ScheduleEntry",
    "ScheduleEntryCreate",
    "ScheduleEntryView",

    # Storage
    "StorageAdapter",
    "StoreResult",
    "TableGateway",
    "create_table_gateway",

    # Resource APIs
    "AnnouncementReadApi",
    "AnnouncementWriteApi",
    "LoginApi",
    "ParticipantReadApi",
    "ParticipantWriteApi",
    "ScheduleReadApi",
    "ScheduleWriteApi",
]
