from .domain_models import (
    TableMeta,
    Participant,
    Announcement,
    ScheduleEntry,
)

# Request bodies
from .dtos import (
    ParticipantRegistration,
    AnnouncementCreate,
    ScheduleEntryCreate,
)

# Read projections
from .views import ScheduleEntryView

__all__ = [
    "TableMeta",
    "Participant",
    "Announcement",
    "ScheduleEntry",
    "ParticipantRegistration",
    "AnnouncementCreate",
    "ScheduleEntryCreate",
    "ScheduleEntryView",
]
