"""
Domain Models for the Event Backend

One model per table:
1. Participant (keyed by email)
2. Announcement (keyed by uuid)
3. Schedule Entry (keyed by uuid)

Models carry no validation beyond types; missing attributes stay None and are
dropped before the item is written, so DynamoDB decides what is acceptable.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# DynamoDB Table Metadata
# =============================================================================

class TableMeta:
    """Base class for table metadata definitions.

    Table names are deployment configuration (see EventStoreConfig), so only
    the key schema is declared here.
    """
    partition_key: str

    @classmethod
    def get_key_fields(cls) -> List[str]:
        return [cls.partition_key]


# =============================================================================
# Participant Domain
# =============================================================================

class Participant(BaseModel):
    """
    A registered participant.

    The password is generated by the server at registration and compared in
    plaintext at login. ``checked_in`` starts False and nothing in the API
    changes it.
    """

    email: Optional[Any] = Field(None, description="Participant email, the table key")
    password: str = Field(..., description="Server-generated login password")
    name: Optional[Any] = Field(None, description="Participant name")
    team: Optional[Any] = Field(None, description="Team the participant belongs to")
    hotel: Optional[Any] = Field(None, description="Hotel the participant stays at")
    stamp: Optional[Any] = Field(None, description="Free-form stamp value supplied at registration")
    diet: Optional[Any] = Field(None, description="Dietary requirements")
    checked_in: bool = Field(False, description="Whether the participant has checked in")

    model_config = ConfigDict(extra='ignore')

    class Meta(TableMeta):
        partition_key = "email"


# =============================================================================
# Announcement Domain
# =============================================================================

class Announcement(BaseModel):
    """A broadcast message, immutable once posted."""

    uuid: str = Field(..., description="Generated identifier, the table key")
    message: Optional[Any] = Field(None, description="Announcement text")
    timestamp: str = Field(..., description="ISO-8601 UTC creation time")

    model_config = ConfigDict(extra='ignore')

    class Meta(TableMeta):
        partition_key = "uuid"


# =============================================================================
# Schedule Domain
# =============================================================================

class ScheduleEntry(BaseModel):
    """One event on a team's schedule."""

    uuid: str = Field(..., description="Generated identifier, the table key")
    team: Optional[Any] = Field(None, description="Team the entry belongs to")
    event: Optional[Any] = Field(None, description="Event name")
    timestamp: str = Field(..., description="ISO-8601 UTC creation time")

    model_config = ConfigDict(extra='ignore')

    class Meta(TableMeta):
        partition_key = "uuid"
