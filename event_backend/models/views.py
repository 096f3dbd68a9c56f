"""
Read-side views

Projections of stored records returned by list endpoints.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ScheduleEntryView(BaseModel):
    """The ``{uuid, team, event, timestamp}`` projection of a schedule entry."""

    uuid: Optional[str] = Field(None, description="Entry identifier")
    team: Optional[Any] = Field(None, description="Team name")
    event: Optional[Any] = Field(None, description="Event name")
    timestamp: Optional[str] = Field(None, description="ISO-8601 UTC creation time")

    model_config = ConfigDict(extra='ignore')

    @classmethod
    def project(cls, item: Dict[str, Any]) -> Dict[str, Any]:
        """Reduce a scanned item to the view fields, omitting absent ones."""
        return cls.model_validate(item).model_dump(exclude_none=True)
