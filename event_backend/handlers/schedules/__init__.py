"""
Schedule APIs

Read API:
- Listing a single team's entries

Write API:
- Creation with generated uuid and timestamp
- Bulk deletion by event, or by event and team
"""

from .queries import ScheduleReadApi
from .commands import ScheduleWriteApi

__all__ = [
    "ScheduleReadApi",
    "ScheduleWriteApi",
]
