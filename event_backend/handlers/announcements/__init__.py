"""
Announcement APIs

Read API:
- Listing sorted newest first

Write API:
- Creation with generated uuid and timestamp
- Deletion by uuid
"""

from .queries import AnnouncementReadApi
from .commands import AnnouncementWriteApi

__all__ = [
    "AnnouncementReadApi",
    "AnnouncementWriteApi",
]
