"""
Announcement Read API
"""

from typing import Optional

from ...config import EventStoreConfig
from ...core import StorageAdapter, StoreResult


class AnnouncementReadApi:
    """Read-only API for the announcement table."""

    def __init__(self, config: EventStoreConfig, storage: Optional[StorageAdapter] = None):
        """Initialize read API with configuration."""
        self.config = config
        self.storage = storage or StorageAdapter(config)
        self.table = config.announcement_table

    def list_sorted(self) -> StoreResult:
        """
        Return all announcements, newest first.

        Timestamps are compared as strings. They are written in one fixed
        ISO-8601 UTC format, so string order is chronological order.
        Records without a timestamp go last; ties keep scan order.
        """
        result = self.storage.read_items(self.table)
        if not result.success:
            return result

        ordered = sorted(result.data, key=lambda item: str(item.get('timestamp') or ''), reverse=True)
        return StoreResult(success=True, data=ordered)
