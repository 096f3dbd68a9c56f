"""
Announcement Write API
"""

import logging
from typing import Optional

from ...config import EventStoreConfig
from ...core import StorageAdapter, StoreResult
from ...models import Announcement, AnnouncementCreate
from ...utils import new_identifier, utc_timestamp

logger = logging.getLogger(__name__)


class AnnouncementWriteApi:
    """Write-only API for the announcement table."""

    def __init__(self, config: EventStoreConfig, storage: Optional[StorageAdapter] = None):
        """Initialize write API with configuration."""
        self.config = config
        self.storage = storage or StorageAdapter(config)
        self.table = config.announcement_table

    def create(self, payload: AnnouncementCreate) -> StoreResult:
        """
        Post an announcement stamped with a new uuid and the current time.

        Returns:
            StoreResult whose data echoes the record that was written
        """
        announcement = Announcement(
            uuid=new_identifier(),
            message=payload.message,
            timestamp=utc_timestamp(),
        )
        item = announcement.model_dump(exclude_none=True)

        result = self.storage.add_item(item, self.table, key_field=Announcement.Meta.partition_key)
        if not result.success:
            return result

        logger.info(f"Posted announcement {announcement.uuid}")
        return StoreResult(success=True, data=item)

    def delete(self, announcement_id: str) -> StoreResult:
        """Delete an announcement by uuid; a missing uuid is still a success."""
        return self.storage.delete_item(announcement_id, self.table, key_field=Announcement.Meta.partition_key)
