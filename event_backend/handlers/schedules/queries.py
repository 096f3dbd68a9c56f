"""
Schedule Read API
"""

from typing import Optional

from ...config import EventStoreConfig
from ...core import StorageAdapter, StoreResult
from ...models import ScheduleEntryView


class ScheduleReadApi:
    """Read-only API for the schedule table."""

    def __init__(self, config: EventStoreConfig, storage: Optional[StorageAdapter] = None):
        """Initialize read API with configuration."""
        self.config = config
        self.storage = storage or StorageAdapter(config)
        self.table = config.schedule_table

    def list_by_team(self, team: str) -> StoreResult:
        """
        Return the schedule of one team, in scan order.

        Each entry is reduced to ``{uuid, team, event, timestamp}``.
        """
        result = self.storage.scan_and_filter(self.table, lambda item: item.get('team') == team)
        if not result.success:
            return result
        return StoreResult(success=True, data=[ScheduleEntryView.project(item) for item in result.data])
