"""
Schedule Write API

Bulk deletion filters a full scan in memory, then deletes each match by key.
Every delete is awaited and the outcome is aggregated: the call only
succeeds if something matched and every matching entry was deleted.

Supported filters are ``event`` alone and ``event`` with ``team``. A
team-only filter deletes nothing.
"""

import logging
from typing import Optional

from ...config import EventStoreConfig
from ...core import StorageAdapter, StoreResult
from ...models import ScheduleEntry, ScheduleEntryCreate, ScheduleEntryView
from ...utils import new_identifier, utc_timestamp

logger = logging.getLogger(__name__)


class ScheduleWriteApi:
    """Write-only API for the schedule table."""

    def __init__(self, config: EventStoreConfig, storage: Optional[StorageAdapter] = None):
        """Initialize write API with configuration."""
        self.config = config
        self.storage = storage or StorageAdapter(config)
        self.table = config.schedule_table

    def create(self, payload: ScheduleEntryCreate) -> StoreResult:
        """
        Add an entry to a team's schedule.

        Returns:
            StoreResult whose data echoes the record that was written
        """
        entry = ScheduleEntry(
            uuid=new_identifier(),
            team=payload.team,
            event=payload.event,
            timestamp=utc_timestamp(),
        )
        item = entry.model_dump(exclude_none=True)

        result = self.storage.add_item(item, self.table, key_field=ScheduleEntry.Meta.partition_key)
        if not result.success:
            return result

        logger.info(f"Scheduled {entry.event} for team {entry.team} ({entry.uuid})")
        return StoreResult(success=True, data=item)

    def delete_matching(self, event: Optional[str] = None, team: Optional[str] = None) -> StoreResult:
        """
        Delete every entry matching the filter.

        Args:
            event: Required event name to match exactly
            team: Optional team name; when given, both must match

        Returns:
            StoreResult whose data lists the deleted entries (projected).
            Fails when no event filter is given, when nothing matches, or
            when any individual delete fails.
        """
        if event and team:
            def predicate(item):
                return item.get('event') == event and item.get('team') == team
        elif event:
            def predicate(item):
                return item.get('event') == event
        else:
            logger.warning("Schedule delete requested without an event filter; nothing deleted")
            return StoreResult(success=False, message="An event filter is required to delete schedule entries")

        matches = self.storage.scan_and_filter(self.table, predicate)
        if not matches.success:
            return matches
        if not matches.data:
            logger.info(f"No schedule entries matched event={event!r} team={team!r}")
            return StoreResult(success=False, data=[], message="No matching schedule entries")

        deleted = []
        failed = []
        for item in matches.data:
            result = self.storage.delete_item(item.get('uuid'), self.table, key_field=ScheduleEntry.Meta.partition_key)
            if result.success:
                deleted.append(ScheduleEntryView.project(item))
            else:
                failed.append(item.get('uuid'))

        if failed:
            logger.error(f"Failed to delete {len(failed)} of {len(matches.data)} schedule entries: {failed}")
            return StoreResult(
                success=False,
                data=deleted,
                message=f"{len(failed)} of {len(matches.data)} schedule entries could not be deleted"
            )

        logger.info(f"Deleted {len(deleted)} schedule entries for event={event!r} team={team!r}")
        return StoreResult(success=True, data=deleted)
