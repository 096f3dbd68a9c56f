"""
Participant Read API

Both reads are full-table scans; lookup by email filters in memory.
"""

import logging
from typing import Optional

from ...config import EventStoreConfig
from ...core import StorageAdapter, StoreResult

logger = logging.getLogger(__name__)


class ParticipantReadApi:
    """Read-only API for the participant table."""

    def __init__(self, config: EventStoreConfig, storage: Optional[StorageAdapter] = None):
        """Initialize read API with configuration."""
        self.config = config
        self.storage = storage or StorageAdapter(config)
        self.table = config.participant_table

    def list_all(self) -> StoreResult:
        """Return every participant record verbatim, in scan order."""
        return self.storage.read_items(self.table)

    def get_by_email(self, email: str) -> StoreResult:
        """
        Find a participant by email.

        The requested email is lower-cased; stored emails are compared as
        stored, so a participant registered with capitals is never found.
        If several records match, the last one in scan order wins.

        Returns:
            StoreResult whose data is the matching record, or ``{}`` if none
        """
        wanted = email.lower()
        result = self.storage.scan_and_filter(self.table, lambda item: item.get('email') == wanted)
        if not result.success:
            return result

        match = result.data[-1] if result.data else {}
        if not match:
            logger.debug(f"No participant found for {wanted}")
        return StoreResult(success=True, data=match)
