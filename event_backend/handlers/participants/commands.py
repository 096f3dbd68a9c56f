"""
Participant Write API

Registration and removal of participants. Registration is an upsert on the
email key: registering the same email twice replaces the first record,
including its password.
"""

import logging
from typing import Optional

from ...config import EventStoreConfig
from ...core import StorageAdapter, StoreResult
from ...models import Participant, ParticipantRegistration
from ...utils import generate_password

logger = logging.getLogger(__name__)


class ParticipantWriteApi:
    """Write-only API for the participant table."""

    def __init__(self, config: EventStoreConfig, storage: Optional[StorageAdapter] = None):
        """Initialize write API with configuration."""
        self.config = config
        self.storage = storage or StorageAdapter(config)
        self.table = config.participant_table

    def register(self, registration: ParticipantRegistration) -> StoreResult:
        """
        Register a participant with a freshly generated password.

        ``checked_in`` is always False on registration, whatever the caller sent.

        Args:
            registration: Client-supplied participant fields

        Returns:
            StoreResult whose data is the stored record, password included
        """
        participant = Participant(
            **registration.model_dump(),
            password=generate_password(),
            checked_in=False,
        )
        item = participant.model_dump(exclude_none=True)

        result = self.storage.add_item(item, self.table, key_field=Participant.Meta.partition_key)
        if not result.success:
            return result

        logger.info(f"Registered participant {participant.email}")
        return StoreResult(success=True, data=item)

    def delete_by_email(self, email: str) -> StoreResult:
        """
        Delete the participant whose key is exactly ``email``.

        No case folding is applied. A missing participant is still a success.
        """
        return self.storage.delete_item(email, self.table, key_field=Participant.Meta.partition_key)
