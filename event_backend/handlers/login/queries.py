"""
Login check

Compares the submitted email and password against the participant table in
plaintext. Nothing is issued on success; every call is checked from scratch.
"""

import logging
from typing import Optional

from ...config import EventStoreConfig
from ...core import StorageAdapter, StoreResult

logger = logging.getLogger(__name__)


class LoginApi:
    """Credential check against registered participants."""

    def __init__(self, config: EventStoreConfig, storage: Optional[StorageAdapter] = None):
        self.config = config
        self.storage = storage or StorageAdapter(config)
        self.table = config.participant_table

    def verify(self, email: str, password: str) -> StoreResult:
        """
        Check whether any participant has exactly this email and password.

        Returns:
            StoreResult whose data is True or False
        """
        result = self.storage.scan_and_filter(
            self.table,
            lambda item: item.get('email') == email and item.get('password') == password,
        )
        if not result.success:
            return result

        matched = bool(result.data)
        logger.info(f"Login for {email}: {'accepted' if matched else 'rejected'}")
        return StoreResult(success=True, data=matched)
