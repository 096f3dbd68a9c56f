"""
Storage Adapter

Generic CRUD over named tables, shared by every resource handler. Each
operation returns a StoreResult instead of raising: store failures are logged
here and reported to the caller as ``success=False`` with no data.

Filtering by anything other than the key is done in memory after a full
table scan (see scan_and_filter). That is only reasonable while the tables
stay small.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from ..config import EventStoreConfig
from ..exceptions import EventStoreError
from ..utils import from_dynamodb, to_dynamodb
from .table_gateway import TableGateway, create_table_gateway

logger = logging.getLogger(__name__)

DEFAULT_KEY_FIELD = "uuid"

Record = Dict[str, Any]
Predicate = Callable[[Record], bool]


@dataclass
class StoreResult:
    """Outcome of a storage operation."""

    success: bool
    data: Any = None
    message: Optional[str] = None

    @classmethod
    def failed(cls, error: Exception) -> 'StoreResult':
        return cls(success=False, data=None, message=str(error))


class StorageAdapter:
    """
    Add, delete and scan records in any configured table.

    Gateways are created on first use and cached per table name. The adapter
    is shared across request threads; each gateway keeps one boto3 resource
    per thread.
    """

    def __init__(self, config: EventStoreConfig):
        self.config = config
        self._gateways: Dict[str, TableGateway] = {}
        self._lock = threading.Lock()

    def gateway(self, table: str) -> TableGateway:
        """Return the cached gateway for ``table``, creating it if needed."""
        with self._lock:
            if table not in self._gateways:
                self._gateways[table] = create_table_gateway(self.config, table)
            return self._gateways[table]

    def add_item(self, record: Record, table: str, key_field: Optional[str] = None) -> StoreResult:
        """
        Write ``record`` to ``table``, silently replacing any record with the same key.

        Args:
            record: Item to store; None values are dropped before writing
            table: Table name
            key_field: Key attribute name, used for log context only

        Returns:
            StoreResult with success flag only
        """
        item = {k: v for k, v in record.items() if v is not None}
        try:
            self.gateway(table).put_item(to_dynamodb(item), key_field=key_field)
            return StoreResult(success=True)
        except EventStoreError as e:
            logger.error(f"add_item failed on {table}: {e}")
            return StoreResult.failed(e)

    def delete_item(self, key_value: Any, table: str, key_field: str = DEFAULT_KEY_FIELD) -> StoreResult:
        """
        Delete the record whose ``key_field`` equals ``key_value``.

        Deleting a key that does not exist succeeds.

        Returns:
            StoreResult whose data is the (empty) attribute map DynamoDB returns
        """
        try:
            attributes = self.gateway(table).delete_item({key_field: key_value})
            return StoreResult(success=True, data=from_dynamodb(attributes))
        except EventStoreError as e:
            logger.error(f"delete_item failed on {table} ({key_field}={key_value}): {e}")
            return StoreResult.failed(e)

    def read_items(self, table: str) -> StoreResult:
        """
        Scan the whole table.

        Returns:
            StoreResult whose data is a list of records in store order,
            or None on failure
        """
        try:
            items = [from_dynamodb(item) for item in self.gateway(table).scan_all()]
            return StoreResult(success=True, data=items)
        except EventStoreError as e:
            logger.error(f"read_items failed on {table}: {e}")
            return StoreResult.failed(e)

    def scan_and_filter(self, table: str, predicate: Predicate) -> StoreResult:
        """
        Scan the whole table and keep the records matching ``predicate``.

        Scan order is preserved among the matches.
        """
        result = self.read_items(table)
        if not result.success:
            return result
        return StoreResult(success=True, data=[item for item in result.data if predicate(item)])
