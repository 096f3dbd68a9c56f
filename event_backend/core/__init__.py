"""
Core infrastructure components for DynamoDB operations.

- TableGateway: Thin wrapper over boto3 DynamoDB table operations
- StorageAdapter: Generic add/delete/scan over named tables, returning StoreResult
"""

from .table_gateway import TableGateway, create_table_gateway, map_dynamodb_error
from .storage import DEFAULT_KEY_FIELD, StorageAdapter, StoreResult

__all__ = [
    "DEFAULT_KEY_FIELD",
    "StorageAdapter",
    "StoreResult",
    "TableGateway",
    "create_table_gateway",
    "map_dynamodb_error",
]
