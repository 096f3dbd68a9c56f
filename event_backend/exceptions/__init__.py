# Base exception class
from .base import EventStoreError

from .domain_exceptions import (
    ValidationError,
    ItemNotFoundError,
    ConflictError,
    ConnectionError,
    RetryableError,
)

__all__ = [
    "EventStoreError",

    # Domain exceptions (alphabetically ordered)
    "ConflictError",
    "ConnectionError",
    "ItemNotFoundError",
    "RetryableError",
    "ValidationError",
]
