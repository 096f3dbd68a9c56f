"""
Domain-Specific Exceptions for the Event Backend

Every exception here extends EventStoreError. The table gateway raises them
after mapping botocore failures; the storage adapter catches them, logs them
and reports a failed result to the resource handlers.

Organized by category:
1. Data Validation Errors
2. Resource Not Found Errors
3. Conflict Errors
4. Infrastructure and Retry Errors
"""

from typing import Any, Dict, Optional

from .base import EventStoreError


# =============================================================================
# Data Validation Errors
# =============================================================================

class ValidationError(EventStoreError):
    """Raised when DynamoDB rejects an item or request as invalid.

    Used for:
    - Missing key attributes (e.g. a participant registered without an email)
    - Empty table names in configuration
    - Item size and collection limits
    """

    def __init__(self, message: str, errors: Optional[Dict[str, Any]] = None, original_error: Optional[Exception] = None):
        """Initialize validation error.

        Args:
            message: Human-readable error message
            errors: Dictionary of field-level validation errors
            original_error: The original exception that caused this error
        """
        self.errors = errors or {}
        context = {}
        if self.errors:
            context['validation_errors'] = self.errors
        super().__init__(message, original_error, context)


# =============================================================================
# Resource Not Found Errors
# =============================================================================

class ItemNotFoundError(EventStoreError):
    """Raised when a table (or a keyed resource inside it) does not exist.

    A missing record is never an error for the resource handlers; this is only
    raised for infrastructure-level misses such as an unprovisioned table.
    """

    def __init__(self, table_name: str, key: dict, original_error: Optional[Exception] = None):
        """Initialize item not found error.

        Args:
            table_name: Name of the DynamoDB table
            key: The key that was not found
            original_error: The original exception that caused this error
        """
        self.table_name = table_name
        self.key = key
        message = f"Resource not found in table '{table_name}' with key: {key}"
        context = {
            'table_name': table_name,
            'key': key
        }
        super().__init__(message, original_error, context)


# =============================================================================
# Conflict Errors
# =============================================================================

class ConflictError(EventStoreError):
    """Raised when DynamoDB rejects a write because of competing state.

    Used for:
    - ConditionalCheckFailedException
    - Transaction conflicts
    - Tables that are still being created
    """

    def __init__(self, message: str, resource_id: Optional[str] = None, original_error: Optional[Exception] = None):
        """Initialize conflict error.

        Args:
            message: Human-readable error message
            resource_id: Key value of the conflicting record
            original_error: The original exception that caused this error
        """
        self.resource_id = resource_id
        context = {}
        if resource_id:
            context['resource_id'] = resource_id
        super().__init__(message, original_error, context)


# =============================================================================
# Infrastructure and Retry Errors
# =============================================================================

class ConnectionError(EventStoreError):
    """Raised when DynamoDB cannot be reached or refuses the caller.

    Used for:
    - Network connectivity issues and unreachable endpoints
    - Missing or rejected credentials
    - Unknown error codes
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, original_error, context)


class RetryableError(EventStoreError):
    """Raised for throttling and transient service failures.

    The application never retries these itself; the only retries are the ones
    botocore performs according to ``EventStoreConfig.retries``.
    """

    def __init__(self, message: str, retry_after_seconds: Optional[int] = None, original_error: Optional[Exception] = None):
        """Initialize retryable error.

        Args:
            message: Human-readable error message
            retry_after_seconds: Suggested retry delay in seconds
            original_error: The original exception that caused this error
        """
        self.retry_after_seconds = retry_after_seconds
        context = {}
        if retry_after_seconds:
            context['retry_after_seconds'] = retry_after_seconds
        super().__init__(message, original_error, context)
