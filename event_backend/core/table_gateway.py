"""
Thin DynamoDB Table Gateway

This module provides a lightweight wrapper around boto3 DynamoDB table
operations. The gateway:

1. Creates the boto3 session, resource and Table handle lazily, per thread
2. Exposes only the primitives the event backend needs (put, delete, scan)
3. Maps botocore failures onto the domain exception hierarchy

It raises; it never reports success flags. Turning exceptions into results
is the job of the storage adapter built on top of it.
"""

import logging
import threading
from typing import Any, Dict, Iterator, List, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ..config import EventStoreConfig
from ..exceptions import (
    ConnectionError,
    ConflictError,
    ItemNotFoundError,
    ValidationError,
    RetryableError
)

logger = logging.getLogger(__name__)


def map_dynamodb_error(
    error: ClientError,
    operation: str,
    table_name: str,
    resource_id: Optional[str] = None
) -> Exception:
    """Map DynamoDB ClientError to domain-specific exceptions.

    Args:
        error: The boto3 ClientError
        operation: The operation that failed (e.g., "Scan", "PutItem")
        table_name: The DynamoDB table name
        resource_id: Optional key value for context

    Returns:
        Appropriate domain exception
    """
    error_code = error.response.get('Error', {}).get('Code', 'Unknown')
    error_message = error.response.get('Error', {}).get('Message', str(error))

    context = f"{operation} on {table_name}"
    if resource_id:
        context += f" (resource: {resource_id})"

    full_message = f"{context}: {error_message}"

    if error_code == 'ConditionalCheckFailedException':
        return ConflictError(f"Conditional check failed - {full_message}", resource_id, original_error=error)

    elif error_code == 'ResourceNotFoundException':
        return ItemNotFoundError(table_name, {'table_name': table_name}, original_error=error)

    elif error_code == 'ValidationException':
        return ValidationError(f"Validation failed - {full_message}", original_error=error)

    elif error_code == 'ItemCollectionSizeLimitExceededException':
        return ValidationError(f"Item collection size limit exceeded - {full_message}", original_error=error)

    elif error_code in ['TransactionConflictException', 'ResourceInUseException']:
        return ConflictError(f"Resource in use - {full_message}", resource_id, original_error=error)

    elif error_code in [
        'ProvisionedThroughputExceededException', 'RequestLimitExceeded',
        'ThrottlingException', 'TooManyRequestsException'
    ]:
        return RetryableError(f"Throttling - {full_message}", original_error=error)

    elif error_code in ['InternalServerError', 'ServiceUnavailable', 'ServiceUnavailableException']:
        return RetryableError(f"Service unavailable - {full_message}", original_error=error)

    elif error_code in [
        'UnrecognizedClientException', 'AccessDeniedException',
        'InvalidSignatureException', 'ExpiredTokenException'
    ]:
        return ConnectionError(f"Authentication/authorization failed - {full_message}", original_error=error)

    # Default to ConnectionError for unknown errors
    logger.warning(f"Unknown DynamoDB error code '{error_code}' mapped to ConnectionError")
    return ConnectionError(f"DynamoDB operation failed - {full_message}", original_error=error)


class TableGateway:
    """
    Thin gateway for a single DynamoDB table.

    Key principles:
    - One gateway per table, shared by every request thread
    - boto3 sessions and resources are not thread-safe, so each thread
      lazily builds its own and keeps it in thread-local storage
    - Every boto3 failure surfaces as an EventStoreError subclass
    - Put is an unconditional upsert; delete of a missing key is not an error
    """

    def __init__(self, config: EventStoreConfig, table_name: str):
        """Initialize table gateway.

        Args:
            config: Event store configuration
            table_name: Name of the DynamoDB table
        """
        self.config = config
        self.table_name = table_name
        self._local = threading.local()

    @property
    def dynamodb(self):
        """DynamoDB resource owned by the calling thread, created on first use."""
        resource = getattr(self._local, 'dynamodb', None)
        if resource is None:
            try:
                session = boto3.Session(
                    aws_access_key_id=self.config.aws_access_key_id,
                    aws_secret_access_key=self.config.aws_secret_access_key,
                    region_name=self.config.region_name
                )

                dynamodb_config = {
                    'region_name': self.config.region_name
                }

                if self.config.endpoint_url:
                    dynamodb_config['endpoint_url'] = self.config.endpoint_url

                boto_config = Config(
                    retries={'max_attempts': self.config.retries},
                    max_pool_connections=self.config.max_pool_connections,
                    read_timeout=self.config.timeout_seconds,
                    connect_timeout=self.config.timeout_seconds
                )
                dynamodb_config['config'] = boto_config

                resource = session.resource('dynamodb', **dynamodb_config)
            except Exception as e:
                logger.error(f"Failed to create DynamoDB resource: {e}")
                raise ConnectionError(f"Failed to connect to DynamoDB: {e}", e) from e
            self._local.dynamodb = resource
            logger.debug(f"Created DynamoDB resource for {self.table_name} in thread {threading.get_ident()}")
        return resource

    @property
    def table(self):
        """Table handle bound to the calling thread's resource."""
        table = getattr(self._local, 'table', None)
        if table is None:
            try:
                table = self.dynamodb.Table(self.table_name)
            except ConnectionError:
                raise
            except Exception as e:
                logger.error(f"Failed to access table '{self.table_name}': {e}")
                raise ConnectionError(f"Failed to access table '{self.table_name}': {e}", e) from e
            self._local.table = table
        return table

    def scan(self, **kwargs) -> Dict[str, Any]:
        """
        Execute a single DynamoDB Scan request.

        Args:
            **kwargs: All boto3 scan parameters

        Returns:
            Raw DynamoDB response
        """
        try:
            return self.table.scan(**kwargs)
        except ClientError as e:
            raise map_dynamodb_error(e, "Scan", self.table_name) from e
        except BotoCoreError as e:
            raise ConnectionError(f"Scan on {self.table_name} failed: {e}", e) from e

    def scan_all(self) -> Iterator[Dict[str, Any]]:
        """
        Yield every item in the table, following LastEvaluatedKey.

        Items come back in store order, which DynamoDB does not guarantee.
        """
        scan_kwargs: Dict[str, Any] = {}
        pages = 0
        while True:
            response = self.scan(**scan_kwargs)
            pages += 1
            yield from response.get('Items', [])

            last_key = response.get('LastEvaluatedKey')
            if not last_key:
                break
            scan_kwargs['ExclusiveStartKey'] = last_key

        logger.debug(f"Scanned {self.table_name} in {pages} page(s)")

    def put_item(self, item: Dict[str, Any], key_field: Optional[str] = None) -> None:
        """
        Put item into DynamoDB table, replacing any item with the same key.

        Args:
            item: Item to store
            key_field: Name of the key attribute, used for error context only
        """
        resource_id = item.get(key_field) if key_field else None
        try:
            self.table.put_item(Item=item)
            logger.info(f"Put item in {self.table_name}: {resource_id or '<no key>'}")
        except ClientError as e:
            raise map_dynamodb_error(e, "PutItem", self.table_name, resource_id) from e
        except BotoCoreError as e:
            raise ConnectionError(f"PutItem on {self.table_name} failed: {e}", e) from e

    def delete_item(self, key: Dict[str, Any]) -> Dict[str, Any]:
        """
        Delete item from DynamoDB table.

        Args:
            key: Primary key of item to delete

        Returns:
            Deleted attributes; always empty since ReturnValues is not requested
        """
        try:
            response = self.table.delete_item(Key=key)
            logger.info(f"Deleted item from {self.table_name}: {key}")
            return response.get('Attributes', {})
        except ClientError as e:
            resource_id = next(iter(key.values()), None)
            raise map_dynamodb_error(e, "DeleteItem", self.table_name, resource_id) from e
        except BotoCoreError as e:
            raise ConnectionError(f"DeleteItem on {self.table_name} failed: {e}", e) from e

    def create_table(self, key_field: str) -> None:
        """
        Create the table with a single string hash key and on-demand billing.

        Blocks until DynamoDB reports the table as existing.

        Args:
            key_field: Name of the hash key attribute
        """
        try:
            table = self.dynamodb.create_table(
                TableName=self.table_name,
                KeySchema=[{'AttributeName': key_field, 'KeyType': 'HASH'}],
                AttributeDefinitions=[{'AttributeName': key_field, 'AttributeType': 'S'}],
                BillingMode='PAY_PER_REQUEST'
            )
            table.wait_until_exists()
            self._local.table = table
            logger.info(f"Created table {self.table_name} keyed by {key_field}")
        except ClientError as e:
            raise map_dynamodb_error(e, "CreateTable", self.table_name) from e
        except BotoCoreError as e:
            raise ConnectionError(f"CreateTable {self.table_name} failed: {e}", e) from e


def create_table_gateway(config: EventStoreConfig, table_name: str) -> TableGateway:
    """
    Factory function to create a TableGateway instance.

    Args:
        config: Event store configuration
        table_name: Full DynamoDB table name

    Returns:
        Configured TableGateway instance
    """
    if not table_name:
        raise ValidationError("Table name is required to create a table gateway")
    return TableGateway(config, table_name)
