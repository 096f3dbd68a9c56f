"""
Event Backend Utilities

Small helpers shared by the storage adapter and the resource handlers:
- Server-assigned values (timestamps, identifiers, participant passwords)
- Conversion between JSON-friendly Python values and DynamoDB attribute values
"""

import logging
import secrets
import string
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

logger = logging.getLogger(__name__)

PASSWORD_ALPHABET = string.ascii_lowercase + string.digits
PASSWORD_LENGTH = 5


# =============================================================================
# Server-Assigned Values
# =============================================================================

def utc_timestamp() -> str:
    """Return the current UTC instant as an ISO-8601 string.

    The format is fixed (millisecond precision, ``Z`` suffix) so that
    lexicographic order of stored timestamps matches chronological order.

    Example:
        >>> utc_timestamp()
        '2024-03-09T17:42:05.123Z'
    """
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def new_identifier() -> str:
    """Return a random uuid4 string for announcement and schedule keys."""
    return str(uuid.uuid4())


def generate_password(length: int = PASSWORD_LENGTH) -> str:
    """Generate a participant password from lowercase letters and digits."""
    return ''.join(secrets.choice(PASSWORD_ALPHABET) for _ in range(length))


# =============================================================================
# DynamoDB Value Conversion
# =============================================================================

def to_dynamodb(obj: Any) -> Any:
    """Convert a JSON-style value into something boto3 can serialize.

    boto3 rejects Python floats, so they are stored as Decimal. Booleans are
    left alone (``checked_in`` must round-trip as a real boolean).
    """
    if isinstance(obj, dict):
        return {k: to_dynamodb(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [to_dynamodb(item) for item in obj]
    elif isinstance(obj, float):
        return Decimal(str(obj))
    return obj


def from_dynamodb(obj: Any) -> Any:
    """Convert a scanned DynamoDB item back into plain JSON-style values.

    Numbers come back from boto3 as Decimal; integral ones become int and the
    rest float.
    """
    if isinstance(obj, dict):
        return {k: from_dynamodb(v) for k, v in obj.items()}
    elif isinstance(obj, (list, set)):
        return [from_dynamodb(item) for item in obj]
    elif isinstance(obj, Decimal):
        if obj == obj.to_integral_value():
            return int(obj)
        return float(obj)
    return obj
