from typing import Any, Dict, Optional


class EventStoreError(Exception):
    """Raised by the table gateway when a DynamoDB call fails.

    The storage adapter catches it, logs ``str(error)`` and returns a failed
    StoreResult, so the string form carries everything worth logging: the
    message plus any table/key details the subclass recorded in ``context``.
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        self.message = message
        self.original_error = original_error
        self.context = context or {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = " ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{self.message} [{details}]"
