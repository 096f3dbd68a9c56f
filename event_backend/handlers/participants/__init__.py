"""
Participant APIs

Read API:
- Full listing and lookup by (lower-cased) email

Write API:
- Registration with a server-generated password
- Deletion by email
"""

from .queries import ParticipantReadApi
from .commands import ParticipantWriteApi

__all__ = [
    "ParticipantReadApi",
    "ParticipantWriteApi",
]
