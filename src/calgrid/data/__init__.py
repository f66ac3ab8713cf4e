"""Data access layer."""

from __future__ import annotations

from .client import EventStoreClient, EventStoreError, NotSignedInError
from .documents import DocumentStoreError, JsonDocumentStore

__all__ = [
    "DocumentStoreError",
    "EventStoreClient",
    "EventStoreError",
    "JsonDocumentStore",
    "NotSignedInError",
]
