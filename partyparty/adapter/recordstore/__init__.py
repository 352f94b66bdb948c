"""Record store adapter."""

from .client import (
    HttpRecordStoreClient,
    InMemoryRecordStoreClient,
    Record,
    RecordOperation,
    RecordStoreClient,
)

__all__ = [
    "HttpRecordStoreClient",
    "InMemoryRecordStoreClient",
    "Record",
    "RecordOperation",
    "RecordStoreClient",
]
