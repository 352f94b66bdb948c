"""Shared plumbing for repositories backed by the record store."""

from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from pydantic import ValidationError as PydanticValidationError

from partyparty.adapter.error import AdapterError
from partyparty.adapter.recordstore import Record, RecordStoreClient
from partyparty.domain.error import SyncFailure
from partyparty.domain.value import Collection

T = TypeVar("T")


class RecordStoreRepository:
    """Base class translating record store errors into SyncFailure.

    Subclasses set ``collection`` and map records with the functions in
    ``partyparty.persistence.mappers``.
    """

    collection: Collection

    def __init__(self, client: RecordStoreClient) -> None:
        """Initialize repository with a record store client.

        Args:
            client: Record store client
        """
        self.client = client

    def _to_entity(
        self, mapper: Callable[[Record], T], record: Record, operation: str
    ) -> T:
        try:
            return mapper(record)
        except (
            KeyError,
            ValueError,
            TypeError,
            AttributeError,
            PydanticValidationError,
        ) as e:
            record_id = record.get("id") if isinstance(record, dict) else None
            raise SyncFailure(
                operation,
                self.collection.value,
                record_id,
                f"malformed record: {e}",
            ) from e

    async def _find(
        self, credential: str, filters: Mapping[str, str] | None = None
    ) -> list[Record]:
        try:
            records = await self.client.find(self.collection, filters, credential)
        except AdapterError as e:
            raise SyncFailure("find", self.collection.value, reason=str(e)) from e

        # Stores that ignore unknown query parameters return every record
        if filters:
            records = [
                r
                for r in records
                if all(str(r.get(k)) == v for k, v in filters.items())
            ]
        return records

    async def _get(self, credential: str, record_id: str) -> Record | None:
        try:
            return await self.client.get(self.collection, record_id, credential)
        except AdapterError as e:
            raise SyncFailure("get", self.collection.value, record_id, str(e)) from e

    async def _create(self, credential: str, fields: Mapping[str, Any]) -> Record:
        try:
            return await self.client.create(self.collection, fields, credential)
        except AdapterError as e:
            raise SyncFailure("create", self.collection.value, reason=str(e)) from e

    async def _update(
        self, credential: str, record_id: str, fields: Mapping[str, Any]
    ) -> Record:
        try:
            return await self.client.update(
                self.collection, record_id, fields, credential
            )
        except AdapterError as e:
            raise SyncFailure("update", self.collection.value, record_id, str(e)) from e

    async def _delete(self, credential: str, record_id: str) -> None:
        try:
            await self.client.delete(self.collection, record_id, credential)
        except AdapterError as e:
            raise SyncFailure("delete", self.collection.value, record_id, str(e)) from e
