"""Record store client implementations.

The record store is a remote collection-oriented REST service. Records are
JSON objects carrying an opaque string ``id`` assigned by the store.
"""

import copy
import uuid
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, NamedTuple

import httpx
import logfire

from partyparty.adapter.error import RecordStoreAuthorizationError, RecordStoreError
from partyparty.domain.value import Collection

Record = dict[str, Any]


class RecordStoreClient(ABC):
    """Create/read/update/delete against the named record store collections.

    Every call requires the bearer credential of the signed-in user.
    """

    @abstractmethod
    async def find(
        self,
        collection: Collection,
        filters: Mapping[str, str] | None,
        credential: str | None,
    ) -> list[Record]:
        """Find records whose fields equal every filter value.

        Args:
            collection: Collection to query
            filters: Field equality filters, None or empty for all records
            credential: Bearer credential

        Returns:
            Matching records, possibly empty

        Raises:
            RecordStoreAuthorizationError: If the credential is missing or rejected
            RecordStoreError: If the request fails
        """
        pass

    @abstractmethod
    async def get(
        self, collection: Collection, record_id: str, credential: str | None
    ) -> Record | None:
        """Get a record by id, None if it does not exist."""
        pass

    @abstractmethod
    async def create(
        self, collection: Collection, fields: Mapping[str, Any], credential: str | None
    ) -> Record:
        """Create a record; the store assigns its id.

        Returns:
            The created record including its id
        """
        pass

    @abstractmethod
    async def update(
        self,
        collection: Collection,
        record_id: str,
        fields: Mapping[str, Any],
        credential: str | None,
    ) -> Record:
        """Replace a record with the given fields.

        Returns:
            The record as stored
        """
        pass

    @abstractmethod
    async def delete(
        self, collection: Collection, record_id: str, credential: str | None
    ) -> None:
        """Delete a record by id.

        Deleting a record that no longer exists is not an error.
        """
        pass


def _require_credential(credential: str | None) -> str:
    if not credential:
        raise RecordStoreAuthorizationError("Missing bearer credential")
    return credential


class HttpRecordStoreClient(RecordStoreClient):
    """Record store client speaking the store's REST interface over httpx."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize HTTP record store client.

        Args:
            base_url: Store base URL, collections live at {base_url}/{collection}
            timeout_seconds: Per-request timeout
            transport: Optional httpx transport (used to stub the store in tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout_seconds,
            transport=self._transport,
        )

    async def _request(
        self,
        method: str,
        path: str,
        credential: str | None,
        *,
        params: Mapping[str, str] | None = None,
        json: Mapping[str, Any] | None = None,
        allow_not_found: bool = False,
    ) -> Any:
        """Send one request and decode its JSON body.

        Returns:
            Decoded body, None for an empty body or an allowed 404

        Raises:
            RecordStoreAuthorizationError: On a missing credential, 401 or 403
            RecordStoreError: On transport errors and other non-2xx responses
        """
        token = _require_credential(credential)
        headers = {"Authorization": f"Bearer {token}"}

        try:
            async with self._client() as client:
                response = await client.request(
                    method,
                    path,
                    params=dict(params) if params else None,
                    json=dict(json) if json is not None else None,
                    headers=headers,
                )
        except httpx.HTTPError as e:
            logfire.error(
                "Record store HTTP error", method=method, path=path, error=str(e)
            )
            raise RecordStoreError(f"HTTP error during {method} {path}: {e}")

        if response.status_code in (401, 403):
            logfire.warn(
                "Record store rejected credential",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            raise RecordStoreAuthorizationError(
                f"{method} {path} not authorized", status_code=response.status_code
            )

        if response.status_code == 404 and allow_not_found:
            return None

        if response.is_error:
            logfire.error(
                "Record store request failed",
                method=method,
                path=path,
                status_code=response.status_code,
                error=response.text,
            )
            raise RecordStoreError(
                f"{method} {path} failed: {response.status_code}",
                status_code=response.status_code,
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise RecordStoreError(f"Invalid JSON from {method} {path}: {e}")

    async def find(
        self,
        collection: Collection,
        filters: Mapping[str, str] | None,
        credential: str | None,
    ) -> list[Record]:
        body = await self._request(
            "GET", f"/{collection.value}", credential, params=filters
        )
        # The store answers a filtered query with a list or a single object
        if body is None:
            return []
        if isinstance(body, dict):
            return [body]
        return list(body)

    async def get(
        self, collection: Collection, record_id: str, credential: str | None
    ) -> Record | None:
        return await self._request(
            "GET",
            f"/{collection.value}/{record_id}",
            credential,
            allow_not_found=True,
        )

    async def create(
        self, collection: Collection, fields: Mapping[str, Any], credential: str | None
    ) -> Record:
        body = await self._request("POST", f"/{collection.value}", credential, json=fields)
        if not isinstance(body, dict) or "id" not in body:
            raise RecordStoreError(
                f"Store did not return the created {collection.value} record"
            )
        return body

    async def update(
        self,
        collection: Collection,
        record_id: str,
        fields: Mapping[str, Any],
        credential: str | None,
    ) -> Record:
        payload = {**fields, "id": record_id}
        body = await self._request(
            "PUT", f"/{collection.value}/{record_id}", credential, json=payload
        )
        if isinstance(body, dict):
            return body
        return payload

    async def delete(
        self, collection: Collection, record_id: str, credential: str | None
    ) -> None:
        await self._request(
            "DELETE",
            f"/{collection.value}/{record_id}",
            credential,
            allow_not_found=True,
        )


class RecordOperation(NamedTuple):
    """One write applied to the in-memory store."""

    operation: str
    collection: Collection
    record_id: str


class _InjectedFailure(NamedTuple):
    operation: str
    collection: Collection
    record_id: str | None
    fields: Mapping[str, Any] | None


class InMemoryRecordStoreClient(RecordStoreClient):
    """Record store held in process memory.

    Used by tests and local development. Writes are recorded in
    ``operations``; failures can be injected per operation.
    """

    def __init__(self) -> None:
        self.records: dict[Collection, dict[str, Record]] = {c: {} for c in Collection}
        self.operations: list[RecordOperation] = []
        self._failures: list[_InjectedFailure] = []

    def seed(self, collection: Collection, *records: Mapping[str, Any]) -> list[Record]:
        """Insert records directly, without journaling them.

        Records without an id get a generated one.
        """
        seeded = []
        for fields in records:
            record = copy.deepcopy(dict(fields))
            record.setdefault("id", uuid.uuid4().hex)
            self.records[collection][record["id"]] = record
            seeded.append(copy.deepcopy(record))
        return seeded

    def inject_failure(
        self,
        operation: str,
        collection: Collection,
        record_id: str | None = None,
        fields: Mapping[str, Any] | None = None,
    ) -> None:
        """Make matching writes fail with RecordStoreError until cleared.

        Args:
            operation: "create", "update" or "delete"
            collection: Collection the write targets
            record_id: Only fail writes to this record
            fields: Only fail writes whose fields include these values
        """
        self._failures.append(_InjectedFailure(operation, collection, record_id, fields))

    def clear_failures(self) -> None:
        self._failures.clear()

    def writes(self, operation: str | None = None) -> list[RecordOperation]:
        """Journaled writes, optionally of one kind."""
        return [
            op for op in self.operations if operation is None or op.operation == operation
        ]

    def _check_failure(
        self,
        operation: str,
        collection: Collection,
        record_id: str | None,
        fields: Mapping[str, Any] | None,
    ) -> None:
        for failure in self._failures:
            if failure.operation != operation or failure.collection != collection:
                continue
            if failure.record_id is not None and failure.record_id != record_id:
                continue
            if failure.fields is not None and (
                fields is None
                or any(fields.get(k) != v for k, v in failure.fields.items())
            ):
                continue
            raise RecordStoreError(
                f"Injected failure for {operation} {collection.value}", status_code=500
            )

    @staticmethod
    def _matches(record: Record, filters: Mapping[str, str] | None) -> bool:
        if not filters:
            return True
        return all(
            k in record and str(record[k]) == str(v) for k, v in filters.items()
        )

    async def find(
        self,
        collection: Collection,
        filters: Mapping[str, str] | None,
        credential: str | None,
    ) -> list[Record]:
        _require_credential(credential)
        return [
            copy.deepcopy(record)
            for record in self.records[collection].values()
            if self._matches(record, filters)
        ]

    async def get(
        self, collection: Collection, record_id: str, credential: str | None
    ) -> Record | None:
        _require_credential(credential)
        record = self.records[collection].get(record_id)
        return copy.deepcopy(record) if record is not None else None

    async def create(
        self, collection: Collection, fields: Mapping[str, Any], credential: str | None
    ) -> Record:
        _require_credential(credential)
        self._check_failure("create", collection, None, fields)

        record = copy.deepcopy(dict(fields))
        record["id"] = uuid.uuid4().hex
        self.records[collection][record["id"]] = record
        self.operations.append(RecordOperation("create", collection, record["id"]))
        return copy.deepcopy(record)

    async def update(
        self,
        collection: Collection,
        record_id: str,
        fields: Mapping[str, Any],
        credential: str | None,
    ) -> Record:
        _require_credential(credential)
        self._check_failure("update", collection, record_id, fields)
        if record_id not in self.records[collection]:
            raise RecordStoreError(
                f"PUT /{collection.value}/{record_id} failed: 404", status_code=404
            )

        record = {**copy.deepcopy(dict(fields)), "id": record_id}
        self.records[collection][record_id] = record
        self.operations.append(RecordOperation("update", collection, record_id))
        return copy.deepcopy(record)

    async def delete(
        self, collection: Collection, record_id: str, credential: str | None
    ) -> None:
        _require_credential(credential)
        self._check_failure("delete", collection, record_id, None)
        if self.records[collection].pop(record_id, None) is None:
            return
        self.operations.append(RecordOperation("delete", collection, record_id))
