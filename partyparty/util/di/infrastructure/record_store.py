"""Record store infrastructure providers."""

from dishka import Scope, provide

from partyparty.adapter.recordstore import HttpRecordStoreClient, RecordStoreClient
from partyparty.config import RecordStoreSettings
from partyparty.util.di.base import ProviderBase


class RecordStoreProvider(ProviderBase):
    """Record store component base."""

    __mock_component__ = "record_store"


class ProdRecordStoreProvider(RecordStoreProvider):
    """Production record store provider speaking HTTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_record_store_client(self, settings: RecordStoreSettings) -> RecordStoreClient:
        """Provide record store client."""
        return HttpRecordStoreClient(
            base_url=settings.base_url,
            timeout_seconds=settings.timeout_seconds,
        )
