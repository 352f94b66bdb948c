"""Mock providers for testing."""

from .identity import MockIdentityProvider
from .record_store import MockRecordStoreProvider
from .container import build_test_container

__all__ = [
    "MockIdentityProvider",
    "MockRecordStoreProvider",
    "build_test_container",
]
