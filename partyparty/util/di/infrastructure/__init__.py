"""Infrastructure providers."""

# Import bases
from .identity import IdentityProvider
from .persistence import PersistenceProvider
from .record_store import RecordStoreProvider

# Import implementations (needed for __subclasses__())
from .identity import ProdIdentityProvider  # noqa: F401
from .record_store import ProdRecordStoreProvider  # noqa: F401

__all__ = [
    "IdentityProvider",
    "PersistenceProvider",
    "ProdIdentityProvider",
    "ProdRecordStoreProvider",
    "RecordStoreProvider",
]
