"""Firebase Auth adapter."""

from .client import FirebaseIdentityClient, MockIdentityProviderClient

__all__ = ["FirebaseIdentityClient", "MockIdentityProviderClient"]
