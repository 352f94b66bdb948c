"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RecordStoreSettings(BaseModel):
    """Remote record store configuration."""

    # Base URL of the record store (collections live at {base_url}/{collection})
    base_url: str = "http://localhost:5008"

    # Per-request timeout; retries and backoff are not handled here
    timeout_seconds: float = 30.0


class IdentitySettings(BaseModel):
    """Identity provider (Firebase Auth) configuration."""

    # Web API key used for Identity Toolkit REST calls
    api_key: str = "CHANGE_ME_IN_PRODUCTION"

    # Identity Toolkit base URL
    base_url: str = "https://identitytoolkit.googleapis.com"

    # Auth emulator host, used instead of base_url when use_emulator is set
    emulator_url: str = "http://localhost:9099/identitytoolkit.googleapis.com"
    use_emulator: bool = False

    timeout_seconds: float = 10.0

    @computed_field
    @property
    def endpoint(self) -> str:
        """Resolved Identity Toolkit v1 endpoint."""
        base = self.emulator_url if self.use_emulator else self.base_url
        return f"{base.rstrip('/')}/v1"


class InvitationSettings(BaseModel):
    """Invitation message configuration."""

    # Trailing line of the default invitation message sent to guests
    app_link_text: str = "Click HERE to download the PartyParty guest app for free!"


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class APISettings(BaseModel):
    """API configuration."""

    host: str
    port: int
    protocol: Literal["http", "https"]

    @computed_field
    @property
    def base_url(self) -> str:
        """Construct base URL from host.

        In development: http://localhost:8000
        In production: https://{host}
        """
        if self.host == "localhost":
            return f"{self.protocol}://{self.host}:{self.port}"
        else:
            return f"{self.protocol}://{self.host}"


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested values:

    Development (default):
        HOST=localhost
        PORT=8000
        ENVIRONMENT=development
        RECORD_STORE__BASE_URL=http://localhost:5008
        IDENTITY__USE_EMULATOR=true

    Production:
        HOST=api.partyparty.app
        ENVIRONMENT=production
        RECORD_STORE__BASE_URL=https://store.partyparty.app
        IDENTITY__API_KEY=...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows RECORD_STORE__BASE_URL syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Git commit SHA (loaded from version.txt file or defaults to "unknown")
    git_sha: str = "unknown"

    host: str = "localhost"
    port: int = 8000

    # Nested settings
    record_store: RecordStoreSettings = RecordStoreSettings()
    identity: IdentitySettings = IdentitySettings()
    api: APISettings = APISettings(
        host="localhost", port=8000, protocol="http"
    )  # Overwritten in validator
    invitations: InvitationSettings = InvitationSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def initialize_api_settings(self) -> "Settings":
        """Initialize API settings from host and environment."""
        protocol: Literal["http", "https"] = (
            "http" if self.environment in ("test", "development") else "https"
        )

        self.api = APISettings(host=self.host, port=self.port, protocol=protocol)
        self.git_sha = self._load_git_sha()

        return self

    @staticmethod
    def _load_git_sha() -> str:
        """Load git SHA from version file.

        Returns:
            Git SHA if version file exists, otherwise "unknown"
        """
        version_file = Path("/app/version.txt")
        if version_file.exists():
            try:
                return version_file.read_text().strip()
            except OSError:
                return "unknown"
        return "unknown"
