"""Application configuration via environment variables."""

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Shared secret from the platform's app settings (empty = not configured)
    webhook_secret: SecretStr = Field(
        SecretStr(""),
        validation_alias=AliasChoices("webhook_secret", "HOOKGATE_WEBHOOK_SECRET", "ZOOM_WEBHOOK_SECRET"),
    )

    # Downstream receiver (Apps Script web app URL)
    gas_url: str = Field(
        "",
        validation_alias=AliasChoices("gas_url", "HOOKGATE_GAS_URL", "GAS_URL"),
    )

    # Reject unsigned deliveries instead of passing them through
    require_signature: bool = False

    # Signature verification
    timestamp_tolerance_seconds: int = 300
    signature_header: str = "x-zm-signature"
    timestamp_header: str = "x-zm-request-timestamp"

    # Forwarding
    forward_timeout_seconds: float = 10.0
    forward_follow_redirects: bool = True

    # Server
    webhook_path: str = "/api/zoom"
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "info"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "HOOKGATE_",
        "extra": "ignore",
        "frozen": True,
    }

    @field_validator("webhook_secret", mode="before")
    @classmethod
    def _strip_secret(cls, value):
        if isinstance(value, SecretStr):
            value = value.get_secret_value()
        return SecretStr((value or "").strip())

    @field_validator("gas_url", mode="before")
    @classmethod
    def _strip_url(cls, value):
        return (value or "").strip()

    @property
    def secret_configured(self) -> bool:
        return bool(self.webhook_secret.get_secret_value())


settings = Settings()
