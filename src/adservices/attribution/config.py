"""Attribution client configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AttributionSettings(BaseSettings):
    """Attribution settings loaded from ``ADSERVICES_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ADSERVICES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Retry policy for transient statuses (404, 500)
    max_retries: int = Field(default=3, ge=0)
    retry_delay_seconds: float = Field(default=5.0, ge=0)

    # AdServices API
    endpoint_url: str = "https://api-adservices.apple.com/api/v1/"
    timeout: float = Field(default=60.0, gt=0)
