"""Configuration management for the Nad Balance Service.

Uses Pydantic Settings for type-safe configuration with .env file support.
All sensitive values are loaded from environment variables. The settings
object is handed to ``create_app`` explicitly; request handlers read it from
``app.state`` and never look at the environment themselves.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# 1 Million Nads collection on Monad testnet
NADS_CONTRACT_ADDRESS = "0x922da3512e2bebbe32bcce59adf7e6759fb8cea2"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: str = "development"
    log_level: str = "INFO"
    log_format: str = "text"

    # Service Configuration
    port: int = 8000

    # Inbound protection (compared against the X-API-Key header)
    protection_api_key: str = ""

    # thirdweb Insight
    thirdweb_client_id: str = ""
    insight_base_url: str = "https://insight.thirdweb.com/v1"
    chain_id: str = "10143"
    page_limit: int = 100
    max_empty_responses: int = 2
    upstream_timeout_seconds: float = 30.0

    # Ownership detection
    nads_contract_address: str = NADS_CONTRACT_ADDRESS

    @field_validator("insight_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("text", "json"):
            raise ValueError("log_format must be 'text' or 'json'")
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"


settings = Settings()
