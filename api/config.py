"""
API Configuration

Centralized settings for the collector service.
API metadata is hardcoded, while environment-specific settings load from .env file.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


# Get the project root directory (one level up from api/)
PROJECT_ROOT = Path(__file__).parent.parent


class Settings(BaseSettings):
    """
    Application settings for the transaction collector

    MongoDB is optional: without `mongodb_uri` records are kept in memory.
    """

    # ============================================================================
    # API Metadata (hardcoded - versioned with code)
    # ============================================================================

    api_title: str = "Cardano dApp Backend"
    api_description: str = (
        "Collects the hashes of transactions sent from the Cardano dApp. "
        "Stores them in MongoDB when configured, otherwise in memory."
    )
    api_version: str = "1.0.0"
    API_PREFIX: str = "/api"

    # ============================================================================
    # Environment Settings (loaded from .env)
    # ============================================================================

    port: int = 4000
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # MongoDB (optional)
    mongodb_uri: str = ""
    mongodb_database: str = "cardano_dapp"
    mongodb_timeout_ms: int = 5000

    # Transaction records
    default_network: str = "preprod"
    history_limit: int = 20

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"), env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @property
    def mongo_configured(self) -> bool:
        return bool(self.mongodb_uri.strip())


# ============================================================================
# Global settings instance
# ============================================================================

settings = Settings()
