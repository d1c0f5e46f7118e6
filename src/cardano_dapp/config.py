"""
Console Configuration

Settings for the dApp console, loaded from the environment and `.env`.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class DappSettings(BaseSettings):
    """Client-side settings"""

    backend_url: str = "http://localhost:4000"
    network: str = "preprod"

    # Local mnemonic wallet, injected under `injected_wallet` when both are set
    wallet_mnemonic: Optional[str] = None
    blockfrost_api_key: Optional[str] = None
    injected_wallet: str = "nami"

    confirm_delay_seconds: float = 8.0
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")
