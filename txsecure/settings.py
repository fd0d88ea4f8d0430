"""Settings and configuration."""
from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file if it exists
load_dotenv()


class Settings(BaseSettings):
    # Security
    # 32-byte hex string (64 hex chars). Example: openssl rand -hex 32
    MASTER_KEY_HEX: Optional[str] = None

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
