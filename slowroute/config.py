# slowroute/config.py
from typing import Literal
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # App
    APP_ENV: Literal["dev", "prod", "staging"] = "dev"

    # Bind address (loopback only by default)
    HOST: str = "127.0.0.1"
    PORT: int = 3000

    # Deadline shared by every request
    REQUEST_TIMEOUT_MS: int = Field(300, gt=0)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

settings = Settings()
