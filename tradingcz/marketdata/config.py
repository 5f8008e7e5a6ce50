"""Process-wide service hosts.

Values are read from the environment (``APCA_API_DATA_URL``) or a local
``.env`` file.
"""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="APCA_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_url: str = Field(
        default="https://data.alpaca.markets",
        description="Market data host, used by endpoints without a base URL override.",
    )


settings = Settings()
