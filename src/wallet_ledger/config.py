from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    # Snapshot settings
    snapshot_encoding: str = "utf-8"
    snapshot_duplicate_policy: Literal["append", "reject"] = "append"


settings = Settings()
