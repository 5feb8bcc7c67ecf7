from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class Settings(BaseSettings):
    site_url: str = "/"
    output_dir: Path = Path("./output")
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="CARDKIT_",
        env_file_encoding="utf-8",
    )

    @field_validator("site_url")
    @classmethod
    def site_url_must_be_absolute(cls, v: str) -> str:
        if not (v.startswith("/") or v.startswith("http://") or v.startswith("https://")):
            raise ValueError("site_url must start with '/' or 'http(s)://'")
        return v

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.upper()
        if level not in _LEVELS:
            raise ValueError(f"unknown log_level '{v}'")
        return level
