"""Application configuration using Pydantic Settings."""

from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings, configurable via environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Paths
    data_dir: Path = Path("data")
    wordnet_dir: Path | None = Field(
        default=None,
        validation_alias=AliasChoices("wordnet_dir", "WNSEARCHDIR", "WORDNET"),
    )

    # Logging
    log_level: LogLevel = "INFO"
    log_file_enabled: bool = False
    log_file_path: Path | None = None
    log_file_max_bytes: int = 10 * 1024 * 1024  # 10 MB
    log_file_backup_count: int = 5

    # Engine
    preload_data: bool = False  # read data files into memory instead of mmap
    completion_limit: int = Field(default=100, ge=1)
    definition_depth: int = Field(default=1, ge=0)

    # Editor features, checked by callers before invoking the lookup service
    enable_hover: bool = True
    enable_completion: bool = True
    enable_goto_definition: bool = True
    enable_code_actions: bool = True

    @field_validator("wordnet_dir", mode="after")
    @classmethod
    def expand_home(cls, value: Path | None) -> Path | None:
        return value.expanduser() if value is not None else None

    @property
    def resolved_log_file_path(self) -> Path:
        """Return log file path, defaulting to data_dir/lexdb.log if not set."""
        return self.log_file_path or self.data_dir / "lexdb.log"


settings = Settings()
