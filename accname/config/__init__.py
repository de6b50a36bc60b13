"""Configuration management for accname."""
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env relative to the project root (where this package lives)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Logging
    log_level: str = Field(default="INFO", alias="ACCNAME_LOG_LEVEL")
    log_dir: Optional[Path] = Field(default=None, alias="ACCNAME_LOG_DIR")

    # Recursion guard
    max_tree_depth: int = Field(default=256, ge=1, alias="ACCNAME_MAX_TREE_DEPTH")
    max_reference_depth: int = Field(default=8, ge=1, alias="ACCNAME_MAX_REFERENCE_DEPTH")

    # Extractor
    include_hidden: bool = Field(default=False, alias="ACCNAME_INCLUDE_HIDDEN")


def load_config() -> Settings:
    """Load and return configuration."""
    return Settings()
