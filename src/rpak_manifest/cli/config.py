"""CLI configuration using Pydantic settings.

Configuration is loaded from:
1. Environment variables (RPAK_* prefix)
2. .env file in current directory
3. Default values
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rpak_manifest.manifest.model import (
    DEFAULT_COMPRESS_LEVEL,
    DEFAULT_COMPRESS_WORKERS,
    DEFAULT_PAK_NAME,
)


class ManifestConfig(BaseSettings):
    """Configuration for the manifest compiler.

    Environment variables are prefixed with RPAK_.
    """

    model_config = SettingsConfigDict(
        env_prefix="RPAK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Well-known files, relative to the working directory
    skip_list_path: Path = Path("R5Reloaded_Asset_Database.db")
    output_path: Path = Path("output.json")
    log_path: Path = Path("log.txt")

    # Pak metadata
    pak_name: str = DEFAULT_PAK_NAME
    compress_level: int = DEFAULT_COMPRESS_LEVEL
    compress_workers: int = DEFAULT_COMPRESS_WORKERS

    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            msg = f"Invalid log level: {v}. Must be one of {valid_levels}"
            raise ValueError(msg)
        return upper

    @field_validator("compress_level")
    @classmethod
    def validate_compress_level(cls, v: int) -> int:
        """Zstandard levels run from 1 to 22."""
        if not 1 <= v <= 22:
            msg = f"Invalid compress level: {v}. Must be between 1 and 22"
            raise ValueError(msg)
        return v

    @field_validator("compress_workers")
    @classmethod
    def validate_compress_workers(cls, v: int) -> int:
        if v < 0:
            msg = f"Invalid compress worker count: {v}"
            raise ValueError(msg)
        return v

    @field_validator("pak_name")
    @classmethod
    def validate_pak_name(cls, v: str) -> str:
        name = v.strip()
        if not name or "/" in name or "\\" in name:
            msg = f"Invalid pak name: {v!r}"
            raise ValueError(msg)
        return name


@lru_cache
def get_config() -> ManifestConfig:
    """Get the global configuration.

    Configuration is cached after first load.

    Returns:
        ManifestConfig instance.
    """
    return ManifestConfig()


def clear_config_cache() -> None:
    """Clear the configuration cache (for testing)."""
    get_config.cache_clear()
