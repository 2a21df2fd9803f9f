"""CLI module."""
from __future__ import annotations

from rpak_manifest.cli.config import ManifestConfig, get_config
from rpak_manifest.cli.main import app

__all__ = ["ManifestConfig", "app", "get_config"]
