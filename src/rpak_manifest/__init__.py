"""rpak-manifest.

Compiles an exported game asset tree into the JSON build manifest consumed
by RePak.

Example:
    >>> from pathlib import Path
    >>> from rpak_manifest import AssetScanner, ManifestBuilder, serialize_manifest
    >>>
    >>> groups = AssetScanner(root_path=Path("exports/mymod")).scan()
    >>> document = ManifestBuilder(name="mymod").build(groups)
    >>> print(serialize_manifest(document))
"""
from __future__ import annotations

__version__ = "0.1.0"

from rpak_manifest.manifest import (
    AssetClassifier,
    AssetScanner,
    EntryGroups,
    ManifestBuilder,
    ManifestDocument,
    ManifestEntry,
    serialize_manifest,
    write_manifest,
)
from rpak_manifest.paths import PathNotRelativeError
from rpak_manifest.rson import extract_section
from rpak_manifest.skiplist import SkipSet, load_skip_set

__all__ = [
    "AssetClassifier",
    "AssetScanner",
    "EntryGroups",
    "ManifestBuilder",
    "ManifestDocument",
    "ManifestEntry",
    "PathNotRelativeError",
    "SkipSet",
    "__version__",
    "extract_section",
    "load_skip_set",
    "serialize_manifest",
    "write_manifest",
]
