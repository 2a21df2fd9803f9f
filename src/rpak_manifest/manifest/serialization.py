"""Manifest JSON serialization.

This module provides serialization that:
- Converts snake_case metadata field names to camelCase (the packer's convention)
- Keeps keys in construction order (the packer reads ``files`` last)
- Pretty-prints with two-space indentation
- Produces identical output for identical input (fingerprint-safe)
"""
from __future__ import annotations

import hashlib
import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from rpak_manifest.manifest.model import ManifestDocument

INDENT = 2


def to_camel_case(snake_str: str) -> str:
    """Convert snake_case string to camelCase.

    Args:
        snake_str: String in snake_case format.

    Returns:
        String in camelCase format.

    Example:
        >>> to_camel_case("keep_dev_only")
        'keepDevOnly'
    """
    if not snake_str:
        return snake_str
    components = snake_str.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


def serialize_manifest(document: ManifestDocument) -> str:
    """Serialize a manifest document to pretty-printed JSON text.

    Args:
        document: The assembled manifest.

    Returns:
        JSON text, keys in construction order.
    """
    return json.dumps(document.to_dict(), indent=INDENT, ensure_ascii=False)


def manifest_fingerprint(document: ManifestDocument) -> str:
    """Compute SHA-256 fingerprint of the serialized manifest.

    Returns:
        64-character hex string.
    """
    return hashlib.sha256(serialize_manifest(document).encode("utf-8")).hexdigest()


def write_manifest(document: ManifestDocument, path: Path) -> str:
    """Write the manifest to `path`, replacing any existing file.

    Returns:
        The fingerprint of the written text.
    """
    text = serialize_manifest(document)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(text)
    return hashlib.sha256(text.encode("utf-8")).hexdigest()
