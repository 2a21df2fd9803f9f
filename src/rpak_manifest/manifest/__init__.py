"""Manifest generation module."""
from __future__ import annotations

from rpak_manifest.manifest.builder import ManifestBuilder
from rpak_manifest.manifest.classifier import AssetClassifier, ClassifiedAsset
from rpak_manifest.manifest.discovery import AssetScanner
from rpak_manifest.manifest.model import EntryGroups, ManifestDocument, ManifestEntry
from rpak_manifest.manifest.rules import (
    DEFAULT_GROUP_ORDER,
    DEFAULT_RULES,
    ClassificationRule,
    KindCode,
    RuleTable,
)
from rpak_manifest.manifest.serialization import (
    manifest_fingerprint,
    serialize_manifest,
    to_camel_case,
    write_manifest,
)
from rpak_manifest.manifest.sorting import DEFAULT_PRIORITY_TAGS, sort_material_entries

__all__ = [
    "DEFAULT_GROUP_ORDER",
    "DEFAULT_PRIORITY_TAGS",
    "DEFAULT_RULES",
    "AssetClassifier",
    "AssetScanner",
    "ClassificationRule",
    "ClassifiedAsset",
    "EntryGroups",
    "KindCode",
    "ManifestBuilder",
    "ManifestDocument",
    "ManifestEntry",
    "RuleTable",
    "manifest_fingerprint",
    "serialize_manifest",
    "sort_material_entries",
    "to_camel_case",
    "write_manifest",
]
