"""Deterministic ordering of material entries.

Materials that belong to a render pass are packed ahead of the others, in
pass order, so the packer resolves pass dependencies before the materials
that reference them.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rpak_manifest.manifest.model import ManifestEntry

DEFAULT_PRIORITY_TAGS: tuple[str, ...] = (
    "_shadow_",
    "_prepass_",
    "_vsm_",
    "_tightshadow_",
    "_colpass_",
)


def priority_index(path: str, tags: Sequence[str] = DEFAULT_PRIORITY_TAGS) -> int:
    """Index of the first tag (in list order) found in `path`.

    Returns:
        The tag index, or ``len(tags)`` when no tag appears.

    Example:
        >>> priority_index("material/wpn_prepass_rifle.rpak")
        1
    """
    folded = path.casefold()
    for index, tag in enumerate(tags):
        if tag.casefold() in folded:
            return index
    return len(tags)


def path_sort_key(path: str, tags: Sequence[str] = DEFAULT_PRIORITY_TAGS) -> tuple[int, str, str]:
    """Priority index, then ordinal case-insensitive path, then the path itself.

    Paths are compared upper-cased so ``_`` sorts after letters
    (``riflescope`` before ``rifle_sknp``), matching the packer's ordinal
    case-insensitive comparison.
    """
    return (priority_index(path, tags), path.upper(), path)


def material_sort_key(
    entry: ManifestEntry,
    tags: Sequence[str] = DEFAULT_PRIORITY_TAGS,
) -> tuple[int, str, str]:
    return path_sort_key(entry.output_path, tags)


def sort_material_entries(
    entries: list[ManifestEntry],
    tags: Sequence[str] = DEFAULT_PRIORITY_TAGS,
) -> None:
    """Sort material entries in place by priority tag, then path (case-insensitive)."""
    entries.sort(key=lambda entry: material_sort_key(entry, tags))


def sort_paths(paths: Sequence[str], tags: Sequence[str] = DEFAULT_PRIORITY_TAGS) -> list[str]:
    """Return `paths` in material order."""
    return sorted(paths, key=lambda p: path_sort_key(p, tags))
