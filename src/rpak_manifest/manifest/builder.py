"""Manifest builder for assembling the packer's build manifest."""
from __future__ import annotations

from typing import TYPE_CHECKING

from rpak_manifest.manifest.model import (
    DEFAULT_COMPRESS_LEVEL,
    DEFAULT_COMPRESS_WORKERS,
    DEFAULT_PAK_NAME,
    ManifestDocument,
)
from rpak_manifest.manifest.rules import DEFAULT_GROUP_ORDER
from rpak_manifest.manifest.sorting import DEFAULT_PRIORITY_TAGS, sort_material_entries

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rpak_manifest.manifest.model import EntryGroups


class ManifestBuilder:
    """Builder for RePak build manifests.

    Example:
        >>> builder = ManifestBuilder(name="mymod")
        >>> document = builder.build(scanner.scan())
    """

    def __init__(
        self,
        *,
        name: str = DEFAULT_PAK_NAME,
        compress_level: int = DEFAULT_COMPRESS_LEVEL,
        compress_workers: int = DEFAULT_COMPRESS_WORKERS,
        group_order: Sequence[str] = DEFAULT_GROUP_ORDER,
        priority_tags: Sequence[str] = DEFAULT_PRIORITY_TAGS,
        sorted_groups: Sequence[str] = ("matl",),
    ) -> None:
        """Initialize the manifest builder.

        Args:
            name: Pak name; also names the stream files.
            compress_level: Compression level passed to the packer.
            compress_workers: Compression worker count passed to the packer.
            group_order: Groups to include, in output order.
            priority_tags: Render-pass tags ordering the sorted groups.
            sorted_groups: Groups reordered by priority tag before assembly.
        """
        self.name = name
        self.compress_level = compress_level
        self.compress_workers = compress_workers
        self.group_order = tuple(group_order)
        self.priority_tags = tuple(priority_tags)
        self.sorted_groups = tuple(sorted_groups)

    def build(self, groups: EntryGroups) -> ManifestDocument:
        """Build a manifest from collected entry groups.

        The sorted groups are reordered in place; the other groups keep
        their traversal order.

        Args:
            groups: Entries collected by the scanner.

        Returns:
            Complete ManifestDocument ready for serialization.
        """
        for group in self.sorted_groups:
            sort_material_entries(groups.get(group), self.priority_tags)

        return ManifestDocument.for_pak(
            self.name,
            groups.ordered(self.group_order),
            compress_level=self.compress_level,
            compress_workers=self.compress_workers,
        )
