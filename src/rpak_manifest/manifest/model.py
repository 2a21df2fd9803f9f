"""Manifest data model.

The manifest is consumed by RePak, so the wire form of an entry keeps the
packer's key names (``_type``, ``_path``, ``$guid``, ``$sequences``...).
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from rpak_manifest.manifest.rules import DEFAULT_GROUP_ORDER
from rpak_manifest.manifest.serialization import to_camel_case

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping, Sequence

MANIFEST_FORMAT_VERSION = 8
DEFAULT_PAK_NAME = "output"
DEFAULT_COMPRESS_LEVEL = 19
DEFAULT_COMPRESS_WORKERS = 16


@dataclass(frozen=True, slots=True)
class ManifestEntry:
    """One asset record in the manifest.

    Attributes:
        kind: Short kind code (``txtr``, ``matl``, ``mdl_``...).
        output_path: Packaged path, forward slashes.
        guid: Asset identity for kinds that carry one.
        sub_lists: Named lists from a companion file (``animrigs``,
            ``sequences``), only present when non-empty.
    """

    kind: str
    output_path: str
    guid: str | None = None
    sub_lists: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        if not self.kind:
            raise ValueError("manifest entry kind must not be empty")
        if not self.output_path:
            raise ValueError(f"manifest entry of kind {self.kind!r} has no output path")

        frozen: dict[str, tuple[str, ...]] = {}
        for name, items in self.sub_lists.items():
            values = tuple(items)
            if not values:
                msg = f"sub-list {name!r} of {self.output_path} is empty"
                raise ValueError(msg)
            if any(not item for item in values):
                msg = f"sub-list {name!r} of {self.output_path} contains an empty item"
                raise ValueError(msg)
            frozen[name] = values
        object.__setattr__(self, "sub_lists", MappingProxyType(frozen))

    def to_dict(self) -> dict[str, Any]:
        """Convert to the packer's wire format."""
        data: dict[str, Any] = {
            "_type": self.kind,
            "_path": self.output_path,
        }
        if self.guid is not None:
            data["$guid"] = self.guid
        for name, items in self.sub_lists.items():
            data[f"${name}"] = list(items)
        return data


@dataclass
class EntryGroups:
    """Per-group, append-only entry collections filled by the tree walk.

    Example:
        >>> groups = EntryGroups()
        >>> groups.add("txtr", ManifestEntry("txtr", "texture/rifle.rpak", guid="rifle"))
        >>> len(groups)
        1
    """

    groups: dict[str, list[ManifestEntry]] = field(
        default_factory=lambda: {name: [] for name in DEFAULT_GROUP_ORDER}
    )

    def add(self, group: str, entry: ManifestEntry) -> None:
        """Append `entry` to `group`, creating the group if needed."""
        self.groups.setdefault(group, []).append(entry)

    def get(self, group: str) -> list[ManifestEntry]:
        """Entries of `group` (empty list for unknown groups)."""
        return self.groups.get(group, [])

    def ordered(self, order: Sequence[str]) -> list[ManifestEntry]:
        """Concatenate the groups named in `order`, in that order."""
        result: list[ManifestEntry] = []
        for name in order:
            result.extend(self.groups.get(name, ()))
        return result

    def counts(self) -> dict[str, int]:
        """Number of entries per group."""
        return {name: len(entries) for name, entries in self.groups.items()}

    def __iter__(self) -> Iterator[ManifestEntry]:
        for entries in self.groups.values():
            yield from entries

    def __len__(self) -> int:
        return sum(len(entries) for entries in self.groups.values())


@dataclass(frozen=True)
class ManifestDocument:
    """Complete RePak build manifest.

    Field order is the serialized key order; ``files`` always comes last.
    """

    version: int = MANIFEST_FORMAT_VERSION
    keep_dev_only: bool = True
    name: str = DEFAULT_PAK_NAME
    stream_file_mandatory: str = f"paks/Win64/{DEFAULT_PAK_NAME}.starpak"
    stream_file_optional: str = f"paks/Win64/{DEFAULT_PAK_NAME}.opt.starpak"
    assets_dir: str = "./assets/"
    output_dir: str = "./build/"
    compress_level: int = DEFAULT_COMPRESS_LEVEL
    compress_workers: int = DEFAULT_COMPRESS_WORKERS
    files: tuple[ManifestEntry, ...] = ()

    @classmethod
    def for_pak(
        cls,
        name: str,
        files: Iterable[ManifestEntry],
        **metadata: Any,
    ) -> ManifestDocument:
        """Create a document whose stream file names follow the pak name."""
        return cls(
            name=name,
            stream_file_mandatory=f"paks/Win64/{name}.starpak",
            stream_file_optional=f"paks/Win64/{name}.opt.starpak",
            files=tuple(files),
            **metadata,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        data: dict[str, Any] = {}
        for f in fields(self):
            if f.name == "files":
                continue
            data[to_camel_case(f.name)] = getattr(self, f.name)
        data["files"] = [entry.to_dict() for entry in self.files]
        return data
