"""Asset discovery from an exported asset tree.

Walks the export root depth-first and feeds every file through the
classifier, collecting entries into one EntryGroups aggregator.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

from rpak_manifest.manifest.classifier import AssetClassifier
from rpak_manifest.manifest.model import EntryGroups

if TYPE_CHECKING:
    from collections.abc import Iterator

    from rpak_manifest.skiplist import SkipSet

logger = structlog.get_logger()


def _name_key(name: str) -> tuple[str, str]:
    return (name.upper(), name)


class AssetScanner:
    """Discovers exported assets under a root directory.

    Example:
        >>> scanner = AssetScanner(root_path=Path("exports/mymod"))
        >>> groups = scanner.scan()
        >>> print(f"Found {len(groups)} assets")
    """

    def __init__(
        self,
        root_path: Path,
        *,
        classifier: AssetClassifier | None = None,
        skip_set: SkipSet | None = None,
        log: Any = None,
    ) -> None:
        """Initialize the scanner.

        Args:
            root_path: Root directory to scan.
            classifier: Classifier to apply (built from `skip_set` if omitted).
            skip_set: Already packaged assets, used when building a classifier.
            log: Bound logger for diagnostics (module logger by default).
        """
        self.root_path = root_path
        self.log = log or logger
        self.classifier = classifier or AssetClassifier(
            root_path,
            skip_set=skip_set,
            log=self.log,
        )

    def scan(self, groups: EntryGroups | None = None) -> EntryGroups:
        """Classify every file under the root.

        Args:
            groups: Aggregator to append to (a fresh one by default).

        Returns:
            Entries collected per group, in traversal order.
        """
        groups = groups if groups is not None else EntryGroups()

        if not self.root_path.is_dir():
            self.log.warning("directory_not_found", path=str(self.root_path))
            return groups

        self.log.info("scanning_assets", root=str(self.root_path))
        file_count = 0
        for file_path in self._walk_files():
            file_count += 1
            classified = self.classifier.classify(file_path)
            if classified is not None:
                groups.add(classified.group, classified.entry)

        self.log.info("scan_complete", file_count=file_count, entry_count=len(groups))
        return groups

    def _walk_files(self) -> Iterator[Path]:
        """Yield files depth-first, each folder's files before its subfolders.

        Names are visited in case-insensitive order (ties broken by the exact
        name) so repeated scans of an unchanged tree produce the same sequence.
        """
        for dirpath, dirnames, filenames in os.walk(
            self.root_path,
            topdown=True,
            onerror=self._on_walk_error,
        ):
            dirnames.sort(key=_name_key)
            for filename in sorted(filenames, key=_name_key):
                yield Path(dirpath) / filename

    def _on_walk_error(self, error: OSError) -> None:
        self.log.warning(
            "directory_unreadable",
            path=str(error.filename),
            error=error.strerror or str(error),
        )
