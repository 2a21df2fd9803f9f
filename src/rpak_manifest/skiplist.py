"""Skip list of assets already packaged elsewhere.

The skip list is a flat text file with one identifier per line. An
identifier can be a bare filename (``rifle.dds``), a filename without its
extension (``rifle``) or a root-relative path (``mdl/weapons/rifle.rmdl``).
Matching is case-insensitive and separator-agnostic.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import structlog

from rpak_manifest.paths import to_posix

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

logger = structlog.get_logger()


def _normalize_key(value: str) -> str:
    return to_posix(value.strip()).casefold()


@dataclass(frozen=True, slots=True)
class SkipSet:
    """Immutable set of already packaged asset identifiers.

    Example:
        >>> skip = SkipSet.from_lines(["Rifle.dds", "", "  pistol  "])
        >>> skip.contains(["rifle.DDS"])
        True
    """

    keys: frozenset[str] = frozenset()

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> SkipSet:
        """Build a skip set from raw lines, ignoring blanks."""
        return cls(frozenset(_normalize_key(line) for line in lines if line.strip()))

    @classmethod
    def load(cls, path: Path) -> SkipSet:
        """Load a skip set from `path`.

        Args:
            path: Newline-delimited skip list file.

        Returns:
            SkipSet instance (empty if the file doesn't exist)
        """
        if not path.exists():
            return cls()

        with path.open(encoding="utf-8", errors="replace") as f:
            return cls.from_lines(f)

    def match(self, candidates: Iterable[str]) -> str | None:
        """Return the first candidate form found in the set, if any."""
        for candidate in candidates:
            if candidate and _normalize_key(candidate) in self.keys:
                return candidate
        return None

    def contains(self, candidates: Iterable[str]) -> bool:
        """Check whether any candidate form of an asset is in the set."""
        return self.match(candidates) is not None

    def __contains__(self, candidate: object) -> bool:
        return isinstance(candidate, str) and self.contains([candidate])

    def __len__(self) -> int:
        return len(self.keys)


def load_skip_set(path: Path, log: Any = None) -> SkipSet:
    """Load the skip list, degrading to an empty set when unavailable.

    Args:
        path: Skip list location.
        log: Bound logger receiving the notices (module logger by default).

    Returns:
        The loaded SkipSet, or an empty one when the file is missing or
        unreadable.
    """
    log = log or logger
    if not path.is_file():
        log.info("skip_list_not_found", path=str(path))
        return SkipSet()

    try:
        skip_set = SkipSet.load(path)
    except OSError as e:
        log.warning("skip_list_unreadable", path=str(path), error=str(e))
        return SkipSet()

    log.info("skip_list_loaded", path=str(path), entries=len(skip_set))
    return skip_set
