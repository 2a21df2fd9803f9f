"""Path helpers for manifest output paths.

All manifest paths are root-relative and use forward slashes regardless of
the host platform.
"""
from __future__ import annotations

import posixpath
from pathlib import Path, PurePath


class PathNotRelativeError(ValueError):
    """Raised when a path does not live under the scan root."""

    def __init__(self, path: str | PurePath, root: str | PurePath) -> None:
        self.path = str(path)
        self.root = str(root)
        super().__init__(f"{self.path} is not relative to root {self.root}")


def to_posix(path: str | PurePath) -> str:
    """Rewrite every path separator to a forward slash.

    Example:
        >>> to_posix("dtbl\\\\weapons\\\\rifle.csv")
        'dtbl/weapons/rifle.csv'
    """
    return str(path).replace("\\", "/")


def relative_path(path: str | PurePath, root: str | PurePath) -> str:
    """Return `path` relative to `root` in forward-slash form.

    Args:
        path: Absolute or root-relative file path.
        root: Scan root directory.

    Returns:
        Root-relative path using `/` separators.

    Raises:
        PathNotRelativeError: If `path` is outside `root`.
    """
    candidate = Path(to_posix(path))
    base = Path(to_posix(root))
    if not candidate.is_absolute() and base.is_absolute():
        # Already root-relative; reject attempts to climb out of the root.
        if ".." in candidate.parts:
            raise PathNotRelativeError(path, root)
        return candidate.as_posix()

    try:
        relative = candidate.relative_to(base)
    except ValueError:
        raise PathNotRelativeError(path, root) from None

    if not relative.parts:
        raise PathNotRelativeError(path, root)
    return relative.as_posix()


def replace_extension(path: str, extension: str) -> str:
    """Swap the trailing extension of `path` for `extension`.

    Paths without an extension get one appended. The target may be given
    with or without its leading dot.
    """
    if extension and not extension.startswith("."):
        extension = f".{extension}"
    stem, _ = posixpath.splitext(to_posix(path))
    return f"{stem}{extension}"


def strip_leading_segment(path: str, segment: str) -> str:
    """Drop the first segment of `path` when it equals `segment`.

    Exporters name some folders differently from the game runtime (``dtbl/``
    on export, ``datatable/`` at runtime); the export-side folder is removed.
    Comparison is case-insensitive.
    """
    head, sep, tail = to_posix(path).partition("/")
    if sep and tail and head.casefold() == segment.strip("/").casefold():
        return tail
    return to_posix(path)


def parent_folder_name(relative: str) -> str:
    """Name of the folder directly containing a root-relative file."""
    parent = posixpath.dirname(to_posix(relative))
    return posixpath.basename(parent)


def parent_directory(relative: str) -> str:
    """Root-relative directory of a root-relative file ('' at the root)."""
    return posixpath.dirname(to_posix(relative))
