"""Minimal reader for list sections of RSON companion files.

Companion ``.rson`` files sit next to rigs and models and list the animation
rigs and sequences they depend on::

    rigs:
    [
        animrig/humans/pilots/pilot_light.rrig
    ]
    seqs:
    [
        animseq/humans/pilots/idle.rseq,
        animseq/humans/pilots/run.rseq
    ]

Only this narrow shape is understood: one item per line, no quoting, no
nesting, no multi-line values.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from rpak_manifest.paths import to_posix

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

COMPANION_EXTENSION = ".rson"


def _clean_item(text: str) -> str:
    item = text.strip()
    item = item.removeprefix("[")
    return item.rstrip(", ]").strip()


def extract_section(lines: Iterable[str], key: str) -> list[str]:
    """Extract the items of the ``<key>:`` list section.

    Scanning stops at the first line that is exactly ``]`` once inside the
    section, so only the first section named `key` is read. A header that
    opens its bracket inline (``seqs: [a, b]``) contributes those items and
    closes the section when the bracket closes on the same line. Only the
    inline header is split on commas; a body line is always one item, so
    ``[a, b]`` on its own line yields ``"a, b"``.

    Args:
        lines: Lines of the companion file.
        key: Section name, e.g. ``"seqs"`` or ``"rigs"`` (case-insensitive).

    Returns:
        Items in file order with separators normalized; empty when the
        section is absent or has no items.

    Example:
        >>> extract_section(["seqs:", "[", "a,", "b", "]"], "seqs")
        ['a', 'b']
    """
    header = f"{key.casefold()}:"
    items: list[str] = []
    in_section = False

    for line in lines:
        stripped = line.strip()

        if not in_section:
            if not stripped.casefold().startswith(header):
                continue
            in_section = True

            rest = stripped[len(header):].strip()
            if rest.startswith("["):
                body = rest[1:].rstrip()
                for part in body.split(","):
                    item = _clean_item(part)
                    if item:
                        items.append(to_posix(item))
                if body.rstrip(", ").endswith("]"):
                    break
            continue

        if stripped == "]":
            break
        if stripped.casefold().startswith(header):
            continue

        item = _clean_item(stripped)
        if item:
            items.append(to_posix(item))

    return items


def companion_path(asset_path: Path, extension: str = COMPANION_EXTENSION) -> Path:
    """Sibling file sharing the asset's stem with the companion extension."""
    return asset_path.with_suffix(extension)


def read_companion(path: Path) -> list[str] | None:
    """Read a companion file's lines, or None when it does not exist."""
    if not path.is_file():
        return None
    return path.read_text(encoding="utf-8", errors="replace").splitlines()
