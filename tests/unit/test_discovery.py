"""Tests for asset tree discovery."""
from __future__ import annotations

from pathlib import Path

import pytest
from structlog.testing import capture_logs


def _touch(root: Path, relative: str, text: str = "") -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


class TestAssetScanner:
    """Tests for AssetScanner."""

    def test_scan_empty_directory(self, tmp_path: Path) -> None:
        """Scanning an empty tree yields no entries."""
        from rpak_manifest.manifest.discovery import AssetScanner

        groups = AssetScanner(root_path=tmp_path).scan()

        assert len(groups) == 0

    def test_scan_missing_root(self, tmp_path: Path) -> None:
        """A missing root is logged and yields no entries."""
        from rpak_manifest.manifest.discovery import AssetScanner

        with capture_logs() as logs:
            groups = AssetScanner(root_path=tmp_path / "missing").scan()

        assert len(groups) == 0
        assert logs[0]["event"] == "directory_not_found"

    def test_scan_groups_by_kind(self, tmp_path: Path) -> None:
        """Entries land in their kind's group."""
        from rpak_manifest.manifest.discovery import AssetScanner

        _touch(tmp_path, "texture/a.dds")
        _touch(tmp_path, "material/a.json")
        _touch(tmp_path, "dtbl/datatable/a.csv")
        _touch(tmp_path, "mdl/a.rmdl")
        _touch(tmp_path, "notes.txt")

        groups = AssetScanner(root_path=tmp_path).scan()

        counts = {name: count for name, count in groups.counts().items() if count}
        assert counts == {"txtr": 1, "matl": 1, "dtbl": 1, "mdl_": 1}

    def test_files_before_subdirectories(self, tmp_path: Path) -> None:
        """Each folder's files are visited before its subfolders, depth-first."""
        from rpak_manifest.manifest.discovery import AssetScanner

        _touch(tmp_path, "b.dds")
        _touch(tmp_path, "a.dds")
        _touch(tmp_path, "sub/c.dds")
        _touch(tmp_path, "sub/deeper/e.dds")
        _touch(tmp_path, "sub/z.dds")
        _touch(tmp_path, "other/d.dds")

        groups = AssetScanner(root_path=tmp_path).scan()

        guids = [entry.guid for entry in groups.get("txtr")]
        assert guids == ["a", "b", "d", "c", "z", "e"]

    def test_names_visited_case_insensitively(self, tmp_path: Path) -> None:
        """Upper-case names do not jump ahead of lower-case ones."""
        from rpak_manifest.manifest.discovery import AssetScanner

        _touch(tmp_path, "B.dds")
        _touch(tmp_path, "a.dds")
        _touch(tmp_path, "Sub/d.dds")
        _touch(tmp_path, "other/c.dds")

        groups = AssetScanner(root_path=tmp_path).scan()

        assert [entry.guid for entry in groups.get("txtr")] == ["a", "B", "c", "d"]

    def test_skip_set_applied(self, tmp_path: Path) -> None:
        """Skip-listed files produce no entries."""
        from rpak_manifest.manifest.discovery import AssetScanner
        from rpak_manifest.skiplist import SkipSet

        _touch(tmp_path, "texture/a.dds")
        _touch(tmp_path, "texture/b.dds")

        groups = AssetScanner(
            root_path=tmp_path,
            skip_set=SkipSet.from_lines(["A.DDS"]),
        ).scan()

        assert [entry.guid for entry in groups.get("txtr")] == ["b"]

    def test_bad_file_does_not_abort_scan(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """A failure on one file is logged and the walk continues."""
        from rpak_manifest.manifest.classifier import AssetClassifier
        from rpak_manifest.manifest.discovery import AssetScanner

        _touch(tmp_path, "a.dds")
        _touch(tmp_path, "broken.dds")
        _touch(tmp_path, "c.dds")

        original = AssetClassifier._classify

        def _flaky(self: AssetClassifier, file_path: Path) -> object:
            if file_path.name == "broken.dds":
                raise OSError("disk on fire")
            return original(self, file_path)

        monkeypatch.setattr(AssetClassifier, "_classify", _flaky)

        with capture_logs() as logs:
            groups = AssetScanner(root_path=tmp_path).scan()

        assert [entry.guid for entry in groups.get("txtr")] == ["a", "c"]
        failures = [e for e in logs if e["event"] == "asset_processing_failed"]
        assert len(failures) == 1
        assert failures[0]["path"].endswith("broken.dds")

    def test_scan_appends_to_given_groups(self, tmp_path: Path) -> None:
        """An existing aggregator is extended in place."""
        from rpak_manifest.manifest.discovery import AssetScanner
        from rpak_manifest.manifest.model import EntryGroups, ManifestEntry

        _touch(tmp_path, "a.dds")
        groups = EntryGroups()
        groups.add("txtr", ManifestEntry("txtr", "texture/pre.rpak", guid="pre"))

        result = AssetScanner(root_path=tmp_path).scan(groups)

        assert result is groups
        assert [entry.guid for entry in groups.get("txtr")] == ["pre", "a"]

    def test_uses_given_logger(self, tmp_path: Path) -> None:
        """Diagnostics go to the logger passed in."""
        from rpak_manifest.manifest.discovery import AssetScanner

        events: list[str] = []

        class _Recorder:
            def _record(self, event: str, **_: object) -> None:
                events.append(event)

            info = warning = error = debug = _record

        _touch(tmp_path, "a.dds")

        AssetScanner(root_path=tmp_path, log=_Recorder()).scan()

        assert events == ["scanning_assets", "asset_processed", "scan_complete"]
