"""Tests for the console and file run log."""
from __future__ import annotations

import io
from pathlib import Path

import pytest


class TestTeeStream:
    """Tests for TeeStream."""

    def test_writes_to_all_streams(self) -> None:
        """Each write reaches every stream."""
        from rpak_manifest.runlog import TeeStream

        first, second = io.StringIO(), io.StringIO()
        tee = TeeStream(first, second)

        assert tee.write("hello\n") == 6
        tee.flush()

        assert first.getvalue() == "hello\n"
        assert second.getvalue() == "hello\n"


class TestLevelNumber:
    """Tests for level_number."""

    def test_known_levels(self) -> None:
        """Level names map to logging constants."""
        import logging

        from rpak_manifest.runlog import level_number

        assert level_number("debug") == logging.DEBUG
        assert level_number("WARNING") == logging.WARNING

    def test_unknown_level_defaults_to_info(self) -> None:
        """Unrecognized names fall back to INFO."""
        import logging

        from rpak_manifest.runlog import level_number

        assert level_number("chatty") == logging.INFO


class TestOpenRunLog:
    """Tests for open_run_log."""

    def test_console_and_file_receive_same_lines(self, tmp_path: Path) -> None:
        """Every line is duplicated to the console and the log file."""
        from rpak_manifest.runlog import open_run_log

        console = io.StringIO()
        log_path = tmp_path / "log.txt"

        with open_run_log(log_path, console=console) as log:
            log.info("asset_processed", path="texture/a.dds")

        file_text = log_path.read_text(encoding="utf-8")
        assert file_text == console.getvalue()
        lines = file_text.splitlines()
        assert "manifest_compiler_starting" in lines[0]
        assert "asset_processed" in lines[1]
        assert "texture/a.dds" in lines[1]
        assert "run_finished" in lines[-1]

    def test_log_file_truncated(self, tmp_path: Path) -> None:
        """A previous run's log is replaced."""
        from rpak_manifest.runlog import open_run_log

        log_path = tmp_path / "log.txt"
        log_path.write_text("previous run\n")

        with open_run_log(log_path, console=io.StringIO()):
            pass

        assert "previous run" not in log_path.read_text(encoding="utf-8")

    def test_level_filter(self) -> None:
        """Events below the minimum level are dropped."""
        from rpak_manifest.runlog import open_run_log

        console = io.StringIO()

        with open_run_log(console=console, level="WARNING") as log:
            log.info("quiet_event")
            log.warning("loud_event")

        text = console.getvalue()
        assert "quiet_event" not in text
        assert "loud_event" in text

    def test_closes_on_exception(self, tmp_path: Path) -> None:
        """The log is finished and closed when the body raises."""
        from rpak_manifest.runlog import open_run_log

        log_path = tmp_path / "log.txt"

        with pytest.raises(RuntimeError), open_run_log(log_path, console=io.StringIO()):
            raise RuntimeError("boom")

        assert "run_finished" in log_path.read_text(encoding="utf-8")

    def test_console_only(self) -> None:
        """Without a log path only the console is written."""
        from rpak_manifest.runlog import open_run_log

        console = io.StringIO()

        with open_run_log(console=console) as log:
            log.info("hello")

        assert "hello" in console.getvalue()
