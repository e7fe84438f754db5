"""Test the paths module."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from utilkit.utils import ensure_dir, expand, relative_or_none, with_suffix_if_missing


def test_expand_resolves_home_and_env_vars(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("UTILKIT_TEST_DIR", str(tmp_path / "data"))

    assert expand("~/notes.txt") == (tmp_path / "notes.txt").resolve()
    assert expand("$UTILKIT_TEST_DIR/raw") == (tmp_path / "data" / "raw").resolve()


def test_ensure_dir_creates_nested_directories(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.DEBUG, logger="utilkit.utils.paths")
    target = tmp_path / "a" / "b"

    assert ensure_dir(target) == target
    assert target.is_dir()
    assert "Created directory" in caplog.text


def test_ensure_dir_accepts_existing_directory(tmp_path: Path) -> None:
    assert ensure_dir(tmp_path) == tmp_path


def test_ensure_dir_rejects_existing_file(tmp_path: Path) -> None:
    existing = tmp_path / "file.txt"
    existing.write_text("x")

    with pytest.raises(NotADirectoryError):
        ensure_dir(existing)


def test_with_suffix_if_missing() -> None:
    assert with_suffix_if_missing("report", ".csv") == Path("report.csv")
    assert with_suffix_if_missing("report.txt", ".csv") == Path("report.txt")


def test_relative_or_none() -> None:
    assert relative_or_none("/srv/app/data", "/srv/app") == Path("data")
    assert relative_or_none("/etc/hosts", "/srv/app") is None
