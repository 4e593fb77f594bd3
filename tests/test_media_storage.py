"""Test filename conventions and album directory helpers."""

import re
from datetime import datetime

from core.storage import media_storage
from core.storage.media_storage import (
    buildSaveFilename,
    createNewImageFile,
    formatTimestamp,
    getImageStorageDir,
)


MOMENT = datetime(2026, 1, 19, 15, 4, 5)


def test_timestamp_uses_twelve_hour_clock():
    """Timestamps follow yyyyMMdd-hh:mm:ss with a 12-hour hour field."""
    assert formatTimestamp(MOMENT) == "20260119-03:04:05"
    assert re.fullmatch(r"\d{8}-\d{2}:\d{2}:\d{2}", formatTimestamp())


def test_save_filename_is_namespaced_by_app():
    """Saved files are prefixed with the upper-cased application name."""
    assert buildSaveFilename("PxSort", MOMENT) == "PXSORT_20260119-03:04:05.png"


def test_storage_dir_created_once(tmp_path):
    """The album directory is created on first use and reused afterwards."""
    albumDir = getImageStorageDir(tmp_path, "PxSort")

    assert albumDir == tmp_path / "PxSort"
    assert albumDir.is_dir()
    assert getImageStorageDir(str(tmp_path), "PxSort") == albumDir


def test_storage_dir_requires_existing_root(tmp_path):
    """Only the album level is created; a missing root fails."""
    assert getImageStorageDir(tmp_path / "missing", "PxSort") is None


def test_storage_dir_rejects_file(tmp_path):
    """A regular file in place of the album is not a usable directory."""
    (tmp_path / "PxSort").write_bytes(b"")

    assert getImageStorageDir(tmp_path, "PxSort") is None


def test_new_image_files_are_unique(tmp_path, monkeypatch):
    """Allocated capture files are empty, distinct and correctly named."""
    monkeypatch.setattr(media_storage, "formatTimestamp", lambda moment=None: "20260119-03:04:05")

    first = createNewImageFile(tmp_path)
    second = createNewImageFile(tmp_path)

    assert first != second
    for path in (first, second):
        assert path.parent == tmp_path
        assert path.name.startswith("IMG_20260119-03:04:05")
        assert path.suffix == ".png"
        assert path.stat().st_size == 0


def test_new_image_file_without_directory(tmp_path):
    """No directory or an unusable directory yields None."""
    assert createNewImageFile(None) is None
    assert createNewImageFile(tmp_path / "missing") is None
