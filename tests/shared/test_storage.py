"""Tests for the upload storage adapters."""

import pytest
from shared.errors import StorageError
from shared.storage import InMemoryFileStorage, LocalFileStorage


class TestLocalFileStorage:
    def test_writes_file_and_returns_public_path(self, tmp_path):
        storage = LocalFileStorage(str(tmp_path / "uploads"))

        url = storage.save("gond.jpg", b"jpeg-bytes")

        assert url.startswith("/uploads/")
        assert url.endswith("-gond.jpg")
        stored = tmp_path / "uploads" / url.removeprefix("/uploads/")
        assert stored.read_bytes() == b"jpeg-bytes"

    def test_filename_prefix_is_a_millisecond_timestamp(self, tmp_path):
        url = LocalFileStorage(str(tmp_path)).save("dokra.png", b"x")
        prefix = url.removeprefix("/uploads/").split("-", 1)[0]
        assert prefix.isdigit()
        assert len(prefix) >= 13

    def test_directory_parts_of_the_name_are_dropped(self, tmp_path):
        url = LocalFileStorage(str(tmp_path)).save("../../etc/passwd", b"x")
        assert url.endswith("-passwd")
        assert "/.." not in url

    def test_unwritable_directory_raises_storage_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")

        with pytest.raises(StorageError):
            LocalFileStorage(str(blocker / "uploads")).save("gond.jpg", b"x")


class TestInMemoryFileStorage:
    def test_keeps_uploads_in_order(self):
        storage = InMemoryFileStorage()
        assert storage.save("a.jpg", b"1") == "/uploads/000001-a.jpg"
        assert storage.save("b.jpg", b"2") == "/uploads/000002-b.jpg"
        assert storage.files == {"000001-a.jpg": b"1", "000002-b.jpg": b"2"}

    def test_can_be_told_to_fail(self):
        storage = InMemoryFileStorage()
        storage.should_fail = True
        with pytest.raises(StorageError):
            storage.save("a.jpg", b"1")
        assert storage.files == {}
