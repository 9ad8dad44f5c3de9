# Tests for treesync.utils.hashing
# Content hashing for change detection

import hashlib
from pathlib import Path
from unittest.mock import patch

from treesync.utils.hashing import file_hash


class TestFileHash:
    """Tests for file_hash."""

    def test_existing_file(self, temp_dir: Path):
        f = temp_dir / "test.txt"
        f.write_text("hello", encoding="utf-8")
        assert file_hash(f) == hashlib.sha256(b"hello").hexdigest()

    def test_large_file_streamed(self, temp_dir: Path):
        data = b"x" * 200_000
        f = temp_dir / "big.bin"
        f.write_bytes(data)
        assert file_hash(f, chunk_size=4096) == hashlib.sha256(data).hexdigest()

    def test_nonexistent_file(self, temp_dir: Path):
        assert file_hash(temp_dir / "missing.txt") is None

    def test_directory_returns_none(self, temp_dir: Path):
        assert file_hash(temp_dir) is None

    def test_read_error_returns_none(self, temp_dir: Path):
        f = temp_dir / "locked.txt"
        f.write_text("data", encoding="utf-8")
        with patch("builtins.open", side_effect=PermissionError("locked")):
            assert file_hash(f) is None
