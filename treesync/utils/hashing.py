# treesync Hashing Utilities
# Content hashing for change detection

import hashlib
from pathlib import Path


def file_hash(path: Path, *, algorithm: str = "sha256", chunk_size: int = 65536) -> str | None:
    """
    Calculate hash of file content by streaming it in chunks.

    Args:
        path: Path to file.
        algorithm: Hash algorithm (default sha256).
        chunk_size: Chunk size for reading large files.

    Returns:
        Hex digest of hash, or None if the file is missing or cannot be read.
    """
    if not path.is_file():
        return None

    hasher = hashlib.new(algorithm)

    try:
        with open(path, "rb") as f:
            while chunk := f.read(chunk_size):
                hasher.update(chunk)
    except OSError:
        return None

    return hasher.hexdigest()
