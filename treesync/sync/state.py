# treesync Run State
# Per-run hash cache and traversal bookkeeping

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from treesync.utils.hashing import file_hash


class HashCache:
    """
    Content digests memoized for the lifetime of one run.

    A digest is computed the first time a path is asked for and reused
    afterwards, even if the file changes later in the same run. Failed
    reads are cached as None.
    """

    def __init__(self) -> None:
        self._digests: dict[Path, Optional[str]] = {}

    def digest(self, path: Path) -> Optional[str]:
        """Return the content digest for path, hashing it on first use."""
        if path not in self._digests:
            self._digests[path] = file_hash(path)
        return self._digests[path]

    def compare(self, first: Path, second: Path) -> bool:
        """
        Check whether two files hold identical content.

        Returns False when either file is missing or cannot be read;
        an unreadable file never equals anything.
        """
        if not first.exists() or not second.exists():
            return False

        first_digest = self.digest(first)
        second_digest = self.digest(second)
        if first_digest is None or second_digest is None:
            return False
        return first_digest == second_digest

    def __contains__(self, path: object) -> bool:
        return path in self._digests

    def __len__(self) -> int:
        return len(self._digests)

    def clear(self) -> None:
        self._digests.clear()


@dataclass
class CurrentFile:
    """Progress record for the file being reconciled."""

    path: Path
    other_path: Path
    location: str
    counter: int


@dataclass
class RunState:
    """Mutable bookkeeping scoped to a single sync run."""

    hashes: HashCache = field(default_factory=HashCache)
    created: set[Path] = field(default_factory=set)
    counter: int = 0
    current: Optional[CurrentFile] = None

    def visit(self, path: Path, other_path: Path, location: str) -> CurrentFile:
        """Advance the visit counter and record the file being processed."""
        self.counter += 1
        self.current = CurrentFile(path, other_path, location, self.counter)
        return self.current

    def reset(self) -> None:
        self.hashes.clear()
        self.created.clear()
        self.counter = 0
        self.current = None
