# treesync Path Utilities
# Filesystem primitives used by the reconcilers

import os
import shutil
from pathlib import Path


def expand_path(path: str | Path) -> Path:
    """
    Expand ~ and environment variables in path.

    Args:
        path: Path string or Path object.

    Returns:
        Expanded, absolute Path object.
    """
    path_str = str(path)
    # Expand ~ first, then environment variables
    path_str = os.path.expanduser(path_str)
    path_str = os.path.expandvars(path_str)
    return Path(path_str).resolve()


def ensure_dir(path: Path) -> Path:
    """
    Ensure directory exists, creating if necessary.

    Args:
        path: Directory path.

    Returns:
        The path that was ensured.
    """
    path.mkdir(parents=True, exist_ok=True)
    return path


def same_root(first: Path, second: Path) -> bool:
    """Check whether two resolved roots name the same location, ignoring case."""
    return os.path.normcase(str(first)).lower() == os.path.normcase(str(second)).lower()


def swap_root(path: Path, this_root: Path, other_root: Path) -> Path:
    """
    Mirror a path from one root onto the other.

    Args:
        path: Path under this_root.
        this_root: Root the path was discovered under.
        other_root: Root to map it onto.

    Returns:
        The counterpart path under other_root.
    """
    return other_root / path.relative_to(this_root)


def is_readable(path: Path) -> bool:
    """Check that a file can be opened for reading (not denied or locked)."""
    if not os.access(path, os.R_OK):
        return False
    try:
        with open(path, "rb"):
            pass
    except OSError:
        return False
    return True


def copy_file(source: Path, dest: Path) -> None:
    """
    Copy file bytes and permission bits, creating parent directories.

    Raises:
        OSError: If the copy fails.
    """
    ensure_dir(dest.parent)
    shutil.copy(source, dest)


def delete_file(path: Path) -> None:
    """Remove a single file. Raises OSError on failure."""
    path.unlink()


def delete_tree(path: Path) -> None:
    """Remove a directory with all of its contents. Raises OSError on failure."""
    shutil.rmtree(path)


def copy_times(source: Path, dest: Path) -> None:
    """
    Give dest the modification time of source.

    The access time of dest is reset to zero. Birth time cannot be set
    portably, so it keeps whatever the filesystem assigned.

    Raises:
        OSError: If either path cannot be stat'ed or updated.
    """
    os.utime(dest, ns=(0, source.stat().st_mtime_ns))


def root_reachable(path: Path) -> bool:
    """Check that the drive or mount anchor of path exists."""
    return Path(path.anchor or ".").exists()
