# treesync Utilities Module
# Helper functions for path handling and content hashing

from treesync.utils.hashing import file_hash
from treesync.utils.paths import (
    copy_file,
    copy_times,
    delete_file,
    delete_tree,
    ensure_dir,
    expand_path,
    is_readable,
    root_reachable,
    same_root,
    swap_root,
)

__all__ = [
    # Paths
    "expand_path",
    "ensure_dir",
    "same_root",
    "root_reachable",
    "swap_root",
    "is_readable",
    "copy_file",
    "copy_times",
    "delete_file",
    "delete_tree",
    # Hashing
    "file_hash",
]
