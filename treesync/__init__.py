"""treesync - Directory Tree Synchronization.

Reconciles a source and a destination directory tree according to a
configurable policy and reports every decision as an event.
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "Syncer",
    "SyncSession",
    "SyncResult",
    "SyncEvent",
    "EventKind",
    "IgnoreMatcher",
    "CopyMode",
    "OverwritePriority",
    "load_config",
]


def __getattr__(name: str):
    """Lazy import to avoid loading dependencies during setup."""
    if name in ("Syncer", "SyncSession", "SyncResult", "SyncEvent", "EventKind", "IgnoreMatcher"):
        from treesync import sync

        return getattr(sync, name)
    if name in ("CopyMode", "OverwritePriority", "load_config"):
        from treesync import config

        return getattr(config, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
