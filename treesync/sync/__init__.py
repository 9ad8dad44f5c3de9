# treesync Sync Module
# Core synchronization engine and components

from treesync.sync.actions import (
    DirectoryAction,
    DirectoryFacts,
    FileAction,
    FileFacts,
    decide_directory,
    decide_file,
)
from treesync.sync.engine import Syncer, SyncResult, TreeWalker
from treesync.sync.events import EventKind, EventRecorder, SyncEvent, format_event, format_log_line
from treesync.sync.ignore import IgnoreMatcher
from treesync.sync.reconciler import DirectoryReconciler, FileReconciler
from treesync.sync.session import Location, PathPair, SyncSession
from treesync.sync.state import HashCache, RunState

__all__ = [
    # Session
    "SyncSession",
    "Location",
    "PathPair",
    # State
    "RunState",
    "HashCache",
    # Ignore
    "IgnoreMatcher",
    # Actions
    "FileAction",
    "DirectoryAction",
    "FileFacts",
    "DirectoryFacts",
    "decide_file",
    "decide_directory",
    # Reconcilers
    "FileReconciler",
    "DirectoryReconciler",
    # Events
    "EventKind",
    "SyncEvent",
    "EventRecorder",
    "format_event",
    "format_log_line",
    # Engine
    "Syncer",
    "SyncResult",
    "TreeWalker",
]
