# treesync Sync Events
# Event taxonomy reported by the engine at every decision point

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional


class EventKind(str, Enum):
    """Kinds of events emitted during a sync run."""

    # Fatal
    ROOT_ERROR = "ROOT_ERROR"

    # Entry and subtree errors
    FILE_ERROR = "FILE_ERROR"
    FILE_ACCESS_ERROR = "FILE_ACCESS_ERROR"
    FILE_COPY_ERROR = "FILE_COPY_ERROR"
    DIRECTORY_READ_ERROR = "DIRECTORY_READ_ERROR"
    DELETED_ERROR = "DELETED_ERROR"

    # Mutations
    CREATED_DIRECTORY = "CREATED_DIRECTORY"
    DELETED_DIRECTORY = "DELETED_DIRECTORY"
    DELETED_FILE = "DELETED_FILE"
    COPIED = "COPIED"
    SYNC_DATE = "SYNC_DATE"
    OVERWRITTEN = "OVERWRITTEN"

    # Progress
    CURRENT_FILE = "CURRENT_FILE"

    @property
    def is_error(self) -> bool:
        """Check if this kind reports a failure."""
        return self in _ERROR_KINDS

    @property
    def is_change(self) -> bool:
        """Check if this kind reports a change to either tree."""
        return self in _CHANGE_KINDS


_ERROR_KINDS = frozenset(
    {
        EventKind.ROOT_ERROR,
        EventKind.FILE_ERROR,
        EventKind.FILE_ACCESS_ERROR,
        EventKind.FILE_COPY_ERROR,
        EventKind.DIRECTORY_READ_ERROR,
        EventKind.DELETED_ERROR,
    }
)

_CHANGE_KINDS = frozenset(
    {
        EventKind.CREATED_DIRECTORY,
        EventKind.DELETED_DIRECTORY,
        EventKind.DELETED_FILE,
        EventKind.COPIED,
        EventKind.SYNC_DATE,
        EventKind.OVERWRITTEN,
    }
)


@dataclass(frozen=True)
class SyncEvent:
    """
    A single notification from the engine.

    path is the entry the decision was made for; other_path is its
    counterpart (or the copy target) when one is relevant.
    """

    kind: EventKind
    path: Optional[Path] = None
    other_path: Optional[Path] = None
    location: Optional[str] = None
    counter: Optional[int] = None


EventSink = Callable[[SyncEvent], None]


def null_sink(event: SyncEvent) -> None:
    """Default sink, drops every event."""


class EventRecorder:
    """Sink that keeps every event in order, used for summaries and tests."""

    def __init__(self) -> None:
        self.events: list[SyncEvent] = []

    def __call__(self, event: SyncEvent) -> None:
        self.events.append(event)

    def of_kind(self, *kinds: EventKind) -> list[SyncEvent]:
        """Return the recorded events of the given kinds."""
        return [e for e in self.events if e.kind in kinds]

    def clear(self) -> None:
        self.events.clear()


_MESSAGES: dict[EventKind, str] = {
    EventKind.ROOT_ERROR: 'Error with root: "{path}"',
    EventKind.FILE_ERROR: 'Error file: "{path}" is corrupted or inaccessible',
    EventKind.FILE_ACCESS_ERROR: 'Error accessing file: "{path}" is inaccessible or locked',
    EventKind.FILE_COPY_ERROR: 'Error copying file: "{path}" to "{other}"',
    EventKind.DIRECTORY_READ_ERROR: 'Error reading directory: "{path}"',
    EventKind.CREATED_DIRECTORY: 'Created directory: "{path}"',
    EventKind.DELETED_DIRECTORY: 'Deleted directory: "{path}"',
    EventKind.DELETED_FILE: 'Deleted file: "{path}"',
    EventKind.DELETED_ERROR: 'Delete file error: "{path}"',
    EventKind.COPIED: 'Copied file: "{path}" to "{other}"',
    EventKind.SYNC_DATE: 'Synced date: "{other}" with "{path}"',
    EventKind.OVERWRITTEN: 'Overwritten file: "{other}" with "{path}"',
    EventKind.CURRENT_FILE: "[{counter}]: {path}",
}


def format_event(event: SyncEvent) -> str:
    """
    Render the human-readable message for an event.

    Root errors name whichever roots are involved (source, destination or
    both when they collide).
    """
    if event.kind == EventKind.ROOT_ERROR:
        roots = [str(p) for p in (event.path, event.other_path) if p is not None]
        return 'Error with root: "{}"'.format('", "'.join(roots))

    return _MESSAGES[event.kind].format(
        path=event.path,
        other=event.other_path,
        counter=event.counter,
    )


def format_log_line(event: SyncEvent, when: Optional[datetime] = None) -> str:
    """Format an event as a timestamped log file line."""
    when = when or datetime.now()
    return f"[{when.strftime('%Y-%m-%d %H:%M:%S')}] {format_event(event)}"
