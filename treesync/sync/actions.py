# treesync Sync Actions
# Ordered decision chains for files and directories

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from treesync.sync.session import Location, SyncSession


class FileAction(str, Enum):
    """Terminal decision for a single file."""

    # No action needed
    NONE = "none"

    # Entry problems
    MISSING = "missing"  # Vanished between listing and processing
    SKIP = "skip"  # Unreadable or locked

    # Deletes on this side
    DELETE = "delete"
    DELETE_IGNORED = "delete_ignored"

    # Writes to the other side
    COPY = "copy"
    OVERWRITE = "overwrite"
    SYNC_DATE = "sync_date"


class DirectoryAction(str, Enum):
    """Terminal decision for a directory, before its children are visited."""

    NONE = "none"
    MISSING = "missing"
    DELETE = "delete"
    CREATE = "create"
    DELETE_IGNORED = "delete_ignored"


@dataclass(frozen=True)
class FileFacts:
    """
    Snapshot of everything the file chain looks at, except content.

    time_diff and size_diff are counterpart minus this side and are only
    meaningful when both files exist.
    """

    exists: bool = True
    readable: bool = True
    other_exists: bool = False
    ignored: bool = False
    other_ignored: bool = False
    time_diff: Optional[int] = None
    size_diff: Optional[int] = None


@dataclass(frozen=True)
class DirectoryFacts:
    """Snapshot of what the directory chain looks at."""

    exists: bool = True
    other_exists: bool = False
    ignored: bool = False
    other_ignored: bool = False


def ignore_delete_applies(
    session: SyncSession,
    location: Location,
    ignored: bool,
    other_ignored: bool,
) -> bool:
    """
    Decide whether an entry goes because of the ignore rules.

    Two-way sync only drops a copy when this side is accepted but its
    counterpart is ignored. One-way sync drops the copy on the
    non-authoritative side whenever the counterpart is ignored, whether or
    not this side is ignored too.
    """
    if not (session.sync_delete and session.delete_ignored):
        return False

    if session.two_way:
        return not session.is_copy_side(location) and not ignored and other_ignored

    return not session.is_copy_side(location) and other_ignored


def decide_file(
    session: SyncSession,
    location: Location,
    facts: FileFacts,
    same_content: Callable[[], bool],
) -> FileAction:
    """
    Determine what to do with a file seen during traversal.

    The first applicable rule wins.

    Args:
        session: Sync policy.
        location: Side the current pass started from.
        facts: Existence, access, ignore and metadata facts.
        same_content: Called only when the decision depends on content.

    Returns:
        The terminal FileAction.
    """
    if not facts.exists:
        return FileAction.MISSING

    if not facts.readable:
        return FileAction.SKIP

    if (
        session.sync_delete
        and not facts.other_exists
        and not session.two_way
        and not session.is_copy_side(location)
    ):
        return FileAction.DELETE

    if ignore_delete_applies(session, location, facts.ignored, facts.other_ignored):
        return FileAction.DELETE_IGNORED

    if not facts.other_exists:
        if session.is_authoritative(location):
            return FileAction.COPY
        return FileAction.NONE

    return _decide_overwrite(session, location, facts, same_content)


def _decide_overwrite(
    session: SyncSession,
    location: Location,
    facts: FileFacts,
    same_content: Callable[[], bool],
) -> FileAction:
    """Overwrite or date-sync a file that exists on both sides."""
    if not session.sync_overwrite:
        return FileAction.NONE

    time_diff = facts.time_diff or 0
    size_diff = facts.size_diff or 0

    # Same date and size: trust it without hashing
    if session.sync_date and time_diff == 0 and size_diff == 0:
        return FileAction.NONE

    if not (session.is_authoritative(location) and session.has_priority(location, time_diff)):
        return FileAction.NONE

    if session.sync_date:
        # Different sizes can only mean different content
        identical = size_diff == 0 and same_content()
    else:
        identical = same_content()

    if identical:
        if session.sync_date and time_diff != 0:
            return FileAction.SYNC_DATE
        return FileAction.NONE

    return FileAction.OVERWRITE


def decide_ignored_file(session: SyncSession, location: Location, facts: FileFacts) -> FileAction:
    """Determine what to do with a file the ignore rules reject."""
    if not facts.exists:
        return FileAction.MISSING

    if not facts.readable:
        return FileAction.SKIP

    if ignore_delete_applies(session, location, facts.ignored, facts.other_ignored):
        return FileAction.DELETE_IGNORED

    return FileAction.NONE


def decide_directory(session: SyncSession, location: Location, facts: DirectoryFacts) -> DirectoryAction:
    """
    Determine what to do with a directory before descending into it.

    Directories are created without copying timestamps; that happens after
    the children were reconciled.
    """
    if not facts.other_exists:
        if session.sync_delete and not session.two_way and not session.is_copy_side(location):
            return DirectoryAction.DELETE
        if session.is_authoritative(location):
            return DirectoryAction.CREATE

    return decide_ignored_directory(session, location, facts)


def decide_ignored_directory(session: SyncSession, location: Location, facts: DirectoryFacts) -> DirectoryAction:
    """Apply the ignore-driven delete rule to a directory."""
    if not (session.sync_delete and session.delete_ignored):
        return DirectoryAction.NONE

    if not facts.exists:
        return DirectoryAction.MISSING

    if ignore_delete_applies(session, location, facts.ignored, facts.other_ignored):
        return DirectoryAction.DELETE_IGNORED

    return DirectoryAction.NONE


def should_sync_directory_date(
    session: SyncSession,
    location: Location,
    other_exists: bool,
    time_diff: int,
) -> bool:
    """Decide whether a directory's modification time is copied to its counterpart."""
    return session.sync_date and other_exists and session.is_authoritative(location) and time_diff != 0
