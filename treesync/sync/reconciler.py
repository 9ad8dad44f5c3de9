# treesync Reconcilers
# Execute file and directory decisions and report them as events

from __future__ import annotations

from pathlib import Path
from typing import Optional

from treesync.sync.actions import (
    DirectoryAction,
    DirectoryFacts,
    FileAction,
    FileFacts,
    decide_directory,
    decide_file,
    decide_ignored_directory,
    decide_ignored_file,
    should_sync_directory_date,
)
from treesync.sync.events import EventKind, EventSink, SyncEvent
from treesync.sync.ignore import PathPredicate
from treesync.sync.session import PathPair, SyncSession
from treesync.sync.state import RunState
from treesync.utils.paths import copy_file, copy_times, delete_file, delete_tree, ensure_dir, is_readable


def mtime_ms(path: Path) -> int:
    """Modification time in whole milliseconds."""
    return path.stat().st_mtime_ns // 1_000_000


class _Reconciler:
    """Shared plumbing: policy, run state, ignore predicate and event sink."""

    def __init__(
        self,
        session: SyncSession,
        state: RunState,
        accepts: PathPredicate,
        emit: EventSink,
    ):
        self.session = session
        self.state = state
        self.accepts = accepts
        self._emit = emit

    def report(
        self,
        kind: EventKind,
        path: Optional[Path],
        other_path: Optional[Path] = None,
        location: Optional[str] = None,
        counter: Optional[int] = None,
    ) -> None:
        self._emit(SyncEvent(kind=kind, path=path, other_path=other_path, location=location, counter=counter))


class FileReconciler(_Reconciler):
    """Applies the file decision chain to one path at a time."""

    def gather(self, pair: PathPair) -> FileFacts:
        """Collect existence, access, ignore and metadata facts for a file pair."""
        exists = pair.path.exists()
        readable = exists and is_readable(pair.path)
        other_exists = pair.other.exists()
        time_diff = size_diff = None

        if readable and other_exists:
            try:
                time_diff = mtime_ms(pair.other) - mtime_ms(pair.path)
                size_diff = pair.other.stat().st_size - pair.path.stat().st_size
            except OSError:
                readable = False

        return FileFacts(
            exists=exists,
            readable=readable,
            other_exists=other_exists,
            ignored=not self.accepts(pair.path, False),
            other_ignored=not self.accepts(pair.other, False),
            time_diff=time_diff,
            size_diff=size_diff,
        )

    def reconcile(self, pair: PathPair) -> FileAction:
        """Run the full chain for an accepted file."""
        self._announce(pair)
        facts = self.gather(pair)
        action = decide_file(
            self.session,
            pair.location,
            facts,
            lambda: self.state.hashes.compare(pair.path, pair.other),
        )
        self.execute(pair, action)
        return action

    def reconcile_ignored(self, pair: PathPair) -> FileAction:
        """Run the ignore-driven delete rule for a file the rules reject."""
        self._announce(pair)
        action = decide_ignored_file(self.session, pair.location, self.gather(pair))
        self.execute(pair, action)
        return action

    def _announce(self, pair: PathPair) -> None:
        current = self.state.visit(pair.path, pair.other, pair.location.value)
        self.report(EventKind.CURRENT_FILE, pair.path, pair.other, pair.location.value, current.counter)

    def execute(self, pair: PathPair, action: FileAction) -> None:
        """Carry out a decision and report its outcome."""
        location = pair.location.value

        if action == FileAction.MISSING:
            self.report(EventKind.FILE_ERROR, pair.path, pair.other, location)
        elif action == FileAction.SKIP:
            self.report(EventKind.FILE_ACCESS_ERROR, pair.path, pair.other, location)
        elif action in (FileAction.DELETE, FileAction.DELETE_IGNORED):
            try:
                delete_file(pair.path)
            except OSError:
                self.report(EventKind.DELETED_ERROR, pair.path, None, location)
            else:
                self.report(EventKind.DELETED_FILE, pair.path, None, location)
        elif action == FileAction.COPY:
            if self._copy(pair):
                self.report(EventKind.COPIED, pair.path, pair.other, location)
        elif action == FileAction.OVERWRITE:
            try:
                delete_file(pair.other)
            except OSError:
                self.report(EventKind.DELETED_ERROR, pair.other, None, location)
                return
            if self._copy(pair):
                self.report(EventKind.OVERWRITTEN, pair.path, pair.other, location)
        elif action == FileAction.SYNC_DATE:
            try:
                copy_times(pair.path, pair.other)
            except OSError:
                self.report(EventKind.FILE_COPY_ERROR, pair.path, pair.other, location)
            else:
                self.report(EventKind.SYNC_DATE, pair.path, pair.other, location)

    def _copy(self, pair: PathPair) -> bool:
        """Copy the whole file onto its counterpart; report and return False on failure."""
        try:
            copy_file(pair.path, pair.other)
            if not pair.other.exists():
                raise FileNotFoundError(pair.other)
            if self.session.sync_date:
                copy_times(pair.path, pair.other)
        except OSError:
            self.report(EventKind.FILE_COPY_ERROR, pair.path, pair.other, pair.location.value)
            return False
        return True


class DirectoryReconciler(_Reconciler):
    """Applies the directory decision chain around a directory's children."""

    def gather(self, pair: PathPair) -> DirectoryFacts:
        return DirectoryFacts(
            exists=pair.path.is_dir(),
            other_exists=pair.other.exists(),
            ignored=not self.accepts(pair.path, True),
            other_ignored=not self.accepts(pair.other, True),
        )

    def reconcile(self, pair: PathPair) -> DirectoryAction:
        """Pre-order step for an accepted directory: delete, create or ignore-delete."""
        action = decide_directory(self.session, pair.location, self.gather(pair))
        self.execute(pair, action)
        return action

    def reconcile_ignored(self, pair: PathPair) -> DirectoryAction:
        """Post-order step for a directory the rules reject."""
        action = decide_ignored_directory(self.session, pair.location, self.gather(pair))
        self.execute(pair, action)
        return action

    def execute(self, pair: PathPair, action: DirectoryAction) -> None:
        location = pair.location.value

        if action == DirectoryAction.MISSING:
            self.report(EventKind.FILE_ERROR, pair.path, pair.other, location)
        elif action == DirectoryAction.DELETE:
            try:
                delete_tree(pair.path)
            except OSError:
                self.report(EventKind.DELETED_ERROR, pair.path, None, location)
            else:
                self.report(EventKind.DELETED_DIRECTORY, pair.path, None, location)
        elif action == DirectoryAction.DELETE_IGNORED:
            # Only empty directories go; contents were handled by the traversal
            try:
                pair.path.rmdir()
            except OSError:
                self.report(EventKind.DELETED_ERROR, pair.path, None, location)
            else:
                self.report(EventKind.DELETED_DIRECTORY, pair.path, None, location)
        elif action == DirectoryAction.CREATE:
            try:
                ensure_dir(pair.other)
            except OSError:
                self.report(EventKind.FILE_COPY_ERROR, pair.path, pair.other, location)
            else:
                self.state.created.add(pair.other)
                self.report(EventKind.CREATED_DIRECTORY, pair.other, None, location)

    def sync_date(self, pair: PathPair) -> bool:
        """
        Post-order step: copy the directory's modification time to its counterpart.

        Directories created earlier in this run get their time set but
        produce no event.

        Returns:
            True if the counterpart's time was updated.
        """
        if not self.session.sync_date or not pair.path.is_dir() or not pair.other.exists():
            return False

        try:
            time_diff = mtime_ms(pair.other) - mtime_ms(pair.path)
        except OSError:
            return False

        if not should_sync_directory_date(self.session, pair.location, True, time_diff):
            return False

        try:
            copy_times(pair.path, pair.other)
        except OSError:
            self.report(EventKind.FILE_COPY_ERROR, pair.path, pair.other, pair.location.value)
            return False

        if pair.other not in self.state.created:
            self.report(EventKind.SYNC_DATE, pair.path, pair.other, pair.location.value)
        return True
