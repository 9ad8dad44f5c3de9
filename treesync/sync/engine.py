# treesync Sync Engine
# Tree walker driving both reconciliation passes

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from treesync.sync.events import EventKind, EventSink, SyncEvent, null_sink
from treesync.sync.ignore import IgnoreMatcher, PathPredicate
from treesync.sync.reconciler import DirectoryReconciler, FileReconciler
from treesync.sync.session import Location, PathPair, SyncSession
from treesync.sync.state import CurrentFile, RunState
from treesync.utils.paths import expand_path, root_reachable, same_root


@dataclass
class SyncResult:
    """Summary of a complete sync run."""

    success: bool = True
    root_error: bool = False
    visited: int = 0
    counts: Counter = field(default_factory=Counter)
    errors: list[SyncEvent] = field(default_factory=list)

    def record(self, event: SyncEvent) -> None:
        """Account for one emitted event."""
        self.counts[event.kind] += 1
        if event.kind.is_error:
            self.errors.append(event)
        if event.kind == EventKind.ROOT_ERROR:
            self.root_error = True
            self.success = False

    def count(self, kind: EventKind) -> int:
        return self.counts[kind]

    @property
    def copied(self) -> int:
        return self.counts[EventKind.COPIED]

    @property
    def overwritten(self) -> int:
        return self.counts[EventKind.OVERWRITTEN]

    @property
    def deleted(self) -> int:
        """Files and directories removed."""
        return self.counts[EventKind.DELETED_FILE] + self.counts[EventKind.DELETED_DIRECTORY]

    @property
    def created_directories(self) -> int:
        return self.counts[EventKind.CREATED_DIRECTORY]

    @property
    def dates_synced(self) -> int:
        return self.counts[EventKind.SYNC_DATE]

    @property
    def changes(self) -> int:
        """Total number of changes made to either tree."""
        return sum(n for kind, n in self.counts.items() if kind.is_change)

    @property
    def has_issues(self) -> bool:
        """Check if any entry or root error was reported."""
        return bool(self.errors)


class TreeWalker:
    """
    Depth-first traversal of one root.

    Each directory gets its create/delete decision before its children are
    visited and its timestamp sync after them.
    """

    def __init__(
        self,
        session: SyncSession,
        accepts: PathPredicate,
        files: FileReconciler,
        directories: DirectoryReconciler,
    ):
        self.session = session
        self.accepts = accepts
        self.files = files
        self.directories = directories

    def walk(self, location: Location) -> None:
        """Run one full pass starting at the root for location."""
        self.recurse(self.session.root_of(location), location)

    def recurse(self, directory: Path, location: Location) -> None:
        try:
            if not directory.exists():
                return
            children = sorted(directory.iterdir())
        except OSError:
            self.files.report(EventKind.DIRECTORY_READ_ERROR, directory, None, location.value)
            return

        for path in children:
            is_dir = path.is_dir()
            pair = self.session.pair(path, location)

            if not self.accepts(path, is_dir):
                self.handle_ignored(pair, is_dir)
                continue

            if is_dir:
                self.directories.reconcile(pair)
                self.recurse(path, location)
                self.directories.sync_date(pair)
            elif path.is_file():
                self.files.reconcile(pair)

    def handle_ignored(self, pair: PathPair, is_dir: bool) -> None:
        """
        Route an ignored entry.

        Ignored directories are still descended into, so their contents get
        their own verdicts; the directory itself is only considered for
        removal afterwards.
        """
        if is_dir:
            self.recurse(pair.path, pair.location)
            if self.session.sync_delete:
                self.directories.reconcile_ignored(pair)
        elif self.session.sync_delete and pair.path.is_file():
            self.files.reconcile_ignored(pair)


class Syncer:
    """
    Directory tree synchronization engine.

    Reconciles a source and a destination root according to the session
    policy and reports every decision to the callback.
    """

    def __init__(
        self,
        session: SyncSession,
        callback: Optional[EventSink] = None,
        *,
        ignore: Optional[PathPredicate] = None,
    ):
        """
        Initialize engine.

        Args:
            session: Roots and policy.
            callback: Receives every SyncEvent (defaults to dropping them).
            ignore: Optional predicate replacing the compiled gitignore rules.
        """
        self.session = session
        self.callback = callback or null_sink
        self._ignore = ignore
        self._matcher: Optional[IgnoreMatcher] = None
        self._state: Optional[RunState] = None

    @property
    def matcher(self) -> IgnoreMatcher:
        """Ignore rules compiled against the resolved roots."""
        if self._matcher is None:
            self._matcher = IgnoreMatcher(
                self.session.gitignore,
                roots=(expand_path(self.session.source), expand_path(self.session.destination)),
            )
        return self._matcher

    @property
    def accepts(self) -> PathPredicate:
        return self._ignore or self.matcher

    @property
    def current_file(self) -> Optional[CurrentFile]:
        """The file being reconciled, or None outside a run."""
        return self._state.current if self._state else None

    def set_ignore_rules(self, rules: list[str]) -> None:
        """Replace the ignore rules and recompile them."""
        self.session = self.session.with_gitignore(rules)
        self._matcher = None

    def load_ignore_file(self, path: Path) -> bool:
        """
        Replace the ignore rules with the lines of a .gitignore-style file.

        Returns:
            False if the file does not exist.
        """
        if not path.is_file():
            return False
        self.set_ignore_rules(path.read_text(encoding="utf-8").splitlines())
        return True

    def sync(self) -> SyncResult:
        """
        Run both passes: source-rooted, then destination-rooted.

        Returns:
            SyncResult; root_error is set when the run was refused.
        """
        result = SyncResult()

        def emit(event: SyncEvent) -> None:
            result.record(event)
            self.callback(event)

        source = expand_path(self.session.source)
        destination = expand_path(self.session.destination)

        if not root_reachable(source):
            emit(SyncEvent(EventKind.ROOT_ERROR, path=self.session.source))
            return result
        if not root_reachable(destination):
            emit(SyncEvent(EventKind.ROOT_ERROR, other_path=self.session.destination))
            return result
        if same_root(source, destination):
            emit(SyncEvent(EventKind.ROOT_ERROR, path=self.session.source, other_path=self.session.destination))
            return result

        session = self.session.with_roots(source, destination)
        state = RunState()
        self._state = state

        accepts = self.accepts
        walker = TreeWalker(
            session,
            accepts,
            FileReconciler(session, state, accepts, emit),
            DirectoryReconciler(session, state, accepts, emit),
        )

        try:
            walker.walk(Location.SOURCE)
            walker.walk(Location.DESTINATION)
        finally:
            result.visited = state.counter
            state.reset()
            self._state = None

        return result
