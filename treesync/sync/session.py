# treesync Sync Session
# Immutable policy and roots for one sync run

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from treesync.config.schema import CopyMode, OverwritePriority
from treesync.utils.paths import swap_root

if TYPE_CHECKING:
    from treesync.config.schema import SyncJob


class Location(str, Enum):
    """Root a traversal pass originated from."""

    SOURCE = "source"
    DESTINATION = "destination"


@dataclass(frozen=True)
class SyncSession:
    """
    Roots and policy for a sync run.

    Never mutated while a run is in progress; replacing the ignore rules
    produces a new session.
    """

    source: Path
    destination: Path
    gitignore: tuple[str, ...] = ()
    copy_mode: CopyMode = CopyMode.SOURCE
    overwrite_priority: OverwritePriority = OverwritePriority.SOURCE
    sync_delete: bool = False
    sync_date: bool = False
    sync_overwrite: bool = False
    delete_ignored: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "source", Path(self.source))
        object.__setattr__(self, "destination", Path(self.destination))
        object.__setattr__(self, "gitignore", tuple(self.gitignore))
        object.__setattr__(self, "copy_mode", CopyMode(self.copy_mode))
        object.__setattr__(self, "overwrite_priority", OverwritePriority(self.overwrite_priority))

    @classmethod
    def from_job(cls, job: SyncJob) -> SyncSession:
        """Build a session from a configured job, reading its ignore file if set."""
        rules = list(job.gitignore)
        if job.gitignore_file:
            ignore_file = Path(job.gitignore_file)
            if ignore_file.is_file():
                rules.extend(ignore_file.read_text(encoding="utf-8").splitlines())

        return cls(
            source=Path(job.source),
            destination=Path(job.destination),
            gitignore=tuple(rules),
            copy_mode=job.copy_mode,
            overwrite_priority=job.overwrite_priority,
            sync_delete=job.sync_delete,
            sync_date=job.sync_date,
            sync_overwrite=job.sync_overwrite,
            delete_ignored=job.delete_ignored,
        )

    @property
    def two_way(self) -> bool:
        """True for bidirectional sync."""
        return self.copy_mode == CopyMode.BOTH

    def is_copy_side(self, location: Location) -> bool:
        """Check whether copy_mode names exactly this side (never true for two-way)."""
        return self.copy_mode.value == location.value

    def is_authoritative(self, location: Location) -> bool:
        """Check whether the given side may create and overwrite on the other."""
        return self.two_way or self.is_copy_side(location)

    def has_priority(self, location: Location, time_diff: int) -> bool:
        """
        Check whether this side wins an overwrite.

        Args:
            location: Side the current pass started from.
            time_diff: Counterpart mtime minus this side's mtime.
        """
        if self.overwrite_priority == OverwritePriority.DATE:
            return time_diff < 0
        return self.overwrite_priority.value == location.value

    def root_of(self, location: Location) -> Path:
        return self.source if location == Location.SOURCE else self.destination

    def other_root_of(self, location: Location) -> Path:
        return self.destination if location == Location.SOURCE else self.source

    def pair(self, path: Path, location: Location) -> PathPair:
        """Mirror a path discovered in the given pass onto the other root."""
        other = swap_root(path, self.root_of(location), self.other_root_of(location))
        return PathPair(path=path, other=other, location=location)

    def with_roots(self, source: Path, destination: Path) -> SyncSession:
        return replace(self, source=source, destination=destination)

    def with_gitignore(self, rules: list[str] | tuple[str, ...]) -> SyncSession:
        return replace(self, gitignore=tuple(rules))


@dataclass(frozen=True)
class PathPair:
    """A path on the side being walked and its mirror on the other side."""

    path: Path
    other: Path
    location: Location
