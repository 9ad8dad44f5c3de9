# treesync Configuration Schema
# Pydantic models for YAML configuration validation

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class CopyMode(str, Enum):
    """Which side is authoritative for create and overwrite decisions."""

    SOURCE = "source"
    DESTINATION = "destination"
    BOTH = "both"


class OverwritePriority(str, Enum):
    """Which side wins when both hold the same path with different content."""

    SOURCE = "source"
    DESTINATION = "destination"
    DATE = "date"


class SyncJob(BaseModel):
    """Configuration for a single source/destination pair."""

    enabled: bool = Field(default=True, description="Whether this job runs by default")
    description: str = Field(default="", description="Human-readable description")
    source: str = Field(description="Source root directory")
    destination: str = Field(description="Destination root directory")
    copy_mode: CopyMode = Field(default=CopyMode.SOURCE, description="Authoritative side")
    overwrite_priority: OverwritePriority = Field(
        default=OverwritePriority.SOURCE, description="Tie-break for differing files"
    )
    sync_delete: bool = Field(default=False, description="Propagate deletions")
    sync_date: bool = Field(default=False, description="Keep modification times in sync")
    sync_overwrite: bool = Field(default=False, description="Overwrite files that differ")
    delete_ignored: bool = Field(default=False, description="Delete copies of ignored paths")
    gitignore: list[str] = Field(default_factory=list, description="Ignore patterns (gitignore syntax)")
    gitignore_file: str | None = Field(default=None, description="File with additional ignore patterns")

    @field_validator("source", "destination")
    @classmethod
    def expand_paths(cls, v: str) -> str:
        """Expand ~ in paths."""
        return str(Path(v).expanduser())

    @field_validator("gitignore_file")
    @classmethod
    def expand_optional_path(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return str(Path(v).expanduser())


class OutputConfig(BaseModel):
    """Output and logging configuration."""

    verbose: bool = Field(default=False, description="Enable verbose output")
    colored: bool = Field(default=True, description="Enable colored output")
    log_file: str | None = Field(default=None, description="Path to event log file")

    @field_validator("log_file")
    @classmethod
    def expand_optional_paths(cls, v: str | None) -> str | None:
        """Expand ~ in optional paths."""
        if v is None:
            return None
        return str(Path(v).expanduser())


class TreesyncConfig(BaseModel):
    """Root configuration model for treesync."""

    jobs: dict[str, SyncJob] = Field(default_factory=dict, description="Sync job definitions")
    output: OutputConfig = Field(default_factory=OutputConfig, description="Output settings")

    def get_enabled_jobs(self) -> dict[str, SyncJob]:
        """Return only enabled jobs."""
        return {name: job for name, job in self.jobs.items() if job.enabled}

    def get_job(self, name: str) -> SyncJob | None:
        """Get a job by name."""
        return self.jobs.get(name)
