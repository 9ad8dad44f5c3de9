# treesync Configuration Module
# Handles YAML-based configuration loading, validation, and defaults

from treesync.config.defaults import DEFAULT_CONFIG, DEFAULT_JOB, generate_default_config, new_job
from treesync.config.loader import (
    ensure_config_exists,
    get_config_path,
    load_config,
    save_config,
    validate_config_file,
)
from treesync.config.schema import (
    CopyMode,
    OutputConfig,
    OverwritePriority,
    SyncJob,
    TreesyncConfig,
)

__all__ = [
    # Schema
    "TreesyncConfig",
    "SyncJob",
    "OutputConfig",
    "CopyMode",
    "OverwritePriority",
    # Loader
    "load_config",
    "save_config",
    "get_config_path",
    "ensure_config_exists",
    "validate_config_file",
    # Defaults
    "DEFAULT_CONFIG",
    "DEFAULT_JOB",
    "generate_default_config",
    "new_job",
]
