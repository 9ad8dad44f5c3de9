# treesync Default Configuration
# Full default configuration as Python dict and YAML generator

import copy
from typing import Any

import yaml

DEFAULT_JOB: dict[str, Any] = {
    "enabled": True,
    "description": "",
    "copy_mode": "source",
    "overwrite_priority": "source",
    "sync_delete": False,
    "sync_date": False,
    "sync_overwrite": False,
    "delete_ignored": False,
    "gitignore": [],
}

DEFAULT_CONFIG: dict[str, Any] = {
    "jobs": {
        "documents": {
            "enabled": False,
            "description": "Mirror documents onto a backup drive",
            "source": "~/Documents",
            "destination": "/mnt/backup/Documents",
            "copy_mode": "source",
            "overwrite_priority": "source",
            "sync_delete": True,
            "sync_date": True,
            "sync_overwrite": True,
            "delete_ignored": True,
            "gitignore": [
                ".DS_Store",
                "Thumbs.db",
                "*.tmp",
                "*.swp",
                "~$*",
            ],
        },
    },
    "output": {
        "verbose": False,
        "colored": True,
        "log_file": None,
    },
}


def generate_default_config() -> str:
    """Generate default configuration as YAML string with comments."""
    header = """# treesync - Directory Tree Synchronization Configuration
#
# Each job reconciles a source and a destination directory tree.
# Jobs can be individually enabled/disabled.
#
# copy_mode (authoritative side):
#   - source: source -> destination
#   - destination: destination -> source
#   - both: two-way, each side fills in what the other is missing
#
# overwrite_priority (which copy wins when both exist and differ):
#   - source / destination: that side always wins
#   - date: the newer file wins
#
# sync_delete:     remove entries missing on the authoritative side
# sync_date:       keep modification times in sync (and skip hashing
#                  files whose time and size already match)
# sync_overwrite:  replace files whose content differs
# delete_ignored:  with sync_delete, also remove copies of ignored paths
# gitignore:       ignore patterns in .gitignore syntax

"""
    return header + yaml.dump(DEFAULT_CONFIG, default_flow_style=False, sort_keys=False, allow_unicode=True)


def new_job(source: str, destination: str, **overrides: Any) -> dict[str, Any]:
    """Build a job entry with default policy values."""
    job = copy.deepcopy(DEFAULT_JOB)
    job.update(source=source, destination=destination, **overrides)
    return job
