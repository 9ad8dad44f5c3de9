# treesync Output Module
# Rich console output and event logging

from treesync.output.console import Console, create_console

__all__ = [
    "Console",
    "create_console",
]
