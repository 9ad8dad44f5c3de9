"""Rich console output and log file for sync events."""

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from treesync.sync.events import EventKind, SyncEvent, format_event, format_log_line


class SyncLogger:
    """Event sink that renders sync events on the console and in a log file."""

    STYLES: dict[EventKind, tuple[str, str]] = {
        EventKind.COPIED: ("green", "+"),
        EventKind.OVERWRITTEN: ("yellow", "~"),
        EventKind.SYNC_DATE: ("blue", "="),
        EventKind.CREATED_DIRECTORY: ("green", "+"),
        EventKind.DELETED_FILE: ("red", "-"),
        EventKind.DELETED_DIRECTORY: ("red", "-"),
    }

    def __init__(
        self,
        console: Optional[Console] = None,
        verbose: bool = False,
        log_file: Optional[Path] = None,
    ):
        """Initialize logger.

        Args:
            console: Rich Console instance
            verbose: Also show progress for every visited file
            log_file: Optional file that every event line is appended to
        """
        self.console = console or Console()
        self.verbose = verbose
        self.log_file = log_file

    def __call__(self, event: SyncEvent) -> None:
        self.event(event)

    def info(self, message: str) -> None:
        """Blue info message."""
        self.console.print(f"[blue]ℹ[/blue] {escape(message)}")

    def warning(self, message: str) -> None:
        """Yellow warning message."""
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    def event(self, event: SyncEvent) -> None:
        """Display an event with appropriate styling and append it to the log file."""
        if event.kind == EventKind.CURRENT_FILE:
            if self.verbose:
                self.console.print(Text(format_event(event), style="dim"))
            return

        # Paths may contain brackets, so build Text instead of markup
        text = Text()
        if event.kind.is_error:
            text.append("✗ ", style="red")
        else:
            color, marker = self.STYLES.get(event.kind, ("white", "•"))
            text.append(f"  {marker} ", style=color)
        text.append(format_event(event))
        self.console.print(text)

        self.write(event)

    def write(self, event: SyncEvent) -> None:
        """Append an event line to the log file, if one is configured."""
        if self.log_file is None:
            return
        self.log_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.log_file, "a", encoding="utf-8") as f:
            f.write(format_log_line(event) + "\n")
