# treesync Console Output
# Rich-based console output for user-friendly display

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from treesync.config.schema import SyncJob
from treesync.sync.engine import SyncResult


class Console:
    """
    Console output manager using Rich.

    Provides formatted output for sync runs.
    """

    def __init__(self, *, verbose: bool = False, colored: bool = True):
        """
        Initialize console.

        Args:
            verbose: Enable verbose output.
            colored: Enable colored output.
        """
        self.verbose = verbose
        self._console = RichConsole(no_color=not colored, highlight=False)

    @property
    def rich(self) -> RichConsole:
        """Underlying Rich console."""
        return self._console

    def print(self, *args, **kwargs) -> None:
        """Print to console."""
        self._console.print(*args, **kwargs)

    def print_error(self, message: str) -> None:
        """Print error message."""
        self._console.print(f"[red]Error:[/red] {escape(message)}")

    def print_warning(self, message: str) -> None:
        """Print warning message."""
        self._console.print(f"[yellow]Warning:[/yellow] {escape(message)}")

    def print_success(self, message: str) -> None:
        """Print success message."""
        self._console.print(f"[green]{escape(message)}[/green]")

    def print_info(self, message: str) -> None:
        """Print info message."""
        self._console.print(f"[blue]{escape(message)}[/blue]")

    def print_sync_result(self, name: str, result: SyncResult) -> None:
        """
        Print the summary panel for one job.

        Args:
            name: Job name (or a label for ad-hoc runs).
            result: Result of the run.
        """
        if result.root_error:
            self._console.print(
                Panel(
                    "[red]Sync refused: root error[/red]",
                    title=name,
                    border_style="red",
                )
            )
            return

        status_text = "[green]Sync completed[/green]" if not result.has_issues else "[yellow]Sync completed with errors[/yellow]"
        self._console.print(
            Panel(
                f"{status_text}\n"
                f"Files visited: {result.visited}\n"
                f"Copied: {result.copied}, overwritten: {result.overwritten}, deleted: {result.deleted}\n"
                f"Directories created: {result.created_directories}, dates synced: {result.dates_synced}\n"
                f"Errors: {len(result.errors)}",
                title=name,
                border_style="green" if not result.has_issues else "yellow",
            )
        )

    def print_jobs(self, jobs: dict[str, SyncJob], *, show_all: bool = False) -> None:
        """
        Print list of jobs.

        Args:
            jobs: Dict of job name to job configuration.
            show_all: Show all jobs including disabled.
        """
        table = Table(show_header=True, header_style="bold")
        table.add_column("Job")
        table.add_column("Status")
        table.add_column("Source", style="cyan")
        table.add_column("Destination", style="cyan")
        table.add_column("Mode")
        table.add_column("Policy", style="dim")

        for name, job in sorted(jobs.items()):
            if not show_all and not job.enabled:
                continue

            status = "[green]enabled[/green]" if job.enabled else "[dim]disabled[/dim]"
            flags = [
                flag
                for flag, on in (
                    ("delete", job.sync_delete),
                    ("date", job.sync_date),
                    ("overwrite", job.sync_overwrite),
                    ("delete-ignored", job.delete_ignored),
                )
                if on
            ]
            mode = f"{job.copy_mode.value} / {job.overwrite_priority.value}"
            table.add_row(name, status, job.source, job.destination, mode, ", ".join(flags) or "-")

        self._console.print(table)

    def print_config_summary(self, config_path: str, jobs_count: int) -> None:
        """Print configuration summary."""
        self._console.print(
            Panel(
                f"Config: {config_path}\n" f"Jobs: {jobs_count}",
                title="treesync Configuration",
                border_style="blue",
            )
        )


def create_console(*, verbose: bool = False, colored: bool = True) -> Console:
    """
    Create a console instance.

    Args:
        verbose: Enable verbose output.
        colored: Enable colored output.

    Returns:
        Console instance.
    """
    return Console(verbose=verbose, colored=colored)
