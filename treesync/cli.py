"""Click-based CLI for treesync - Directory Tree Synchronization."""

from __future__ import annotations

import sys
import time
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from treesync import __version__
from treesync.config import (
    CopyMode,
    OverwritePriority,
    SyncJob,
    TreesyncConfig,
    ensure_config_exists,
    generate_default_config,
    get_config_path,
    load_config,
    new_job,
    save_config,
    validate_config_file,
)
from treesync.logger import SyncLogger
from treesync.output import Console, create_console
from treesync.sync import Syncer, SyncResult, SyncSession

console = create_console()


def _load(config_path: Optional[Path]) -> TreesyncConfig:
    """Load configuration or exit with an error message."""
    try:
        return load_config(config_path)
    except FileNotFoundError as e:
        console.print_error(str(e))
        sys.exit(1)
    except ValidationError as e:
        console.print_error(f"Invalid configuration:\n{e}")
        sys.exit(1)


def _run_session(name: str, session: SyncSession, out: Console, logger: SyncLogger) -> SyncResult:
    """Run one session and print its summary."""
    logger.info(f"{name}: {session.source} -> {session.destination} ({session.copy_mode.value})")
    result = Syncer(session, logger).sync()
    out.print_sync_result(name, result)
    return result


@click.group()
@click.version_option(version=__version__, prog_name="treesync")
def cli() -> None:
    """treesync - Directory Tree Synchronization.

    Reconciles a source and a destination directory tree: copies new files,
    overwrites changed ones, propagates deletions and modification times,
    all governed by a per-job policy.
    """


@cli.command()
@click.argument("jobs", nargs=-1)
@click.option("--config", "-c", "config_path", type=click.Path(path_type=Path), help="Configuration file")
@click.option("--verbose", "-v", is_flag=True, help="Show every visited file")
@click.option(
    "--interval",
    "-i",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Repeat the run every N seconds until interrupted",
)
def sync(jobs: tuple[str, ...], config_path: Optional[Path], verbose: bool, interval: Optional[float]) -> None:
    """Run configured sync jobs.

    Runs the named JOBS, or every enabled job when none are given.
    """
    config = _load(config_path)

    if jobs:
        unknown = [name for name in jobs if config.get_job(name) is None]
        if unknown:
            console.print_error(f"Unknown job(s): {', '.join(unknown)}")
            sys.exit(1)
        selected = {name: config.jobs[name] for name in jobs}
    else:
        selected = config.get_enabled_jobs()

    if not selected:
        console.print_warning("No enabled jobs to run")
        return

    out = create_console(verbose=verbose or config.output.verbose, colored=config.output.colored)
    logger = SyncLogger(
        out.rich,
        verbose=out.verbose,
        log_file=Path(config.output.log_file) if config.output.log_file else None,
    )

    try:
        while True:
            failed = False
            for name, job in selected.items():
                result = _run_session(name, SyncSession.from_job(job), out, logger)
                failed = failed or result.root_error

            if interval is None:
                break
            logger.info(f"Next run in {interval:g}s (Ctrl+C to stop)")
            time.sleep(interval)
    except KeyboardInterrupt:
        logger.warning("Stopped")
        return

    if failed:
        sys.exit(1)


@cli.command()
@click.argument("source", type=click.Path(path_type=Path))
@click.argument("destination", type=click.Path(path_type=Path))
@click.option(
    "--copy-mode",
    type=click.Choice([m.value for m in CopyMode]),
    default=CopyMode.SOURCE.value,
    show_default=True,
    help="Authoritative side",
)
@click.option(
    "--overwrite-priority",
    type=click.Choice([p.value for p in OverwritePriority]),
    default=OverwritePriority.SOURCE.value,
    show_default=True,
    help="Which copy wins when both differ",
)
@click.option("--sync-delete", is_flag=True, help="Propagate deletions")
@click.option("--sync-date", is_flag=True, help="Keep modification times in sync")
@click.option("--sync-overwrite", is_flag=True, help="Overwrite files that differ")
@click.option("--delete-ignored", is_flag=True, help="Delete copies of ignored paths (needs --sync-delete)")
@click.option("--ignore", "ignore_patterns", multiple=True, help="Ignore pattern (.gitignore syntax), repeatable")
@click.option(
    "--ignore-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="File with ignore patterns",
)
@click.option("--log-file", type=click.Path(dir_okay=False, path_type=Path), help="Append events to this file")
@click.option("--verbose", "-v", is_flag=True, help="Show every visited file")
def run(
    source: Path,
    destination: Path,
    copy_mode: str,
    overwrite_priority: str,
    sync_delete: bool,
    sync_date: bool,
    sync_overwrite: bool,
    delete_ignored: bool,
    ignore_patterns: tuple[str, ...],
    ignore_file: Optional[Path],
    log_file: Optional[Path],
    verbose: bool,
) -> None:
    """Synchronize SOURCE and DESTINATION without a configuration file."""
    rules = list(ignore_patterns)
    if ignore_file is not None:
        rules.extend(ignore_file.read_text(encoding="utf-8").splitlines())

    session = SyncSession(
        source=source,
        destination=destination,
        gitignore=tuple(rules),
        copy_mode=CopyMode(copy_mode),
        overwrite_priority=OverwritePriority(overwrite_priority),
        sync_delete=sync_delete,
        sync_date=sync_date,
        sync_overwrite=sync_overwrite,
        delete_ignored=delete_ignored,
    )

    out = create_console(verbose=verbose)
    logger = SyncLogger(out.rich, verbose=verbose, log_file=log_file)
    result = _run_session("run", session, out, logger)

    if result.root_error:
        sys.exit(1)


@cli.command()
@click.option("--config", "-c", "config_path", type=click.Path(path_type=Path), help="Configuration file")
@click.option("--all", "-a", "show_all", is_flag=True, help="Include disabled jobs")
def jobs(config_path: Optional[Path], show_all: bool) -> None:
    """List configured sync jobs."""
    config = _load(config_path)

    if not config.jobs:
        console.print_info("No jobs configured")
        return

    console.print_jobs(config.jobs, show_all=show_all)


@cli.group()
def config() -> None:
    """Manage the configuration file."""


@config.command("init")
@click.option("--config", "-c", "config_path", type=click.Path(path_type=Path), help="Configuration file")
def config_init(config_path: Optional[Path]) -> None:
    """Create the default configuration file."""
    path, created = ensure_config_exists(config_path)
    if created:
        console.print_success(f"Created configuration: {path}")
    else:
        console.print_warning(f"Configuration already exists: {path}")


@config.command("show")
@click.option("--config", "-c", "config_path", type=click.Path(path_type=Path), help="Configuration file")
@click.option("--default", "show_default", is_flag=True, help="Show the default configuration instead")
def config_show(config_path: Optional[Path], show_default: bool) -> None:
    """Print the configuration file."""
    if show_default:
        click.echo(generate_default_config())
        return

    path = config_path or get_config_path()
    if not path.exists():
        console.print_error(f"Configuration file not found: {path}")
        sys.exit(1)

    console.print_config_summary(str(path), len(_load(path).jobs))
    click.echo(path.read_text(encoding="utf-8"))


@config.command("validate")
@click.option("--config", "-c", "config_path", type=click.Path(path_type=Path), help="Configuration file")
def config_validate(config_path: Optional[Path]) -> None:
    """Validate the configuration file."""
    valid, errors = validate_config_file(config_path)

    if valid:
        console.print_success("Configuration is valid")
        return

    for error in errors:
        console.print_error(error)
    sys.exit(1)


@config.command("add")
@click.argument("name")
@click.argument("source")
@click.argument("destination")
@click.option("--config", "-c", "config_path", type=click.Path(path_type=Path), help="Configuration file")
@click.option("--description", "-d", default="", help="Job description")
@click.option(
    "--copy-mode",
    type=click.Choice([m.value for m in CopyMode]),
    default=CopyMode.SOURCE.value,
    show_default=True,
    help="Authoritative side",
)
@click.option(
    "--overwrite-priority",
    type=click.Choice([p.value for p in OverwritePriority]),
    default=OverwritePriority.SOURCE.value,
    show_default=True,
    help="Which copy wins when both differ",
)
@click.option("--sync-delete", is_flag=True, help="Propagate deletions")
@click.option("--sync-date", is_flag=True, help="Keep modification times in sync")
@click.option("--sync-overwrite", is_flag=True, help="Overwrite files that differ")
@click.option("--delete-ignored", is_flag=True, help="Delete copies of ignored paths (needs --sync-delete)")
@click.option("--ignore", "ignore_patterns", multiple=True, help="Ignore pattern (.gitignore syntax), repeatable")
@click.option("--disabled", is_flag=True, help="Add the job disabled")
@click.option("--force", "-f", is_flag=True, help="Replace an existing job of the same name")
def config_add(
    name: str,
    source: str,
    destination: str,
    config_path: Optional[Path],
    description: str,
    copy_mode: str,
    overwrite_priority: str,
    sync_delete: bool,
    sync_date: bool,
    sync_overwrite: bool,
    delete_ignored: bool,
    ignore_patterns: tuple[str, ...],
    disabled: bool,
    force: bool,
) -> None:
    """Add a sync job to the configuration file."""
    path, _ = ensure_config_exists(config_path)
    config = _load(path)

    if name in config.jobs and not force:
        console.print_error(f"Job already exists: {name} (use --force to replace it)")
        sys.exit(1)

    job = new_job(
        source,
        destination,
        enabled=not disabled,
        description=description,
        copy_mode=copy_mode,
        overwrite_priority=overwrite_priority,
        sync_delete=sync_delete,
        sync_date=sync_date,
        sync_overwrite=sync_overwrite,
        delete_ignored=delete_ignored,
        gitignore=list(ignore_patterns),
    )
    try:
        config.jobs[name] = SyncJob.model_validate(job)
    except ValidationError as e:
        console.print_error(f"Invalid job:\n{e}")
        sys.exit(1)

    save_config(config, path)
    console.print_success(f"Added job '{name}' to {path}")


@config.command("path")
def config_path_cmd() -> None:
    """Print the configuration file location."""
    click.echo(str(get_config_path()))


if __name__ == "__main__":
    cli()
