"""Command line interface for Speedy."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from speedy.config import AppConfig, check_root
from speedy.errors import ConfigurationError, NotificationError
from speedy.models import SearchKind, SearchReport, SearchTarget
from speedy.notify import notify_found
from speedy.search.flags import CancellationToken, install_interrupt_handler
from speedy.search.runner import SearchTask
from speedy.search.walker import ACCESS_LOGGER


LOGGER = logging.getLogger(__name__)
console = Console()
app = typer.Typer(help="Speedy - a fast file and folder search tool")

SPINNER_LABEL = "Searching..."


def _setup_logging(verbose: bool, quiet: bool = False) -> None:
    if quiet:
        level = logging.ERROR
    else:
        level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")
    ACCESS_LOGGER.setLevel(logging.INFO)


def _build_config(
    path: Optional[Path],
    global_search: bool,
    depth: Optional[int],
    threads: Optional[int],
    stop_after_match: bool,
    verbose: bool,
    quiet: bool,
    notify: bool,
) -> AppConfig:
    config = AppConfig(
        root=path,
        global_search=global_search,
        max_depth=depth,
        stop_after_match=stop_after_match,
        verbose=verbose,
        quiet=quiet,
        notify=notify,
    )
    if threads is not None:
        config.workers = threads
    try:
        config.validate()
    except ConfigurationError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return config


def _print_report(report: SearchReport, name: str, config: AppConfig) -> None:
    label = report.target.kind.value
    if report.found:
        console.print(f"\n[bold green]Found matching {label} at:[/bold green]")
        console.print(f"   {escape(str(report.path))}")
        console.print(escape(report.summary(name)))
    elif report.cancelled:
        console.print(f"[yellow]{report.summary(name)}[/yellow]")
    else:
        console.print(f"[red]{escape(report.summary(name))}[/red]")
        if config.global_search and not config.verbose:
            console.print("Tip: Try with --verbose to see search progress or permission issues")


def _search(kind: SearchKind, name: str, config: AppConfig) -> SearchReport:
    root = config.resolve_root(Path.cwd())
    try:
        check_root(root)
    except ConfigurationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    target = SearchTarget.create(name, kind, root, config.max_depth)
    if not config.quiet:
        console.print(f'Searching for {kind.value} "{escape(name)}" in {escape(str(root))}...')
        if config.max_depth is not None:
            console.print(f"   (Depth limited to {config.max_depth} levels)")

    cancel = CancellationToken()
    restore_handler = install_interrupt_handler(cancel)
    try:
        task = SearchTask(target, config, cancel=cancel)
        task.start()
        if config.quiet:
            report = task.wait()
        else:
            with console.status(SPINNER_LABEL, spinner="dots") as status:
                report = task.wait(
                    lambda count: status.update(f"{SPINNER_LABEL} Scanned {count} locations")
                )
    finally:
        restore_handler()

    if not config.quiet:
        _print_report(report, name, config)

    if report.found and config.notify:
        try:
            notify_found(name, report.path)
        except NotificationError as exc:
            LOGGER.debug("Notification failed", exc_info=True)
            if not config.quiet:
                console.print(f"[yellow]Notification failed: {escape(str(exc))}[/yellow]")
    return report


@app.command("file")
def search_file(
    name: str = typer.Argument(..., help="Name of the file to find."),
    path: Optional[Path] = typer.Option(None, "--path", help="Search in a specific directory"),
    global_search: bool = typer.Option(
        False, "--global", help="Search the entire system (default: current directory)"
    ),
    depth: Optional[int] = typer.Option(None, "--depth", help="Limit search depth (default: unlimited)"),
    threads: Optional[int] = typer.Option(None, "--threads", help="Number of threads (default: CPU cores)"),
    stop_after_match: bool = typer.Option(
        False, "--stop-after-match", help="Stop searching after first match is found"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed search information and warnings"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-essential output"),
    notify: bool = typer.Option(False, "--notify", help="Show desktop notification when found"),
) -> None:
    """Search for a file by name.

    Symbolic links are never followed, and a link to a file does not count as a file.
    """
    _setup_logging(verbose, quiet)
    config = _build_config(path, global_search, depth, threads, stop_after_match, verbose, quiet, notify)
    _search(SearchKind.FILE, name, config)


@app.command("folder")
def search_folder(
    name: str = typer.Argument(..., help="Name of the folder to find."),
    path: Optional[Path] = typer.Option(None, "--path", help="Search in a specific directory"),
    global_search: bool = typer.Option(
        False, "--global", help="Search the entire system (default: current directory)"
    ),
    depth: Optional[int] = typer.Option(None, "--depth", help="Limit search depth (default: unlimited)"),
    threads: Optional[int] = typer.Option(None, "--threads", help="Number of threads (default: CPU cores)"),
    stop_after_match: bool = typer.Option(
        False, "--stop-after-match", help="Stop searching after first match is found"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed search information and warnings"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-essential output"),
    notify: bool = typer.Option(False, "--notify", help="Show desktop notification when found"),
) -> None:
    """Search for a folder by name.

    Symbolic links are never followed, and a link to a folder does not count as a folder.
    """
    _setup_logging(verbose, quiet)
    config = _build_config(path, global_search, depth, threads, stop_after_match, verbose, quiet, notify)
    _search(SearchKind.DIRECTORY, name, config)
