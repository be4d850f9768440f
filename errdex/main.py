#!/usr/bin/env python3
"""
Main CLI entry point for errdex
"""

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from errdex import __version__
from errdex.config import get_env_info, load_env_files, load_settings
from errdex.exceptions import ErrdexError
from errdex.repository import ReportRepository
from errdex.utils.logging_utils import setup_tui_logging
from errdex.utils.output import console, err_console

app = typer.Typer(add_completion=False)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"errdex version {__version__}")
        raise typer.Exit()


def _print_config() -> None:
    table = Table(title="errdex Configuration", show_header=True, header_style="bold magenta")
    table.add_column("Variable", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")
    table.add_column("Default", style="dim")
    table.add_column("Description")

    for name, info in get_env_info().items():
        value = info["value"] if info["is_set"] else "[dim](not set)[/dim]"
        table.add_row(name, value, info["default"] or "", info["description"])

    console.print(table)


@app.command()
def main(
    init_index: bool = typer.Option(
        False, "--init-index", help="Configure the Meilisearch index attributes and exit"
    ),
    show_config: bool = typer.Option(
        False, "--show-config", help="Show configuration environment variables and exit"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="File to write logs to (default: ~/.config/errdex/errdex.log)"
    ),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """
    errdex - Error Report Knowledge Base

    Record and search error reports (symptom, program, distro, resources,
    solution) stored in Meilisearch.
    """
    logger, _ = setup_tui_logging(debug=debug, log_file=log_file)

    load_env_files()
    if show_config:
        _print_config()
        return

    try:
        settings = load_settings()
    except ErrdexError as e:
        err_console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1) from e

    repository = ReportRepository(settings)

    if init_index:
        logger.info("Initializing Meilisearch index %s...", settings.index_name)
        try:
            repository.ensure_index_configured()
        except ErrdexError as e:
            logger.error("Error initializing index: %s", e)
            err_console.print(f"[red]❌ Error initializing index: {e}[/red]")
            raise typer.Exit(1) from e
        console.print("[green]✅ Index initialized successfully![/green]")
        return

    from errdex.ui.app import run_tui

    try:
        run_tui(repository)
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logger.exception("TUI crashed")
        err_console.print(f"[red]❌ Error: {e}[/red]")
        raise typer.Exit(1) from e


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
