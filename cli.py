#!/usr/bin/env python3
"""
CLI for reporting operations on resources.

Reads manifests and prints one line per object through the printer
selected by --output, e.g. "pod/foo created (dry run)".

This is the main entry point that assembles the commands from the
printflags/cli/ modules.
"""

import sys
from pathlib import Path

import typer
from rich.console import Console

from printflags import __version__
from printflags.cli.common import build_print_flags, ui
from printflags.cli.operations import apply, create, delete, report
from printflags.config import get_settings, reload_settings
from printflags.logging import configure_logging, get_logger

# Create main app
app = typer.Typer(
    name="printflags",
    help="Report operations on resources read from manifests",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Register operation commands
app.command("report")(report)
app.command("create")(create)
app.command("apply")(apply)
app.command("delete")(delete)

logger = get_logger("main")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"printflags {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    config: Path | None = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """Report operations on resources read from manifests."""
    settings = reload_settings(config) if config else get_settings()
    level = "debug" if verbose else settings.logging.level
    configure_logging(level=level, file_path=settings.logging.file, use_rich=settings.logging.use_rich)
    logger.debug("Loaded settings (config=%s)", config)


@app.command()
def formats():
    """List the supported output formats."""
    print_flags = build_print_flags("", dry_run=False)
    table = ui.create_table("Output formats", columns=["Format", "Prints"])
    for output_format in print_flags.allowed_formats():
        table.add_row(output_format, "kind.group/name only")
    table.add_row('"" (default)', "kind.group/name followed by the operation")
    Console(file=sys.stdout).print(table)


if __name__ == "__main__":
    app()
