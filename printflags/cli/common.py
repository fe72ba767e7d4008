"""
Common utilities shared across CLI commands.

This module provides:
- Manifest loading with user-facing error handling
- Printer construction from command options and settings
- Shared console and UI instances
"""

import logging
from pathlib import Path
from typing import Any

import click
import typer

from printflags.config import get_settings
from printflags.errors import NoCompatiblePrinterError, PrinterError
from printflags.printers import PrintFlags, ResourcePrinter, new_print_flags
from printflags.resources import load_manifests
from printflags.utils.ui import console, ui

__all__ = [
    "build_print_flags",
    "console",
    "load_objects",
    "logger",
    "OUTPUT_HELP",
    "print_objects",
    "select_printer",
    "STDIN_PATH",
    "ui",
]

logger = logging.getLogger(__name__)

STDIN_PATH = Path("-")

OUTPUT_HELP = f"Output format. One of: {'|'.join(PrintFlags().allowed_formats())}. Omit for a full success message."


def build_print_flags(operation: str, dry_run: bool | None) -> PrintFlags:
    """Build print flags, filling unset options from settings.

    Args:
        operation: Verb describing what happened ("created")
        dry_run: Explicit dry-run flag, or None to use the configured default
    """
    settings = get_settings()
    if dry_run is None:
        dry_run = settings.output.dry_run
    return new_print_flags(operation, dry_run=dry_run).with_default_output(settings.output.format)


def select_printer(print_flags: PrintFlags, output: str | None) -> ResourcePrinter:
    """Select a printer, reporting an unsupported format as a usage error.

    Raises:
        typer.BadParameter: If no printer handles the format
    """
    try:
        printer = print_flags.to_printer(output)
    except NoCompatiblePrinterError as e:
        logger.debug("Rejected output format %r", e.output_format)
        raise typer.BadParameter(str(e), param_hint="'--output' / '-o'") from e

    logger.debug("Selected %s for output %r", type(printer).__name__, output)
    return printer


def load_objects(files: list[Path]) -> list[dict[str, Any]]:
    """Load manifest objects from files, '-' meaning stdin.

    Raises:
        typer.Exit: If a file is missing or is not a valid manifest
    """
    objects: list[dict[str, Any]] = []
    for path in files:
        try:
            if path == STDIN_PATH:
                loaded = load_manifests(click.get_text_stream("stdin"))
            else:
                loaded = load_manifests(path)
        except FileNotFoundError:
            ui.error(f"File not found: {path}")
            raise typer.Exit(1)
        except PrinterError as e:
            ui.error(f"Could not read {path}", details=str(e))
            raise typer.Exit(1)

        if not loaded:
            ui.warning(f"No objects found in {path}")
        logger.debug("Loaded %d objects from %s", len(loaded), path)
        objects.extend(loaded)
    return objects


def print_objects(printer: ResourcePrinter, objects: list[Any]) -> None:
    """Print each object, stopping at the first one that cannot be printed.

    Raises:
        typer.Exit: If an object cannot be identified
    """
    for obj in objects:
        try:
            printer.print_obj(obj)
        except PrinterError as e:
            ui.error("Could not print object", details=str(e))
            raise typer.Exit(1)
