"""
Operation CLI commands.

Commands that report an operation on every object in a set of manifests:
- report: report any operation verb
- create, apply, delete: report with a fixed verb

Operations are reported, not performed.
"""

import logging
from pathlib import Path

import typer

from printflags.cli.common import OUTPUT_HELP, build_print_flags, load_objects, print_objects, select_printer

logger = logging.getLogger(__name__)

FILES_ARGUMENT_HELP = "Manifest files (YAML, multi-document allowed); '-' reads stdin"
DRY_RUN_HELP = "Mark the reported operation as a dry run"


def run_operation(files: list[Path], operation: str, dry_run: bool | None, output: str | None) -> None:
    """Load manifests and print each object through the selected printer."""
    print_flags = build_print_flags(operation, dry_run)
    printer = select_printer(print_flags, output)
    objects = load_objects(files)
    logger.debug("Reporting %r for %d objects", operation, len(objects))
    print_objects(printer, objects)


def report(
    files: list[Path] = typer.Argument(..., help=FILES_ARGUMENT_HELP),
    operation: str = typer.Option("", "--operation", help="Verb describing what happened (e.g. 'labeled')"),
    dry_run: bool | None = typer.Option(None, "--dry-run/--no-dry-run", help=DRY_RUN_HELP),
    output: str | None = typer.Option(None, "--output", "-o", help=OUTPUT_HELP),
):
    """Report an arbitrary operation on each object."""
    run_operation(files, operation, dry_run, output)


def create(
    files: list[Path] = typer.Argument(..., help=FILES_ARGUMENT_HELP),
    dry_run: bool | None = typer.Option(None, "--dry-run/--no-dry-run", help=DRY_RUN_HELP),
    output: str | None = typer.Option(None, "--output", "-o", help=OUTPUT_HELP),
):
    """Report each object as created."""
    run_operation(files, "created", dry_run, output)


def apply(
    files: list[Path] = typer.Argument(..., help=FILES_ARGUMENT_HELP),
    dry_run: bool | None = typer.Option(None, "--dry-run/--no-dry-run", help=DRY_RUN_HELP),
    output: str | None = typer.Option(None, "--output", "-o", help=OUTPUT_HELP),
):
    """Report each object as configured."""
    run_operation(files, "configured", dry_run, output)


def delete(
    files: list[Path] = typer.Argument(..., help=FILES_ARGUMENT_HELP),
    dry_run: bool | None = typer.Option(None, "--dry-run/--no-dry-run", help=DRY_RUN_HELP),
    output: str | None = typer.Option(None, "--output", "-o", help=OUTPUT_HELP),
):
    """Report each object as deleted."""
    run_operation(files, "deleted", dry_run, output)
