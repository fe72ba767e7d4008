"""
CLI module for printflags.

- common: shared loading, printer selection and console helpers
- operations: report/create/apply/delete commands
"""

from printflags.cli.common import build_print_flags, console, load_objects, print_objects, select_printer, ui
from printflags.cli.operations import apply, create, delete, report, run_operation

__all__ = [
    "apply",
    "build_print_flags",
    "console",
    "create",
    "delete",
    "load_objects",
    "print_objects",
    "report",
    "run_operation",
    "select_printer",
    "ui",
]
