"""
Selector for name printing.
"""

from dataclasses import dataclass, field

import click

from ..errors import NoCompatiblePrinterError
from ..resources import DefaultResolver, ObjectResolver
from .interfaces import PrinterSelector, ResourcePrinter
from .name_printer import NamePrinter

DRY_RUN_SUFFIX = " (dry run)"


@dataclass(frozen=True)
class NamePrintFlags(PrinterSelector):
    """
    Options for printing a resource's kind.group/name, or a success
    message about that resource when an operation is provided.

    Attributes:
        operation: Action that took place on the object ("created"),
            included in the success message. May be empty.
        dry_run: Append " (dry run)" to the success message
        resolver: Identifies objects for the printers this selector builds
    """

    operation: str = ""
    dry_run: bool = False
    resolver: ObjectResolver = field(default_factory=DefaultResolver, compare=False, repr=False)

    def allowed_formats(self) -> list[str]:
        return ["name"]

    def to_printer(self, output_format: str) -> ResourcePrinter:
        """
        Build a printer for --output=name or for the default success message.

        "name" prints kind.group/name only; "" prints the full message.
        Matching is case-insensitive.

        Raises:
            NoCompatiblePrinterError: For any other format
        """
        operation = self.operation
        if self.dry_run:
            operation = operation + DRY_RUN_SUFFIX

        requested = (output_format or "").lower()
        if requested == "name":
            return NamePrinter(operation=operation, short_output=True, resolver=self.resolver)
        elif requested == "":
            return NamePrinter(operation=operation, short_output=False, resolver=self.resolver)

        raise NoCompatiblePrinterError(output_format, self.allowed_formats(), options=self)

    def register_flags(self, command: click.Command) -> None:
        # operation and dry_run come from the constructor
        return None


def new_name_print_flags(operation: str, dry_run: bool, resolver: ObjectResolver | None = None) -> NamePrintFlags:
    """Return name printing options with defaults set."""
    if resolver is None:
        return NamePrintFlags(operation=operation, dry_run=dry_run)
    return NamePrintFlags(operation=operation, dry_run=dry_run, resolver=resolver)
