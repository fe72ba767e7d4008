"""
Composite selector behind a command's --output flag.

Usage:
    print_flags = new_print_flags("created", dry_run=args.dry_run)
    print_flags.register_flags(command)
    printer = print_flags.to_printer(output)
    printer.print_obj(obj)
"""

from dataclasses import dataclass, field, replace

import click

from ..errors import NoCompatiblePrinterError
from ..resources import ObjectResolver
from .interfaces import PrinterSelector, ResourcePrinter
from .name_flags import NamePrintFlags, new_name_print_flags


@dataclass(frozen=True)
class PrintFlags(PrinterSelector):
    """
    Every printer selector a command supports, tried in order.

    Attributes:
        name_print_flags: Selector for name and success-message output
        output_format: Format used when to_printer is called without one
    """

    name_print_flags: NamePrintFlags = field(default_factory=NamePrintFlags)
    output_format: str | None = None

    @property
    def selectors(self) -> list[PrinterSelector]:
        return [self.name_print_flags]

    def complete(self, success_template: str) -> "PrintFlags":
        """
        Return a copy whose operation is rendered through success_template.

        Args:
            success_template: %-style template, e.g. "%s (server dry run)"
        """
        operation = success_template % self.name_print_flags.operation
        return replace(self, name_print_flags=replace(self.name_print_flags, operation=operation))

    def with_default_output(self, output: str) -> "PrintFlags":
        """Return a copy that uses output when no format has been set."""
        if self.output_format:
            return self
        return replace(self, output_format=output)

    def allowed_formats(self) -> list[str]:
        formats: list[str] = []
        for selector in self.selectors:
            for output_format in selector.allowed_formats():
                if output_format not in formats:
                    formats.append(output_format)
        return formats

    def to_printer(self, output_format: str | None = None) -> ResourcePrinter:
        """
        Ask each selector for a printer, returning the first match.

        Args:
            output_format: Requested format (None = this object's output_format)

        Raises:
            NoCompatiblePrinterError: If no selector handles the format
        """
        if output_format is None:
            output_format = self.output_format or ""

        for selector in self.selectors:
            try:
                return selector.to_printer(output_format)
            except NoCompatiblePrinterError:
                continue

        raise NoCompatiblePrinterError(output_format, self.allowed_formats(), options=self)

    def register_flags(self, command: click.Command) -> None:
        """Add -o/--output to command (once), then each selector's flags."""
        if not any(param.name == "output" for param in command.params):
            command.params.append(
                click.Option(
                    ["-o", "--output"],
                    default=self.output_format or "",
                    show_default=False,
                    help=f"Output format. One of: {'|'.join(self.allowed_formats())}.",
                )
            )

        for selector in self.selectors:
            selector.register_flags(command)


def new_print_flags(operation: str, dry_run: bool = False, resolver: ObjectResolver | None = None) -> PrintFlags:
    """Return print flags for a command reporting operation on its objects."""
    return PrintFlags(name_print_flags=new_name_print_flags(operation, dry_run, resolver=resolver))
