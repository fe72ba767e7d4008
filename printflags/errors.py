"""
Exceptions raised while selecting or running a resource printer.
"""

from typing import Any


class PrinterError(Exception):
    """Base exception for printer selection and rendering errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class NoCompatiblePrinterError(PrinterError):
    """
    No printer matches the requested output format.

    Attributes:
        output_format: The rejected format string, as the caller passed it
        allowed_formats: Formats the rejecting selector would have accepted
        options: The selector that rejected the format
    """

    def __init__(
        self,
        output_format: str | None,
        allowed_formats: list[str] | None = None,
        options: Any = None,
    ) -> None:
        self.output_format = output_format
        self.allowed_formats = sorted(allowed_formats or [])
        self.options = options
        super().__init__(
            f'unable to match a printer suitable for the output format "{output_format or ""}", '
            f"allowed formats are: {','.join(self.allowed_formats)}"
        )


class DecodeError(PrinterError):
    """An object could not be resolved to a kind, group and name."""

    pass


class MissingKindError(PrinterError):
    """An object was resolved but carries no kind."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"missing kind for resource with name {name}")


def is_no_compatible_printer_error(err: BaseException | None) -> bool:
    """Return True if err reports an unsupported output format."""
    return isinstance(err, NoCompatiblePrinterError)
