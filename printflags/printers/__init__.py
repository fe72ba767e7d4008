"""
Printer selection for command output.

Selectors map an --output value to a printer; printers render objects.
"""

from ..errors import (
    DecodeError,
    MissingKindError,
    NoCompatiblePrinterError,
    PrinterError,
    is_no_compatible_printer_error,
)
from .interfaces import PrinterSelector, ResourcePrinter, ResourcePrinterFunc
from .name_flags import DRY_RUN_SUFFIX, NamePrintFlags, new_name_print_flags
from .name_printer import UNKNOWN_NAME, NamePrinter
from .print_flags import PrintFlags, new_print_flags

__all__ = [
    # Interfaces
    "PrinterSelector",
    "ResourcePrinter",
    "ResourcePrinterFunc",
    # Selectors
    "NamePrintFlags",
    "PrintFlags",
    "new_name_print_flags",
    "new_print_flags",
    "DRY_RUN_SUFFIX",
    # Printers
    "NamePrinter",
    "UNKNOWN_NAME",
    # Exceptions
    "PrinterError",
    "NoCompatiblePrinterError",
    "DecodeError",
    "MissingKindError",
    "is_no_compatible_printer_error",
]
