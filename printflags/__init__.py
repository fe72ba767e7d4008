"""
printflags - output printer selection for resource operation reports.

Maps an --output value to a printer that reports what happened to a
resource, e.g. "deployment.apps/web created (dry run)".
"""

from .errors import DecodeError, MissingKindError, NoCompatiblePrinterError, PrinterError
from .printers import NamePrinter, NamePrintFlags, PrintFlags, new_name_print_flags, new_print_flags

__version__ = "0.1.0"
__all__ = [
    "DecodeError",
    "MissingKindError",
    "NamePrinter",
    "NamePrintFlags",
    "NoCompatiblePrinterError",
    "PrintFlags",
    "PrinterError",
    "new_name_print_flags",
    "new_print_flags",
]
