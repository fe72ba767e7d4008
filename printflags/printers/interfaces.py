"""
Base classes shared by every printer and printer selector.

A selector turns an --output value into a ResourcePrinter; a printer
turns an object into text. Callers only depend on these two contracts,
so any selector variant can stand in for another.
"""

import sys
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, TextIO

import click


class ResourcePrinter(ABC):
    """Renders objects as text."""

    @abstractmethod
    def render(self, obj: Any) -> str:
        """
        Render an object.

        Args:
            obj: Object to render

        Returns:
            Rendered text, newline-terminated per line
        """
        pass

    def print_obj(self, obj: Any, out: TextIO | None = None) -> None:
        """Write the rendered object to out (stdout by default)."""
        stream = out if out is not None else sys.stdout
        stream.write(self.render(obj))


class ResourcePrinterFunc(ResourcePrinter):
    """Adapts a plain render function to the ResourcePrinter interface."""

    def __init__(self, func: Callable[[Any], str]):
        self.func = func

    def render(self, obj: Any) -> str:
        return self.func(obj)


class PrinterSelector(ABC):
    """Maps a requested output format to a ResourcePrinter."""

    @abstractmethod
    def to_printer(self, output_format: str) -> ResourcePrinter:
        """
        Build a printer for output_format.

        Raises:
            NoCompatiblePrinterError: If this selector does not handle the format
        """
        pass

    @abstractmethod
    def allowed_formats(self) -> list[str]:
        """Output formats this selector accepts."""
        pass

    def register_flags(self, command: click.Command) -> None:
        """Bind the selector's command-line flags onto command."""
        return None
