"""
Rich UI utilities for console feedback.

Messages go to stderr; stdout is reserved for printer output so it can
be piped.

Usage:
    from printflags.utils.ui import console, ui

    ui.error("Could not read manifest.yaml", details="invalid manifest")
    table = ui.create_table("Output formats", columns=["Format", "Prints"])
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

PRINTFLAGS_THEME = Theme(
    {
        "error": "bold red",
        "warning": "bold yellow",
        "muted": "dim white",
    }
)

console = Console(theme=PRINTFLAGS_THEME, stderr=True, highlight=False)


class Icons:
    """Unicode icons for consistent visual feedback."""

    ERROR = "✗"
    WARNING = "⚠"


class UIHelper:
    """Central UI helper for consistent visual output."""

    def __init__(self, console: Console):
        self.console = console

    def _message(self, style: str, prefix: str, message: str, details: str | None) -> None:
        text = Text()
        text.append(f"{prefix} ", style=style)
        text.append(message, style=style)
        if details:
            text.append(f"\n   {details}", style="muted")
        self.console.print(text)

    def error(self, message: str, details: str | None = None) -> None:
        """Print an error message."""
        self._message("error", Icons.ERROR, message, details)

    def warning(self, message: str, details: str | None = None) -> None:
        """Print a warning message."""
        self._message("warning", Icons.WARNING, message, details)

    def create_table(self, title: str | None, columns: list[str]) -> Table:
        """Create a table with bold headers."""
        table = Table(title=title, header_style="bold")
        for column in columns:
            table.add_column(column)
        return table


ui = UIHelper(console)

__all__ = [
    "console",
    "ui",
    "Icons",
    "UIHelper",
    "PRINTFLAGS_THEME",
]
