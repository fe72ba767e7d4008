"""
Printer for --output=name and operation success messages.
"""

from typing import Any

from ..errors import MissingKindError
from ..resources import DefaultResolver, ObjectResolver, ResourceIdentity
from .interfaces import ResourcePrinter

UNKNOWN_NAME = "<unknown>"


class NamePrinter(ResourcePrinter):
    """
    Prints a resource's fully-qualified kind.group/name.

    Without short output, the operation is appended to form a success
    message such as "deployment.apps/web created". List objects print
    one line per item.
    """

    def __init__(
        self,
        operation: str = "",
        short_output: bool = False,
        resolver: ObjectResolver | None = None,
    ):
        """
        Initialize printer.

        Args:
            operation: Action description appended after the name
            short_output: Print only kind.group/name, never the operation
            resolver: Identifies the kind, group and name of printed objects
        """
        self.operation = operation
        self.short_output = short_output
        self.resolver = resolver or DefaultResolver()

    def render(self, obj: Any) -> str:
        items = self.resolver.items(obj)
        if items is not None:
            return "".join(self.render(item) for item in items)
        return self.format_identity(self.resolver.resolve(obj))

    def format_identity(self, identity: ResourceIdentity) -> str:
        """Render one resolved object as a single line."""
        name = identity.name or UNKNOWN_NAME
        if not identity.kind:
            raise MissingKindError(name)

        operation = ""
        if self.operation and not self.short_output:
            operation = " " + self.operation

        group_kind = identity.kind
        if identity.group:
            group_kind = f"{identity.kind}.{identity.group}"
        return f"{group_kind.lower()}/{name}{operation}\n"
