"""
Resolve arbitrary objects to their kind, group and name.

Printers never inspect objects themselves; they ask an ObjectResolver.
The default resolver understands:
- plain mappings shaped like manifests (apiVersion/kind/metadata.name)
- pydantic Resource and ResourceList models
- any Python type registered in a KindRegistry

Usage:
    registry = KindRegistry()
    registry.register(Widget, kind="Widget", group="example.io")
    resolver = DefaultResolver(registry)
    resolver.resolve({"apiVersion": "apps/v1", "kind": "Deployment", "metadata": {"name": "web"}})
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol, TextIO, runtime_checkable

import yaml

from ..errors import DecodeError
from .models import GroupKind, Resource, ResourceIdentity, ResourceList


@runtime_checkable
class ObjectResolver(Protocol):
    """Capability to identify objects handed to a printer."""

    def resolve(self, obj: Any) -> ResourceIdentity:
        """Return the kind, group and name of obj, or raise DecodeError."""
        ...

    def items(self, obj: Any) -> list[Any] | None:
        """Return the members of a list object, or None if obj is not a list."""
        ...


class KindRegistry:
    """Maps Python types to the GroupKind their instances represent."""

    def __init__(self) -> None:
        self._kinds: dict[type, GroupKind] = {}

    def register(self, obj_type: type, kind: str, group: str = "") -> None:
        self._kinds[obj_type] = GroupKind(kind=kind, group=group)

    def kind_for(self, obj: Any) -> GroupKind | None:
        """Look up obj's type (and its base classes) in the registry."""
        for klass in type(obj).__mro__:
            if klass in self._kinds:
                return self._kinds[klass]
        return None

    def __contains__(self, obj_type: type) -> bool:
        return obj_type in self._kinds

    def __len__(self) -> int:
        return len(self._kinds)


def _is_list_kind(kind: Any) -> bool:
    return isinstance(kind, str) and kind.endswith("List")


class DefaultResolver:
    """ObjectResolver for manifests, pydantic models and registered types."""

    def __init__(self, registry: KindRegistry | None = None) -> None:
        self.registry = registry or KindRegistry()

    def items(self, obj: Any) -> list[Any] | None:
        if isinstance(obj, ResourceList):
            return list(obj.items)
        if isinstance(obj, (list, tuple)):
            return list(obj)
        if isinstance(obj, Mapping) and _is_list_kind(obj.get("kind")):
            members = obj.get("items")
            if members is None:
                return []
            if not isinstance(members, list):
                raise DecodeError(f"{obj.get('kind')} items must be a list, got {type(members).__name__}")
            return members
        return None

    def resolve(self, obj: Any) -> ResourceIdentity:
        if obj is None:
            raise DecodeError("cannot resolve the kind of a null object")

        if isinstance(obj, Resource):
            return self._with_fallback(obj, obj.group_kind, obj.name)

        if isinstance(obj, Mapping):
            metadata = obj.get("metadata") or {}
            if not isinstance(metadata, Mapping):
                raise DecodeError(f"metadata must be a mapping, got {type(metadata).__name__}")
            for key in ("apiVersion", "kind"):
                value = obj.get(key)
                if value is not None and not isinstance(value, str):
                    raise DecodeError(f"{key} must be a string, got {type(value).__name__}")
            group_kind = GroupKind.from_api_version(obj.get("apiVersion"), obj.get("kind"))
            return self._with_fallback(obj, group_kind, str(metadata.get("name") or ""))

        group_kind = self.registry.kind_for(obj)
        if group_kind is None:
            raise DecodeError(f"no kind is registered for the type {type(obj).__name__}")
        return ResourceIdentity(kind=group_kind.kind, group=group_kind.group, name=_object_name(obj))

    def _with_fallback(self, obj: Any, group_kind: GroupKind, name: str) -> ResourceIdentity:
        # Objects that do not carry a kind may still be typed through the registry
        if not group_kind.kind:
            group_kind = self.registry.kind_for(obj) or group_kind
        return ResourceIdentity(kind=group_kind.kind, group=group_kind.group, name=name)


def _object_name(obj: Any) -> str:
    metadata = getattr(obj, "metadata", None)
    if metadata is not None:
        name = metadata.get("name") if isinstance(metadata, Mapping) else getattr(metadata, "name", None)
        if name:
            return str(name)
    return str(getattr(obj, "name", "") or "")


def load_manifests(source: str | Path | TextIO) -> list[dict[str, Any]]:
    """
    Load manifest objects from a YAML file or stream.

    Multi-document streams yield one object per document; empty
    documents are skipped.

    Args:
        source: Path to a YAML file, or an open text stream

    Returns:
        List of manifest mappings

    Raises:
        DecodeError: If the YAML is malformed or a document is not a mapping
        FileNotFoundError: If source is a path that does not exist
    """
    if isinstance(source, (str, Path)):
        with open(source, encoding="utf-8") as f:
            return load_manifests(f)

    try:
        documents = [doc for doc in yaml.safe_load_all(source) if doc is not None]
    except yaml.YAMLError as e:
        raise DecodeError(f"invalid manifest: {e}") from e

    for index, doc in enumerate(documents):
        if not isinstance(doc, dict):
            raise DecodeError(f"document {index} is a {type(doc).__name__}, expected a mapping")
    return documents
