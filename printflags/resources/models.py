"""
Pydantic models for manifest objects and their identity.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def parse_api_version(api_version: str | None) -> tuple[str, str]:
    """
    Split an apiVersion into (group, version).

    "apps/v1" -> ("apps", "v1"), "v1" -> ("", "v1"), "" -> ("", "").
    """
    if not api_version:
        return "", ""
    if "/" not in api_version:
        return "", api_version
    group, version = api_version.split("/", 1)
    return group, version


class GroupKind(BaseModel):
    """A resource type: its kind within an API group."""

    model_config = ConfigDict(frozen=True)

    kind: str = ""
    group: str = ""

    @classmethod
    def from_api_version(cls, api_version: str | None, kind: str | None) -> "GroupKind":
        group, _ = parse_api_version(api_version)
        return cls(kind=kind or "", group=group)


class ResourceIdentity(BaseModel):
    """Kind, group and name of a single resource."""

    model_config = ConfigDict(frozen=True)

    kind: str = ""
    group: str = ""
    name: str = ""

    @property
    def group_kind(self) -> GroupKind:
        return GroupKind(kind=self.kind, group=self.group)


class ObjectMeta(BaseModel):
    """Object metadata."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str = ""
    namespace: str | None = None
    labels: dict[str, str] = Field(default_factory=dict)
    annotations: dict[str, str] = Field(default_factory=dict)


class Resource(BaseModel):
    """A single manifest object."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    api_version: str = Field(default="", alias="apiVersion")
    kind: str = ""
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)

    @property
    def group_kind(self) -> GroupKind:
        return GroupKind.from_api_version(self.api_version, self.kind)

    @property
    def name(self) -> str:
        return self.metadata.name


class ResourceList(BaseModel):
    """A list of manifest objects (kind "List" or "<Kind>List")."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    api_version: str = Field(default="v1", alias="apiVersion")
    kind: str = "List"
    items: list[Any] = Field(default_factory=list)
