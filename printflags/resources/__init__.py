"""
Resource identity models and resolvers.
"""

from .models import GroupKind, ObjectMeta, Resource, ResourceIdentity, ResourceList, parse_api_version
from .resolver import DefaultResolver, KindRegistry, ObjectResolver, load_manifests

__all__ = [
    # Models
    "GroupKind",
    "ObjectMeta",
    "Resource",
    "ResourceIdentity",
    "ResourceList",
    "parse_api_version",
    # Resolution
    "DefaultResolver",
    "KindRegistry",
    "ObjectResolver",
    "load_manifests",
]
