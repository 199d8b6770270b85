"""Domain layer - immutable value objects for routes, sections and documents."""

from .model import (
    BuildManifest,
    BuildRoute,
    ContentPluginInstance,
    ContentType,
    Document,
    IndexPartition,
    ParsedPage,
    Section,
)


__all__ = [
    "BuildManifest",
    "BuildRoute",
    "ContentPluginInstance",
    "ContentType",
    "Document",
    "IndexPartition",
    "ParsedPage",
    "Section",
]
