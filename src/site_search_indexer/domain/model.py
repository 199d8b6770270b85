"""Domain model - value objects flowing through the index build.

Everything here is immutable: a build creates routes, sections and documents
once, reads them while indexing, and drops them after the artifacts are
written. The model has no dependencies on parsing, indexing or storage.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any


PARENT_CATEGORY_SEPARATOR = " > "


class ContentType(str, Enum):
    """Kinds of pages the generator produces."""

    DOCS = "docs"
    BLOG = "blog"
    PAGE = "page"
    EXCLUDED = "excluded"


@dataclass(frozen=True)
class ContentPluginInstance:
    """A content plugin registered with the generator.

    Multi-instance and versioned sites register several plugins of the same
    type, each with its own route base path.
    """

    content_type: ContentType
    route_base_path: str
    tags_base_path: str = "tags"
    plugin_id: str = "default"


@dataclass(frozen=True)
class BuildRoute:
    """A produced route labelled with its content type."""

    url: str
    route: str
    content_type: ContentType

    @property
    def is_excluded(self) -> bool:
        return self.content_type is ContentType.EXCLUDED


@dataclass(frozen=True)
class BuildManifest:
    """What the generator hands over once rendering has finished.

    ``trailing_slash=False`` means pages were written as ``<route>.html``;
    ``True`` or ``None`` means directory-style ``<route>/index.html``.
    """

    routes: tuple[str, ...]
    out_dir: Path
    base_url: str = "/"
    trailing_slash: bool | None = None
    plugins: tuple[ContentPluginInstance, ...] = ()

    def plugins_for(self, content_type: ContentType) -> tuple[ContentPluginInstance, ...]:
        return tuple(plugin for plugin in self.plugins if plugin.content_type is content_type)


@dataclass(frozen=True)
class Section:
    """A sub-page unit of text with its own anchor and title."""

    hash: str
    title: str
    content: str
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class ParsedPage:
    """Result of running the section extractor over one rendered page."""

    page_title: str
    sections: tuple[Section, ...]
    sidebar_parent_categories: tuple[str, ...] | None = None


@dataclass(frozen=True)
class Document:
    """One indexable record; exactly one per section.

    ``id`` is unique across the whole crawl and assigned in route order, so
    documents produced from the same page are contiguous.
    """

    id: int
    page_title: str
    page_route: str
    section_route: str
    section_title: str
    section_content: str
    section_tags: tuple[str, ...]
    partition_tag: str
    content_type: ContentType
    sidebar_parent_categories: tuple[str, ...] | None = None

    @property
    def ref(self) -> str:
        """Index reference; the index only stores string refs."""
        return str(self.id)

    def display_title(self, *, include_parent_categories: bool) -> str:
        if include_parent_categories and self.sidebar_parent_categories:
            return PARENT_CATEGORY_SEPARATOR.join((*self.sidebar_parent_categories, self.page_title))
        return self.page_title

    def to_summary(self, *, include_parent_categories: bool = False) -> dict[str, Any]:
        """Serialize the fields the client needs to render a hit."""
        return {
            "id": self.id,
            "pageTitle": self.display_title(include_parent_categories=include_parent_categories),
            "sectionTitle": self.section_title,
            "sectionRoute": self.section_route,
            "type": self.content_type.value,
        }


@dataclass(frozen=True)
class IndexPartition:
    """Documents sharing one partition tag, in input order."""

    tag: str
    documents: tuple[Document, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.documents)
