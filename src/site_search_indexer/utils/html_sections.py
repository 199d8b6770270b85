"""Default section and partition-tag extraction for Docusaurus-style pages.

A page is split on its ``h2``/``h3`` headings that carry an ``id`` anchor.
Text before the first anchored heading becomes the intro section, titled
with the page title and addressed by the page route itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import re

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from site_search_indexer.domain.model import ContentType, ParsedPage, Section
from site_search_indexer.errors import PartitionTagError


logger = logging.getLogger(__name__)

SECTION_HEADINGS = ("h2", "h3")
TITLE_HEADINGS = ("h1", *SECTION_HEADINGS)
PARTITION_TAG_META_NAMES = ("docusaurus_tag", "docsearch:docusaurus_tag")

_NOISE_SELECTOR = "script, style, noscript, nav, button, .hash-link, .theme-doc-toc-mobile, .pagination-nav"
_ACTIVE_CATEGORY_SELECTOR = ".menu__link--sublist.menu__link--active"
_TITLE_SUFFIX = re.compile(r"\s+\|\s+.*$")
_WHITESPACE = re.compile(r"\s+")


def _clean(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def _text(element: Tag) -> str:
    return _clean(element.get_text(" "))


@dataclass
class _SectionBuffer:
    hash: str
    title: str
    parts: list[str] = field(default_factory=list)

    def to_section(self, tags: tuple[str, ...]) -> Section:
        return Section(hash=self.hash, title=self.title, content=_clean(" ".join(self.parts)), tags=tags)


def _drop(root: Tag, selector: str) -> None:
    for element in root.select(selector):
        if not element.decomposed:
            element.decompose()


def _content_root(soup: BeautifulSoup, content_type: ContentType) -> Tag:
    if content_type is ContentType.PAGE:
        candidates = ("main", "article")
    else:
        candidates = ("article", "main")
    for name in candidates:
        element = soup.find(name)
        if isinstance(element, Tag):
            return element
    return soup.body if isinstance(soup.body, Tag) else soup


def _page_title(soup: BeautifulSoup, root: Tag) -> str:
    heading = root.find("h1")
    if isinstance(heading, Tag) and (title := _text(heading)):
        return title
    if soup.title is not None and soup.title.string:
        return _TITLE_SUFFIX.sub("", soup.title.string.strip())
    return ""


def _page_tags(root: Tag) -> tuple[str, ...]:
    tags: list[str] = []
    for link in root.find_all("a", href=True):
        href = link["href"]
        if isinstance(href, list):
            href = href[0] if href else ""
        if "/tags/" in href and (label := _text(link)):
            tags.append(label)
    return tuple(dict.fromkeys(tags))


def _sidebar_parent_categories(soup: BeautifulSoup) -> tuple[str, ...] | None:
    categories = [label for link in soup.select(_ACTIVE_CATEGORY_SELECTOR) if (label := _text(link))]
    return tuple(categories) or None


def extract_sections(html: str, content_type: ContentType, url: str) -> ParsedPage:
    """Split a rendered page into sections.

    Tags found on the page apply to every section. Sidebar ancestor
    categories are only collected for docs pages.
    """

    soup = BeautifulSoup(html, "html.parser")
    categories = _sidebar_parent_categories(soup) if content_type is ContentType.DOCS else None
    root = _content_root(soup, content_type)
    _drop(root, _NOISE_SELECTOR)
    page_title = _page_title(soup, root)
    tags = _page_tags(root) if content_type is not ContentType.PAGE else ()
    # Tag links live in the footer
    _drop(root, "footer")

    buffers = [_SectionBuffer(hash="", title=page_title)]
    for node in root.descendants:
        if isinstance(node, Tag):
            anchor = node.get("id")
            if node.name in SECTION_HEADINGS and isinstance(anchor, str) and anchor:
                buffers.append(_SectionBuffer(hash=f"#{anchor}", title=_text(node)))
            continue
        if not isinstance(node, NavigableString) or isinstance(node, Comment):
            continue
        if node.find_parent(TITLE_HEADINGS) is not None:
            continue
        buffers[-1].parts.append(str(node))

    sections = [buffer.to_section(tags) for buffer in buffers]
    # An empty intro section carries nothing the page title field would not.
    if len(sections) > 1 and not sections[0].content:
        sections = sections[1:]

    logger.debug("Extracted %d sections from %s", len(sections), url)
    return ParsedPage(page_title=page_title, sections=tuple(sections), sidebar_parent_categories=categories)


def extract_partition_tag(html: str) -> str:
    """Return the page's partition tag from its ``docusaurus_tag`` meta element."""

    soup = BeautifulSoup(html, "html.parser")
    for name in PARTITION_TAG_META_NAMES:
        meta = soup.find("meta", attrs={"name": name})
        if isinstance(meta, Tag):
            content = meta.get("content")
            if isinstance(content, str) and content.strip():
                return content.strip()
    raise PartitionTagError(f"No partition tag meta ({' or '.join(PARTITION_TAG_META_NAMES)}) found on page")
