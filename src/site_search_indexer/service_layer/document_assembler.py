"""Turn classified routes into numbered section documents."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Protocol

from site_search_indexer.domain.model import BuildRoute, ContentType, Document, ParsedPage
from site_search_indexer.errors import DocumentReadError
from site_search_indexer.utils.html_sections import extract_partition_tag, extract_sections


logger = logging.getLogger(__name__)


class SectionExtractor(Protocol):
    """Converts rendered HTML into a page title, sections and sidebar ancestors."""

    def __call__(self, html: str, content_type: ContentType, url: str) -> ParsedPage:  # pragma: no cover - interface definition
        ...


class TagExtractor(Protocol):
    """Returns the partition tag a rendered page belongs to."""

    def __call__(self, html: str) -> str:  # pragma: no cover - interface definition
        ...


def resolve_html_path(out_dir: Path, route: str, *, trailing_slash: bool | None) -> Path:
    """Locate the rendered file for ``route``.

    ``trailing_slash=False`` builds write ``<route>.html`` (the root route is
    ``index.html``); every other setting writes ``<route>/index.html``.
    """

    if trailing_slash is False:
        return out_dir / f"{route or 'index'}.html"
    return out_dir / route / "index.html"


@dataclass(frozen=True)
class _ParsedRoute:
    route: BuildRoute
    page: ParsedPage
    partition_tag: str


class DocumentAssembler:
    """Read every page concurrently, then number sections in route order.

    Reads and parsing run in worker threads and may finish in any order. Ids
    are handed out only after all of them complete, walking results in the
    order the routes were given, so they are stable across runs.
    """

    def __init__(
        self,
        out_dir: Path,
        *,
        trailing_slash: bool | None = None,
        section_extractor: SectionExtractor | None = None,
        tag_extractor: TagExtractor | None = None,
    ) -> None:
        self.out_dir = Path(out_dir)
        self.trailing_slash = trailing_slash
        self.section_extractor: SectionExtractor = section_extractor or extract_sections
        self.tag_extractor: TagExtractor = tag_extractor or extract_partition_tag

    def _parse(self, route: BuildRoute) -> _ParsedRoute:
        path = resolve_html_path(self.out_dir, route.route, trailing_slash=self.trailing_slash)
        logger.debug("Parsing %s file %s", route.content_type.value, path, extra={"url": route.url})
        try:
            html = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentReadError(path, route.url, str(exc)) from exc
        page = self.section_extractor(html, route.content_type, route.url)
        return _ParsedRoute(route=route, page=page, partition_tag=self.tag_extractor(html))

    async def assemble(self, routes: Sequence[BuildRoute]) -> list[Document]:
        parsed = await asyncio.gather(*(asyncio.to_thread(self._parse, route) for route in routes))

        documents: list[Document] = []
        next_id = 1
        for item in parsed:
            for section in item.page.sections:
                documents.append(
                    Document(
                        id=next_id,
                        page_title=item.page.page_title,
                        page_route=item.route.url,
                        section_route=item.route.url + section.hash,
                        section_title=section.title,
                        section_content=section.content,
                        section_tags=section.tags,
                        partition_tag=item.partition_tag,
                        content_type=item.route.content_type,
                        sidebar_parent_categories=item.page.sidebar_parent_categories,
                    )
                )
                next_id += 1
        return documents
