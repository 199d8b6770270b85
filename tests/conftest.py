"""Shared test fixtures: rendered-site builders and fake extractors."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import orjson
import pytest

from site_search_indexer.domain.model import ContentType, ParsedPage, Section
from site_search_indexer.service_layer.document_assembler import resolve_html_path


def page_payload(
    title: str,
    sections: Sequence[tuple[str, str, str]] = (),
    *,
    tag: str = "default",
    tags: Sequence[str] = (),
    categories: Sequence[str] | None = None,
) -> str:
    """Serialize a page for the fake extractors; sections are (hash, title, content)."""

    return orjson.dumps(
        {
            "title": title,
            "sections": [list(section) for section in sections],
            "tag": tag,
            "tags": list(tags),
            "categories": list(categories) if categories is not None else None,
        }
    ).decode("utf-8")


def fake_section_extractor(html: str, content_type: ContentType, url: str) -> ParsedPage:
    data = orjson.loads(html)
    tags = tuple(data["tags"])
    categories = data["categories"]
    return ParsedPage(
        page_title=data["title"],
        sections=tuple(Section(hash=h, title=t, content=c, tags=tags) for h, t, c in data["sections"]),
        sidebar_parent_categories=tuple(categories) if categories is not None else None,
    )


def fake_tag_extractor(html: str) -> str:
    return orjson.loads(html)["tag"]


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    out_dir = tmp_path / "build"
    out_dir.mkdir()
    return out_dir


@pytest.fixture
def write_page(site_dir: Path) -> Callable[..., Path]:
    """Write a rendered page where the assembler will look for ``route``."""

    def _write(route: str, content: str, *, trailing_slash: bool | None = None) -> Path:
        path = resolve_html_path(site_dir, route, trailing_slash=trailing_slash)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_page() -> Callable[..., str]:
    return page_payload


@pytest.fixture
def fake_extractors() -> dict[str, Callable]:
    """Keyword arguments wiring the fake extractors into an assembler or pipeline."""

    return {"section_extractor": fake_section_extractor, "tag_extractor": fake_tag_extractor}
