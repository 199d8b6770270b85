"""Unit tests for document assembly and partitioning."""

from pathlib import Path
import threading

import pytest

from site_search_indexer.domain.model import BuildRoute, ContentType, ParsedPage
from site_search_indexer.errors import DocumentReadError
from site_search_indexer.service_layer.document_assembler import DocumentAssembler, resolve_html_path
from site_search_indexer.service_layer.partitioner import group_documents_by_tag, partition_documents



class TestResolveHtmlPath:
    def test_directory_style_by_default(self):
        assert resolve_html_path(Path("/out"), "docs/intro", trailing_slash=None) == Path("/out/docs/intro/index.html")
        assert resolve_html_path(Path("/out"), "docs/intro", trailing_slash=True) == Path("/out/docs/intro/index.html")

    def test_flat_files_when_trailing_slash_disabled(self):
        assert resolve_html_path(Path("/out"), "docs/intro", trailing_slash=False) == Path("/out/docs/intro.html")

    def test_root_route(self):
        assert resolve_html_path(Path("/out"), "", trailing_slash=False) == Path("/out/index.html")
        assert resolve_html_path(Path("/out"), "", trailing_slash=None) == Path("/out/index.html")


def docs_route(route: str) -> BuildRoute:
    return BuildRoute(url=f"/{route}", route=route, content_type=ContentType.DOCS)


@pytest.mark.asyncio
async def test_ids_are_contiguous_and_follow_route_order(site_dir, write_page, make_page, fake_extractors):
    write_page("docs/a", make_page("A", [("", "A", "intro"), ("#one", "One", "first"), ("#two", "Two", "second")]))
    write_page("docs/b", make_page("B", []))
    write_page("docs/c", make_page("C", [("", "C", "only")], tag="docs-v2", categories=["Guides"]))
    assembler = DocumentAssembler(site_dir, **fake_extractors)

    documents = await assembler.assemble([docs_route("docs/a"), docs_route("docs/b"), docs_route("docs/c")])

    assert [doc.id for doc in documents] == [1, 2, 3, 4]
    assert [doc.page_route for doc in documents] == ["/docs/a"] * 3 + ["/docs/c"]
    assert [doc.section_route for doc in documents[:3]] == ["/docs/a", "/docs/a#one", "/docs/a#two"]
    assert documents[1].section_title == "One"
    assert documents[1].section_content == "first"
    assert documents[3].partition_tag == "docs-v2"
    assert documents[3].sidebar_parent_categories == ("Guides",)
    assert documents[3].content_type is ContentType.DOCS


@pytest.mark.asyncio
async def test_ids_follow_route_order_when_reads_finish_out_of_order(site_dir, write_page, make_page, fake_extractors):
    for name in ("a", "b", "c"):
        write_page(f"docs/{name}", make_page(name.upper(), [("", name.upper(), name), ("#more", "More", name)]))
    extract = fake_extractors["section_extractor"]
    last_done = threading.Event()
    finished: list[str] = []

    def slow_first_page(html: str, content_type: ContentType, url: str) -> ParsedPage:
        if url == "/docs/a":
            last_done.wait(timeout=5)
        page = extract(html, content_type, url)
        finished.append(url)
        if url == "/docs/c":
            last_done.set()
        return page

    assembler = DocumentAssembler(
        site_dir, section_extractor=slow_first_page, tag_extractor=fake_extractors["tag_extractor"]
    )

    documents = await assembler.assemble([docs_route("docs/a"), docs_route("docs/b"), docs_route("docs/c")])

    assert finished[-1] == "/docs/a"
    assert [doc.id for doc in documents] == [1, 2, 3, 4, 5, 6]
    assert [doc.page_route for doc in documents] == ["/docs/a"] * 2 + ["/docs/b"] * 2 + ["/docs/c"] * 2


@pytest.mark.asyncio
async def test_flat_file_routing(site_dir, write_page, make_page, fake_extractors):
    write_page("docs/a", make_page("A", [("", "A", "flat")]), trailing_slash=False)
    assembler = DocumentAssembler(site_dir, trailing_slash=False, **fake_extractors)

    documents = await assembler.assemble([docs_route("docs/a")])

    assert documents[0].section_content == "flat"


@pytest.mark.asyncio
async def test_missing_file_raises_read_error(site_dir, fake_extractors):
    assembler = DocumentAssembler(site_dir, **fake_extractors)

    with pytest.raises(DocumentReadError) as exc_info:
        await assembler.assemble([docs_route("docs/missing")])

    assert exc_info.value.path == site_dir / "docs" / "missing" / "index.html"
    assert exc_info.value.url == "/docs/missing"


@pytest.mark.asyncio
async def test_no_routes_no_documents(site_dir, fake_extractors):
    assert await DocumentAssembler(site_dir, **fake_extractors).assemble([]) == []


@pytest.mark.asyncio
async def test_partitioning_preserves_order(site_dir, write_page, make_page, fake_extractors):
    write_page("docs/en-1", make_page("E1", [("", "E1", "x")], tag="en"))
    write_page("docs/fr-1", make_page("F1", [("", "F1", "x")], tag="fr"))
    write_page("docs/en-2", make_page("E2", [("", "E2", "x"), ("#s", "S", "y")], tag="en"))
    assembler = DocumentAssembler(site_dir, **fake_extractors)
    documents = await assembler.assemble([docs_route(r) for r in ("docs/en-1", "docs/fr-1", "docs/en-2")])

    groups = group_documents_by_tag(documents)
    partitions = partition_documents(documents)

    assert list(groups) == ["en", "fr"]
    assert [doc.id for doc in groups["en"]] == [1, 3, 4]
    assert [doc.id for doc in groups["fr"]] == [2]
    assert [(p.tag, len(p)) for p in partitions] == [("en", 3), ("fr", 1)]
    assert sum(len(p) for p in partitions) == len(documents)


def test_partitioning_empty_input():
    assert group_documents_by_tag([]) == {}
    assert partition_documents([]) == []
