"""Unit tests for route classification."""

import pytest

from site_search_indexer.config import load_options
from site_search_indexer.domain.model import BuildManifest, ContentPluginInstance, ContentType
from site_search_indexer.errors import ConfigurationError, RouteConsistencyError
from site_search_indexer.service_layer.route_classifier import (
    RouteClassifier,
    normalize_base_path,
    url_matches_prefix,
)


DOCS = ContentPluginInstance(ContentType.DOCS, "/docs", tags_base_path="tags")
BLOG = ContentPluginInstance(ContentType.BLOG, "/blog", tags_base_path="/tags/")
PAGES = ContentPluginInstance(ContentType.PAGE, "/")


def classifier(*plugins, base_url="/", **flags):
    flags.setdefault("index_blog", False)
    return RouteClassifier(base_url, plugins, **flags)


class TestUrlMatchesPrefix:
    @pytest.mark.parametrize(
        ("url", "prefix", "expected"),
        [
            ("docs", "docs", True),
            ("docs/intro", "docs", True),
            ("docsearch", "docs", False),
            ("doc", "docs", False),
            ("anything/at/all", "", True),
            ("", "", True),
        ],
    )
    def test_exact_segment_matching(self, url, prefix, expected):
        assert url_matches_prefix(url, prefix) is expected

    @pytest.mark.parametrize("prefix", ["/docs", "docs/", "/"])
    def test_slash_delimited_prefix_is_a_bug(self, prefix):
        with pytest.raises(ValueError):
            url_matches_prefix("docs", prefix)


class TestNormalizeBasePath:
    @pytest.mark.parametrize(("raw", "expected"), [("/docs/", "docs"), ("docs", "docs"), ("/", ""), ("", "")])
    def test_trims_one_slash_each_side(self, raw, expected):
        assert normalize_base_path(raw) == expected

    @pytest.mark.parametrize("raw", ["//docs", "/docs?x=1", "/do cs", "/docs#top"])
    def test_invalid_formats_rejected(self, raw):
        with pytest.raises(ConfigurationError):
            normalize_base_path(raw)


def test_docs_tags_and_not_found_are_excluded():
    routes = classifier(DOCS).classify_all(["/docs/intro", "/docs/tags", "/404.html"])

    assert [(r.url, r.route, r.content_type) for r in routes] == [("/docs/intro", "docs/intro", ContentType.DOCS)]


@pytest.mark.parametrize(
    "url",
    ["/docs/tags/setup", "/docs/__docusaurus/debug", "/404.html", "/unrelated", "/docsearch"],
)
def test_excluded_docs_routes(url):
    assert classifier(DOCS).classify(url).is_excluded


def test_docs_base_route_itself_is_indexed():
    assert classifier(DOCS).classify("/docs").content_type is ContentType.DOCS


class TestBlog:
    def test_blog_posts_indexed_but_listing_and_tags_excluded(self):
        blog = classifier(BLOG, index_docs=False, index_blog=True)

        assert blog.classify("/blog/hello-world").content_type is ContentType.BLOG
        assert blog.classify("/blog").is_excluded
        assert blog.classify("/blog/tags/release").is_excluded
        assert blog.classify("/blog/__docusaurus/debug").is_excluded


class TestPages:
    def test_pages_catch_remaining_routes_after_docs(self):
        both = classifier(DOCS, PAGES, index_pages=True)

        assert both.classify("/docs/intro").content_type is ContentType.DOCS
        assert both.classify("/docs/tags/x").is_excluded
        assert both.classify("/about").content_type is ContentType.PAGE
        assert both.classify("/").content_type is ContentType.PAGE
        assert both.classify("/__docusaurus/debug").is_excluded

    def test_pages_disabled_by_default(self):
        assert classifier(DOCS, PAGES).classify("/about").is_excluded


def test_classification_is_exclusive_and_first_docs_plugin_wins():
    versioned = ContentPluginInstance(ContentType.DOCS, "/docs/next", plugin_id="next")
    generic = ContentPluginInstance(ContentType.DOCS, "/docs", plugin_id="default")
    community = ContentPluginInstance(ContentType.DOCS, "/community", tags_base_path="labels", plugin_id="community")
    multi = classifier(versioned, generic, community)

    assert multi.classify("/docs/next/intro").content_type is ContentType.DOCS
    assert multi.classify("/docs/intro").content_type is ContentType.DOCS
    assert multi.classify("/community/labels/help").is_excluded
    assert multi.classify("/community/tags").content_type is ContentType.DOCS


def test_base_url_prefix_is_stripped_from_route():
    localized = classifier(DOCS, base_url="/fr/")

    route = localized.classify("/fr/docs/intro")

    assert route.route == "docs/intro"
    assert route.url == "/fr/docs/intro"
    assert route.content_type is ContentType.DOCS


def test_route_outside_base_url_is_a_consistency_error():
    with pytest.raises(RouteConsistencyError, match="must start with the baseUrl"):
        classifier(DOCS, base_url="/fr/").classify("/de/docs/intro")


@pytest.mark.parametrize(
    ("flags", "plugins"),
    [
        ({"index_docs": True}, (BLOG,)),
        ({"index_docs": False, "index_blog": True}, (DOCS,)),
        ({"index_docs": False, "index_pages": True}, (DOCS,)),
    ],
)
def test_enabled_type_without_plugin_is_configuration_error(flags, plugins):
    with pytest.raises(ConfigurationError, match="no .* plugin is registered"):
        classifier(*plugins, **flags)


def test_from_manifest_uses_option_flags(tmp_path):
    manifest = BuildManifest(routes=("/docs/a",), out_dir=tmp_path, plugins=(DOCS, PAGES))
    options = load_options(index_blog=False, index_pages=True)

    routes = RouteClassifier.from_manifest(manifest, options).classify_all(["/docs/a", "/contact"])

    assert [route.content_type for route in routes] == [ContentType.DOCS, ContentType.PAGE]
