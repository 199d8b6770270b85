"""Route classification.

Maps every route the generator produced to the content type that owns it, or
excludes it. Docs, blog and page plugins are consulted in that order and the
first plugin whose base path is a segment prefix of the route wins.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
import logging
import re

from site_search_indexer.config import IndexerOptions
from site_search_indexer.domain.model import BuildManifest, BuildRoute, ContentPluginInstance, ContentType
from site_search_indexer.errors import ConfigurationError, RouteConsistencyError


logger = logging.getLogger(__name__)

NOT_FOUND_ROUTE = "404.html"
INTERNAL_ROUTE_SEGMENT = "__docusaurus"

_INVALID_BASE_PATH = re.compile(r"//|[?#\s]")


def trim_leading_slash(path: str) -> str:
    return path[1:] if path.startswith("/") else path


def trim_trailing_slash(path: str) -> str:
    return path[:-1] if path.endswith("/") else path


def normalize_base_path(path: str) -> str:
    """Trim one leading and one trailing slash from a configured base path.

    >>> normalize_base_path("/docs/")
    'docs'
    """

    if _INVALID_BASE_PATH.search(path):
        raise ConfigurationError(f"Invalid base path {path!r}")
    return trim_trailing_slash(trim_leading_slash(path))


def join_route(*segments: str) -> str:
    return "/".join(segment for segment in segments if segment)


def url_matches_prefix(url: str, prefix: str) -> bool:
    """Return True when ``prefix`` covers ``url`` on whole path segments.

    ``docs`` matches ``docs`` and ``docs/intro`` but not ``docsearch``. The
    empty prefix matches every route.
    """

    if prefix.startswith("/") or prefix.endswith("/"):
        msg = f"prefix must not start or end with a slash, got {prefix!r}"
        raise ValueError(msg)
    if not prefix:
        return True
    return url == prefix or url.startswith(prefix + "/")


@dataclass(frozen=True)
class _PluginRoutes:
    content_type: ContentType
    base_path: str
    excluded_prefixes: tuple[str, ...]
    exclude_base_route: bool = False

    def matches(self, route: str) -> bool:
        return url_matches_prefix(route, self.base_path)

    def is_excluded(self, route: str) -> bool:
        if self.exclude_base_route and route == self.base_path:
            return True
        return any(url_matches_prefix(route, prefix) for prefix in self.excluded_prefixes)


def _plugin_routes(plugin: ContentPluginInstance) -> _PluginRoutes:
    base_path = normalize_base_path(plugin.route_base_path)
    internal = join_route(base_path, INTERNAL_ROUTE_SEGMENT)
    if plugin.content_type is ContentType.PAGE:
        return _PluginRoutes(ContentType.PAGE, base_path, (internal,))
    tags = join_route(base_path, normalize_base_path(plugin.tags_base_path))
    return _PluginRoutes(
        plugin.content_type,
        base_path,
        (tags, internal),
        exclude_base_route=plugin.content_type is ContentType.BLOG,
    )


class RouteClassifier:
    """Label generator routes with the content type that owns them."""

    def __init__(
        self,
        base_url: str,
        plugins: Sequence[ContentPluginInstance],
        *,
        index_docs: bool = True,
        index_blog: bool = True,
        index_pages: bool = False,
    ) -> None:
        if not base_url.startswith("/") or not base_url.endswith("/"):
            raise ConfigurationError(f"baseUrl must start and end with a slash, got {base_url!r}")
        self.base_url = base_url

        enabled = {
            ContentType.DOCS: index_docs,
            ContentType.BLOG: index_blog,
            ContentType.PAGE: index_pages,
        }
        self._plugins: list[_PluginRoutes] = []
        for content_type, is_enabled in enabled.items():
            if not is_enabled:
                continue
            matching = [plugin for plugin in plugins if plugin.content_type is content_type]
            if not matching:
                raise ConfigurationError(
                    f"Indexing of {content_type.value} is enabled but no {content_type.value} plugin is registered. "
                    f"Disable it in the search options or register the plugin."
                )
            self._plugins.extend(_plugin_routes(plugin) for plugin in matching)

    @classmethod
    def from_manifest(cls, manifest: BuildManifest, options: IndexerOptions) -> RouteClassifier:
        return cls(
            manifest.base_url,
            manifest.plugins,
            index_docs=options.index_docs,
            index_blog=options.index_blog,
            index_pages=options.index_pages,
        )

    def classify(self, url: str) -> BuildRoute:
        if not url.startswith(self.base_url):
            raise RouteConsistencyError(url, self.base_url)
        route = url[len(self.base_url) :]

        if route == NOT_FOUND_ROUTE:
            return BuildRoute(url=url, route=route, content_type=ContentType.EXCLUDED)

        # Plugins are ordered docs, blog, pages; the first base path match decides.
        for plugin in self._plugins:
            if not plugin.matches(route):
                continue
            if plugin.is_excluded(route):
                return BuildRoute(url=url, route=route, content_type=ContentType.EXCLUDED)
            return BuildRoute(url=url, route=route, content_type=plugin.content_type)

        return BuildRoute(url=url, route=route, content_type=ContentType.EXCLUDED)

    def classify_all(self, urls: Iterable[str]) -> list[BuildRoute]:
        """Classify every url and keep only the indexable ones, in input order."""

        routes = [self.classify(url) for url in urls]
        kept = [route for route in routes if not route.is_excluded]
        logger.debug("Classified %d routes, %d indexable", len(routes), len(kept))
        return kept
