"""Command line entry point for building search artifacts outside the generator.

The manifest file is the JSON the generator would hand to the post-build hook::

    {
      "outDir": "build",
      "baseUrl": "/",
      "trailingSlash": null,
      "routes": ["/docs/intro", "/blog/hello"],
      "plugins": [{"contentType": "docs", "routeBasePath": "/docs"}],
      "options": {"language": ["en", "fr"]}
    }
"""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import Sequence
import logging
from pathlib import Path
import sys
from typing import Any

import orjson
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from site_search_indexer.config import IndexerSettings, load_options
from site_search_indexer.domain.model import BuildManifest, ContentPluginInstance, ContentType
from site_search_indexer.errors import ConfigurationError, SearchIndexError
from site_search_indexer.observability.logging import configure_logging
from site_search_indexer.observability.tracing import init_tracing
from site_search_indexer.service_layer.pipeline import SearchIndexPipeline


logger = logging.getLogger(__name__)


class PluginEntry(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    content_type: ContentType
    route_base_path: str
    tags_base_path: str = "tags"
    id: str = "default"


class ManifestFile(BaseModel):
    """On-disk form of a :class:`BuildManifest` plus search options."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    out_dir: Path
    base_url: str = "/"
    trailing_slash: bool | None = None
    routes: list[str] = Field(default_factory=list)
    plugins: list[PluginEntry] = Field(default_factory=list)
    options: dict[str, Any] = Field(default_factory=dict)

    def to_manifest(self, *, relative_to: Path | None = None) -> BuildManifest:
        out_dir = self.out_dir
        if relative_to is not None and not out_dir.is_absolute():
            out_dir = relative_to / out_dir
        return BuildManifest(
            routes=tuple(self.routes),
            out_dir=out_dir,
            base_url=self.base_url,
            trailing_slash=self.trailing_slash,
            plugins=tuple(
                ContentPluginInstance(
                    content_type=plugin.content_type,
                    route_base_path=plugin.route_base_path,
                    tags_base_path=plugin.tags_base_path,
                    plugin_id=plugin.id,
                )
                for plugin in self.plugins
            ),
        )


def read_manifest_file(path: Path) -> ManifestFile:
    try:
        return ManifestFile.model_validate(orjson.loads(path.read_bytes()))
    except (orjson.JSONDecodeError, ValidationError) as exc:
        raise ConfigurationError(f"Invalid manifest file {path}: {exc}") from exc


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build per-partition search index artifacts from a rendered site",
    )
    parser.add_argument(
        "manifest",
        type=Path,
        help="Path to the build manifest JSON",
    )
    parser.add_argument(
        "--client-config",
        type=Path,
        help="Write the client runtime configuration to this file",
    )
    parser.add_argument(
        "--log-level",
        help="Override SEARCH_INDEX_LOG_LEVEL",
    )
    parser.add_argument(
        "--plain-logs",
        action="store_true",
        help="Emit human readable logs instead of JSON",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_argument_parser().parse_args(argv)
    settings = IndexerSettings()
    configure_logging(
        level=args.log_level or settings.log_level,
        json_output=settings.log_json and not args.plain_logs,
    )
    init_tracing(service_name=settings.service_name, console=settings.trace_console)

    try:
        manifest_file = read_manifest_file(args.manifest)
    except FileNotFoundError as exc:
        logger.error("Manifest not found: %s", exc)
        return 1
    except OSError as exc:
        logger.error("Cannot read manifest %s: %s", args.manifest, exc)
        return 1
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return 1

    try:
        options = load_options(manifest_file.options)
        pipeline = SearchIndexPipeline(options)
    except SearchIndexError as exc:
        logger.error("%s", exc)
        return 1

    if args.client_config is not None:
        try:
            args.client_config.write_bytes(
                orjson.dumps(pipeline.client_config().to_json_dict(), option=orjson.OPT_INDENT_2)
            )
        except OSError as exc:
            logger.error("Cannot write client config %s: %s", args.client_config, exc)
            return 1

    try:
        result = asyncio.run(pipeline.run(manifest_file.to_manifest(relative_to=args.manifest.parent)))
    except SearchIndexError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Indexed %d documents into %d partitions", result.documents_indexed, len(result.partitions))
    return 0


if __name__ == "__main__":
    sys.exit(main())
