"""Post-build orchestration: routes in, one search artifact per partition out.

The generator calls :meth:`SearchIndexPipeline.run` once rendering has
finished. Options are validated and the language policy resolved in the
constructor, so configuration errors surface before any file is read.
Any failure aborts the run; artifacts already written are left in place.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Any

from opentelemetry.trace import SpanKind

from site_search_indexer.config import ClientRuntimeConfig, IndexerOptions, load_options
from site_search_indexer.domain.model import BuildManifest, IndexPartition
from site_search_indexer.errors import SearchIndexError
from site_search_indexer.observability.context import bound_context
from site_search_indexer.observability.tracing import create_span
from site_search_indexer.search.index_builder import SearchIndex, build_index
from site_search_indexer.service_layer.artifacts import ArtifactSerializer
from site_search_indexer.service_layer.document_assembler import DocumentAssembler, SectionExtractor, TagExtractor
from site_search_indexer.service_layer.partitioner import partition_documents
from site_search_indexer.service_layer.route_classifier import RouteClassifier


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """Summary of one completed build."""

    documents_indexed: int
    partitions: tuple[str, ...]
    artifact_paths: tuple[Path, ...]


class SearchIndexPipeline:
    """Classify, assemble, partition, index and serialize in one pass."""

    def __init__(
        self,
        options: IndexerOptions | None = None,
        *,
        section_extractor: SectionExtractor | None = None,
        tag_extractor: TagExtractor | None = None,
    ) -> None:
        self.options = options or IndexerOptions()
        self.policy = self.options.language_policy()
        self.schema = self.options.section_schema()
        self.section_extractor = section_extractor
        self.tag_extractor = tag_extractor

    def client_config(self) -> ClientRuntimeConfig:
        return ClientRuntimeConfig.from_options(self.options, self.policy)

    def build_partition_index(self, partition: IndexPartition) -> SearchIndex:
        ranking = self.options.ranking
        return build_index(
            partition.documents,
            self.schema,
            self.policy,
            k1=ranking.k1,
            b=ranking.b,
            parent_categories_depth=self.options.index_doc_sidebar_parent_categories,
        )

    async def _index_partition(self, partition: IndexPartition, serializer: ArtifactSerializer) -> Path:
        with bound_context(partition=partition.tag), create_span(
            "search_index.partition",
            kind=SpanKind.INTERNAL,
            attributes={"search_index.partition": partition.tag, "search_index.documents": len(partition)},
        ):
            logger.info("Building index %s (%d documents)", partition.tag, len(partition))
            index = await asyncio.to_thread(self.build_partition_index, partition)
            path = await serializer.write(partition, index)
            logger.info("Index %s written to disk", partition.tag)
            return path

    async def run(self, manifest: BuildManifest) -> PipelineResult:
        with create_span(
            "search_index.build",
            kind=SpanKind.INTERNAL,
            attributes={
                "search_index.routes": len(manifest.routes),
                "search_index.languages": list(self.policy.languages),
            },
        ) as span:
            try:
                result = await self._run(manifest)
            except SearchIndexError as exc:
                logger.error("Search index build failed: %s", exc)
                raise
            span.set_attribute("search_index.documents_indexed", result.documents_indexed)
            span.set_attribute("search_index.partitions", len(result.partitions))
            return result

    async def _run(self, manifest: BuildManifest) -> PipelineResult:
        logger.info("Gathering documents")
        with bound_context(phase="classify"), create_span("search_index.classify"):
            classifier = RouteClassifier.from_manifest(manifest, self.options)
            routes = classifier.classify_all(manifest.routes)

        logger.info("Parsing documents")
        with bound_context(phase="assemble"), create_span(
            "search_index.assemble", attributes={"search_index.pages": len(routes)}
        ):
            assembler = DocumentAssembler(
                manifest.out_dir,
                trailing_slash=manifest.trailing_slash,
                section_extractor=self.section_extractor,
                tag_extractor=self.tag_extractor,
            )
            documents = await assembler.assemble(routes)

        partitions = partition_documents(documents)
        logger.info("%d indexes will be created.", len(partitions))

        serializer = ArtifactSerializer(
            manifest.out_dir,
            include_parent_categories=self.options.include_parent_categories_in_page_title,
        )
        with bound_context(phase="index"):
            paths = await asyncio.gather(*(self._index_partition(partition, serializer) for partition in partitions))
        return PipelineResult(
            documents_indexed=len(documents),
            partitions=tuple(partition.tag for partition in partitions),
            artifact_paths=tuple(paths),
        )


async def post_build(
    manifest: BuildManifest,
    options: IndexerOptions | dict[str, Any] | None = None,
    *,
    section_extractor: SectionExtractor | None = None,
    tag_extractor: TagExtractor | None = None,
) -> PipelineResult:
    """Generator hook entry point; raw option mappings are validated first."""

    resolved = options if isinstance(options, IndexerOptions) else load_options(options)
    pipeline = SearchIndexPipeline(resolved, section_extractor=section_extractor, tag_extractor=tag_extractor)
    return await pipeline.run(manifest)


def run_post_build(
    manifest: BuildManifest,
    options: IndexerOptions | dict[str, Any] | None = None,
    **kwargs: Any,
) -> PipelineResult:
    return asyncio.run(post_build(manifest, options, **kwargs))
