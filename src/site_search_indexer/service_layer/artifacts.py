"""Per-partition search artifacts.

Each partition is written to ``search-index-<tag>.json`` in the output
directory as ``{"documents": [...], "index": {...}}``. ``documents`` holds
one summary per indexed section in ascending id order; ``index`` is the
serialized :class:`~site_search_indexer.search.index_builder.SearchIndex`.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
import logging
from pathlib import Path
from typing import Any

import orjson

from site_search_indexer.domain.model import IndexPartition
from site_search_indexer.errors import ArtifactIntegrityError, ArtifactWriteError, PartitionTagError
from site_search_indexer.search.index_builder import SearchIndex


logger = logging.getLogger(__name__)

ARTIFACT_FILENAME_TEMPLATE = "search-index-{tag}.json"


def artifact_path(out_dir: Path, tag: str) -> Path:
    if not tag or "/" in tag or "\\" in tag or tag in {".", ".."}:
        raise PartitionTagError(f"Partition tag {tag!r} cannot be used in an artifact file name")
    return Path(out_dir) / ARTIFACT_FILENAME_TEMPLATE.format(tag=tag)


def build_artifact(
    partition: IndexPartition,
    index: SearchIndex,
    *,
    include_parent_categories: bool = False,
) -> dict[str, Any]:
    """Pair document summaries with the index and check every ref resolves."""

    documents = sorted(partition.documents, key=lambda document: document.id)
    summary_refs = {document.ref for document in documents}
    index_refs = set(index.referenced_refs())
    if summary_refs != index_refs:
        missing = sorted(index_refs - summary_refs)
        orphaned = sorted(summary_refs - index_refs)
        raise ArtifactIntegrityError(
            f"Partition {partition.tag!r} refs disagree with its documents "
            f"(no summary for {missing}, not indexed {orphaned})"
        )
    return {
        "documents": [document.to_summary(include_parent_categories=include_parent_categories) for document in documents],
        "index": index.to_dict(),
    }


class ArtifactSerializer:
    """Write partition artifacts into the build output directory."""

    def __init__(self, out_dir: Path, *, include_parent_categories: bool = False) -> None:
        self.out_dir = Path(out_dir)
        self.include_parent_categories = include_parent_categories

    def serialize(self, partition: IndexPartition, index: SearchIndex) -> bytes:
        artifact = build_artifact(partition, index, include_parent_categories=self.include_parent_categories)
        return orjson.dumps(artifact)

    async def write(self, partition: IndexPartition, index: SearchIndex) -> Path:
        path = artifact_path(self.out_dir, partition.tag)
        payload = self.serialize(partition, index)
        try:
            await asyncio.to_thread(path.write_bytes, payload)
        except OSError as exc:
            raise ArtifactWriteError(path, str(exc)) from exc
        logger.debug("Wrote %d bytes to %s", len(payload), path)
        return path


def load_artifact(path: Path) -> tuple[list[Mapping[str, Any]], SearchIndex]:
    """Read an artifact back into its summaries and index."""

    data = orjson.loads(Path(path).read_bytes())
    return list(data["documents"]), SearchIndex.from_dict(data["index"])
