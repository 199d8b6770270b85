"""Group section documents by partition tag."""

from __future__ import annotations

from collections.abc import Iterable

from site_search_indexer.domain.model import Document, IndexPartition


def group_documents_by_tag(documents: Iterable[Document]) -> dict[str, list[Document]]:
    """Bucket documents by tag, keeping first-seen tag order and input order within a tag."""

    groups: dict[str, list[Document]] = {}
    for document in documents:
        groups.setdefault(document.partition_tag, []).append(document)
    return groups


def partition_documents(documents: Iterable[Document]) -> list[IndexPartition]:
    return [IndexPartition(tag=tag, documents=tuple(group)) for tag, group in group_documents_by_tag(documents).items()]
