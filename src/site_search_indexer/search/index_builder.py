"""Inverted index construction for one partition.

``IndexBuilder`` accepts section documents, analyzes each schema field with
the build's language analyzer and produces an immutable ``SearchIndex``. The
serialized form is the layout lunr-compatible client runtimes load directly:

* ``fields`` - indexed field names
* ``fieldVectors`` - ``["<field>/<ref>", [termIndex, score, ...]]`` pairs with
  BM25 weights rounded to three decimals
* ``invertedIndex`` - ``[term, {"_index": n, "<field>": {"<ref>": {}}}]`` pairs
  sorted by term in UTF-16 code unit order, the order JavaScript compares strings in
* ``pipeline`` - search-time stemmer labels the client must apply to queries
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
import logging
from typing import Any

from site_search_indexer.domain.model import Document
from site_search_indexer.search.analyzers import Analyzer
from site_search_indexer.search.languages import LanguagePolicy
from site_search_indexer.search.schema import (
    CONTENT_FIELD,
    PARENT_CATEGORIES_FIELD,
    TAGS_FIELD,
    TITLE_FIELD,
    Schema,
)
from site_search_indexer.search.stats import bm25, calculate_idf, compute_field_length_stats, round_score


logger = logging.getLogger(__name__)

INDEX_FORMAT_VERSION = "2.3.9"
FIELD_REF_JOINER = "/"
TERM_INDEX_KEY = "_index"


def sidebar_categories_value(categories: Sequence[str] | None, depth: int) -> str | None:
    """Return the nearest ``depth`` ancestors, leaf first, space-joined.

    >>> sidebar_categories_value(["Guides", "Setup", "Install"], 2)
    'Install Setup'
    """

    if depth <= 0 or not categories:
        return None
    return " ".join(list(reversed(categories))[:depth])


def make_field_ref(field_name: str, ref: str) -> str:
    return f"{field_name}{FIELD_REF_JOINER}{ref}"


def split_field_ref(field_ref: str) -> tuple[str, str]:
    field_name, _, ref = field_ref.partition(FIELD_REF_JOINER)
    return field_name, ref


def term_sort_key(term: str) -> bytes:
    """Order terms by UTF-16 code units; the client rejects out-of-order terms on load."""
    return term.encode("utf-16-be")


@dataclass(frozen=True)
class RankedDocument:
    """Represents a scored document produced by :meth:`SearchIndex.score`."""

    ref: str
    score: float


@dataclass(frozen=True)
class SearchIndex:
    """Immutable built index for one partition."""

    fields: tuple[str, ...]
    field_vectors: dict[str, list[float]] = field(default_factory=dict)
    inverted_index: dict[str, dict[str, Any]] = field(default_factory=dict)
    pipeline: tuple[str, ...] = ()
    version: str = INDEX_FORMAT_VERSION

    @property
    def refs(self) -> frozenset[str]:
        """Refs of every document registered in the index."""
        return frozenset(split_field_ref(field_ref)[1] for field_ref in self.field_vectors)

    def referenced_refs(self) -> frozenset[str]:
        """Every ref mentioned anywhere in the index structure."""

        refs = set(self.refs)
        for posting in self.inverted_index.values():
            for field_name in self.fields:
                refs.update(posting.get(field_name, {}))
        return frozenset(refs)

    @property
    def doc_count(self) -> int:
        return len(self.refs)

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "fields": list(self.fields),
            "fieldVectors": [[field_ref, vector] for field_ref, vector in self.field_vectors.items()],
            "invertedIndex": [[term, posting] for term, posting in self.inverted_index.items()],
            "pipeline": list(self.pipeline),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SearchIndex:
        return cls(
            fields=tuple(data.get("fields", ())),
            field_vectors={field_ref: list(vector) for field_ref, vector in data.get("fieldVectors", [])},
            inverted_index={term: dict(posting) for term, posting in data.get("invertedIndex", [])},
            pipeline=tuple(data.get("pipeline", ())),
            version=str(data.get("version", INDEX_FORMAT_VERSION)),
        )

    def score(
        self,
        query: str,
        analyzer: Analyzer,
        *,
        boosts: Mapping[str, float] | None = None,
    ) -> list[RankedDocument]:
        """Rank documents for ``query`` applying per-field boosts.

        Each matching (field, term) pair contributes ``boost * stored weight``.
        This mirrors how the client applies field boosts at query time and is
        used to check boost semantics; it is not a query engine.
        """

        field_boosts = dict(boosts or {})
        terms = list(dict.fromkeys(token.text for token in analyzer(query) if token.text))
        if not terms:
            return []

        weights: dict[str, dict[int, float]] = {}
        for field_ref, vector in self.field_vectors.items():
            weights[field_ref] = {int(vector[i]): float(vector[i + 1]) for i in range(0, len(vector), 2)}

        doc_scores: dict[str, float] = defaultdict(float)
        for term in terms:
            posting = self.inverted_index.get(term)
            if posting is None:
                continue
            term_index = int(posting[TERM_INDEX_KEY])
            for field_name in self.fields:
                boost = field_boosts.get(field_name, 1.0)
                if boost <= 0:
                    continue
                for ref in posting.get(field_name, {}):
                    weight = weights.get(make_field_ref(field_name, ref), {}).get(term_index, 0.0)
                    doc_scores[ref] += boost * weight

        ranked = [RankedDocument(ref=ref, score=score) for ref, score in doc_scores.items() if score > 0]
        ranked.sort(key=lambda entry: (-entry.score, entry.ref))
        return ranked


class IndexBuilder:
    """Collect documents and compute BM25 field vectors for one partition."""

    def __init__(
        self,
        schema: Schema,
        analyzer: Analyzer,
        *,
        k1: float = 1.2,
        b: float = 0.75,
        parent_categories_depth: int = 0,
        pipeline: Sequence[str] = (),
    ) -> None:
        if k1 < 0:
            msg = f"k1 must be non-negative, got {k1}"
            raise ValueError(msg)
        if not 0 <= b <= 1:
            msg = f"b must be within [0, 1], got {b}"
            raise ValueError(msg)
        self.schema = schema
        self.analyzer = analyzer
        self.k1 = k1
        self.b = b
        self.parent_categories_depth = parent_categories_depth
        self.pipeline = tuple(pipeline)

        self._refs: list[str] = []
        self._seen_refs: set[str] = set()
        self._inverted_index: dict[str, dict[str, Any]] = {}
        self._term_frequencies: dict[str, dict[str, int]] = {}
        self._field_lengths: dict[str, dict[str, int]] = {name: {} for name in schema.field_names}
        self._term_index = 0

    def field_values(self, document: Document) -> dict[str, str | None]:
        values: dict[str, str | None] = {
            TITLE_FIELD: document.section_title,
            CONTENT_FIELD: document.section_content,
            TAGS_FIELD: " ".join(document.section_tags),
        }
        if PARENT_CATEGORIES_FIELD in self.schema:
            values[PARENT_CATEGORIES_FIELD] = sidebar_categories_value(
                document.sidebar_parent_categories, self.parent_categories_depth
            )
        return values

    def add(self, document: Document) -> None:
        ref = document.ref
        if ref in self._seen_refs:
            msg = f"Document ref {ref} was already added to this index"
            raise ValueError(msg)
        self._seen_refs.add(ref)
        self._refs.append(ref)

        values = self.field_values(document)
        for field_name in self.schema.field_names:
            value = values.get(field_name)
            tokens = self.analyzer(value) if value else []
            frequencies: dict[str, int] = defaultdict(int)
            for token in tokens:
                term = token.text
                frequencies[term] += 1
                posting = self._inverted_index.get(term)
                if posting is None:
                    posting = {TERM_INDEX_KEY: self._term_index}
                    for name in self.schema.field_names:
                        posting[name] = {}
                    self._inverted_index[term] = posting
                    self._term_index += 1
                posting[field_name].setdefault(ref, {})

            self._field_lengths[field_name][ref] = len(tokens)
            self._term_frequencies[make_field_ref(field_name, ref)] = dict(frequencies)

    def add_all(self, documents: Iterable[Document]) -> None:
        for document in documents:
            self.add(document)

    def build(self) -> SearchIndex:
        total_docs = len(self._refs)
        length_stats = compute_field_length_stats(self._field_lengths)
        idf_cache: dict[str, float] = {}
        field_vectors: dict[str, list[float]] = {}

        for ref in self._refs:
            for field_name in self.schema.field_names:
                field_ref = make_field_ref(field_name, ref)
                average_length = length_stats[field_name].average_length
                field_length = self._field_lengths[field_name][ref]
                entries: list[tuple[int, float]] = []
                for term, tf in self._term_frequencies[field_ref].items():
                    posting = self._inverted_index[term]
                    idf = idf_cache.get(term)
                    if idf is None:
                        doc_freq = sum(len(posting[name]) for name in self.schema.field_names)
                        idf = calculate_idf(doc_freq, total_docs)
                        idf_cache[term] = idf
                    weight = idf * bm25(tf, field_length, average_length, k1=self.k1, b=self.b)
                    entries.append((posting[TERM_INDEX_KEY], round_score(weight)))
                entries.sort()
                field_vectors[field_ref] = [value for entry in entries for value in entry]

        terms = sorted(self._inverted_index, key=term_sort_key)
        inverted_index = {term: self._inverted_index[term] for term in terms}
        logger.debug("Built index with %d documents and %d terms", total_docs, len(inverted_index))
        return SearchIndex(
            fields=self.schema.field_names,
            field_vectors=field_vectors,
            inverted_index=inverted_index,
            pipeline=self.pipeline,
        )


def build_index(
    documents: Iterable[Document],
    schema: Schema,
    policy: LanguagePolicy,
    *,
    k1: float = 1.2,
    b: float = 0.75,
    parent_categories_depth: int = 0,
) -> SearchIndex:
    """Build a partition index with a freshly created analyzer."""

    builder = IndexBuilder(
        schema,
        policy.create_analyzer(),
        k1=k1,
        b=b,
        parent_categories_depth=parent_categories_depth,
        pipeline=policy.pipeline_labels,
    )
    builder.add_all(documents)
    return builder.build()
