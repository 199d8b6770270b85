"""Unit tests for the section schema and BM25 helpers."""

from __future__ import annotations

import math

import pytest

from site_search_indexer.search.schema import (
    PARENT_CATEGORIES_FIELD,
    Schema,
    TextField,
    create_section_schema,
)
from site_search_indexer.search.stats import (
    FieldLengthStats,
    bm25,
    calculate_idf,
    compute_field_length_stats,
    round_score,
)


class TestSchema:
    def test_default_section_schema_has_three_fields(self) -> None:
        schema = create_section_schema()

        assert schema.field_names == ("title", "content", "tags")
        assert schema.boosts() == {"title": 5.0, "content": 1.0, "tags": 3.0}
        assert PARENT_CATEGORIES_FIELD not in schema

    def test_parent_categories_field_only_when_depth_positive(self) -> None:
        schema = create_section_schema(parent_categories_depth=2, parent_categories_boost=4)

        assert schema.field_names[-1] == PARENT_CATEGORIES_FIELD
        assert schema.get_boost(PARENT_CATEGORIES_FIELD) == 4

    def test_duplicate_fields_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate field"):
            Schema(fields=[TextField("title"), TextField("title")])

    def test_negative_boost_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            TextField("title", boost=-1)

    def test_unknown_field_boost_defaults_to_one(self) -> None:
        assert create_section_schema().get_boost("missing") == 1.0


def test_compute_field_length_stats_returns_averages() -> None:
    stats = compute_field_length_stats({"content": {"1": 100, "2": 50}, "title": {"1": 5}, "tags": {}})

    assert isinstance(stats["content"], FieldLengthStats)
    assert stats["content"].average_length == 75
    assert stats["title"].document_count == 1
    assert stats["tags"].average_length == 0.0


def test_calculate_idf_matches_client_formula() -> None:
    assert calculate_idf(doc_freq=1, total_docs=3) == pytest.approx(math.log(1 + 2.5 / 1.5))
    assert calculate_idf(doc_freq=1, total_docs=10) > calculate_idf(doc_freq=5, total_docs=10) > 0


def test_calculate_idf_stays_positive_when_term_is_everywhere() -> None:
    assert calculate_idf(doc_freq=6, total_docs=3) > 0


def test_calculate_idf_without_documents() -> None:
    assert calculate_idf(doc_freq=0, total_docs=0) == 0.0


def test_bm25_respects_term_frequency_and_length() -> None:
    assert bm25(tf=3, doc_length=100, avg_doc_length=80) > bm25(tf=1, doc_length=100, avg_doc_length=80)
    assert bm25(tf=1, doc_length=10, avg_doc_length=80) > bm25(tf=1, doc_length=200, avg_doc_length=80)
    assert bm25(tf=0, doc_length=10, avg_doc_length=10) == 0.0


def test_bm25_with_b_zero_ignores_length() -> None:
    short = bm25(tf=2, doc_length=1, avg_doc_length=50, b=0.0)
    long = bm25(tf=2, doc_length=500, avg_doc_length=50, b=0.0)

    assert short == long


def test_round_score_keeps_three_decimals() -> None:
    assert round_score(1.23456) == 1.235
