"""Statistical helpers for BM25 style scoring.

The functions here stay independent of the index layout so they can be unit
tested on their own. The formulas match the ones the client-side runtime
uses when it reads field vectors, so scores stay comparable across builds.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import math


SCORE_PRECISION = 3


@dataclass(frozen=True)
class FieldLengthStats:
    """Aggregated term statistics for a field."""

    field: str
    total_terms: int
    document_count: int

    @property
    def average_length(self) -> float:
        if self.document_count == 0:
            return 0.0
        return self.total_terms / self.document_count


def compute_field_length_stats(field_lengths: Mapping[str, Mapping[str, int]]) -> dict[str, FieldLengthStats]:
    """Return aggregate stats for each field given per-document lengths."""

    stats: dict[str, FieldLengthStats] = {}
    for field_name, lengths in field_lengths.items():
        doc_count = len(lengths)
        total_terms = sum(max(length, 0) for length in lengths.values())
        stats[field_name] = FieldLengthStats(
            field=field_name,
            total_terms=total_terms,
            document_count=doc_count,
        )
    return stats


def calculate_idf(doc_freq: int, total_docs: int) -> float:
    """Return inverse document frequency, always non-negative.

    ``doc_freq`` counts (field, document) pairs containing the term, which is
    how the client runtime computes it as well.
    """

    if total_docs <= 0:
        return 0.0
    ratio = (total_docs - doc_freq + 0.5) / (doc_freq + 0.5)
    return math.log(1 + abs(ratio))


def bm25(tf: int, doc_length: int, avg_doc_length: float, *, k1: float = 1.2, b: float = 0.75) -> float:
    """Compute the BM25 term weight without IDF."""

    if tf <= 0:
        return 0.0
    length_ratio = doc_length / avg_doc_length if avg_doc_length > 0 else 0.0
    denominator = k1 * (1 - b + b * length_ratio) + tf
    return ((k1 + 1) * tf) / denominator


def round_score(score: float) -> float:
    return round(score, SCORE_PRECISION)
