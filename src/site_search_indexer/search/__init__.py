"""
Section indexing package.

This package provides the pure-Python index build:
- analyzers: Tokenizers and filters (lowercase, trim, stop, stemming)
- languages: Static language registry and per-build language policies
- schema: Indexed fields and their query-time boosts
- stats: BM25 scoring statistics
- index_builder: Inverted index + field vector construction
"""
