"""Service layer - the post-build indexing use case.

- route_classifier: which routes are indexed, and as what
- document_assembler: rendered pages to numbered section documents
- partitioner: documents grouped by partition tag
- artifacts: one JSON artifact per partition
- pipeline: orchestration of the above
"""
