"""Structured logging and OpenTelemetry spans for index builds."""

from site_search_indexer.observability.context import bound_context, get_trace_context, update_trace_context
from site_search_indexer.observability.logging import JsonFormatter, configure_logging
from site_search_indexer.observability.tracing import create_span, get_tracer, init_tracing


__all__ = [
    "JsonFormatter",
    "bound_context",
    "configure_logging",
    "create_span",
    "get_trace_context",
    "get_tracer",
    "init_tracing",
    "update_trace_context",
]
