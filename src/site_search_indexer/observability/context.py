"""Per-build correlation values shared by log records and spans.

The values live in a ``ContextVar``: tasks created by ``asyncio.gather`` and
threads started with ``asyncio.to_thread`` see a copy, so a partition tag
bound inside one partition build never leaks into another.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from uuid import uuid4


build_context: ContextVar[dict | None] = ContextVar("build_context", default=None)


def new_trace_ids() -> dict[str, str]:
    return {"trace_id": uuid4().hex, "span_id": uuid4().hex[:16]}


def get_trace_context() -> dict:
    """Current values, creating fresh trace/span ids on first use."""
    ctx = build_context.get()
    if ctx is None or not ctx.get("trace_id"):
        ctx = {**(ctx or {}), **new_trace_ids()}
        build_context.set(ctx)
    return ctx


def set_trace_context(trace_id: str, span_id: str, **extra: object) -> None:
    build_context.set({"trace_id": trace_id, "span_id": span_id, **extra})


def update_trace_context(**values: object) -> None:
    build_context.set({**(build_context.get() or {}), **values})


@contextmanager
def bound_context(**values: object) -> Iterator[None]:
    """Bind values (``phase``, ``partition``) for the duration of the block."""
    token = build_context.set({**(build_context.get() or {}), **values})
    try:
        yield
    finally:
        build_context.reset(token)
