"""Structured JSON logging for index builds.

Every record carries the ids of the span it was emitted in and, inside a
partition build, the partition tag, so the interleaved output of concurrent
partition builds can be split apart again.
"""

from __future__ import annotations

from datetime import datetime, timezone
import logging
from pathlib import Path
import sys
from typing import Any

import orjson

from site_search_indexer.observability.context import get_trace_context


_RESERVED_ATTRS = frozenset(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message", "asctime"}
_CONTEXT_FIELDS = ("partition", "phase")

# Third-party loggers that report dictionary loading on every analyzer build.
NOISY_LOGGERS = ("jieba", "pythainlp")


class JsonFormatter(logging.Formatter):
    """One JSON object per record, correlated with the active span."""

    MAX_MESSAGE_LEN = 2000
    MAX_EXTRA_LEN = 500

    def format(self, record: logging.LogRecord) -> str:
        ctx = get_trace_context()
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": self._clip(record.getMessage(), self.MAX_MESSAGE_LEN),
            "trace_id": ctx.get("trace_id", ""),
            "span_id": ctx.get("span_id", ""),
        }
        if "." in record.name:
            entry["component"] = record.name.rsplit(".", 1)[-1]
        entry.update({name: ctx[name] for name in _CONTEXT_FIELDS if ctx.get(name)})

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS or key.startswith("_"):
                continue
            entry[key] = self._clip(value, self.MAX_EXTRA_LEN) if isinstance(value, str) else value

        return orjson.dumps(entry, default=_to_json).decode("utf-8")

    @staticmethod
    def _clip(text: str, limit: int) -> str:
        return text if len(text) <= limit else text[:limit] + "..."


def _to_json(value: Any) -> Any:
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, (set, frozenset)):
        try:
            return sorted(value)
        except TypeError:
            return list(value)
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8", errors="replace")
    return str(value)


def configure_logging(
    level: str = "INFO",
    json_output: bool = True,
    *,
    logger_levels: dict[str, str] | None = None,
) -> None:
    """Install a single stderr handler on the root logger.

    Args:
        level: Root log level name, case-insensitive
        json_output: Use :class:`JsonFormatter` when True, a plain line format otherwise
        logger_levels: Per-logger level overrides (logger name -> level name)
    """
    root = logging.getLogger()
    root.setLevel(_level(level))
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    if json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    for name, logger_level in (logger_levels or {}).items():
        logging.getLogger(name).setLevel(_level(logger_level))


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)
