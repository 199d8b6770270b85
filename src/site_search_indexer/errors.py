"""Exception hierarchy for the search index build.

Every failure aborts the whole run; there is no partial-success mode. Messages
always name the offending value (path, language code, route) so operators can
act on them without a traceback.
"""

from __future__ import annotations

from pathlib import Path


class SearchIndexError(Exception):
    """Base class for all pipeline failures."""


class ConfigurationError(SearchIndexError, ValueError):
    """Raised before any work starts when options cannot be honoured."""


class RouteConsistencyError(SearchIndexError, RuntimeError):
    """Raised when the generator hands over a route outside the base URL.

    This signals a bug in the caller rather than bad user input.
    """

    def __init__(self, url: str, base_url: str) -> None:
        self.url = url
        self.base_url = base_url
        super().__init__(
            f"The route must start with the baseUrl {base_url!r}, but was {url!r}. This is a bug, please report it."
        )


class DocumentReadError(SearchIndexError):
    """Raised when a rendered HTML page cannot be read."""

    def __init__(self, path: Path, url: str, reason: str) -> None:
        self.path = path
        self.url = url
        super().__init__(f"Failed to read rendered page {path} for route {url!r}: {reason}")


class PartitionTagError(SearchIndexError, ValueError):
    """Raised when a page does not carry a partition tag."""


class ArtifactWriteError(SearchIndexError):
    """Raised when a partition artifact cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to write search index artifact {path}: {reason}")


class ArtifactIntegrityError(SearchIndexError, RuntimeError):
    """Raised when index refs and document summaries disagree."""
