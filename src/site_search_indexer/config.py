"""Centralized configuration for the search index build using Pydantic.

``IndexerOptions`` is the option surface a site author sets; it is validated
once, up front, and is immutable afterwards. ``ClientRuntimeConfig`` is the
subset echoed to the client-side search widget. ``IndexerSettings`` carries
process-level knobs (logging) read from the environment.
"""

from __future__ import annotations

from collections.abc import Mapping
import re
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict

from site_search_indexer.errors import ConfigurationError
from site_search_indexer.search.languages import (
    SEPARATOR_INCOMPATIBLE_LANGUAGES,
    ClientTokenizerSpec,
    LanguagePolicy,
    normalize_languages,
    resolve_language_policy,
)
from site_search_indexer.search.schema import Schema, create_section_schema


class RankingOptions(BaseModel):
    """BM25 parameters, field boosts and the tokenizer separator."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    tokenizer_separator: Annotated[
        str | None,
        Field(description="Regex overriding the default whitespace/hyphen splitter"),
    ] = None

    k1: Annotated[
        float,
        Field(ge=0.0, description="BM25 term-frequency saturation parameter", examples=[1.2]),
    ] = 1.2

    b: Annotated[
        float,
        Field(ge=0.0, le=1.0, description="BM25 length normalization parameter", examples=[0.75]),
    ] = 0.75

    title_boost: Annotated[float, Field(ge=0.0, description="Query-time boost for section titles")] = 5.0
    content_boost: Annotated[float, Field(ge=0.0, description="Query-time boost for section content")] = 1.0
    tags_boost: Annotated[float, Field(ge=0.0, description="Query-time boost for section tags")] = 3.0
    parent_categories_boost: Annotated[
        float,
        Field(ge=0.0, description="Query-time boost for sidebar ancestor categories"),
    ] = 2.0

    @field_validator("tokenizer_separator")
    @classmethod
    def _check_separator(cls, value: str | None) -> str | None:
        if value is None:
            return None
        if not value:
            raise ValueError("tokenizer_separator must not be empty")
        try:
            re.compile(value)
        except re.error as exc:
            raise ValueError(f"tokenizer_separator {value!r} is not a valid regular expression: {exc}") from exc
        return value


class IndexerOptions(BaseModel):
    """Options controlling which pages are indexed and how."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    index_docs: bool = Field(default=True, description="Index pages of docs plugins")
    index_doc_sidebar_parent_categories: int = Field(
        default=0,
        ge=0,
        description="Number of nearest sidebar ancestor categories to index (0 disables the field)",
    )
    include_parent_categories_in_page_title: bool = Field(
        default=False,
        description="Prefix display titles with the ancestor category path",
    )
    index_blog: bool = Field(default=True, description="Index blog posts")
    index_pages: bool = Field(default=False, description="Index standalone pages")
    language: str | tuple[str, ...] = Field(default="en", description="Locale code or list of codes")
    style: Literal["none"] | None = Field(default=None, description="Set to 'none' to skip bundled widget CSS")
    max_search_results: int = Field(default=8, ge=1, description="Maximum hits shown by the client widget")
    filter_by_path_name: bool = Field(default=False, description="Client filters hits by the current path")
    sub_path: int = Field(default=-1, ge=-1, description="Path segment used for client filtering (-1 disables)")
    ranking: RankingOptions = Field(default_factory=RankingOptions)

    @field_validator("language", mode="before")
    @classmethod
    def _normalize_language(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            codes = tuple(value)
            return codes[0] if len(codes) == 1 else codes
        return value

    @field_validator("language")
    @classmethod
    def _check_language(cls, value: str | tuple[str, ...]) -> str | tuple[str, ...]:
        normalize_languages(value)
        return value

    @model_validator(mode="after")
    def _check_separator_language(self) -> IndexerOptions:
        if self.ranking.tokenizer_separator:
            conflicting = sorted(set(self.languages) & SEPARATOR_INCOMPATIBLE_LANGUAGES)
            if conflicting:
                raise ValueError(f"The tokenizer separator option is not supported for {', '.join(conflicting)}")
        return self

    @property
    def languages(self) -> tuple[str, ...]:
        return (self.language,) if isinstance(self.language, str) else tuple(self.language)

    def language_policy(self) -> LanguagePolicy:
        return resolve_language_policy(self.language, self.ranking.tokenizer_separator)

    def section_schema(self) -> Schema:
        return create_section_schema(
            title_boost=self.ranking.title_boost,
            content_boost=self.ranking.content_boost,
            tags_boost=self.ranking.tags_boost,
            parent_categories_boost=self.ranking.parent_categories_boost,
            parent_categories_depth=self.index_doc_sidebar_parent_categories,
        )


def load_options(raw: Mapping[str, Any] | None = None, **overrides: Any) -> IndexerOptions:
    """Validate raw options, translating schema failures into ``ConfigurationError``."""

    payload = {**(raw or {}), **overrides}
    try:
        return IndexerOptions.model_validate(payload)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid search index options: {exc}") from exc


class ClientTokenizerConfig(BaseModel):
    """Query tokenizer description for the client runtime."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    kind: Literal["default", "segmenter", "fallback"]
    separator: str
    language: str | None = None

    @classmethod
    def from_spec(cls, spec: ClientTokenizerSpec) -> ClientTokenizerConfig:
        return cls(kind=spec.kind, separator=spec.separator, language=spec.language)


class ClientRuntimeConfig(BaseModel):
    """Configuration handed to the client-side search widget."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    title_boost: float
    content_boost: float
    tags_boost: float
    parent_categories_boost: float
    index_doc_sidebar_parent_categories: int
    max_search_results: int
    filter_by_path_name: bool
    sub_path: int
    languages: tuple[str, ...]
    index_pipeline: tuple[str, ...]
    tokenizer: ClientTokenizerConfig

    @classmethod
    def from_options(cls, options: IndexerOptions, policy: LanguagePolicy | None = None) -> ClientRuntimeConfig:
        active_policy = policy or options.language_policy()
        ranking = options.ranking
        return cls(
            title_boost=ranking.title_boost,
            content_boost=ranking.content_boost,
            tags_boost=ranking.tags_boost,
            parent_categories_boost=ranking.parent_categories_boost,
            index_doc_sidebar_parent_categories=options.index_doc_sidebar_parent_categories,
            max_search_results=options.max_search_results,
            filter_by_path_name=options.filter_by_path_name,
            sub_path=options.sub_path,
            languages=active_policy.languages,
            index_pipeline=active_policy.pipeline_labels,
            tokenizer=ClientTokenizerConfig.from_spec(active_policy.client_tokenizer()),
        )

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class IndexerSettings(BaseSettings):
    """Process-level settings loaded from ``SEARCH_INDEX_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SEARCH_INDEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")
    service_name: str = Field(default="site-search-indexer", description="Service name reported on spans")
    trace_console: bool = Field(default=False, description="Print finished spans to stderr")
