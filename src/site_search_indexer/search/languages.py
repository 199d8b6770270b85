"""Static language registry and per-build language policies.

Every supported locale code maps to a :class:`LanguageSupport` entry that
knows how to tokenize (separator split, or a word segmenter for Japanese,
Thai, Hindi and Chinese) and which Snowball stemmer to apply. Codes are
validated once by :func:`resolve_language_policy`; the resulting
:class:`LanguagePolicy` is immutable and creates a fresh analyzer for every
index build, so no tokenizer state is shared between builds.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
import logging
from typing import Literal

import snowballstemmer

from site_search_indexer.errors import ConfigurationError
from site_search_indexer.search.analyzers import (
    DEFAULT_SEPARATOR,
    Analyzer,
    AnalyzerPipeline,
    LowercaseFilter,
    RegexTokenizer,
    SegmentTokenizer,
    SeparatorTokenizer,
    StemFilter,
    StopFilter,
    TokenFilter,
    Tokenizer,
    TrimmerFilter,
    UnionTokenizer,
)
from site_search_indexer.search.stopwords import stopwords_for


logger = logging.getLogger(__name__)

DEPRECATED_LANGUAGES: dict[str, str] = {"jp": "ja"}

# Languages whose tokenizer is a word segmenter; a custom separator makes no sense there.
SEPARATOR_INCOMPATIBLE_LANGUAGES = frozenset({"ja", "th"})

_DEVANAGARI_WORD = r"[\w\u0900-\u097f]+"

ClientTokenizerKind = Literal["default", "segmenter", "fallback"]


def _tinyseg_tokenizer(_separator: str | None) -> Tokenizer:
    import tinysegmenter

    segmenter = tinysegmenter.TinySegmenter()
    return SegmentTokenizer(segmenter.tokenize)


def _wordcut_tokenizer(_separator: str | None) -> Tokenizer:
    from pythainlp.tokenize import word_tokenize

    def segment(text: str) -> list[str]:
        return word_tokenize(text, engine="newmm", keep_whitespace=False)

    return SegmentTokenizer(segment)


def _devanagari_tokenizer(_separator: str | None) -> Tokenizer:
    return RegexTokenizer(_DEVANAGARI_WORD)


def _jieba_tokenizer(_separator: str | None) -> Tokenizer:
    import jieba

    def segment(text: str) -> Iterable[str]:
        return jieba.cut(text, cut_all=False)

    return SegmentTokenizer(segment)


def _separator_tokenizer(separator: str | None) -> Tokenizer:
    return SeparatorTokenizer(separator)


@dataclass(frozen=True)
class LanguageSupport:
    """Registry entry describing how one language is analyzed."""

    code: str
    stemmer_algorithm: str | None = None
    tokenizer_factory: Callable[[str | None], Tokenizer] = _separator_tokenizer
    stopwords: tuple[str, ...] = ()
    client_tokenizer: ClientTokenizerKind = "default"

    @property
    def pipeline_label(self) -> str | None:
        """Name of the search-time stemmer recorded in the serialized index."""
        if self.stemmer_algorithm is None:
            return None
        return "stemmer" if self.code == "en" else f"stemmer-{self.code}"

    def create_stemmer(self) -> Callable[[str], str] | None:
        if self.stemmer_algorithm is None:
            return None
        return snowballstemmer.stemmer(self.stemmer_algorithm).stemWord


def _support(code: str, stemmer_algorithm: str | None, **kwargs: object) -> LanguageSupport:
    return LanguageSupport(code, stemmer_algorithm, stopwords=stopwords_for(code), **kwargs)  # type: ignore[arg-type]


_LANGUAGE_REGISTRY: dict[str, LanguageSupport] = {
    "ar": _support("ar", "arabic"),
    "da": _support("da", "danish"),
    "de": _support("de", "german"),
    "en": _support("en", "english"),
    "es": _support("es", "spanish"),
    "fi": _support("fi", "finnish"),
    "fr": _support("fr", "french"),
    "hi": _support("hi", "hindi", tokenizer_factory=_devanagari_tokenizer),
    "hu": _support("hu", "hungarian"),
    "it": _support("it", "italian"),
    "ja": _support("ja", None, tokenizer_factory=_tinyseg_tokenizer, client_tokenizer="segmenter"),
    "nl": _support("nl", "dutch"),
    "no": _support("no", "norwegian"),
    "pt": _support("pt", "portuguese"),
    "ro": _support("ro", "romanian"),
    "ru": _support("ru", "russian"),
    "sv": _support("sv", "swedish"),
    "th": _support("th", None, tokenizer_factory=_wordcut_tokenizer, client_tokenizer="segmenter"),
    "tr": _support("tr", "turkish"),
    "vi": _support("vi", None),
    "zh": _support("zh", None, tokenizer_factory=_jieba_tokenizer, client_tokenizer="fallback"),
}

SUPPORTED_LANGUAGES: tuple[str, ...] = tuple(sorted(_LANGUAGE_REGISTRY))


def get_language_support(code: str) -> LanguageSupport:
    """Return the registry entry for ``code`` or raise a configuration error."""

    if code in DEPRECATED_LANGUAGES:
        raise ConfigurationError(f'Language "{code}" is deprecated, please use "{DEPRECATED_LANGUAGES[code]}".')
    try:
        return _LANGUAGE_REGISTRY[code]
    except KeyError:
        msg = f"Unsupported language {code!r}. Available: {list(SUPPORTED_LANGUAGES)}"
        raise ConfigurationError(msg) from None


def normalize_languages(language: str | Sequence[str]) -> tuple[str, ...]:
    """Return validated language codes as a tuple, preserving configured order."""

    codes = (language,) if isinstance(language, str) else tuple(language)
    if not codes:
        raise ConfigurationError("At least one language must be configured.")
    for code in codes:
        get_language_support(code)
    return tuple(dict.fromkeys(codes))


@dataclass(frozen=True)
class ClientTokenizerSpec:
    """How the client runtime must tokenize queries to match the index.

    ``fallback`` is a plain trim/lowercase/split on ``separator``; it is used
    for Chinese because the index-time segmenter cannot run in the browser.
    """

    kind: ClientTokenizerKind
    separator: str
    language: str | None = None


@dataclass(frozen=True)
class LanguagePolicy:
    """Immutable, fully-parameterized tokenization policy for one build."""

    languages: tuple[str, ...]
    separator: str | None = None

    @property
    def supports(self) -> tuple[LanguageSupport, ...]:
        return tuple(_LANGUAGE_REGISTRY[code] for code in self.languages)

    @property
    def is_multilingual(self) -> bool:
        return len(self.languages) > 1

    @property
    def pipeline_labels(self) -> tuple[str, ...]:
        return tuple(label for support in self.supports if (label := support.pipeline_label))

    def create_analyzer(self) -> Analyzer:
        """Build a fresh analyzer; callers never share one across builds."""

        supports = self.supports
        tokenizers = [support.tokenizer_factory(self.separator) for support in supports]
        tokenizer: Tokenizer = tokenizers[0] if len(tokenizers) == 1 else UnionTokenizer(tokenizers)

        filters: list[TokenFilter] = [LowercaseFilter(), TrimmerFilter()]
        for support in supports:
            if support.stopwords:
                filters.append(StopFilter(support.stopwords))
        for support in supports:
            stem = support.create_stemmer()
            if stem is not None:
                filters.append(StemFilter(stem))
        return AnalyzerPipeline(tokenizer, filters)

    def client_tokenizer(self) -> ClientTokenizerSpec:
        separator = self.separator or DEFAULT_SEPARATOR
        if self.is_multilingual:
            return ClientTokenizerSpec(kind="default", separator=separator)
        support = self.supports[0]
        return ClientTokenizerSpec(kind=support.client_tokenizer, separator=separator, language=support.code)


def resolve_language_policy(language: str | Sequence[str], separator: str | None = None) -> LanguagePolicy:
    """Validate ``language``/``separator`` and return the build policy.

    Raises:
        ConfigurationError: for unknown or deprecated codes, or when a custom
            separator is combined with a segmenter-based language.
    """

    codes = normalize_languages(language)
    if separator:
        conflicting = [code for code in codes if code in SEPARATOR_INCOMPATIBLE_LANGUAGES]
        if conflicting:
            raise ConfigurationError(
                f"The tokenizer separator option is not supported for {', '.join(repr(c) for c in conflicting)}."
            )
    logger.debug("Resolved language policy %s (separator=%r)", codes, separator)
    return LanguagePolicy(languages=codes, separator=separator)
