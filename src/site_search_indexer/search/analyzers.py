"""Analyzer utilities for the section index.

Analyzers follow a composable tokenizer/filter design: a tokenizer turns raw
text into positioned tokens, and filters (lowercase, trim, stop words,
stemming) rewrite the stream. Language-specific wiring lives in
:mod:`site_search_indexer.search.languages`; this module only holds the
building blocks.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, replace
import re
from typing import Protocol
import unicodedata

from site_search_indexer.search.stopwords import ENGLISH_STOPWORDS


DEFAULT_SEPARATOR = r"[\s\-]+"


@dataclass
class Token:
    """Represents a token emitted by analyzers."""

    text: str
    position: int
    start_char: int
    end_char: int

    def copy_with(self, **updates: object) -> Token:
        return replace(self, **updates)  # type: ignore[arg-type]


class Analyzer(Protocol):
    """Protocol implemented by analyzers."""

    def __call__(self, text: str) -> list[Token]:  # pragma: no cover - interface definition
        ...


class Tokenizer(Protocol):
    """Protocol implemented by tokenizers."""

    def __call__(self, text: str) -> Iterator[Token]:  # pragma: no cover - interface definition
        ...


class TokenFilter(Protocol):
    """Protocol implemented by token filters."""

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:  # pragma: no cover - interface definition
        ...


class SeparatorTokenizer:
    """Split text on a separator pattern (whitespace and hyphens by default)."""

    def __init__(self, separator: str | None = None) -> None:
        self.separator = separator or DEFAULT_SEPARATOR
        self.pattern = re.compile(self.separator, re.UNICODE)

    def __call__(self, text: str) -> Iterator[Token]:
        position = 0
        start = 0
        for match in self.pattern.finditer(text):
            if match.start() > start:
                yield Token(text=text[start : match.start()], position=position, start_char=start, end_char=match.start())
                position += 1
            start = max(start, match.end())
        if start < len(text):
            yield Token(text=text[start:], position=position, start_char=start, end_char=len(text))


class RegexTokenizer:
    """Regex-based tokenizer that yields word tokens."""

    def __init__(self, pattern: str = r"[\w']+", flags: int = re.UNICODE | re.MULTILINE) -> None:
        self.pattern = re.compile(pattern, flags)

    def __call__(self, text: str) -> Iterator[Token]:
        for position, match in enumerate(self.pattern.finditer(text)):
            yield Token(
                text=match.group(0),
                position=position,
                start_char=match.start(),
                end_char=match.end(),
            )


class SegmentTokenizer:
    """Adapt a ``text -> list[str]`` word segmenter into a positioned tokenizer.

    Segmenters used for CJK and Thai return bare words; offsets are recovered
    by scanning the source text left to right. Whitespace-only segments are
    dropped.
    """

    def __init__(self, segment: Callable[[str], Iterable[str]]) -> None:
        self._segment = segment

    def __call__(self, text: str) -> Iterator[Token]:
        cursor = 0
        position = 0
        for word in self._segment(text):
            if not word or not word.strip():
                cursor += len(word)
                continue
            start = text.find(word, cursor)
            if start < 0:
                start = cursor
            end = start + len(word)
            cursor = end
            yield Token(text=word, position=position, start_char=start, end_char=end)
            position += 1


class UnionTokenizer:
    """Run several tokenizers and merge their output.

    Tokens are ordered by source offset; a token produced by more than one
    constituent (same span and text) is kept once.
    """

    def __init__(self, tokenizers: Sequence[Tokenizer]) -> None:
        if not tokenizers:
            raise ValueError("UnionTokenizer needs at least one tokenizer")
        self.tokenizers = tuple(tokenizers)

    def __call__(self, text: str) -> Iterator[Token]:
        seen: set[tuple[int, int, str]] = set()
        merged: list[Token] = []
        for tokenizer in self.tokenizers:
            for token in tokenizer(text):
                key = (token.start_char, token.end_char, token.text)
                if key in seen:
                    continue
                seen.add(key)
                merged.append(token)
        merged.sort(key=lambda token: (token.start_char, token.end_char))
        for position, token in enumerate(merged):
            yield token.copy_with(position=position)


class LowercaseFilter:
    """Filter that lowercases token text."""

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            if token.text.islower():
                yield token
            else:
                yield token.copy_with(text=token.text.lower())


def _is_word_char(char: str) -> bool:
    # combining marks carry Thai and Devanagari vowels
    return char.isalnum() or char == "_" or unicodedata.category(char).startswith("M")


class TrimmerFilter:
    """Strip leading/trailing non-word characters and drop emptied tokens."""

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            text = token.text
            start = 0
            end = len(text)
            while start < end and not _is_word_char(text[start]):
                start += 1
            while end > start and not _is_word_char(text[end - 1]):
                end -= 1
            if start == end:
                continue
            if start == 0 and end == len(text):
                yield token
            else:
                yield token.copy_with(text=text[start:end])


DEFAULT_STOPWORDS = list(ENGLISH_STOPWORDS)


class StopFilter:
    """Removes stopwords from the stream."""

    def __init__(self, stopwords: Sequence[str] | None = None) -> None:
        vocab = stopwords if stopwords is not None else DEFAULT_STOPWORDS
        self.stopwords = frozenset(word.lower() for word in vocab)

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            if token.text.lower() not in self.stopwords:
                yield token


class StemFilter:
    """Applies a word-level stemmer to every token."""

    def __init__(self, stem: Callable[[str], str]) -> None:
        self._stem = stem

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            stemmed = self._stem(token.text)
            if not stemmed:
                continue
            if stemmed == token.text:
                yield token
            else:
                yield token.copy_with(text=stemmed)


class AnalyzerPipeline:
    """Composable analyzer pipeline (tokenizer + filters)."""

    def __init__(self, tokenizer: Tokenizer, filters: Sequence[TokenFilter] | None = None) -> None:
        self.tokenizer = tokenizer
        self.filters = list(filters or [])

    def __call__(self, text: str) -> list[Token]:
        if not text:
            return []
        stream: Iterable[Token] = self.tokenizer(text)
        for token_filter in self.filters:
            stream = token_filter(stream)
        tokens = list(stream)
        for idx, token in enumerate(tokens):  # normalize positions post-filtering
            token.position = idx
        return tokens


def fallback_tokenize(text: str, separator: str | None = None) -> list[str]:
    """Tokenizer used by clients that cannot run a dictionary segmenter.

    Trims, lowercases and splits on ``separator`` (default: runs of whitespace
    or hyphens), dropping empty pieces. No stemming or segmentation.
    """

    pattern = re.compile(separator or DEFAULT_SEPARATOR, re.UNICODE)
    return [piece for piece in pattern.split(text.strip().lower()) if piece]
