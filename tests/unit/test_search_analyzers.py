"""Unit tests for tokenizers, filters and analyzer pipelines."""

import pytest

from site_search_indexer.search.analyzers import (
    AnalyzerPipeline,
    LowercaseFilter,
    RegexTokenizer,
    SegmentTokenizer,
    SeparatorTokenizer,
    StemFilter,
    StopFilter,
    Token,
    TrimmerFilter,
    UnionTokenizer,
    fallback_tokenize,
)


@pytest.mark.unit
class TestToken:
    def test_copy_with_leaves_original_untouched(self):
        token = Token(text="Configure", position=2, start_char=10, end_char=19)

        clone = token.copy_with(text="configure")

        assert clone.text == "configure"
        assert clone.position == 2
        assert (clone.start_char, clone.end_char) == (10, 19)
        assert token.text == "Configure"


@pytest.mark.unit
class TestSeparatorTokenizer:
    def test_splits_on_whitespace_and_hyphens_with_offsets(self):
        tokens = list(SeparatorTokenizer()("build-time  search index"))

        assert [t.text for t in tokens] == ["build", "time", "search", "index"]
        assert [t.position for t in tokens] == [0, 1, 2, 3]
        assert tokens[1].start_char == 6
        assert tokens[1].end_char == 10
        assert tokens[2].start_char == 12

    def test_leading_and_trailing_separators_yield_no_empty_tokens(self):
        tokens = list(SeparatorTokenizer()("  - hello -  "))

        assert [t.text for t in tokens] == ["hello"]

    def test_custom_separator_replaces_default(self):
        tokens = list(SeparatorTokenizer(r"[\s\-_]+")("snake_case-name here"))

        assert [t.text for t in tokens] == ["snake", "case", "name", "here"]


@pytest.mark.unit
def test_regex_tokenizer_emits_word_tokens():
    tokens = list(RegexTokenizer()("Configure logging, now!"))

    assert [t.text for t in tokens] == ["Configure", "logging", "now"]
    assert tokens[1].start_char == 10
    assert tokens[1].end_char == 17


@pytest.mark.unit
class TestSegmentTokenizer:
    def test_recovers_offsets_from_segments(self):
        tokenizer = SegmentTokenizer(lambda text: ["你好", "世界"])

        tokens = list(tokenizer("你好世界"))

        assert [(t.text, t.start_char, t.end_char) for t in tokens] == [("你好", 0, 2), ("世界", 2, 4)]

    def test_skips_whitespace_segments(self):
        tokenizer = SegmentTokenizer(lambda text: ["foo", " ", "bar", ""])

        tokens = list(tokenizer("foo bar"))

        assert [t.text for t in tokens] == ["foo", "bar"]
        assert [t.position for t in tokens] == [0, 1]
        assert tokens[1].start_char == 4


@pytest.mark.unit
class TestUnionTokenizer:
    def test_merges_by_offset_and_deduplicates(self):
        union = UnionTokenizer([SeparatorTokenizer(), RegexTokenizer()])

        tokens = list(union("hello world"))

        assert [t.text for t in tokens] == ["hello", "world"]
        assert [t.position for t in tokens] == [0, 1]

    def test_keeps_distinct_spans_from_each_tokenizer(self):
        union = UnionTokenizer([SeparatorTokenizer(), RegexTokenizer()])

        tokens = list(union("it's"))

        assert [t.text for t in tokens] == ["it's"]

        tokens = list(union("a.b"))

        assert [t.text for t in tokens] == ["a", "a.b", "b"]

    def test_requires_at_least_one_tokenizer(self):
        with pytest.raises(ValueError):
            UnionTokenizer([])


@pytest.mark.unit
class TestFilters:
    def test_trimmer_strips_punctuation_and_drops_empty_tokens(self):
        tokens = [
            Token("(hello),", 0, 0, 8),
            Token("--", 1, 9, 11),
            Token("world", 2, 12, 17),
        ]

        trimmed = list(TrimmerFilter()(tokens))

        assert [t.text for t in trimmed] == ["hello", "world"]
        assert trimmed[1] is tokens[2]

    def test_trimmer_keeps_combining_marks(self):
        # Devanagari vowel sign at the end of the word is a combining mark
        word = "का"
        trimmed = list(TrimmerFilter()([Token(word, 0, 0, 2)]))

        assert [t.text for t in trimmed] == [word]

    def test_stop_filter_is_case_insensitive(self):
        tokens = [Token("The", 0, 0, 3), Token("index", 1, 4, 9)]

        assert [t.text for t in StopFilter()(tokens)] == ["index"]

    def test_stem_filter_drops_tokens_stemmed_to_nothing(self):
        stems = {"running": "run", "zz": ""}
        tokens = [Token("running", 0, 0, 7), Token("zz", 1, 8, 10)]

        stemmed = list(StemFilter(lambda word: stems.get(word, word))(tokens))

        assert [t.text for t in stemmed] == ["run"]


@pytest.mark.unit
class TestAnalyzerPipeline:
    def test_positions_are_renumbered_after_filtering(self):
        analyzer = AnalyzerPipeline(SeparatorTokenizer(), [LowercaseFilter(), TrimmerFilter(), StopFilter()])

        tokens = analyzer("The Quick, brown fox")

        assert [t.text for t in tokens] == ["quick", "brown", "fox"]
        assert [t.position for t in tokens] == [0, 1, 2]

    def test_empty_text_yields_no_tokens(self):
        analyzer = AnalyzerPipeline(SeparatorTokenizer(), [LowercaseFilter()])

        assert analyzer("") == []


@pytest.mark.unit
class TestFallbackTokenize:
    def test_splits_chinese_on_hyphen(self):
        assert fallback_tokenize("你好-世界") == ["你好", "世界"]

    def test_trims_and_lowercases(self):
        assert fallback_tokenize("  Hello   World ") == ["hello", "world"]

    def test_custom_separator(self):
        assert fallback_tokenize("a,b,,c", separator=",") == ["a", "b", "c"]
