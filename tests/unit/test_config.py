"""Unit tests for option validation, client runtime config and settings."""

import pytest
from pydantic import ValidationError

from site_search_indexer.config import (
    ClientRuntimeConfig,
    IndexerOptions,
    IndexerSettings,
    RankingOptions,
    load_options,
)
from site_search_indexer.errors import ConfigurationError


class TestIndexerOptionsDefaults:
    def test_defaults(self):
        options = IndexerOptions()

        assert options.index_docs is True
        assert options.index_blog is True
        assert options.index_pages is False
        assert options.index_doc_sidebar_parent_categories == 0
        assert options.include_parent_categories_in_page_title is False
        assert options.language == "en"
        assert options.style is None
        assert options.max_search_results == 8
        assert options.filter_by_path_name is False
        assert options.sub_path == -1

    def test_ranking_defaults(self):
        ranking = RankingOptions()

        assert (ranking.k1, ranking.b) == (1.2, 0.75)
        assert (ranking.title_boost, ranking.content_boost, ranking.tags_boost) == (5.0, 1.0, 3.0)
        assert ranking.parent_categories_boost == 2.0
        assert ranking.tokenizer_separator is None

    def test_options_are_frozen(self):
        options = IndexerOptions()

        with pytest.raises(ValidationError):
            options.index_docs = False


class TestLanguageOption:
    def test_single_element_list_collapses(self):
        assert load_options(language=["fr"]).language == "fr"

    def test_list_kept_as_tuple(self):
        options = load_options(language=["en", "fr"])

        assert options.language == ("en", "fr")
        assert options.languages == ("en", "fr")

    def test_deprecated_jp_message(self):
        with pytest.raises(ConfigurationError, match='Language "jp" is deprecated, please use "ja".'):
            load_options(language="jp")

    def test_unknown_language(self):
        with pytest.raises(ConfigurationError):
            load_options(language=["en", "xx"])

    def test_separator_with_japanese_rejected(self):
        with pytest.raises(ConfigurationError, match="separator"):
            load_options(language="ja", ranking={"tokenizer_separator": r"[\s]+"})


class TestNumericBounds:
    @pytest.mark.parametrize(
        "raw",
        [
            {"max_search_results": 0},
            {"sub_path": -2},
            {"index_doc_sidebar_parent_categories": -1},
            {"ranking": {"k1": -1}},
            {"ranking": {"b": 1.01}},
            {"ranking": {"title_boost": -0.5}},
        ],
    )
    def test_out_of_range_values_rejected(self, raw):
        with pytest.raises(ConfigurationError, match="Invalid search index options"):
            load_options(raw)

    def test_invalid_separator_regex_rejected(self):
        with pytest.raises(ConfigurationError, match="not a valid regular expression"):
            load_options(ranking={"tokenizer_separator": "[unclosed"})

    def test_unknown_option_rejected(self):
        with pytest.raises(ConfigurationError):
            load_options(index_everything=True)

    def test_style_only_accepts_none_literal(self):
        assert load_options(style="none").style == "none"
        with pytest.raises(ConfigurationError):
            load_options(style="fancy")

    def test_zero_boosts_and_edge_bm25_values_accepted(self):
        ranking = load_options(ranking={"k1": 0, "b": 1, "content_boost": 0}).ranking

        assert (ranking.k1, ranking.b, ranking.content_boost) == (0, 1, 0)


def test_section_schema_follows_options():
    options = load_options(index_doc_sidebar_parent_categories=3, ranking={"tags_boost": 7})

    schema = options.section_schema()

    assert schema.field_names == ("title", "content", "tags", "sidebarParentCategories")
    assert schema.get_boost("tags") == 7


class TestClientRuntimeConfig:
    def test_serializes_camel_case(self):
        options = load_options(max_search_results=12, filter_by_path_name=True, sub_path=1)

        payload = ClientRuntimeConfig.from_options(options).to_json_dict()

        assert payload["titleBoost"] == 5.0
        assert payload["maxSearchResults"] == 12
        assert payload["filterByPathName"] is True
        assert payload["subPath"] == 1
        assert payload["indexDocSidebarParentCategories"] == 0
        assert payload["languages"] == ["en"]
        assert payload["indexPipeline"] == ["stemmer"]
        assert payload["tokenizer"] == {"kind": "default", "separator": r"[\s\-]+", "language": "en"}

    def test_chinese_uses_fallback_tokenizer(self):
        config = ClientRuntimeConfig.from_options(load_options(language="zh"))

        assert config.tokenizer.kind == "fallback"
        assert config.index_pipeline == ()

    def test_custom_separator_is_echoed(self):
        config = ClientRuntimeConfig.from_options(load_options(ranking={"tokenizer_separator": r"[\s_]+"}))

        assert config.tokenizer.separator == r"[\s_]+"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("SEARCH_INDEX_LOG_LEVEL", "debug")
    monkeypatch.setenv("SEARCH_INDEX_LOG_JSON", "false")

    settings = IndexerSettings()

    assert settings.log_level == "debug"
    assert settings.log_json is False
    assert settings.service_name == "site-search-indexer"
