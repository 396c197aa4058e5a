"""Unit tests for search configuration and settings."""

import pytest
from autocomplete_matcher.config import Settings, get_settings
from autocomplete_matcher.core.exceptions import ErrorType, InvalidConfigError
from autocomplete_matcher.models.config import SearchConfig


class TestSearchConfig:
    """Test cases for building SearchConfig from options."""

    @pytest.fixture
    def store(self):
        """Sample record store."""
        return [{"name": "Apple"}, {"name": "Banana"}]

    def test_minimal_config(self, store):
        """Only the store is required; defaults come from settings."""
        config = SearchConfig.from_options({"data": {"store": store}})
        settings = get_settings()

        assert config.data.key is None
        assert config.search_engine is None
        assert config.sort is None
        assert config.mode == settings.default_mode
        assert config.threshold == settings.default_threshold
        assert config.diacritics == settings.diacritics

    def test_store_kept_by_reference(self, store):
        """The store is not copied."""
        config = SearchConfig.from_options({"data": {"store": store}})
        assert config.data.store is store

    def test_tuple_store(self):
        """Any non-string sequence is a valid store."""
        config = SearchConfig.from_options({"data": {"store": ("a", "b")}})
        assert config.data.store == ("a", "b")

    @pytest.mark.parametrize("options", [
        {},
        {"data": {}},
        {"data": {"store": None}},
        {"data": {"store": "not a list"}},
        {"data": {"store": 42}},
        {"data": {"store": {"a": 1}}},
    ])
    def test_invalid_store(self, options):
        """Missing or non-sequence stores fail fast."""
        with pytest.raises(InvalidConfigError) as exc_info:
            SearchConfig.from_options(options)

        error = exc_info.value
        assert error.error_type == ErrorType.INVALID_CONFIG
        assert error.details["errors"]

    def test_non_mapping_options(self):
        """Options must be a mapping."""
        with pytest.raises(InvalidConfigError):
            SearchConfig.from_options(["data"])

    def test_single_key_shorthand(self, store):
        """A single key name becomes a one-item list."""
        config = SearchConfig.from_options({"data": {"store": store, "key": "name"}})
        assert config.data.key == ["name"]

    def test_search_engine_mode_string(self, store):
        """A string search engine selects the default matcher mode."""
        config = SearchConfig.from_options({"data": {"store": store}, "searchEngine": "loose"})

        assert config.mode == "loose"
        assert config.search_engine is None

    def test_search_engine_callable(self, store):
        """A callable search engine is kept as given."""
        def engine(query, text):
            return True

        config = SearchConfig.from_options({"data": {"store": store}, "searchEngine": engine})
        assert config.search_engine is engine

    def test_invalid_mode(self, store):
        """Unknown matcher modes are rejected."""
        with pytest.raises(InvalidConfigError):
            SearchConfig.from_options({"data": {"store": store}, "mode": "exact"})

    def test_nested_options(self, store):
        """Trigger and query options are parsed into nested models."""
        condition = lambda q: True  # noqa: E731
        manipulate = str.strip

        config = SearchConfig.from_options({
            "data": {"store": store},
            "trigger": {"condition": condition},
            "query": {"manipulate": manipulate},
        })

        assert config.trigger.condition is condition
        assert config.query.manipulate is manipulate

    def test_existing_config_returned(self, store):
        """Passing a SearchConfig returns it unchanged."""
        config = SearchConfig.from_options({"data": {"store": store}})
        assert SearchConfig.from_options(config) is config

    def test_error_to_dict(self):
        """Errors serialize with type, message and details."""
        with pytest.raises(InvalidConfigError) as exc_info:
            SearchConfig.from_options({"data": {"store": None}})

        data = exc_info.value.to_dict()
        assert data["error_type"] == "invalid_config"
        assert data["message"] == "invalid search configuration"
        assert data["details"]["errors"][0]["field"] == "data.store"


class TestSettings:
    """Test cases for environment-driven settings."""

    def test_defaults(self):
        """Settings have sensible defaults."""
        settings = Settings()

        assert settings.default_mode == "strict"
        assert settings.default_threshold == 1
        assert settings.diacritics is True
        assert settings.highlight_open == "<mark>"

    def test_environment_override(self, monkeypatch):
        """Settings read AUTOCOMPLETE_ prefixed environment variables."""
        monkeypatch.setenv("AUTOCOMPLETE_DEFAULT_MODE", "loose")
        monkeypatch.setenv("AUTOCOMPLETE_FUZZY_THRESHOLD", "0.5")

        settings = Settings()

        assert settings.default_mode == "loose"
        assert settings.fuzzy_threshold == 0.5
