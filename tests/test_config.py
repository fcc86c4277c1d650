"""Test engine configuration."""

import importlib

import pytest

from tlsearch.core import config

ENV_VARS = [
    "TLSEARCH_SPLIT_MODE",
    "TLSEARCH_SEARCH_LIMIT",
    "TLSEARCH_SUGGEST_LIMIT",
    "TLSEARCH_SNIPPET_WINDOW",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Clean environment variables and restore the module afterwards."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield monkeypatch
    monkeypatch.undo()
    importlib.reload(config)


class TestSettings:
    """Test Settings class."""

    def test_defaults(self, clean_env):
        importlib.reload(config)

        assert config.settings.SPLIT_MODE == "A"
        assert config.settings.SEARCH_LIMIT == 10
        assert config.settings.SUGGEST_LIMIT == 10
        assert config.settings.SNIPPET_WINDOW == 150

    def test_values_from_env(self, clean_env):
        clean_env.setenv("TLSEARCH_SPLIT_MODE", "c")
        clean_env.setenv("TLSEARCH_SUGGEST_LIMIT", "3")

        importlib.reload(config)

        assert config.settings.SPLIT_MODE == "C"
        assert config.settings.SUGGEST_LIMIT == 3

    def test_invalid_split_mode(self, clean_env):
        clean_env.setenv("TLSEARCH_SPLIT_MODE", "X")

        with pytest.raises(RuntimeError, match="TLSEARCH_SPLIT_MODE"):
            importlib.reload(config)

    @pytest.mark.parametrize("value", ["abc", "0", "-5"])
    def test_invalid_limit(self, clean_env, value):
        clean_env.setenv("TLSEARCH_SEARCH_LIMIT", value)

        with pytest.raises(RuntimeError, match="TLSEARCH_SEARCH_LIMIT"):
            importlib.reload(config)
