"""Unit tests for i18next.config settings."""

import pytest

from i18next.config import I18nSettings


@pytest.mark.unit
class TestI18nSettings:
    """Test I18nSettings configuration."""

    def test_default_values(self):
        """Test I18nSettings with default values."""
        settings = I18nSettings()

        assert settings.default_locale == "en"
        assert settings.namespace_separator == ":"
        assert settings.context_separator == "_"
        assert settings.plural_separator == "_"
        assert settings.key_separator == "."
        assert settings.escape_value is True
        assert settings.fallback_namespaces == []
        assert settings.max_nesting_depth == 25
        assert settings.LOG_LEVEL == "WARNING"

    def test_environment_overrides(self, monkeypatch):
        """Test I18nSettings reads environment variables."""
        monkeypatch.setenv("I18N_DEFAULT_LOCALE", "fr-FR")
        monkeypatch.setenv("I18N_NAMESPACE_SEPARATOR", "|")
        monkeypatch.setenv("I18N_ESCAPE_VALUE", "false")
        monkeypatch.setenv("I18N_FALLBACK_NAMESPACES", '["common", "base"]')
        monkeypatch.setenv("I18N_MAX_NESTING_DEPTH", "10")

        settings = I18nSettings()

        assert settings.default_locale == "fr-FR"
        assert settings.namespace_separator == "|"
        assert settings.escape_value is False
        assert settings.fallback_namespaces == ["common", "base"]
        assert settings.max_nesting_depth == 10

    def test_is_production_without_prefix(self):
        """Test is_production is True when PREFIX is empty."""
        assert I18nSettings().is_production is True

    def test_is_not_production_with_prefix(self, monkeypatch):
        """Test is_production is False when PREFIX is set."""
        monkeypatch.setenv("PREFIX", "dev-")
        assert I18nSettings().is_production is False

    def test_invalid_nesting_depth(self, monkeypatch):
        """Test max_nesting_depth must be positive."""
        monkeypatch.setenv("I18N_MAX_NESTING_DEPTH", "0")
        with pytest.raises(ValueError):
            I18nSettings()
