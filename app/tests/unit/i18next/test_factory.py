"""Tests for create_i18next (i18next.factory)."""

from unittest.mock import Mock

import pytest

from i18next import I18Next, InMemoryResourceStore, Locale, Options, PluralResolver
from i18next.config import I18nSettings
from i18next.factory import create_i18next


@pytest.mark.unit
class TestCreateI18Next:
    """Tests for the factory function."""

    def test_builds_in_memory_store(self, yaml_resources):
        """Resources are wrapped in an InMemoryResourceStore."""
        i18n = create_i18next(yaml_resources, settings=I18nSettings())

        assert isinstance(i18n, I18Next)
        assert isinstance(i18n.resource_store, InMemoryResourceStore)
        assert i18n.t("common:greeting", variables={"name": "Ada"}) == "Hello Ada"

    def test_without_resources(self):
        """An empty store misses every key."""
        i18n = create_i18next(settings=I18nSettings())
        assert i18n.t_or_null("common:title") is None

    def test_uses_given_store(self, resource_store, mock_key):
        """A pre-built store takes precedence over resources."""
        mock_key("key", "from store", ns="ns")
        i18n = create_i18next(
            {"en": {"ns": {"key": "from resources"}}},
            resource_store=resource_store,
            settings=I18nSettings(),
        )
        assert i18n.resource_store is resource_store
        assert i18n.t("ns:key") == "from store"

    def test_default_locale_from_settings(self, yaml_resources):
        """The default locale comes from settings."""
        settings = I18nSettings(I18N_DEFAULT_LOCALE="en-GB")
        i18n = create_i18next(yaml_resources, settings=settings)

        assert i18n.locale == Locale("en", "GB")
        assert i18n.t("common:title") == "Dashboard (GB)"
        assert i18n.t("common:menu.file") == "File"

    def test_settings_become_options(self, yaml_resources):
        """Separators and fallbacks come from settings."""
        settings = I18nSettings(
            I18N_NAMESPACE_SEPARATOR="::",
            I18N_FALLBACK_NAMESPACES=["errors"],
        )
        i18n = create_i18next(yaml_resources, settings=settings)

        assert i18n.options.namespace_separator == "::"
        assert i18n.options.fallback_namespaces == ("errors",)
        assert i18n.t("common::not_found") == "Not found"

    def test_options_override_settings(self, yaml_resources):
        """Explicit options win over settings."""
        settings = I18nSettings(I18N_ESCAPE_VALUE=True)
        i18n = create_i18next(
            {"en": {"ns": {"key": "{{v}}"}}},
            options=Options(escape_value=False),
            settings=settings,
        )

        assert i18n.options.escape_value is False
        assert i18n.t("ns:key", variables={"v": "<b>"}) == "<b>"

    def test_settings_from_environment(self, monkeypatch):
        """Environment variables configure the facade."""
        monkeypatch.setenv("I18N_DEFAULT_LOCALE", "fr")
        i18n = create_i18next(
            {"fr": {"ns": {"key": "clé"}}}, settings=I18nSettings()
        )
        assert i18n.t("ns:key") == "clé"

    def test_custom_plural_resolver(self):
        """A custom plural resolver is used."""
        resolver = Mock(spec=PluralResolver)
        resolver.pluralize.return_value = "_many"
        i18n = create_i18next(
            {"en": {"ns": {"item": "one", "item_many": "many"}}},
            settings=I18nSettings(),
            plural_resolver=resolver,
        )

        assert i18n.t("ns:item", count=5) == "many"
        resolver.pluralize.assert_called_once()
