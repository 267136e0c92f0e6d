"""Tests for i18next.resource_store module."""

import pytest

from i18next.models import Locale, Options
from i18next.resource_store import InMemoryResourceStore, ResourceStore


@pytest.mark.unit
class TestInMemoryResourceStore:
    """Tests for InMemoryResourceStore."""

    def test_satisfies_protocol(self, yaml_store):
        """InMemoryResourceStore is a ResourceStore."""
        assert isinstance(yaml_store, ResourceStore)

    def test_retrieve_flat_key(self, yaml_store, options):
        """retrieve() returns top-level templates."""
        assert yaml_store.retrieve(Locale("en"), "common", "title", options) == "Dashboard"

    def test_retrieve_nested_key(self, yaml_store, options):
        """retrieve() walks hierarchical keys."""
        assert yaml_store.retrieve(Locale("en"), "common", "menu.file", options) == "File"
        assert (
            yaml_store.retrieve(Locale("en"), "common", "menu.edit.undo", options)
            == "Undo"
        )

    def test_retrieve_custom_key_separator(self, yaml_store):
        """retrieve() splits on options.key_separator."""
        options = Options.base().merge(Options(key_separator="/"))
        assert yaml_store.retrieve(Locale("en"), "common", "menu/file", options) == "File"
        assert yaml_store.retrieve(Locale("en"), "common", "menu.file", options) is None

    def test_retrieve_flat_dotted_key(self, options):
        """A flat entry containing the separator is found directly."""
        store = InMemoryResourceStore({"en": {"ns": {"group.keyB": "B"}}})
        assert store.retrieve(Locale("en"), "ns", "group.keyB", options) == "B"

    def test_retrieve_non_string_leaf(self, yaml_store, options):
        """Subtrees and non-string values are not templates."""
        assert yaml_store.retrieve(Locale("en"), "common", "menu", options) is None
        assert yaml_store.retrieve(Locale("en"), "common", "count", options) is None

    def test_retrieve_missing(self, yaml_store, options):
        """Unknown locales, namespaces and keys return None."""
        assert yaml_store.retrieve(Locale("de"), "common", "title", options) is None
        assert yaml_store.retrieve(Locale("en"), "nope", "title", options) is None
        assert yaml_store.retrieve(Locale("en"), "common", "nope", options) is None
        assert yaml_store.retrieve(Locale("en"), "common", "menu.nope", options) is None

    def test_retrieve_region_then_language(self, yaml_store, options):
        """The full tag is tried before the language."""
        en_gb = Locale("en", "GB")
        assert yaml_store.retrieve(en_gb, "common", "title", options) == "Dashboard (GB)"
        assert yaml_store.retrieve(en_gb, "errors", "not_found", options) == "Not found"

    def test_add_resource(self, options):
        """add_resource() stores a single entry."""
        store = InMemoryResourceStore()
        store.add_resource("en", "ns", "key", "value")
        assert store.retrieve(Locale("en"), "ns", "key", options) == "value"
        assert store.has_namespace("en", "ns")
        assert not store.has_namespace("fr", "ns")

    def test_add_resource_bundle_deep_merges(self, options):
        """add_resource_bundle() merges nested trees."""
        store = InMemoryResourceStore({"en": {"ns": {"menu": {"file": "File"}}}})
        store.add_resource_bundle("en", "ns", {"menu": {"edit": "Edit"}, "title": "T"})
        assert store.retrieve(Locale("en"), "ns", "menu.file", options) == "File"
        assert store.retrieve(Locale("en"), "ns", "menu.edit", options) == "Edit"
        assert store.retrieve(Locale("en"), "ns", "title", options) == "T"

    def test_constructor_copies_data(self, options):
        """Mutating the source tree does not change the store."""
        source = {"en": {"ns": {"menu": {"file": "File"}}}}
        store = InMemoryResourceStore(source)
        source["en"]["ns"]["menu"]["file"] = "Changed"
        assert store.retrieve(Locale("en"), "ns", "menu.file", options) == "File"
