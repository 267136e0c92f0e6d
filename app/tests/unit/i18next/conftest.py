"""Feature-level fixtures for i18n tests.

Provides mock resource stores, YAML resource fixtures and a facade wired
to them.
"""

import pytest
import yaml

from i18next import I18Next, InMemoryResourceStore, Locale
from tests.factories.i18n import NAMESPACE, make_mock_store, make_options


@pytest.fixture
def locale():
    """Default English locale."""
    return Locale("en")


@pytest.fixture
def options():
    """Fully populated default Options."""
    return make_options()


@pytest.fixture
def entries():
    """Backing data for the mock store: {(locale, namespace, key): value}."""
    return {}


@pytest.fixture
def resource_store(entries):
    """Mock resource store answering from ``entries``."""
    return make_mock_store(entries)


@pytest.fixture
def mock_key(entries):
    """Register a template in the mock store."""

    def _mock_key(key, answer, ns=NAMESPACE, locale="en"):
        entries[(locale, ns, key)] = answer

    return _mock_key


@pytest.fixture
def i18next(resource_store):
    """I18Next facade over the mock store with default options."""
    return I18Next(Locale("en"), resource_store)


@pytest.fixture
def yaml_resources():
    """Resource tree parsed from a YAML document."""
    document = """
en:
  common:
    title: Dashboard
    greeting: "Hello {{name}}"
    menu:
      file: File
      edit:
        undo: Undo
    count: 3
  errors:
    not_found: "Not found"
en-GB:
  common:
    title: Dashboard (GB)
"""
    return yaml.safe_load(document)


@pytest.fixture
def yaml_store(yaml_resources):
    """InMemoryResourceStore built from the YAML fixture."""
    return InMemoryResourceStore(yaml_resources)
