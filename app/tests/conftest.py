"""Root test fixtures.

Keeps environment-driven settings from leaking between tests.
"""

import pytest

_I18N_ENV_VARS = (
    "PREFIX",
    "LOG_LEVEL",
    "I18N_DEFAULT_LOCALE",
    "I18N_NAMESPACE_SEPARATOR",
    "I18N_CONTEXT_SEPARATOR",
    "I18N_PLURAL_SEPARATOR",
    "I18N_KEY_SEPARATOR",
    "I18N_ESCAPE_VALUE",
    "I18N_FALLBACK_NAMESPACES",
    "I18N_MAX_NESTING_DEPTH",
)


@pytest.fixture(autouse=True)
def clean_i18n_env(monkeypatch):
    """Remove i18n environment variables for every test."""
    for name in _I18N_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
