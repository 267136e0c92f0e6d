"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    NAMESPACE,
    make_i18next,
    make_locale,
    make_mock_store,
    make_options,
    make_resource_store,
    make_resources,
)

__all__ = [
    "NAMESPACE",
    "make_i18next",
    "make_locale",
    "make_mock_store",
    "make_options",
    "make_resource_store",
    "make_resources",
]
