"""i18next - key resolution and string rendering for localized UIs.

Resolves a symbolic key plus runtime variables into a localized string,
with namespaces, context and plural variants, interpolation, nesting and
HTML escaping.

Main components:
- models: Locale, TranslationKey, Options, TranslationRequest
- plural: PluralResolver and PluralRule
- resource_store: ResourceStore protocol and InMemoryResourceStore
- interpolator: interpolate() and nest()
- translator: Translator
- service: I18Next facade (t, t_or_null)
"""

from i18next.exceptions import (
    I18nError,
    InterpolationError,
    NestingDepthExceededError,
    NestingError,
    TranslationRenderError,
)
from i18next.factory import create_i18next
from i18next.models import (
    DISABLED,
    Locale,
    Options,
    TranslationKey,
    TranslationRequest,
)
from i18next.plural import PluralResolver, PluralRule
from i18next.resource_store import InMemoryResourceStore, ResourceStore
from i18next.service import I18Next
from i18next.translator import Translator

__all__ = [
    "I18Next",
    "create_i18next",
    "Locale",
    "Options",
    "DISABLED",
    "TranslationKey",
    "TranslationRequest",
    "PluralResolver",
    "PluralRule",
    "ResourceStore",
    "InMemoryResourceStore",
    "Translator",
    "I18nError",
    "TranslationRenderError",
    "InterpolationError",
    "NestingError",
    "NestingDepthExceededError",
]
