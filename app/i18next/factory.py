"""Factory functions for creating the translation facade."""

from typing import Any, Mapping, Optional

from i18next.config import I18nSettings, settings as default_settings
from i18next.logging import get_module_logger
from i18next.models import Options
from i18next.plural import PluralResolver
from i18next.resource_store import InMemoryResourceStore, ResourceStore
from i18next.service import I18Next

logger = get_module_logger()


def create_i18next(
    resources: Optional[Mapping[str, Mapping[str, Any]]] = None,
    resource_store: Optional[ResourceStore] = None,
    options: Optional[Options] = None,
    settings: Optional[I18nSettings] = None,
    plural_resolver: Optional[PluralResolver] = None,
) -> I18Next:
    """Create and configure an I18Next instance.

    Options come from settings (environment), with ``options`` layered on top.

    Args:
        resources: Resource tree {locale: {namespace: {...}}} for an
            in-memory store. Ignored when ``resource_store`` is given.
        resource_store: Pre-built store.
        options: Options overriding the settings-derived ones.
        settings: Settings instance (default: module-level settings).
        plural_resolver: Optional custom plural resolver.

    Returns:
        I18Next: Configured facade.

    Usage:
        i18n = create_i18next({"en": {"common": {"hello": "Hello {{name}}"}}})
        i18n.t("common:hello", variables={"name": "World"})
    """
    settings = settings or default_settings
    store = resource_store or InMemoryResourceStore(resources)
    instance_options = Options.from_settings(settings).merge(options)

    i18n = I18Next(
        settings.default_locale,
        store,
        options=instance_options,
        plural_resolver=plural_resolver,
    )
    logger.info(
        "i18next_created",
        default_locale=i18n.locale.tag,
        fallback_namespaces=list(instance_options.fallback_namespaces or ()),
    )
    return i18n
