"""Public translation facade.

Usage:
    store = InMemoryResourceStore({"en": {"common": {"friend": "A friend"}}})
    i18n = I18Next("en", store)

    i18n.t("common:friend")                          # "A friend"
    i18n.t("common:friend", count=2, context="male")
    i18n.t_or_null("common:unknown")                 # None
"""

from typing import Any, Callable, Mapping, Optional

from i18next.logging import get_module_logger
from i18next.models import Locale, LocaleLike, Options, TranslationRequest
from i18next.plural import PluralResolver
from i18next.resource_store import ResourceStore
from i18next.translator import Translator

logger = get_module_logger()


class I18Next:
    """Entry point for translating keys.

    Holds the default locale, the resource store and the instance Options.
    Per-call Options are merged over the instance Options, which are merged
    over Options.base(). Nothing is mutated by a call.

    Attributes:
        locale: Default locale for calls that do not pass one.
        resource_store: Source of raw templates.
        options: Instance options (fields left as None use the defaults).
        plural_resolver: Resolver for plural key suffixes.
    """

    def __init__(
        self,
        locale: LocaleLike,
        resource_store: ResourceStore,
        options: Optional[Options] = None,
        plural_resolver: Optional[PluralResolver] = None,
    ):
        """Initialize the facade.

        Args:
            locale: Default locale or tag.
            resource_store: Populated resource store.
            options: Optional instance options.
            plural_resolver: Optional resolver; defaults to the built-in rules.
        """
        self.locale = Locale.parse(locale)
        self.resource_store = resource_store
        self.options = options or Options()
        self.plural_resolver = plural_resolver or PluralResolver()

    def t(
        self,
        key: str,
        locale: Optional[LocaleLike] = None,
        context: Optional[str] = None,
        count: Optional[int] = None,
        variables: Optional[Mapping[str, Any]] = None,
        options: Optional[Options] = None,
        or_else: Optional[Callable[[str], str]] = None,
    ) -> str:
        """Translate ``key``, never returning None.

        On a miss, returns ``or_else(key)`` if given, else the result of
        ``missing_key_handler`` if it returns a value, else ``key`` itself.
        Exceptions raised by ``or_else`` propagate.

        Args:
            key: Raw key, optionally namespace-qualified ("ns:key").
            locale: Locale override.
            context: Context; overrides variables["context"].
            count: Count; overrides variables["count"].
            variables: Interpolation variables.
            options: Per-call options.
            or_else: Fallback producer called with the raw key on a miss.

        Returns:
            Rendered string or the miss fallback.
        """
        request = self._build_request(key, locale, context, count, variables, options)
        result = self._translate(request)
        if result is not None:
            return result

        if or_else is not None:
            return or_else(key)

        handler = request.options.missing_key_handler
        if handler is not None:
            fallback = handler(request.locale, key, request.variables, request.options)
            if fallback is not None:
                return fallback
        return key

    def t_or_null(
        self,
        key: str,
        locale: Optional[LocaleLike] = None,
        context: Optional[str] = None,
        count: Optional[int] = None,
        variables: Optional[Mapping[str, Any]] = None,
        options: Optional[Options] = None,
    ) -> Optional[str]:
        """Translate ``key``, returning None on a miss.

        Same arguments as t() minus ``or_else``; the missing key handler is
        not consulted.
        """
        request = self._build_request(key, locale, context, count, variables, options)
        return self._translate(request)

    def _build_request(
        self,
        key: str,
        locale: Optional[LocaleLike],
        context: Optional[str],
        count: Optional[int],
        variables: Optional[Mapping[str, Any]],
        options: Optional[Options],
    ) -> TranslationRequest:
        effective = Options.base().merge(self.options).merge(options)
        return TranslationRequest.build(
            key,
            locale if locale is not None else self.locale,
            variables=variables,
            options=effective,
            context=context,
            count=count,
        )

    def _translate(self, request: TranslationRequest) -> Optional[str]:
        translator = Translator(self.plural_resolver, self.resource_store)
        result = translator(
            request.key, request.locale, request.variables, request.options
        )
        if result is None:
            logger.debug("key_not_resolved", key=request.key, locale=request.locale.tag)
        return result
