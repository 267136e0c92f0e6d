"""Key resolution: candidate generation, namespace fallback and rendering.

Order of key resolution within a namespace (most specific first):

- context + pluralization: ['key_ctx_plr', 'key_ctx', 'key_plr', 'key']
- context only: ['key_ctx', 'key']
- pluralization only: ['key_plr', 'key']
- otherwise: ['key']

The primary namespace is searched with every candidate before the
configured fallback namespaces are tried, in their configured order.
"""

from typing import Any, List, Mapping, Optional, Tuple

from i18next import interpolator
from i18next.exceptions import NestingDepthExceededError
from i18next.logging import get_module_logger
from i18next.models import (
    Locale,
    Options,
    ResolutionFrame,
    TranslationKey,
    get_context,
    get_count,
)
from i18next.plural import PluralResolver
from i18next.resource_store import ResourceStore

logger = get_module_logger()


def log_translation_failed(
    locale: Locale,
    namespace: str,
    key: str,
    variables: Mapping[str, Any],
    options: Options,
    error: Exception,
) -> Optional[str]:
    """Default failure handler: log the error and report a miss."""
    logger.warning(
        "translation_failed",
        locale=locale.tag,
        namespace=namespace,
        key=key,
        error=str(error),
        error_type=type(error).__name__,
    )
    return None


class Translator:
    """Resolves a key to a rendered string.

    A Translator is created per call. Nested ``$t(...)`` tokens are
    resolved by a new Translator scoped to the namespace the template was
    found in, carrying the chain of templates being rendered so direct or
    indirect self-references fail instead of recursing.

    Attributes:
        plural_resolver: Resolver for plural key suffixes.
        resource_store: Source of raw templates.
        context_namespace: Namespace for keys without one (nested scope).
        chain: Templates currently being rendered, outermost first.
    """

    def __init__(
        self,
        plural_resolver: PluralResolver,
        resource_store: ResourceStore,
        context_namespace: Optional[str] = None,
        chain: Tuple[ResolutionFrame, ...] = (),
    ):
        self.plural_resolver = plural_resolver
        self.resource_store = resource_store
        self.context_namespace = context_namespace
        self.chain = chain

    def __call__(
        self,
        key: str,
        locale: Locale,
        variables: Mapping[str, Any],
        options: Options,
    ) -> Optional[str]:
        """Split the namespace off ``key`` and translate it.

        Args:
            key: Raw key, e.g. "common:friend" or "friend".
            locale: Target locale.
            variables: Variable bag.
            options: Effective options.

        Returns:
            Rendered string, or None if nothing was found.
        """
        parsed = TranslationKey.parse(key, options.namespace_separator)
        namespace = parsed.namespace
        if namespace is None:
            namespace = self.context_namespace or ""
        return self.translate_key(locale, namespace, parsed.key, variables, options)

    def candidate_keys(
        self,
        locale: Locale,
        key: str,
        variables: Mapping[str, Any],
        options: Options,
    ) -> List[str]:
        """Build the lookup candidates for ``key``, most specific first.

        A non-string or empty context and a non-integer count are treated
        as absent.
        """
        context = get_context(variables)
        count = get_count(variables)

        plural_suffix = ""
        if count is not None:
            plural_suffix = self.plural_resolver.pluralize(locale, count, options)

        keys = [key]
        if context is not None and count is not None:
            keys.append(key + plural_suffix)
        if context is not None:
            key = f"{key}{options.context_separator or ''}{context}"
            keys.append(key)
        if count is not None:
            keys.append(key + plural_suffix)

        # Duplicates appear when the plural suffix is empty.
        return list(dict.fromkeys(reversed(keys)))

    def translate_key(
        self,
        locale: Locale,
        namespace: str,
        key: str,
        variables: Mapping[str, Any],
        options: Options,
    ) -> Optional[str]:
        """Search every namespace and candidate for ``key``.

        A render failure stops the search; the result of
        ``options.translation_failed_handler`` is returned instead.

        Returns:
            Rendered string, the failure handler's result, or None.
        """
        context = get_context(variables)
        keys = self.candidate_keys(locale, key, variables, options)
        namespaces = [namespace, *(options.fallback_namespaces or ())]

        for current_namespace in namespaces:
            for current_key in keys:
                frame = ResolutionFrame(current_namespace, current_key, context)
                if frame in self.chain:
                    logger.debug(
                        "nesting_cycle_detected",
                        namespace=current_namespace,
                        key=current_key,
                        context=context,
                    )
                    return None
                try:
                    found = self.find(
                        locale, current_namespace, current_key, variables, options
                    )
                except Exception as e:  # includes errors raised by user formatters
                    handler = options.translation_failed_handler
                    if handler is None:
                        raise
                    return handler(
                        locale, current_namespace, current_key, variables, options, e
                    )
                if found is not None:
                    return found

        logger.debug(
            "translation_missing",
            locale=locale.tag,
            namespace=namespace,
            key=key,
            candidates=keys,
        )
        return None

    def find(
        self,
        locale: Locale,
        namespace: str,
        key: str,
        variables: Mapping[str, Any],
        options: Options,
    ) -> Optional[str]:
        """Retrieve the template for one (namespace, key) pair and render it.

        Returns:
            Rendered string, or None if the store has no such key.

        Raises:
            TranslationRenderError: If interpolation or nesting fails.
        """
        template = self.resource_store.retrieve(locale, namespace, key, options)
        if template is None:
            return None

        frame = ResolutionFrame(namespace, key, get_context(variables))
        chain = self.chain + (frame,)
        max_depth = options.max_nesting_depth

        def translate_nested(
            nested_key: str,
            nested_locale: Locale,
            nested_variables: Mapping[str, Any],
            nested_options: Options,
        ) -> Optional[str]:
            if max_depth is not None and len(chain) >= max_depth:
                raise NestingDepthExceededError(
                    f"Nesting deeper than {max_depth} levels",
                    template,
                    nested_key,
                )
            nested = Translator(
                self.plural_resolver, self.resource_store, namespace, chain
            )
            return nested(nested_key, nested_locale, nested_variables, nested_options)

        result = interpolator.interpolate(
            locale, template, variables, options, skip_nesting=True
        )
        return interpolator.nest(locale, result, translate_nested, variables, options)
