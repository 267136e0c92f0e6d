"""Resource store interface and an in-memory implementation.

The translation pipeline only reads from the store. Loading resources
from files or the network is the caller's job; the store is handed over
already populated.
"""

from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable

from i18next.logging import get_module_logger
from i18next.models import Locale, LocaleLike, Options

logger = get_module_logger()


@runtime_checkable
class ResourceStore(Protocol):
    """Read-only lookup of raw templates.

    Implementations must be synchronous and deterministic for a fixed
    snapshot of their data.
    """

    def retrieve(
        self, locale: Locale, namespace: str, key: str, options: Options
    ) -> Optional[str]:
        """Return the raw template for a key, or None if there is none.

        Args:
            locale: Target locale.
            namespace: Namespace to search.
            key: Key path, possibly hierarchical ("group.keyB").
            options: Effective options (key_separator).

        Returns:
            Template string or None.
        """
        ...


class InMemoryResourceStore:
    """Resource store backed by nested dicts.

    Data layout: {locale_tag: {namespace: {key: template or nested dict}}}.

    Attributes:
        data: The resource tree.
    """

    def __init__(self, data: Optional[Mapping[str, Mapping[str, Any]]] = None):
        self.data: Dict[str, Dict[str, Any]] = {}
        for locale, namespaces in (data or {}).items():
            for namespace, resources in namespaces.items():
                self.add_resource_bundle(locale, namespace, resources)

    def retrieve(
        self, locale: Locale, namespace: str, key: str, options: Options
    ) -> Optional[str]:
        """Look up a template, trying the full locale tag then its language."""
        for tag in dict.fromkeys((locale.tag, locale.language)):
            resources = self.data.get(tag, {}).get(namespace)
            if resources is None:
                continue
            value = self._walk(resources, key, options.key_separator)
            if value is not None:
                return value
        return None

    def add_resource(
        self, locale: LocaleLike, namespace: str, key: str, value: str
    ) -> None:
        """Set a single flat entry.

        Args:
            locale: Locale or tag.
            namespace: Namespace identifier.
            key: Key, stored as given.
            value: Template string.
        """
        tag = Locale.parse(locale).tag
        self.data.setdefault(tag, {}).setdefault(namespace, {})[key] = value

    def add_resource_bundle(
        self, locale: LocaleLike, namespace: str, resources: Mapping[str, Any]
    ) -> None:
        """Merge a resource tree into a namespace.

        Nested dicts are merged recursively; later entries override earlier ones.
        """
        tag = Locale.parse(locale).tag
        target = self.data.setdefault(tag, {}).setdefault(namespace, {})
        _deep_merge(target, resources)
        logger.debug(
            "added_resource_bundle",
            locale=tag,
            namespace=namespace,
            key_count=len(resources),
        )

    def has_namespace(self, locale: LocaleLike, namespace: str) -> bool:
        return namespace in self.data.get(Locale.parse(locale).tag, {})

    @staticmethod
    def _walk(
        resources: Mapping[str, Any], key: str, separator: Optional[str]
    ) -> Optional[str]:
        value = resources.get(key)
        if isinstance(value, str):
            return value

        if not separator or separator not in key:
            return None

        node: Any = resources
        for part in key.split(separator):
            if not isinstance(node, Mapping) or part not in node:
                return None
            node = node[part]
        return node if isinstance(node, str) else None


def _deep_merge(target: Dict[str, Any], source: Mapping[str, Any]) -> None:
    for key, value in source.items():
        if isinstance(value, Mapping) and isinstance(target.get(key), dict):
            _deep_merge(target[key], value)
        elif isinstance(value, Mapping):
            target[key] = {}
            _deep_merge(target[key], value)
        else:
            target[key] = value
