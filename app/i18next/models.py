"""Core data structures for the translation pipeline.

Defines locales, parsed translation keys, the read-only ``Options``
configuration and the per-call ``TranslationRequest``.
"""

from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Mapping,
    Optional,
    Tuple,
    Union,
)

if TYPE_CHECKING:
    from i18next.config import I18nSettings


@dataclass(frozen=True)
class Locale:
    """Locale identifier.

    Opaque to the pipeline except for plural resolution, which needs the
    language part. Frozen so it can key resource and rule tables.

    Attributes:
        language: Language subtag (e.g., "en", "pt").
        region: Optional region subtag (e.g., "US", "BR").
    """

    language: str
    region: Optional[str] = None

    def __str__(self) -> str:
        """Return the BCP 47 tag (e.g., "en-US")."""
        return self.tag

    @property
    def tag(self) -> str:
        if self.region:
            return f"{self.language}-{self.region}"
        return self.language

    @classmethod
    def parse(cls, value: Union["Locale", str]) -> "Locale":
        """Create a Locale from a tag such as "en", "en-US" or "en_US".

        Args:
            value: Locale tag, or an existing Locale (returned as is).

        Returns:
            Locale instance.

        Raises:
            ValueError: If the tag is empty.
        """
        if isinstance(value, Locale):
            return value
        tag = value.strip().replace("_", "-")
        if not tag:
            raise ValueError("Locale tag must not be empty")
        parts = tag.split("-", 1)
        region = parts[1] if len(parts) > 1 and parts[1] else None
        return cls(language=parts[0], region=region)


LocaleLike = Union[Locale, str]

Formatter = Callable[[Any, str, Locale, "Options"], str]
MissingKeyHandler = Callable[[Locale, str, Mapping[str, Any], "Options"], Optional[str]]
TranslationFailedHandler = Callable[
    [Locale, str, str, Mapping[str, Any], "Options", Exception], Optional[str]
]


@dataclass(frozen=True)
class TranslationKey:
    """A raw key split into namespace and key path.

    Attributes:
        namespace: Namespace part, or None when the raw key had no separator.
        key: Key path within the namespace (e.g., "friend", "group.keyB").
        separator: Namespace separator the key was parsed with, used by str().
    """

    namespace: Optional[str]
    key: str
    separator: str = field(default=":", compare=False)

    def __str__(self) -> str:
        if self.namespace is None:
            return self.key
        return f"{self.namespace}{self.separator}{self.key}"

    @classmethod
    def parse(cls, raw_key: str, separator: Optional[str] = ":") -> "TranslationKey":
        """Split a raw key on the first namespace separator.

        Args:
            raw_key: Key as passed by the caller (e.g., "common:friend").
            separator: Namespace separator. Empty or None disables splitting.

        Returns:
            TranslationKey instance.
        """
        if separator and separator in raw_key:
            namespace, _, key = raw_key.partition(separator)
            return cls(namespace=namespace, key=key, separator=separator)
        return cls(namespace=None, key=raw_key)


class _Disabled:
    """Marker that clears an option when merged over another Options."""

    def __repr__(self) -> str:
        return "DISABLED"


DISABLED: Any = _Disabled()


def _freeze(mapping: Optional[Mapping[str, Any]]) -> Optional[Mapping[str, Any]]:
    if mapping is None or mapping is DISABLED:
        return mapping
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class Options:
    """Read-only configuration for a translation call.

    Every field defaults to None ("not set") so a per-call Options can be
    layered over instance Options with merge(). Set a field to DISABLED to
    clear it instead. Use Options.base() for the library defaults.
    """

    namespace_separator: Optional[str] = None
    context_separator: Optional[str] = None
    plural_separator: Optional[str] = None
    plural_suffix: Optional[str] = None
    key_separator: Optional[str] = None

    interpolation_prefix: Optional[str] = None
    interpolation_suffix: Optional[str] = None
    format_separator: Optional[str] = None
    unescape_prefix: Optional[str] = None
    escape_value: Optional[bool] = None

    nesting_prefix: Optional[str] = None
    nesting_suffix: Optional[str] = None
    nesting_option_separator: Optional[str] = None
    max_nesting_depth: Optional[int] = None

    fallback_namespaces: Optional[Tuple[str, ...]] = None
    formats: Optional[Mapping[str, Formatter]] = None
    missing_key_handler: Optional[MissingKeyHandler] = None
    translation_failed_handler: Optional[TranslationFailedHandler] = None

    def __post_init__(self):
        namespaces = self.fallback_namespaces
        if namespaces is not None and namespaces is not DISABLED:
            object.__setattr__(self, "fallback_namespaces", tuple(namespaces))
        object.__setattr__(self, "formats", _freeze(self.formats))

    @classmethod
    def base(cls) -> "Options":
        """Options with every field set to its library default."""
        # Deferred: translator imports this module.
        from i18next.translator import log_translation_failed

        return cls(
            namespace_separator=":",
            context_separator="_",
            plural_separator="_",
            plural_suffix="plural",
            key_separator=".",
            interpolation_prefix="{{",
            interpolation_suffix="}}",
            format_separator=",",
            unescape_prefix="-",
            escape_value=True,
            nesting_prefix="$t(",
            nesting_suffix=")",
            nesting_option_separator=",",
            max_nesting_depth=25,
            fallback_namespaces=(),
            formats={},
            missing_key_handler=None,
            translation_failed_handler=log_translation_failed,
        )

    @classmethod
    def from_settings(cls, settings: "I18nSettings") -> "Options":
        """Build Options from environment-driven settings.

        Args:
            settings: I18nSettings instance.

        Returns:
            Options carrying the configured separators and limits.
        """
        return cls(
            namespace_separator=settings.namespace_separator,
            context_separator=settings.context_separator,
            plural_separator=settings.plural_separator,
            key_separator=settings.key_separator,
            escape_value=settings.escape_value,
            fallback_namespaces=tuple(settings.fallback_namespaces),
            max_nesting_depth=settings.max_nesting_depth,
        )

    def merge(self, other: Optional["Options"]) -> "Options":
        """Return a copy where every field set on ``other`` wins.

        A field set to DISABLED on ``other`` is cleared in the result, e.g.
        ``Options(translation_failed_handler=DISABLED)`` lets render
        failures propagate to the caller.

        Args:
            other: Overlay options, or None.

        Returns:
            New merged Options; self is left untouched.
        """
        if other is None:
            return self
        overrides = {}
        for f in fields(self):
            value = getattr(other, f.name)
            if value is DISABLED:
                overrides[f.name] = None
            elif value is not None:
                overrides[f.name] = value
        if not overrides:
            return self
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update(overrides)
        return Options(**values)


@dataclass(frozen=True)
class ResolutionFrame:
    """A template currently being rendered, used to detect nesting cycles."""

    namespace: str
    key: str
    context: Optional[str]


@dataclass(frozen=True)
class TranslationRequest:
    """A single translation call as seen by the facade.

    Attributes:
        key: Raw key, possibly namespace-qualified.
        locale: Target locale.
        variables: Variable bag, with explicit context/count already applied.
        options: Effective options for the call.
    """

    key: str
    locale: Locale
    variables: Mapping[str, Any] = field(default_factory=dict)
    options: Options = field(default_factory=Options)

    @classmethod
    def build(
        cls,
        key: str,
        locale: LocaleLike,
        variables: Optional[Mapping[str, Any]] = None,
        options: Optional[Options] = None,
        context: Optional[str] = None,
        count: Optional[int] = None,
    ) -> "TranslationRequest":
        """Create a request, applying explicit context/count over variables.

        Args:
            key: Raw key.
            locale: Target locale or tag.
            variables: Caller variables.
            options: Effective options.
            context: Explicit context; overrides variables["context"].
            count: Explicit count; overrides variables["count"].

        Returns:
            TranslationRequest instance.
        """
        bag: Dict[str, Any] = dict(variables or {})
        if context is not None:
            bag["context"] = context
        if count is not None:
            bag["count"] = count
        return cls(
            key=key,
            locale=Locale.parse(locale),
            variables=MappingProxyType(bag),
            options=options or Options.base(),
        )


def get_context(variables: Mapping[str, Any]) -> Optional[str]:
    """Return variables["context"] if it is a non-empty string, else None."""
    value = variables.get("context")
    if isinstance(value, str) and value:
        return value
    return None


def get_count(variables: Mapping[str, Any]) -> Optional[int]:
    """Return variables["count"] if it is an integer, else None.

    Booleans are not counts even though bool subclasses int.
    """
    value = variables.get("count")
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None
