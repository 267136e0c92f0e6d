"""i18n configuration settings."""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class I18nSettings(BaseSettings):
    """Translation pipeline configuration.

    Environment Variables:
        PREFIX: Environment prefix, empty in production
        LOG_LEVEL: Level of the "i18next" logger (default WARNING; DEBUG shows misses)
        I18N_DEFAULT_LOCALE: Locale used when a call does not pass one
        I18N_NAMESPACE_SEPARATOR: Separator between namespace and key (default ':')
        I18N_CONTEXT_SEPARATOR: Separator before a context suffix (default '_')
        I18N_PLURAL_SEPARATOR: Separator before a plural suffix (default '_')
        I18N_KEY_SEPARATOR: Separator for nested resource keys (default '.')
        I18N_ESCAPE_VALUE: HTML-escape interpolated values (default True)
        I18N_FALLBACK_NAMESPACES: JSON list of namespaces searched after the primary one
        I18N_MAX_NESTING_DEPTH: Maximum depth of $t(...) nesting (default 25)

    Example:
        ```python
        from i18next.config import settings

        if settings.escape_value:
            ...
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "WARNING"

    default_locale: str = Field(
        default="en",
        alias="I18N_DEFAULT_LOCALE",
        description="Locale used when a call does not pass one",
    )
    namespace_separator: str = Field(
        default=":",
        alias="I18N_NAMESPACE_SEPARATOR",
        description="Separator between namespace and key",
    )
    context_separator: str = Field(
        default="_",
        alias="I18N_CONTEXT_SEPARATOR",
        description="Separator inserted before a context suffix",
    )
    plural_separator: str = Field(
        default="_",
        alias="I18N_PLURAL_SEPARATOR",
        description="Separator inserted before a plural suffix",
    )
    key_separator: str = Field(
        default=".",
        alias="I18N_KEY_SEPARATOR",
        description="Separator for hierarchical resource keys",
    )
    escape_value: bool = Field(
        default=True,
        alias="I18N_ESCAPE_VALUE",
        description="HTML-escape interpolated values",
    )
    fallback_namespaces: List[str] = Field(
        default_factory=list,
        alias="I18N_FALLBACK_NAMESPACES",
        description="Namespaces searched, in order, after the primary one",
    )
    max_nesting_depth: int = Field(
        default=25,
        alias="I18N_MAX_NESTING_DEPTH",
        description="Maximum depth of nested $t(...) translations",
        ge=1,
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def is_production(self) -> bool:
        """Check if the library is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)


settings = I18nSettings()
