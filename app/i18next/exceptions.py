"""Custom exceptions for the translation pipeline.

Misses are not exceptions: a key that cannot be found resolves to ``None``
and the facade applies its miss policy. Only render failures raise.
"""

from typing import Optional


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            i18n.t("common:greeting", variables={"name": name})
        except I18nError as e:
            logger.error("translation_error", error=str(e))
    """

    pass


class TranslationRenderError(I18nError):
    """Raised when a stored template cannot be fully rendered.

    Rendering is all-or-nothing: a template is either completely
    substituted or the whole render fails with this error.

    Attributes:
        template: The template being rendered.
        token: The offending token, if known.
    """

    def __init__(
        self, message: str, template: str = "", token: Optional[str] = None
    ):
        super().__init__(message)
        self.template = template
        self.token = token


class InterpolationError(TranslationRenderError):
    """Raised when a ``{{...}}`` token cannot be resolved.

    Example:
        >>> interpolate(locale, "Hi {{name}}", {}, options)
        Traceback (most recent call last):
        ...
        InterpolationError: Could not evaluate variable 'name'
    """

    pass


class NestingError(TranslationRenderError):
    """Raised when a ``$t(...)`` token cannot be resolved."""

    pass


class NestingDepthExceededError(NestingError):
    """Raised when nested translations go deeper than ``max_nesting_depth``."""

    pass
