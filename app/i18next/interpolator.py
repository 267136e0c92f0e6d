"""Template rendering: ``{{...}}`` interpolation and ``$t(...)`` nesting.

Both functions are pure. Rendering is all-or-nothing: either every token
in the template is substituted or a TranslationRenderError is raised and
nothing is returned.
"""

import json
import re
from functools import lru_cache
from typing import Any, Callable, List, Mapping, Optional, Pattern

from i18next.exceptions import InterpolationError, NestingError
from i18next.models import Locale, Options

Translate = Callable[[str, Locale, Mapping[str, Any], Options], Optional[str]]

_MISSING = object()

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#x27;",
        "/": "&#x2F;",
    }
)


def escape(text: str) -> str:
    """HTML-escape a substitution value."""
    return text.translate(_HTML_ESCAPES)


@lru_cache(maxsize=32)
def _interpolation_pattern(prefix: str, suffix: str) -> Pattern[str]:
    return re.compile(re.escape(prefix) + r"(.*?)" + re.escape(suffix), re.DOTALL)


def lookup_variable(
    variables: Mapping[str, Any], name: str, separator: Optional[str] = "."
) -> Any:
    """Resolve a variable name, falling back to a dotted path into mappings.

    Returns:
        The value, or a sentinel when it is absent.
    """
    if name in variables:
        return variables[name]
    if not separator or separator not in name:
        return _MISSING

    node: Any = variables
    for part in name.split(separator):
        if not isinstance(node, Mapping) or part not in node:
            return _MISSING
        node = node[part]
    return node


def interpolate(
    locale: Locale,
    template: str,
    variables: Mapping[str, Any],
    options: Options,
    skip_nesting: bool = False,
) -> str:
    """Replace every ``{{name[, format]}}`` token in ``template``.

    A leading unescape prefix (``{{- name}}``) disables HTML escaping for
    that token regardless of ``options.escape_value``. With
    ``skip_nesting``, text inside ``$t(...)`` tokens is left for nest(),
    which interpolates their inline options itself.

    Args:
        locale: Locale passed through to formatters.
        template: Raw template.
        variables: Variable bag.
        options: Effective options.
        skip_nesting: Leave nesting tokens untouched.

    Returns:
        Fully interpolated string.

    Raises:
        InterpolationError: If a token is empty, names a missing variable
            or an unregistered format, or its formatter returns None.
    """
    pattern = _interpolation_pattern(
        options.interpolation_prefix or "{{", options.interpolation_suffix or "}}"
    )

    def _replace(match: "re.Match[str]") -> str:
        return _render_token(match, template, locale, variables, options)

    if not skip_nesting:
        return pattern.sub(_replace, template)

    parts: List[str] = []
    position = 0
    for start, end, _ in _scan_nesting_tokens(
        template, options.nesting_prefix or "$t(", options.nesting_suffix or ")"
    ):
        parts.append(pattern.sub(_replace, template[position:start]))
        parts.append(template[start:end])
        position = end
    parts.append(pattern.sub(_replace, template[position:]))
    return "".join(parts)


def _render_token(
    match: "re.Match[str]",
    template: str,
    locale: Locale,
    variables: Mapping[str, Any],
    options: Options,
) -> str:
    token = match.group(0)
    content = match.group(1).strip()

    raw = False
    unescape_prefix = options.unescape_prefix
    if unescape_prefix and content.startswith(unescape_prefix):
        raw = True
        content = content[len(unescape_prefix) :].strip()

    name, has_format, format_name = content.partition(options.format_separator or ",")
    name = name.strip()
    format_name = format_name.strip()
    if not name:
        raise InterpolationError("Empty interpolation token", template, token)

    value = lookup_variable(variables, name, options.key_separator)
    if value is _MISSING or value is None:
        raise InterpolationError(
            f"Could not evaluate variable '{name}'", template, token
        )

    if has_format and format_name:
        formatter = (options.formats or {}).get(format_name)
        if formatter is None:
            raise InterpolationError(
                f"Unknown format '{format_name}'", template, token
            )
        text = formatter(value, format_name, locale, options)
        if text is None:
            raise InterpolationError(
                f"Format '{format_name}' returned no value", template, token
            )
        text = str(text)
    else:
        text = str(value)

    if options.escape_value is not False and not raw:
        text = escape(text)
    return text


def nest(
    locale: Locale,
    template: str,
    translate: Translate,
    variables: Mapping[str, Any],
    options: Options,
) -> str:
    """Replace every ``$t(key[, {json}])`` token with a nested translation.

    Inline JSON options are interpolated (unescaped) against ``variables``
    first, then merged over them for the nested call.

    Args:
        locale: Locale for nested calls.
        template: Template, usually already interpolated.
        translate: Resolver for nested keys; returns None when unresolved.
        variables: Outer variable bag.
        options: Effective options.

    Returns:
        String with every nesting token substituted.

    Raises:
        NestingError: If a nested key resolves to None or its inline
            options are not a JSON object.
    """
    prefix = options.nesting_prefix or "$t("
    suffix = options.nesting_suffix or ")"
    separator = options.nesting_option_separator or ","

    parts: List[str] = []
    position = 0
    for start, end, content in _scan_nesting_tokens(template, prefix, suffix):
        token = template[start:end]
        key, _, raw_options = content.partition(separator)
        key = key.strip()
        if not key:
            raise NestingError("Empty nesting token", template, token)

        nested_variables = _nested_variables(
            locale, raw_options, variables, options, template, token
        )
        value = translate(key, locale, nested_variables, options)
        if value is None:
            raise NestingError(
                f"Nested translation '{key}' not found", template, token
            )

        parts.append(template[position:start])
        parts.append(value)
        position = end

    if not parts:
        return template
    parts.append(template[position:])
    return "".join(parts)


def _nested_variables(
    locale: Locale,
    raw_options: str,
    variables: Mapping[str, Any],
    options: Options,
    template: str,
    token: str,
) -> Mapping[str, Any]:
    if not raw_options.strip():
        return variables

    rendered = interpolate(
        locale, raw_options, variables, options.merge(Options(escape_value=False))
    )
    try:
        inline = json.loads(rendered)
    except json.JSONDecodeError as e:
        raise NestingError(
            f"Invalid nesting options: {e.msg}", template, token
        ) from e
    if not isinstance(inline, dict):
        raise NestingError("Nesting options must be a JSON object", template, token)

    merged = dict(variables)
    merged.update(inline)
    return merged


def _scan_nesting_tokens(template: str, prefix: str, suffix: str):
    """Yield (start, end, content) for each complete nesting token."""
    position = 0
    while True:
        start = template.find(prefix, position)
        if start == -1:
            return
        content_start = start + len(prefix)
        close = _find_closing(template, content_start, suffix)
        if close == -1:
            return
        yield start, close + len(suffix), template[content_start:close]
        position = close + len(suffix)


def _find_closing(template: str, index: int, suffix: str) -> int:
    # Brackets and quoted strings in inline JSON may contain the suffix.
    depth = 0
    in_string = False
    escaped = False
    while index < len(template):
        char = template[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char in "{[":
            depth += 1
        elif char in "}]" and depth > 0:
            depth -= 1
        elif depth == 0 and template.startswith(suffix, index):
            return index
        index += 1
    return -1
