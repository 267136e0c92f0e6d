"""Plural category resolution.

Maps (locale, count) to the key suffix that selects a plural form. The
rule tables are locale data; the resolver only defines how a rule's
category index turns into a suffix.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional, Sequence, Tuple

from i18next.logging import get_module_logger
from i18next.models import Locale, Options

logger = get_module_logger()


@dataclass(frozen=True)
class PluralRule:
    """Plural rule for a group of languages.

    Attributes:
        numbers: Sample number for each category, in category order.
        plurals: Maps a count to a category index into ``numbers``.
        no_abs: If True, the rule receives the signed count.
    """

    numbers: Tuple[int, ...]
    plurals: Callable[[int], int]
    no_abs: bool = False

    @property
    def is_simple(self) -> bool:
        """True for singular/plural rules that use the "_plural" suffix."""
        return len(self.numbers) == 2 and self.numbers[0] == 1


def _slavic(n: int) -> int:
    if n % 10 == 1 and n % 100 != 11:
        return 0
    if 2 <= n % 10 <= 4 and (n % 100 < 10 or n % 100 >= 20):
        return 1
    return 2


def _polish(n: int) -> int:
    if n == 1:
        return 0
    if 2 <= n % 10 <= 4 and (n % 100 < 10 or n % 100 >= 20):
        return 1
    return 2


def _czech(n: int) -> int:
    if n == 1:
        return 0
    if 2 <= n <= 4:
        return 1
    return 2


def _arabic(n: int) -> int:
    if n in (0, 1, 2):
        return n
    if 3 <= n % 100 <= 10:
        return 3
    if n % 100 >= 11:
        return 4
    return 5


def _lithuanian(n: int) -> int:
    if n % 10 == 1 and n % 100 != 11:
        return 0
    if n % 10 >= 2 and (n % 100 < 10 or n % 100 >= 20):
        return 1
    return 2


def _latvian(n: int) -> int:
    if n % 10 == 1 and n % 100 != 11:
        return 0
    if n != 0:
        return 1
    return 2


_RULE_SETS: Sequence[Tuple[Sequence[str], PluralRule]] = (
    (
        ("ach", "ak", "am", "arn", "br", "fil", "fr", "gun", "ln", "mfe", "mg",
         "mi", "oc", "pt-BR", "tg", "tl", "ti", "tr", "uz", "wa"),
        PluralRule(numbers=(1, 2), plurals=lambda n: int(n > 1)),
    ),
    (
        ("af", "an", "ast", "az", "bg", "bn", "ca", "da", "de", "el", "en",
         "eo", "es", "et", "eu", "fi", "fo", "fur", "fy", "gl", "gu", "ha",
         "hi", "hu", "hy", "ia", "it", "kk", "kn", "ku", "lb", "mai", "ml",
         "mn", "mr", "nah", "nap", "nb", "ne", "nl", "nn", "no", "nso", "pa",
         "pap", "pms", "ps", "pt", "rm", "sco", "se", "si", "so", "son", "sq",
         "sv", "sw", "ta", "te", "tk", "ur", "yo"),
        PluralRule(numbers=(1, 2), plurals=lambda n: int(n != 1)),
    ),
    (
        ("ay", "bo", "cgg", "fa", "ht", "id", "ja", "jbo", "ka", "km", "ko",
         "ky", "lo", "ms", "sah", "su", "th", "tt", "ug", "vi", "wo", "zh"),
        PluralRule(numbers=(1,), plurals=lambda n: 0),
    ),
    (
        ("be", "bs", "cnr", "dz", "hr", "ru", "sr", "uk"),
        PluralRule(numbers=(1, 2, 5), plurals=_slavic),
    ),
    (("ar",), PluralRule(numbers=(0, 1, 2, 3, 11, 100), plurals=_arabic)),
    (("cs", "sk"), PluralRule(numbers=(1, 2, 5), plurals=_czech)),
    (("pl",), PluralRule(numbers=(1, 2, 5), plurals=_polish)),
    (
        ("is",),
        PluralRule(
            numbers=(1, 2), plurals=lambda n: int(n % 10 != 1 or n % 100 == 11)
        ),
    ),
    (("lt",), PluralRule(numbers=(1, 2, 10), plurals=_lithuanian)),
    (("lv",), PluralRule(numbers=(1, 2, 0), plurals=_latvian)),
)


def default_rules() -> Dict[str, PluralRule]:
    """Return the built-in rule table keyed by locale tag or language."""
    return {code: rule for codes, rule in _RULE_SETS for code in codes}


class PluralResolver:
    """Resolves the plural key suffix for a locale and count.

    Suffix protocol:
    - single-category rule: ""
    - simple singular/plural rule: "" or plural_separator + plural_suffix
    - any other rule: plural_separator + category index ("_0", "_1", ...)

    Attributes:
        rules: Rule table keyed by locale tag ("pt-BR") or language ("pt").
    """

    def __init__(self, rules: Optional[Mapping[str, PluralRule]] = None):
        """Initialize PluralResolver.

        Args:
            rules: Rules that extend or override the built-in table.
        """
        self.rules: Dict[str, PluralRule] = default_rules()
        if rules:
            self.rules.update(rules)

    def get_rule(self, locale: Locale) -> Optional[PluralRule]:
        """Find the rule for a locale, trying the full tag then the language."""
        return self.rules.get(locale.tag) or self.rules.get(locale.language)

    def pluralize(self, locale: Locale, count: int, options: Options) -> str:
        """Return the key suffix for ``count`` in ``locale``.

        Args:
            locale: Target locale.
            count: Integer count.
            options: Effective options (plural_separator, plural_suffix).

        Returns:
            Suffix to append to the key, possibly empty.
        """
        rule = self.get_rule(locale)
        if rule is None:
            logger.debug("no_plural_rule", locale=locale.tag)
            return ""
        if len(rule.numbers) == 1:
            return ""

        index = rule.plurals(count if rule.no_abs else abs(count))
        separator = options.plural_separator or ""
        if rule.is_simple:
            if index == 0:
                return ""
            return f"{separator}{options.plural_suffix or 'plural'}"
        return f"{separator}{index}"

    __call__ = pluralize
