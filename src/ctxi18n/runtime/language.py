"""Target language handling.

A target language is an arbitrary case-insensitive tag. Tags made of a
primary code and a variant code separated by a hyphen ("en-us") also match
translations written for the primary code alone ("en").

Python 3.13+.
"""

from __future__ import annotations

import locale
import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass

from ctxi18n.constants import DEFAULT_LANGUAGE, LANGUAGE_SEPARATOR
from ctxi18n.enums import ValueMatch

__all__ = [
    "TargetLanguage",
    "get_system_language",
    "normalize_language",
]

logger = logging.getLogger(__name__)


def normalize_language(language: str) -> str:
    """Convert a POSIX locale name to a lower-case language tag.

    Strips the encoding and modifier suffixes and replaces underscores with
    hyphens, e.g. "de_DE.UTF-8" -> "de-de".

    Example:
        >>> normalize_language("pt_BR.UTF-8")
        'pt-br'
        >>> normalize_language("sr_RS@latin")
        'sr-rs'
        >>> normalize_language("en")
        'en'
    """
    language = language.split(".", 1)[0].split("@", 1)[0]
    return language.replace("_", LANGUAGE_SEPARATOR).lower()


@dataclass(frozen=True, slots=True)
class TargetLanguage:
    """Full and primary tags of a target language.

    Attributes:
        full: Lower-cased tag as given, e.g. "en-us"
        primary: Part before the first hyphen, e.g. "en"; None if the tag
                 has no hyphen
    """

    full: str
    primary: str | None = None

    @classmethod
    def parse(cls, language: str) -> TargetLanguage:
        """Derive full and primary tags from a language tag.

        Example:
            >>> TargetLanguage.parse("en-US")
            TargetLanguage(full='en-us', primary='en')
            >>> TargetLanguage.parse("zh-Hans-CN")
            TargetLanguage(full='zh-hans-cn', primary='zh')
            >>> TargetLanguage.parse("Klingon")
            TargetLanguage(full='klingon', primary=None)
        """
        full = language.lower()
        primary, separator, _ = full.partition(LANGUAGE_SEPARATOR)
        return cls(full=full, primary=primary if separator else None)

    def matches(self, language: str) -> ValueMatch:
        """Classify a Value element's language against this target.

        Args:
            language: Value of the element's lang attribute (any case)

        Returns:
            FULL, PRIMARY or NO_MATCH
        """
        language = language.lower()
        if language == self.full:
            return ValueMatch.FULL
        if self.primary is not None and language == self.primary:
            return ValueMatch.PRIMARY
        return ValueMatch.NO_MATCH


_ENVIRONMENT_VARIABLES = ("LC_ALL", "LC_MESSAGES", "LANG")
_PSEUDO_LOCALES = frozenset({"", "C", "POSIX"})


def _locale_candidates() -> Iterator[str | None]:
    try:
        yield locale.getlocale()[0]
    except (ValueError, AttributeError):
        logger.debug("locale.getlocale() failed; consulting environment")
    for name in _ENVIRONMENT_VARIABLES:
        yield os.environ.get(name)


def get_system_language(*, raise_on_failure: bool = False) -> str:
    """Language of the running process.

    The OS locale is consulted first, then LC_ALL, LC_MESSAGES and LANG in
    that order. The C and POSIX pseudo-locales count as unset, and any
    encoding suffix (".UTF-8") is dropped.

    Args:
        raise_on_failure: Raise RuntimeError instead of returning
            DEFAULT_LANGUAGE when nothing usable is set

    Example:
        >>> os.environ["LANG"] = "de_DE.UTF-8"
        >>> get_system_language()
        'de-de'
    """
    for candidate in _locale_candidates():
        if candidate and candidate.split(".", 1)[0] not in _PSEUDO_LOCALES:
            return normalize_language(candidate)

    if raise_on_failure:
        msg = "Could not determine system language: set LC_ALL, LC_MESSAGES or LANG"
        raise RuntimeError(msg)
    return DEFAULT_LANGUAGE
