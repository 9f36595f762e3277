"""Enumerations for ctxi18n type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ValueMatch(StrEnum):
    """How a Value element's language relates to the target language.

    StrEnum provides automatic string conversion: str(ValueMatch.FULL) == "full"
    """

    NO_MATCH = "no_match"
    """Language matches neither the full nor the primary target tag"""

    FULL = "full"
    """Language equals the full target tag: lang="en-us" for target en-US"""

    PRIMARY = "primary"
    """Language equals the primary target tag: lang="en" for target en-US"""


class LoadStatus(StrEnum):
    """Outcome of loading a single localization resource.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Resource was read and merged into the localizer"""

    NOT_FOUND = "not_found"
    """Resource does not exist"""

    ERROR = "error"
    """Resource could not be read"""


__all__ = [
    "LoadStatus",
    "ValueMatch",
]
