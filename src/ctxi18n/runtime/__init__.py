"""Runtime resolution: context-tree localizer and target language handling.

Exports:
    Localizer: Context-tree localizer with parent fallback
    TargetLanguage: Full and primary tags of a target language
    get_system_language: Detect the process language
    normalize_language: Convert POSIX locale names to language tags

Python 3.13+.
"""

from .language import TargetLanguage, get_system_language, normalize_language
from .localizer import Localizer

__all__ = [
    "Localizer",
    "TargetLanguage",
    "get_system_language",
    "normalize_language",
]
