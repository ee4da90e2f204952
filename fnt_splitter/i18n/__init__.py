"""
Message catalogue for fnt_splitter.

Every error message and every line the command line prints goes through
``tr`` so it can be shown in the user's language.

Usage:
    from ..i18n import tr, set_language

    message = tr("grammar.expected_line", section="common")
    set_language("pt_BR")
"""

import os
from typing import Optional

from .translations import TRANSLATIONS, LANGUAGES

DEFAULT_LANGUAGE = "en"
LANGUAGE_ENV_VAR = "FNT_SPLITTER_LANG"

_current_language = DEFAULT_LANGUAGE


def set_language(lang_code: str) -> bool:
    """
    Set the current language.

    Returns:
        True if the language exists, False if it was left unchanged
    """
    global _current_language
    if lang_code in TRANSLATIONS:
        _current_language = lang_code
        return True
    return False


def get_language() -> str:
    """Get the current language code."""
    return _current_language


def get_available_languages() -> dict:
    """Get a copy of {code: display_name} for each language."""
    return LANGUAGES.copy()


def default_language() -> str:
    """Language requested through FNT_SPLITTER_LANG, or English."""
    requested = os.environ.get(LANGUAGE_ENV_VAR, "")
    return requested if requested in TRANSLATIONS else DEFAULT_LANGUAGE


def _lookup(table: dict, keys: list) -> Optional[str]:
    value = table
    for k in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(k)
    return value if isinstance(value, str) else None


def tr(key: str, **kwargs) -> str:
    """
    Get the translated string for a dotted key, formatted with kwargs.

    Falls back to English, then to the key itself.

    Example:
        tr("cli.split_done", count=12, path="split")
        # Returns "Split 12 glyphs into split"
    """
    keys = key.split(".")
    value = _lookup(TRANSLATIONS[_current_language], keys)
    if value is None:
        value = _lookup(TRANSLATIONS[DEFAULT_LANGUAGE], keys)
    if value is None:
        return key

    if kwargs:
        try:
            return value.format(**kwargs)
        except (KeyError, ValueError):
            return value

    return value
