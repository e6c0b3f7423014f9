"""Internationalization for user-facing cart messages"""

import json
from pathlib import Path
from typing import Any

from rocketshoes.logging import get_logger

logger = get_logger(__name__)

# Supported languages with their names
SUPPORTED_LANGUAGES = {
    "en": "English",
    "pt": "Português",
}

# Default language
DEFAULT_LANGUAGE = "en"

# Locale files ship inside the package
LOCALES_PATH = Path(__file__).parent / "locales"

# Cache for loaded translations
_translations: dict[str, dict[str, Any]] = {}


def _load_translations(lang: str) -> dict[str, Any]:
    """Load translations for a language"""
    if lang in _translations:
        return _translations[lang]

    file_path = LOCALES_PATH / f"{lang}.json"

    if not file_path.exists():
        # Fallback to English
        if lang != DEFAULT_LANGUAGE:
            return _load_translations(DEFAULT_LANGUAGE)
        return {}

    try:
        with open(file_path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load locale {lang}: {e}")
        return {}

    if not isinstance(data, dict):
        return {}
    _translations[lang] = data
    return data


def _lookup(translations: dict[str, Any], key: str) -> Any:
    """Resolve a dotted key (e.g. "cart.not_found")."""
    current_val: Any = translations
    try:
        for k in key.split("."):
            current_val = current_val[k]
    except (KeyError, TypeError):
        return None
    return current_val


def get_text(key: str, lang: str = DEFAULT_LANGUAGE, default: str | None = None) -> str:
    """
    Get translated text by key.

    Args:
        key: Translation key (e.g., "cart.out_of_stock")
        lang: Language code (e.g., "pt", "en")
        default: Default value if key not found (instead of returning key)

    Returns:
        Translated string or key/default if not found
    """
    lang = detect_language(lang)

    text = _lookup(_load_translations(lang), key)

    # Fallback to English if key not found
    if text is None and lang != DEFAULT_LANGUAGE:
        text = _lookup(_load_translations(DEFAULT_LANGUAGE), key)

    # Missing, or a partial key pointing at a section
    if not isinstance(text, str):
        return default if default is not None else key

    return text


def detect_language(language_code: str | None) -> str:
    """
    Normalize a language code ("pt-BR" -> "pt").

    Returns:
        Supported language code, or the default one
    """
    if not language_code:
        return DEFAULT_LANGUAGE

    lang = language_code.split("-")[0].lower()
    return lang if lang in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE
