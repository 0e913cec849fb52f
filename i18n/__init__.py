"""
DesignOptions - Internationalization (i18n)
Übersetzungstabellen aus JSON-Dateien, Schlüssel = englischer Text

Verwendung:
    from i18n import tr, set_language

    set_language('de')
    label = tr("Show All")  # -> "Alle anzeigen"
"""

import json
import os
from typing import Dict
from loguru import logger

_current_language = 'en'
_translations: Dict[str, Dict[str, str]] = {}

_i18n_dir = os.path.dirname(os.path.abspath(__file__))


def load_language(lang: str) -> bool:
    """Lädt eine Sprachdatei in die Übersetzungstabelle"""
    filepath = os.path.join(_i18n_dir, f'{lang}.json')
    if not os.path.exists(filepath):
        return False

    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            _translations[lang] = json.load(f)
        return True
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"[i18n] Error loading language file {filepath}: {e}")
        return False


def set_language(lang: str) -> bool:
    """
    Setzt die aktuelle Sprache für diese Sitzung.

    Returns:
        False wenn keine Sprachdatei existiert (Sprache bleibt unverändert)
    """
    global _current_language

    if lang not in _translations and not load_language(lang):
        logger.info(f"[i18n] Language '{lang}' not found, keeping '{_current_language}'")
        return False

    _current_language = lang
    logger.debug(f"[i18n] Language: {lang}")
    return True


def tr(text: str, context: str = None) -> str:
    """
    Übersetzt einen Text.

    Args:
        text: Der zu übersetzende Text (in Englisch als Schlüssel)
        context: Optionaler Kontext für mehrdeutige Texte

    Returns:
        Übersetzter Text oder Original wenn keine Übersetzung gefunden
    """
    if _current_language == 'en':
        return text

    trans = _translations.get(_current_language, {})
    if context:
        key = f"{context}::{text}"
        if key in trans:
            return trans[key]

    return trans.get(text, text)


load_language('en')
load_language('de')
