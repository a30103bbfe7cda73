from __future__ import annotations

import logging
from types import ModuleType

from moviebot.messages import el, en

logger = logging.getLogger(__name__)

LANGUAGES: dict[str, ModuleType] = {
    "en": en,
    "el": el,
}

LANGUAGE_NAMES = {
    "en": "English",
    "el": "Greek (Ελληνικά)",
}


def get_messages(language: str | None = None) -> ModuleType:
    """
    Returns the message catalog for `language` (defaults to settings.language).
    Unknown languages fall back to English.
    """
    if language is None:
        from moviebot.core.config import settings
        language = settings.language

    catalog = LANGUAGES.get(language)
    if catalog is None:
        logger.warning("Language %r not found, falling back to English", language)
        return en

    logger.debug("Bot language: %s", LANGUAGE_NAMES.get(language, language))
    return catalog
