"""
Translation of the text the package adds to report tables
"""

from typing import Optional

from summary_tables.constants.theme import DEFAULT_LANGUAGE
from summary_tables.constants.translations import SUPPORTED_LANGUAGES, TRANSLATIONS


def translate_text(text: str, language: Optional[str] = None) -> str:
    """
    Translate ``text`` to ``language``.

    :param text: English text.
    :param language: Language code, e.g. ``"es"``. None means English.
    :return: The translation, or ``text`` itself when English was requested or
        no translation exists.
    """
    if language is None or language == DEFAULT_LANGUAGE:
        return text
    if language not in SUPPORTED_LANGUAGES:
        raise ValueError(
            f"Invalid language: {language!r}. Valid options are {SUPPORTED_LANGUAGES}."
        )
    return TRANSLATIONS.get(text, {}).get(language, text)
