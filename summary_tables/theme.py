"""
Theme: configuration passed explicitly to the table operations

A theme is a set of named elements (see ``summary_tables.constants.theme``)
that override package defaults, e.g. the formatter used for q-values or
whether informational messages are logged.
"""

from typing import Any, Dict, Optional

from summary_tables.constants.theme import PKGWIDE_LANGUAGE, THEME_ELEMENTS
from summary_tables.constants.translations import SUPPORTED_LANGUAGES


class Theme:
    """
    Immutable mapping of theme element names to values.
    """

    def __init__(self, elements: Optional[Dict[str, Any]] = None):
        """
        :param elements: Mapping of theme element name to value.
        """
        elements = dict(elements or {})
        unknown = sorted(set(elements) - set(THEME_ELEMENTS))
        if unknown:
            raise ValueError(
                f"Invalid theme elements: {unknown}. Valid options are {THEME_ELEMENTS}."
            )
        language = elements.get(PKGWIDE_LANGUAGE)
        if language is not None and language not in SUPPORTED_LANGUAGES:
            raise ValueError(
                f"Invalid language: {language!r}. Valid options are {SUPPORTED_LANGUAGES}."
            )
        self._elements = elements

    def get_theme_element(self, key: str, default: Any = None) -> Any:
        """
        Look up a theme element.

        :param key: Theme element name, e.g. ``"pkgwide-lgl:quiet"``.
        :param default: Value returned when the element is not set.
        :return: The element value or ``default``.
        """
        if key not in THEME_ELEMENTS:
            raise ValueError(f"Invalid theme element: {key!r}. Valid options are {THEME_ELEMENTS}.")
        return self._elements.get(key, default)

    def with_elements(self, elements: Dict[str, Any]) -> "Theme":
        """Return a new theme with ``elements`` added on top of this one."""
        return Theme({**self._elements, **elements})

    def __repr__(self) -> str:
        return f"Theme({self._elements!r})"
