"""Localization: translation snippets per locale and the registry holding them."""

from . import keys
from .errors import LocaleError, MissingPlaceholderError, NoTranslationError
from .locale import Locale, substitute
from .registry import LocaleRegistry

__all__ = [
    "Locale",
    "LocaleError",
    "LocaleRegistry",
    "MissingPlaceholderError",
    "NoTranslationError",
    "keys",
    "substitute",
]
