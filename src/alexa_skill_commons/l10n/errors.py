"""Translation errors accumulated on a Locale.

These are never raised by the locale itself. Lookups always return a usable
value and append one of these to the locale's error list, so a single request
can collect every missing translation before responding.
"""

from __future__ import annotations


class LocaleError(Exception):
    """A translation problem for one key of one locale."""

    def __init__(self, locale: str, key: str, placeholder: str = "") -> None:
        self.locale = locale
        self.key = key
        self.placeholder = placeholder
        super().__init__(self.describe())

    def describe(self) -> str:
        return f"locale {self.locale}: translation error for key '{self.key}'"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocaleError):
            return NotImplemented
        return (type(self), self.locale, self.key, self.placeholder) == (
            type(other),
            other.locale,
            other.key,
            other.placeholder,
        )

    def __hash__(self) -> int:
        return hash((type(self), self.locale, self.key, self.placeholder))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(locale={self.locale!r}, key={self.key!r}, placeholder={self.placeholder!r})"


class NoTranslationError(LocaleError):
    """The key is unknown or maps to an empty list."""

    def describe(self) -> str:
        return f"locale {self.locale}: no translation for key '{self.key}'"


class MissingPlaceholderError(LocaleError):
    """A translation contains a placeholder no argument was supplied for."""

    def describe(self) -> str:
        if self.placeholder:
            return f"locale {self.locale}: key '{self.key}' is missing placeholder '{self.placeholder}' in translation"
        return f"locale {self.locale}: key '{self.key}' is missing a placeholder in translation"
