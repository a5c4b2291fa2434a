"""Named collection of locales with a designated default."""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import TYPE_CHECKING

from alexa_skill_commons.errors import DuplicateNameError, NotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from .locale import Locale

logger = logging.getLogger(__name__)


class LocaleRegistry:
    """Registry of locales keyed by name.

    The first registered locale becomes the default unless a later one is
    registered with ``as_default=True``. Iteration follows registration order.
    Registration and default changes are serialized by an internal lock.
    """

    def __init__(self) -> None:
        self._locales: dict[str, Locale] = {}
        self._default = ""
        self._lock = threading.Lock()

    def register(self, locale: Locale, *, as_default: bool = False) -> None:
        """Add a locale.

        Raises:
            DuplicateNameError: If the locale has no name or the name is taken.
        """
        if not locale.name:
            raise DuplicateNameError("cannot register locale with no name")
        with self._lock:
            if locale.name in self._locales:
                raise DuplicateNameError(f"locale {locale.name} already registered")
            if as_default or not self._default:
                self._default = locale.name
            self._locales[locale.name] = locale
        logger.debug("Registered locale %s (default: %s)", locale.name, self._default)

    def resolve(self, name: str) -> Locale:
        """Return the locale registered under name.

        Raises:
            NotFoundError: If no such locale is registered.
        """
        try:
            return self._locales[name]
        except KeyError:
            raise NotFoundError(f"locale '{name}' not found") from None

    @property
    def default(self) -> Locale | None:
        return self._locales.get(self._default)

    def get_default(self) -> Locale | None:
        return self.default

    def set_default(self, name: str) -> None:
        """Make an already registered locale the default."""
        self.resolve(name)
        with self._lock:
            self._default = name

    @property
    def locales(self) -> Mapping[str, Locale]:
        """Read-only snapshot of the registered locales."""
        with self._lock:
            return MappingProxyType(dict(self._locales))

    def __contains__(self, name: object) -> bool:
        return name in self._locales

    def __len__(self) -> int:
        return len(self._locales)

    def __iter__(self) -> Iterator[Locale]:
        return iter(self.locales.values())
