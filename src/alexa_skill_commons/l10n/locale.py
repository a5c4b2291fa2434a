"""Per-language translation snippets with lookup, substitution and error accumulation."""

from __future__ import annotations

import logging
import random
import re
import threading
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from .errors import LocaleError, MissingPlaceholderError, NoTranslationError

logger = logging.getLogger(__name__)

# AIDEV-NOTE: printf-style directives only; "{Slot}" sample syntax must pass through untouched
_PLACEHOLDER = re.compile(r"%(?P<spec>[-+#0]*\d*(?:\.\d+)?[sdifFeEgGxXocrv]|%)")

# Seeded once from system entropy at import; tests inject their own generator.
_DEFAULT_RANDOM = random.Random()


def substitute(text: str, args: Sequence[Any]) -> tuple[str, str]:
    """Replace printf-style placeholders in text with positional arguments.

    Args:
        text: Translation text, e.g. "Hello %s, you have %d new messages"
        args: Positional substitution arguments

    Returns:
        Tuple of the substituted text and the first placeholder that had no
        argument left ("" when every placeholder was satisfied). Unsatisfied
        placeholders stay verbatim in the text, surplus arguments are ignored.
    """
    remaining = iter(args)
    missing = ""

    def replace(match: re.Match[str]) -> str:
        nonlocal missing
        spec = match.group("spec")
        if spec == "%":
            return "%"
        try:
            arg = next(remaining)
        except StopIteration:
            missing = missing or match.group(0)
            return match.group(0)
        if spec.endswith("v"):
            spec = spec[:-1] + "s"
        try:
            return f"%{spec}" % (arg,)
        except (TypeError, ValueError):
            return str(arg)

    return _PLACEHOLDER.sub(replace, text), missing


class Locale:
    """Translations for one language, e.g. "en-US".

    Every lookup returns a usable value. Problems (missing keys, placeholders
    without arguments) are appended to ``errors`` instead of being raised so
    callers can inspect them after a batch of lookups.

    Example:
        >>> loc = Locale("en-US", {"Greeting": ["Hello %s"]})
        >>> loc.get("Greeting", "Alexa")
        'Hello Alexa'
    """

    def __init__(
        self,
        name: str,
        snippets: Mapping[str, Iterable[str]] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._name = name
        self._snippets: dict[str, list[str]] = {key: list(values) for key, values in (snippets or {}).items()}
        self._errors: list[LocaleError] = []
        self._rng = rng or _DEFAULT_RANDOM
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def snippets(self) -> dict[str, list[str]]:
        """Snapshot of all key to translations entries."""
        with self._lock:
            return {key: list(values) for key, values in self._snippets.items()}

    @property
    def errors(self) -> list[LocaleError]:
        """Errors accumulated since creation or the last reset, oldest first."""
        with self._lock:
            return list(self._errors)

    def reset_errors(self) -> None:
        with self._lock:
            self._errors.clear()

    def set(self, key: str, values: Iterable[str]) -> None:
        """Replace the translations for key."""
        with self._lock:
            self._snippets[key] = list(values)

    def get(self, key: str, *args: Any) -> str:
        """Return the first translation for key with args substituted."""
        texts = self._lookup(key)
        if not texts:
            return ""
        return self._render(key, [texts[0]], args)[0]

    def get_any(self, key: str, *args: Any) -> str:
        """Return a uniformly chosen translation for key with args substituted."""
        texts = self._lookup(key)
        if not texts:
            return ""
        text = texts[0] if len(texts) == 1 else self._rng.choice(texts)
        return self._render(key, [text], args)[0]

    def get_all(self, key: str, *args: Any) -> list[str]:
        """Return every translation for key, in stored order, with args substituted."""
        texts = self._lookup(key)
        if not texts:
            return []
        return self._render(key, texts, args)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return bool(self._snippets.get(key)) if isinstance(key, str) else False

    def __repr__(self) -> str:
        return f"Locale(name={self._name!r}, keys={len(self._snippets)})"

    def _lookup(self, key: str) -> list[str]:
        with self._lock:
            texts = list(self._snippets.get(key) or [])
            if not texts:
                self._errors.append(NoTranslationError(self._name, key))
        if not texts:
            logger.debug("No translation for key '%s' in locale %s", key, self._name)
        return texts

    def _render(self, key: str, texts: list[str], args: Sequence[Any]) -> list[str]:
        rendered = []
        for text in texts:
            result, missing = substitute(text, args)
            if missing:
                with self._lock:
                    self._errors.append(MissingPlaceholderError(self._name, key, missing))
            rendered.append(result)
        return rendered
