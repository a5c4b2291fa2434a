"""Helpers turning locale and handler errors into user facing responses."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import NotFoundError
from .l10n import Locale, LocaleError, LocaleRegistry, MissingPlaceholderError, keys

if TYPE_CHECKING:
    from .response import ResponseBuilder

logger = logging.getLogger(__name__)


@dataclass
class ApplicationResponse:
    """Content of a response independent of the wire format.

    Attributes:
        title: Card title
        text: Card text
        speech: Spoken text, SSML when wrapped in <speak> tags
        image: Image URL template with one "%s" receiving "small" or "large"
        reprompt: Use speech as reprompt instead of as output speech
        end: End the session after this response
    """

    title: str = ""
    text: str = ""
    speech: str = ""
    image: str = ""
    reprompt: bool = False
    end: bool = False


def get_locale_with_fallback(registry: LocaleRegistry, locale: str) -> tuple[Locale | None, ApplicationResponse]:
    """Resolve locale, falling back to the registry default.

    Returns the locale and an empty response, or None and an error response
    when not even a default locale exists.
    """
    try:
        return registry.resolve(locale), ApplicationResponse()
    except NotFoundError:
        default = registry.default
        if default is None:
            logger.warning("Locale %s not found and no default locale registered", locale)
            return None, ApplicationResponse(title="Error", text="No locale found!", end=True)
        logger.debug("Locale %s not found, falling back to %s", locale, default.name)
        return default, ApplicationResponse()


class ResponseError(Exception, ABC):
    """An error that knows how to present itself to the user."""

    @abstractmethod
    def response(self, loc: Locale) -> ApplicationResponse: ...


class TextError(ResponseError):
    """Error with a literal message shown on the card."""

    def __init__(self, locale: str, text: str) -> None:
        self.locale = locale
        self.text = text
        super().__init__(text)

    def response(self, loc: Locale) -> ApplicationResponse:
        return ApplicationResponse(
            title=loc.get_any(keys.KEY_ERROR_TITLE),
            text=self.text,
            speech=loc.get_any(keys.KEY_ERROR_SSML),
            end=True,
        )


class TranslationError(ResponseError):
    def __init__(self, locale: str, key: str) -> None:
        self.locale = locale
        self.key = key
        super().__init__(f"locale {locale}: translation for key '{key}' is missing")

    def response(self, loc: Locale) -> ApplicationResponse:
        return ApplicationResponse(
            title=loc.get_any(keys.KEY_ERROR_TRANSLATION_TITLE),
            text=loc.get_any(keys.KEY_ERROR_TRANSLATION_TEXT),
            speech=loc.get_any(keys.KEY_ERROR_TRANSLATION_SSML),
            end=True,
        )


def handle_error(builder: ResponseBuilder, loc: Locale | None, err: Exception) -> bool:
    """Write an error response for err into builder.

    Returns:
        True if a response was written, False if err is not an error this
        helper knows how to present.
    """
    if loc is None:
        response = ApplicationResponse(title="Error", text="Locale not found!", end=True)
    elif isinstance(err, ResponseError):
        response = err.response(loc)
    elif isinstance(err, MissingPlaceholderError):
        response = ApplicationResponse(
            title=loc.get_any(keys.KEY_ERROR_MISSING_PLACEHOLDER_TITLE),
            text=loc.get_any(keys.KEY_ERROR_MISSING_PLACEHOLDER_TEXT, err.placeholder),
            speech=loc.get_any(keys.KEY_ERROR_MISSING_PLACEHOLDER_SSML, err.placeholder),
            end=True,
        )
    elif isinstance(err, LocaleError):
        response = ApplicationResponse(
            title=loc.get_any(keys.KEY_ERROR_NO_TRANSLATION_TITLE),
            text=loc.get_any(keys.KEY_ERROR_NO_TRANSLATION_TEXT, err.key),
            speech=loc.get_any(keys.KEY_ERROR_NO_TRANSLATION_SSML, err.key),
            end=True,
        )
    else:
        return False

    logger.debug("Responding with error: %s", err)
    builder.apply(response)
    return True


def check_for_locale_error(loc: Locale) -> ResponseError | None:
    """Convert the most recent error accumulated on loc into a ResponseError."""
    errors = loc.errors
    if not errors:
        return None
    last = errors[-1]
    if isinstance(last, LocaleError):
        return TranslationError(last.locale, last.key)
    return TextError(loc.name, str(last))
