"""Building blocks for Alexa skill backends: localization, manifest and model builders, request dispatch."""

from .application import (
    ApplicationResponse,
    ResponseError,
    TextError,
    TranslationError,
    check_for_locale_error,
    get_locale_with_fallback,
    handle_error,
)
from .errors import ConfigurationError, DuplicateNameError, NotFoundError, SkillError
from .l10n import Locale, LocaleError, LocaleRegistry, MissingPlaceholderError, NoTranslationError
from .request import ElementNotFoundError, RequestEnvelope, RequestType
from .response import ResponseBuilder, ResponseEnvelope
from .server import ServeMux, Server
from .skill import ModelBuilder, SkillBuilder
from .skill_config import LocaleTranslations, ManifestSettings, load_config, load_translations, register_translations
from .skill_logger import LoggerConfig, SkillLogger

# Single __all__ declaration with all public exports
__all__ = [
    "ApplicationResponse",
    "ConfigurationError",
    "DuplicateNameError",
    "ElementNotFoundError",
    "Locale",
    "LocaleError",
    "LocaleRegistry",
    "LocaleTranslations",
    "LoggerConfig",
    "ManifestSettings",
    "MissingPlaceholderError",
    "ModelBuilder",
    "NoTranslationError",
    "NotFoundError",
    "RequestEnvelope",
    "RequestType",
    "ResponseBuilder",
    "ResponseEnvelope",
    "ResponseError",
    "ServeMux",
    "Server",
    "SkillBuilder",
    "SkillError",
    "SkillLogger",
    "TextError",
    "TranslationError",
    "check_for_locale_error",
    "get_locale_with_fallback",
    "handle_error",
    "load_config",
    "load_translations",
    "register_translations",
]
