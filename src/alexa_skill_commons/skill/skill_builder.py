"""Skill manifest builder.

Publishing and privacy information is resolved per locale from the shared
LocaleRegistry, using the standard ``SKILL_*`` keys unless rebound.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Self

from alexa_skill_commons.errors import ConfigurationError, NotFoundError, SkillError
from alexa_skill_commons.l10n import Locale, LocaleRegistry
from alexa_skill_commons.l10n.keys import (
    KEY_SKILL_DESCRIPTION,
    KEY_SKILL_EXAMPLE_PHRASES,
    KEY_SKILL_KEYWORDS,
    KEY_SKILL_LARGE_ICON_URI,
    KEY_SKILL_NAME,
    KEY_SKILL_PRIVACY_POLICY_URL,
    KEY_SKILL_SMALL_ICON_URI,
    KEY_SKILL_SUMMARY,
    KEY_SKILL_TERMS_OF_USE_URL,
    KEY_SKILL_TESTING_INSTRUCTIONS,
)
from alexa_skill_commons.skill_config import ManifestSettings

from .manifest import (
    Apis,
    Category,
    Custom,
    Endpoint,
    Interface,
    InterfaceType,
    LocaleDef,
    Manifest,
    Permission,
    Privacy,
    PrivacyFlag,
    PrivacyLocaleDef,
    Publishing,
    Region,
    RegionDef,
    Skill,
)
from .model_builder import ModelBuilder

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .model import Model

logger = logging.getLogger(__name__)


def _enum_value(value: Enum | str) -> str:
    return value.value if isinstance(value, Enum) else value


class SkillLocaleBuilder:
    """Publishing and privacy entries of the manifest for one locale.

    Without a registry the builder creates its own, holding just this locale.
    """

    def __init__(
        self,
        locale: str,
        registry: LocaleRegistry | None = None,
        settings: ManifestSettings | None = None,
    ) -> None:
        self._locale = locale
        self._settings = settings or ManifestSettings()
        self._error: Exception | None = None
        if registry is None:
            registry = LocaleRegistry()
            try:
                registry.register(Locale(locale))
            except ConfigurationError as err:
                self._error = err
        self._registry = registry
        self._name_key = KEY_SKILL_NAME
        self._summary_key = KEY_SKILL_SUMMARY
        self._description_key = KEY_SKILL_DESCRIPTION
        self._examples_key = KEY_SKILL_EXAMPLE_PHRASES
        self._keywords_key = KEY_SKILL_KEYWORDS
        self._small_icon_key = KEY_SKILL_SMALL_ICON_URI
        self._large_icon_key = KEY_SKILL_LARGE_ICON_URI
        self._privacy_url_key = KEY_SKILL_PRIVACY_POLICY_URL
        self._terms_url_key = KEY_SKILL_TERMS_OF_USE_URL

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def error(self) -> Exception | None:
        return self._error

    def with_locale_registry(self, registry: LocaleRegistry) -> Self:
        self._registry = registry
        return self

    def with_name(self, key: str) -> Self:
        return self._rebind("_name_key", key)

    def with_locale_name(self, name: str) -> Self:
        return self._store(self._name_key, [name])

    def with_summary(self, key: str) -> Self:
        return self._rebind("_summary_key", key)

    def with_locale_summary(self, summary: str) -> Self:
        return self._store(self._summary_key, [summary])

    def with_description(self, key: str) -> Self:
        return self._rebind("_description_key", key)

    def with_locale_description(self, description: str) -> Self:
        return self._store(self._description_key, [description])

    def with_examples(self, key: str) -> Self:
        return self._rebind("_examples_key", key)

    def with_locale_examples(self, examples: Iterable[str]) -> Self:
        return self._store(self._examples_key, examples)

    def with_keywords(self, key: str) -> Self:
        return self._rebind("_keywords_key", key)

    def with_locale_keywords(self, keywords: Iterable[str]) -> Self:
        return self._store(self._keywords_key, keywords)

    def with_small_icon(self, key: str) -> Self:
        return self._rebind("_small_icon_key", key)

    def with_locale_small_icon(self, uri: str) -> Self:
        return self._store(self._small_icon_key, [uri])

    def with_large_icon(self, key: str) -> Self:
        return self._rebind("_large_icon_key", key)

    def with_locale_large_icon(self, uri: str) -> Self:
        return self._store(self._large_icon_key, [uri])

    def with_privacy_url(self, key: str) -> Self:
        return self._rebind("_privacy_url_key", key)

    def with_locale_privacy_url(self, url: str) -> Self:
        return self._store(self._privacy_url_key, [url])

    def with_terms_url(self, key: str) -> Self:
        return self._rebind("_terms_url_key", key)

    def with_locale_terms_url(self, url: str) -> Self:
        return self._store(self._terms_url_key, [url])

    def build_publishing_locale(self) -> LocaleDef:
        """Build the ``publishingInformation.locales`` entry.

        Raises:
            ConfigurationError: If name, summary, description or an icon is
                empty, or there are too many example phrases or keywords.
        """
        if self._error is not None:
            raise self._error
        loc = self._registry.resolve(self._locale)
        required = [
            loc.get(key)
            for key in (
                self._name_key,
                self._summary_key,
                self._description_key,
                self._small_icon_key,
                self._large_icon_key,
            )
        ]
        if not all(required):
            raise ConfigurationError(
                "skill requires a name, description, summary, small icon and large icon... "
                f"but for '{self._locale}' at least one was empty"
            )
        name, summary, description, small_icon, large_icon = required
        examples = loc.get_all(self._examples_key)
        if len(examples) > self._settings.max_example_phrases:
            raise ConfigurationError(
                f"only {self._settings.max_example_phrases} examplePhrases are allowed ({self._locale})"
            )
        keywords = loc.get_all(self._keywords_key)
        if len(keywords) > self._settings.max_keywords:
            raise ConfigurationError(f"only {self._settings.max_keywords} keywords are allowed ({self._locale})")
        return LocaleDef(
            name=name,
            summary=summary,
            description=description,
            example_phrases=examples,
            keywords=keywords,
            small_icon_uri=small_icon,
            large_icon_uri=large_icon,
        )

    def build_privacy_locale(self) -> PrivacyLocaleDef:
        """Build the ``privacyAndCompliance.locales`` entry.

        Raises:
            ConfigurationError: If a terms of use URL is set while
                ``ManifestSettings.allow_terms_of_use`` is off.
        """
        if self._error is not None:
            raise self._error
        loc = self._registry.resolve(self._locale)
        privacy_url = loc.get(self._privacy_url_key)
        terms_url = loc.get(self._terms_url_key)
        # AIDEV-NOTE: skill deployment rejects privacyAndCompliance.locales.*.termsOfUse
        if terms_url and not self._settings.allow_terms_of_use:
            raise ConfigurationError(f"'termsOfUse' makes Skill deployment fail! ({self._locale})")
        return PrivacyLocaleDef(privacy_policy_url=privacy_url or None, terms_of_use=terms_url or None)

    def _rebind(self, attribute: str, key: str) -> Self:
        if self._error is None:
            setattr(self, attribute, key)
        return self

    def _store(self, key: str, values: Iterable[str]) -> Self:
        if self._error is not None:
            return self
        try:
            self._registry.resolve(self._locale).set(key, values)
        except NotFoundError as err:
            logger.debug("Skill locale %s recorded error: %s", self._locale, err)
            self._error = err
        return self


class SkillBuilder:
    """Builds the skill manifest and, through an attached ModelBuilder, the interaction models.

    Example:
        >>> skill = (
        ...     SkillBuilder()
        ...     .with_category(Category.NEWS)
        ...     .add_locale("en-US")
        ...     .with_default_locale_testing_instructions("Just ask for the news")
        ... )
        >>> skill.locale("en-US").with_locale_name("Daily News")
    """

    def __init__(self, registry: LocaleRegistry | None = None, settings: ManifestSettings | None = None) -> None:
        self._registry = registry if registry is not None else LocaleRegistry()
        self._settings = settings or ManifestSettings()
        self._category: Category | None = None
        self._countries: list[str] = []
        self._instructions_key = KEY_SKILL_TESTING_INSTRUCTIONS
        self._privacy_flags: dict[PrivacyFlag, bool] = {}
        self._locales: dict[str, SkillLocaleBuilder] = {}
        self._model: ModelBuilder | None = None
        self._endpoint: Endpoint | None = None
        self._regions: dict[Region, RegionDef] = {}
        self._interfaces: list[Interface] = []
        self._permissions: list[Permission] = []
        self._error: Exception | None = None

    @property
    def registry(self) -> LocaleRegistry:
        return self._registry

    @property
    def settings(self) -> ManifestSettings:
        return self._settings

    @property
    def error(self) -> Exception | None:
        return self._error

    def with_locale_registry(self, registry: LocaleRegistry) -> Self:
        self._registry = registry
        for builder in self._locales.values():
            builder.with_locale_registry(registry)
        if self._model is not None:
            self._model.with_locale_registry(registry)
        return self

    def with_category(self, category: Category | str) -> Self:
        if self._error is None:
            try:
                self._category = Category(category)
            except ValueError:
                self._record(ConfigurationError(f"unsupported category: {category}"))
        return self

    def with_countries(self, countries: Iterable[str]) -> Self:
        if self._error is None:
            self._countries = [_enum_value(country) for country in countries]
        return self

    def add_country(self, country: str) -> Self:
        if self._error is None:
            self._countries.append(_enum_value(country))
        return self

    def add_countries(self, countries: Iterable[str]) -> Self:
        if self._error is None:
            self._countries.extend(_enum_value(country) for country in countries)
        return self

    def with_testing_instructions(self, key: str) -> Self:
        """Rebind the translation key of the testing instructions."""
        if self._error is None:
            self._instructions_key = key
        return self

    def with_privacy_flag(self, flag: PrivacyFlag | str, value: bool) -> Self:
        if self._error is None:
            try:
                self._privacy_flags[PrivacyFlag(flag)] = value
            except ValueError:
                self._record(ConfigurationError(f"unsupported privacy flag: {flag}"))
        return self

    def add_locale(self, locale: str, *, as_default: bool = False) -> Self:
        """Register a new locale and create its locale builder."""
        if self._error is not None:
            return self
        try:
            self._registry.register(Locale(locale), as_default=as_default)
        except ConfigurationError as err:
            self._record(err)
            return self
        self._locales[locale] = SkillLocaleBuilder(locale, self._registry, self._settings)
        return self

    def with_default_locale(self, locale: str) -> Self:
        if self._error is None:
            try:
                self._registry.set_default(locale)
            except NotFoundError as err:
                self._record(err)
        return self

    def with_default_locale_testing_instructions(self, instructions: str) -> Self:
        if self._error is not None:
            return self
        default = self._registry.default
        if default is None:
            self._record(NotFoundError("no default locale registered"))
            return self
        default.set(self._instructions_key, [instructions])
        return self

    def with_endpoint(self, uri: str, ssl_certificate_type: str | None = None) -> Self:
        """Set the default custom skill endpoint."""
        if self._error is None:
            self._endpoint = Endpoint(uri=uri, ssl_certificate_type=ssl_certificate_type)
        return self

    def with_region_endpoint(self, region: Region | str, uri: str, ssl_certificate_type: str | None = None) -> Self:
        if self._error is None:
            try:
                self._regions[Region(region)] = RegionDef(
                    endpoint=Endpoint(uri=uri, ssl_certificate_type=ssl_certificate_type)
                )
            except ValueError:
                self._record(ConfigurationError(f"unsupported region: {region}"))
        return self

    def add_interface(self, interface: InterfaceType | str) -> Self:
        if self._error is None:
            try:
                self._interfaces.append(Interface(type=InterfaceType(interface)))
            except ValueError:
                self._record(ConfigurationError(f"unsupported interface: {interface}"))
        return self

    def add_permission(self, name: str) -> Self:
        if self._error is None:
            self._permissions.append(Permission(name=name))
        return self

    def with_model(self) -> Self:
        """Attach a new ModelBuilder bound to this builder's registry."""
        if self._error is None:
            self._model = ModelBuilder(self._registry)
        return self

    def locale(self, name: str) -> SkillLocaleBuilder:
        """Return the locale builder for name.

        Locales registered on the registry directly get a builder on first
        access. For an unknown locale the error is recorded on this builder
        and a detached builder is returned so chained calls do not fail.
        """
        if name in self._locales:
            return self._locales[name]
        if self._error is None and name in self._registry:
            self._locales[name] = SkillLocaleBuilder(name, self._registry, self._settings)
            return self._locales[name]
        if self._error is None:
            self._record(NotFoundError(f"no builder registered for locale '{name}'"))
        return SkillLocaleBuilder(name, settings=self._settings)

    def model(self) -> ModelBuilder:
        """Return the attached ModelBuilder (see ``locale`` for the missing case)."""
        if self._model is not None:
            return self._model
        if self._error is None:
            self._record(NotFoundError("no model builder registered"))
        return ModelBuilder()

    def build(self) -> Skill:
        if self._error is not None:
            raise self._error
        if not len(self._registry):
            raise NotFoundError("no locales registered to build")
        default = self._registry.default
        if default is None:
            raise NotFoundError("no default locale defined")
        if self._category is None:
            raise ConfigurationError("skill category is required")
        instructions = default.get(self._instructions_key)
        if not instructions:
            raise ConfigurationError(f"testing instructions are required ({default.name}: {self._instructions_key})")

        publishing_locales: dict[str, LocaleDef] = {}
        privacy_locales: dict[str, PrivacyLocaleDef] = {}
        for name in self._registry.locales:
            builder = self._locales.get(name) or SkillLocaleBuilder(name, self._registry, self._settings)
            try:
                publishing_locales[name] = builder.build_publishing_locale()
                privacy_locales[name] = builder.build_privacy_locale()
            except SkillError as err:
                logger.debug("Manifest build failed for locale %s: %s", name, err)
                raise

        flags = {flag: self._privacy_flags.get(flag, False) for flag in PrivacyFlag}
        return Skill(
            manifest=Manifest(
                manifest_version=self._settings.manifest_version,
                publishing_information=Publishing(
                    locales=publishing_locales,
                    is_available_worldwide=not self._countries,
                    category=self._category,
                    distribution_countries=list(self._countries) or None,
                    testing_instructions=instructions,
                ),
                apis=self._build_apis(),
                permissions=list(self._permissions),
                privacy_and_compliance=Privacy(
                    is_export_compliant=flags[PrivacyFlag.IS_EXPORT_COMPLIANT],
                    contains_ads=flags[PrivacyFlag.CONTAINS_ADS],
                    allows_purchases=flags[PrivacyFlag.ALLOWS_PURCHASES],
                    uses_personal_info=flags[PrivacyFlag.USES_PERSONAL_INFO],
                    is_child_directed=flags[PrivacyFlag.IS_CHILD_DIRECTED],
                    locales=privacy_locales,
                ),
            )
        )

    def build_models(self) -> dict[str, Model]:
        if self._error is not None:
            raise self._error
        if self._model is None:
            raise NotFoundError("no model to build")
        return self._model.build()

    def _build_apis(self) -> Apis | None:
        if self._endpoint is None and not self._regions and not self._interfaces:
            return None
        return Apis(
            custom=Custom(
                endpoint=self._endpoint,
                regions=dict(self._regions) or None,
                interfaces=list(self._interfaces) or None,
            )
        )

    def _record(self, err: Exception) -> None:
        logger.debug("Skill builder recorded error: %s", err)
        self._error = err
