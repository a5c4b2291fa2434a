"""Builders for dialog prompts and their localized variations."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Self

from alexa_skill_commons.errors import ConfigurationError, NotFoundError
from alexa_skill_commons.l10n import LocaleRegistry
from alexa_skill_commons.l10n.keys import KEY_POSTFIX_SSML, KEY_POSTFIX_TEXT

from .model import ModelPrompt, PromptVariation, ValidationType, VariationType

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


class PromptKind(str, Enum):
    ELICIT = "Elicit"
    CONFIRM = "Confirm"
    VALIDATE = "Validate"


def variation_key(intent: str, slot: str, kind: PromptKind, variation_type: VariationType) -> str:
    """Translation key for a prompt variation: ``<intent>_<slot>_<Kind>_<Text|SSML>``.

    Empty intent or slot parts are skipped, so intent level prompts use
    ``<intent>_<Kind>_<Text|SSML>``.
    """
    postfix = KEY_POSTFIX_TEXT if VariationType(variation_type) is VariationType.PLAIN_TEXT else KEY_POSTFIX_SSML
    parts = [part for part in (intent, slot) if part]
    return "_".join([*parts, PromptKind(kind).value]) + postfix


class VariationsBuilder:
    """Maps variation types (PlainText, SSML) to translation keys for one prompt."""

    def __init__(
        self,
        intent: str,
        slot: str,
        kind: PromptKind,
        variation_type: VariationType,
        registry: LocaleRegistry | None = None,
    ) -> None:
        self._intent = intent
        self._slot = slot
        self._kind = PromptKind(kind)
        self._registry = registry if registry is not None else LocaleRegistry()
        self._keys: dict[VariationType, str] = {}
        self._error: Exception | None = None
        self.with_variation(variation_type)

    @property
    def keys(self) -> dict[VariationType, str]:
        return dict(self._keys)

    def with_locale_registry(self, registry: LocaleRegistry) -> Self:
        self._registry = registry
        return self

    def with_variation(self, variation_type: VariationType) -> Self:
        """Add a variation type using its default translation key."""
        if self._error is None:
            vt = VariationType(variation_type)
            self._keys[vt] = variation_key(self._intent, self._slot, self._kind, vt)
        return self

    def with_type_value(self, variation_type: VariationType, key: str) -> Self:
        """Use key as translation key for the variation type."""
        if self._error is None:
            self._keys[VariationType(variation_type)] = key
        return self

    def with_locale_type_value(self, locale: str, variation_type: VariationType, values: Iterable[str]) -> Self:
        """Store values in the locale under the variation type's key."""
        if self._error is not None:
            return self
        try:
            loc = self._registry.resolve(locale)
            key = self._keys[VariationType(variation_type)]
        except NotFoundError as err:
            self._record(err)
            return self
        except KeyError:
            self._record(ConfigurationError(f"no '{variation_type}' variation configured ({self._describe()})"))
            return self
        loc.set(key, values)
        return self

    def build_locale(self, locale: str) -> list[PromptVariation]:
        if self._error is not None:
            raise self._error
        loc = self._registry.resolve(locale)
        if not self._keys:
            raise ConfigurationError(f"prompt requires variations ({locale}: {self._describe()})")
        variations = [
            PromptVariation(type=variation_type, value=value)
            for variation_type, key in self._keys.items()
            for value in loc.get_all(key)
        ]
        if not variations:
            raise ConfigurationError(f"prompt requires variations with values ({locale}: {self._describe()})")
        return variations

    def _describe(self) -> str:
        return f"{self._intent}_{self._slot}_{self._kind.value}"

    def _record(self, err: Exception) -> None:
        logger.debug("Variations %s recorded error: %s", self._describe(), err)
        self._error = err


class PromptBuilder:
    """Builds one dialog prompt from per-type variation builders.

    Use the ``elicitation``, ``confirmation``, ``validation`` and
    ``intent_confirmation`` constructors; they derive the prompt id the
    dialog model refers to.
    """

    def __init__(
        self,
        kind: PromptKind,
        prompt_id: str,
        intent: str = "",
        slot: str = "",
        registry: LocaleRegistry | None = None,
    ) -> None:
        self._kind = PromptKind(kind)
        self._id = prompt_id
        self._intent = intent
        self._slot = slot
        self._registry = registry if registry is not None else LocaleRegistry()
        self._variations: dict[VariationType, VariationsBuilder] = {}

    @classmethod
    def elicitation(cls, intent: str, slot: str, registry: LocaleRegistry | None = None) -> PromptBuilder:
        return cls(PromptKind.ELICIT, f"Elicit.Intent-{intent}.IntentSlot-{slot}", intent, slot, registry)

    @classmethod
    def confirmation(cls, intent: str, slot: str, registry: LocaleRegistry | None = None) -> PromptBuilder:
        return cls(PromptKind.CONFIRM, f"Confirm.Intent-{intent}.IntentSlot-{slot}", intent, slot, registry)

    @classmethod
    def validation(
        cls,
        slot: str,
        validation_type: ValidationType | str,
        intent: str = "",
        registry: LocaleRegistry | None = None,
    ) -> PromptBuilder:
        vt = ValidationType(validation_type)
        return cls(PromptKind.VALIDATE, f"Validate.Slot-{slot}.Type-{vt.value}", intent, slot, registry)

    @classmethod
    def intent_confirmation(cls, intent: str, registry: LocaleRegistry | None = None) -> PromptBuilder:
        return cls(PromptKind.CONFIRM, f"Confirm.Intent-{intent}", intent, "", registry)

    @property
    def id(self) -> str:
        return self._id

    @property
    def kind(self) -> PromptKind:
        return self._kind

    def with_locale_registry(self, registry: LocaleRegistry) -> Self:
        self._registry = registry
        for variations in self._variations.values():
            variations.with_locale_registry(registry)
        return self

    def with_variation(self, variation_type: VariationType) -> Self:
        """Add (or replace) the variations builder for variation_type."""
        vt = VariationType(variation_type)
        self._variations[vt] = VariationsBuilder(self._intent, self._slot, self._kind, vt, self._registry)
        return self

    def variation(self, variation_type: VariationType) -> VariationsBuilder:
        try:
            return self._variations[VariationType(variation_type)]
        except KeyError:
            raise NotFoundError(f"prompt '{self._id}' has no '{variation_type}' variation") from None

    def build_locale(self, locale: str) -> ModelPrompt:
        if not self._variations:
            raise ConfigurationError(f"prompt '{self._id}' requires variations ({locale})")
        self._registry.resolve(locale)
        variations: list[PromptVariation] = []
        for builder in self._variations.values():
            variations.extend(builder.build_locale(locale))
        return ModelPrompt(id=self._id, variations=variations)
