"""Builders for intents, their slots, slot validation rules and custom slot types.

Every builder resolves its translations from the shared LocaleRegistry at
build time, so the same builder tree produces one artifact per locale.
Configuration calls record the first error; later ``with_*`` calls are then
ignored and the error is raised by the next build.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from alexa_skill_commons.errors import ConfigurationError, NotFoundError
from alexa_skill_commons.l10n import LocaleRegistry
from alexa_skill_commons.l10n.keys import KEY_POSTFIX_SAMPLES, KEY_POSTFIX_SYNONYMS, KEY_POSTFIX_VALUES

from .model import (
    DelegationStrategy,
    DialogIntent,
    DialogIntentSlot,
    IntentPrompts,
    ModelIntent,
    ModelSlot,
    ModelType,
    NameValue,
    SlotPrompts,
    SlotValidation,
    TypeValue,
    ValidationType,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationRule:
    validation_type: ValidationType
    prompt: str
    values_key: str = ""


class ValidationRulesBuilder:
    """Collects validation rules for a single slot."""

    def __init__(self, registry: LocaleRegistry | None = None) -> None:
        self._registry = registry if registry is not None else LocaleRegistry()
        self._rules: list[ValidationRule] = []

    @property
    def rules(self) -> list[ValidationRule]:
        return list(self._rules)

    def with_locale_registry(self, registry: LocaleRegistry) -> Self:
        self._registry = registry
        return self

    def with_rule(self, validation_type: ValidationType | str, prompt: str, values_key: str | None = None) -> Self:
        self._rules.append(ValidationRule(ValidationType(validation_type), prompt, values_key or ""))
        return self

    def build_rules(self, locale: str) -> list[SlotValidation]:
        loc = self._registry.resolve(locale)
        validations = []
        for rule in self._rules:
            values = loc.get_all(rule.values_key) if rule.values_key else []
            if rule.validation_type.requires_values and not values:
                raise ConfigurationError(f"validation type requires values ({locale}: {rule.prompt})")
            validations.append(SlotValidation(type=rule.validation_type, prompt=rule.prompt, values=values or None))
        return validations


class SlotBuilder:
    """Builds one slot of an intent.

    Samples are looked up under ``<intent>_<slot>_Samples`` unless rebound
    with ``with_samples``.
    """

    def __init__(self, intent: str, name: str, slot_type: str, registry: LocaleRegistry | None = None) -> None:
        self._registry = registry if registry is not None else LocaleRegistry()
        self._intent = intent
        self._name = name
        self._slot_type = slot_type
        self._samples_key = f"{intent}_{name}{KEY_POSTFIX_SAMPLES}"
        self._confirmation = False
        self._elicitation = False
        self._confirmation_prompt = ""
        self._elicitation_prompt = ""
        self._validation_rules: ValidationRulesBuilder | None = None
        self._error: Exception | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def intent(self) -> str:
        return self._intent

    @property
    def slot_type(self) -> str:
        return self._slot_type

    @property
    def samples_key(self) -> str:
        return self._samples_key

    @property
    def confirmation_required(self) -> bool:
        return self._confirmation

    @property
    def elicitation_required(self) -> bool:
        return self._elicitation

    def with_locale_registry(self, registry: LocaleRegistry) -> Self:
        self._registry = registry
        if self._validation_rules is not None:
            self._validation_rules.with_locale_registry(registry)
        return self

    def with_samples(self, key: str) -> Self:
        if self._error is None:
            self._samples_key = key
        return self

    def with_locale_samples(self, locale: str, samples: Iterable[str]) -> Self:
        if self._error is None:
            try:
                self._registry.resolve(locale).set(self._samples_key, samples)
            except NotFoundError as err:
                self._record(err)
        return self

    def with_confirmation(self, confirmation: bool) -> Self:
        if self._error is None:
            self._confirmation = confirmation
        return self

    def with_confirmation_prompt(self, prompt_id: str) -> Self:
        """Link a confirmation prompt; this also requires confirmation."""
        if self._error is None:
            self._confirmation = True
            self._confirmation_prompt = prompt_id
        return self

    def with_elicitation(self, elicitation: bool) -> Self:
        if self._error is None:
            self._elicitation = elicitation
        return self

    def with_elicitation_prompt(self, prompt_id: str) -> Self:
        """Link an elicitation prompt; this also requires elicitation."""
        if self._error is None:
            self._elicitation = True
            self._elicitation_prompt = prompt_id
        return self

    def with_validation_rule(
        self,
        validation_type: ValidationType | str,
        prompt_id: str,
        values_key: str | None = None,
    ) -> Self:
        if self._error is not None:
            return self
        if self._validation_rules is None:
            self._validation_rules = ValidationRulesBuilder(self._registry)
        try:
            self._validation_rules.with_rule(validation_type, prompt_id, values_key)
        except ValueError:
            self._record(ConfigurationError(f"unsupported validation type: {validation_type}"))
        return self

    def build_intent_slot(self, locale: str) -> ModelSlot:
        if self._error is not None:
            raise self._error
        loc = self._registry.resolve(locale)
        samples = loc.get_all(self._samples_key)
        if self._elicitation and not samples:
            raise ConfigurationError(
                f"slot '{self._intent}.{self._name}' requires elicitation samples ({locale}: {self._samples_key})"
            )
        return ModelSlot(name=self._name, type=self._slot_type, samples=samples or None)

    def build_dialog_slot(self, locale: str) -> DialogIntentSlot:
        if self._error is not None:
            raise self._error
        self._registry.resolve(locale)
        prompts = None
        if self._elicitation_prompt or self._confirmation_prompt:
            prompts = SlotPrompts(
                elicitation=self._elicitation_prompt or None,
                confirmation=self._confirmation_prompt or None,
            )
        validations = self._validation_rules.build_rules(locale) if self._validation_rules is not None else []
        return DialogIntentSlot(
            name=self._name,
            type=self._slot_type,
            confirmation_required=self._confirmation,
            elicitation_required=self._elicitation,
            prompts=prompts,
            validations=validations or None,
        )

    def _record(self, err: Exception) -> None:
        logger.debug("Slot %s.%s recorded error: %s", self._intent, self._name, err)
        self._error = err


class IntentBuilder:
    """Builds an intent for the language model and, when it has slots, the dialog model."""

    def __init__(self, name: str, registry: LocaleRegistry | None = None) -> None:
        self._registry = registry if registry is not None else LocaleRegistry()
        self._name = name
        self._samples_key = f"{name}{KEY_POSTFIX_SAMPLES}"
        # None defers to the model-level strategy
        self._delegation: DelegationStrategy | None = None
        self._confirmation = False
        self._confirmation_prompt = ""
        self._slots: dict[str, SlotBuilder] = {}
        self._error: Exception | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def samples_key(self) -> str:
        return self._samples_key

    @property
    def slots(self) -> dict[str, SlotBuilder]:
        return dict(self._slots)

    @property
    def has_slots(self) -> bool:
        return bool(self._slots)

    @property
    def confirmation_required(self) -> bool:
        return self._confirmation

    @property
    def has_confirmation_prompt(self) -> bool:
        return bool(self._confirmation_prompt)

    def with_locale_registry(self, registry: LocaleRegistry) -> Self:
        self._registry = registry
        for slot in self._slots.values():
            slot.with_locale_registry(registry)
        return self

    def with_samples(self, key: str) -> Self:
        if self._error is None:
            self._samples_key = key
        return self

    def with_locale_samples(self, locale: str, samples: Iterable[str]) -> Self:
        if self._error is None:
            try:
                self._registry.resolve(locale).set(self._samples_key, samples)
            except NotFoundError as err:
                self._record(err)
        return self

    def with_slot(self, name: str, slot_type: str) -> Self:
        """Add a slot; a slot with the same name is replaced."""
        if self._error is None:
            self._slots[name] = SlotBuilder(self._name, name, slot_type, self._registry)
        return self

    def slot(self, name: str) -> SlotBuilder:
        try:
            return self._slots[name]
        except KeyError:
            raise NotFoundError(f"intent '{self._name}' has no slot '{name}'") from None

    def with_delegation(self, strategy: DelegationStrategy | str) -> Self:
        if self._error is None:
            try:
                self._delegation = DelegationStrategy(strategy)
            except ValueError:
                self._record(ConfigurationError(f"unsupported 'delegation': {strategy}"))
        return self

    def with_confirmation(self, confirmation: bool) -> Self:
        if self._error is None:
            self._confirmation = confirmation
        return self

    def with_confirmation_prompt(self, prompt_id: str) -> Self:
        """Link an intent confirmation prompt; this also requires confirmation."""
        if self._error is None:
            self._confirmation = True
            self._confirmation_prompt = prompt_id
        return self

    def build_language_intent(self, locale: str) -> ModelIntent:
        if self._error is not None:
            raise self._error
        loc = self._registry.resolve(locale)
        samples = loc.get_all(self._samples_key)
        slots = [slot.build_intent_slot(locale) for slot in self._slots.values()]
        return ModelIntent(name=self._name, samples=samples or None, slots=slots or None)

    def build_dialog_intent(self, locale: str) -> DialogIntent:
        if self._error is not None:
            raise self._error
        slots = [slot.build_dialog_slot(locale) for slot in self._slots.values()]
        prompts = IntentPrompts(confirmation=self._confirmation_prompt) if self._confirmation_prompt else None
        return DialogIntent(
            name=self._name,
            confirmation_required=self._confirmation,
            delegation_strategy=self._delegation,
            prompts=prompts,
            slots=slots or None,
        )

    def _record(self, err: Exception) -> None:
        logger.debug("Intent %s recorded error: %s", self._name, err)
        self._error = err


class TypeBuilder:
    """Builds a custom slot type from the values stored under ``<type>_Values``.

    Synonyms for a value are read from ``<type>_<value>_Synonyms`` when present.
    """

    def __init__(self, name: str, registry: LocaleRegistry | None = None) -> None:
        self._registry = registry if registry is not None else LocaleRegistry()
        self._name = name
        self._values_key = f"{name}{KEY_POSTFIX_VALUES}"
        self._error: Exception | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def values_key(self) -> str:
        return self._values_key

    def synonyms_key(self, value: str) -> str:
        return f"{self._name}_{value}{KEY_POSTFIX_SYNONYMS}"

    def with_locale_registry(self, registry: LocaleRegistry) -> Self:
        self._registry = registry
        return self

    def with_values(self, key: str) -> Self:
        if self._error is None:
            self._values_key = key
        return self

    def with_locale_values(self, locale: str, values: Iterable[str]) -> Self:
        if self._error is None:
            try:
                self._registry.resolve(locale).set(self._values_key, values)
            except NotFoundError as err:
                self._record(err)
        return self

    def with_locale_synonyms(self, locale: str, value: str, synonyms: Iterable[str]) -> Self:
        if self._error is None:
            try:
                self._registry.resolve(locale).set(self.synonyms_key(value), synonyms)
            except NotFoundError as err:
                self._record(err)
        return self

    def build_locale(self, locale: str) -> ModelType:
        if self._error is not None:
            raise self._error
        loc = self._registry.resolve(locale)
        values = []
        for value in loc.get_all(self._values_key):
            synonyms_key = self.synonyms_key(value)
            synonyms = loc.get_all(synonyms_key) if synonyms_key in loc else None
            values.append(TypeValue(name=NameValue(value=value, synonyms=synonyms)))
        return ModelType(name=self._name, values=values)

    def _record(self, err: Exception) -> None:
        logger.debug("Type %s recorded error: %s", self._name, err)
        self._error = err
