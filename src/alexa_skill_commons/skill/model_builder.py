"""Interaction model builder producing one Model per registered locale."""

from __future__ import annotations

import logging
from typing import Self

from alexa_skill_commons.errors import ConfigurationError, NotFoundError
from alexa_skill_commons.l10n import Locale, LocaleRegistry
from alexa_skill_commons.l10n.keys import KEY_SKILL_INVOCATION

from .intent_builder import IntentBuilder, SlotBuilder, TypeBuilder
from .model import DelegationStrategy, Dialog, InteractionModel, LanguageModel, Model, ValidationType
from .prompt_builder import PromptBuilder

logger = logging.getLogger(__name__)


class ModelBuilder:
    """Configures intents, slot types and dialog prompts of a skill.

    Intents, types and prompts share one LocaleRegistry; every child created
    by this builder is bound to it. Prompts can only be attached to slots
    that already exist, and attaching one also links the slot to it.

    Example:
        >>> builder = (
        ...     ModelBuilder()
        ...     .with_locale("en-US", "my skill")
        ...     .with_intent("SayHello")
        ... )
        >>> builder.intent("SayHello").with_locale_samples("en-US", ["say hello"])
        >>> models = builder.build()
    """

    def __init__(self, registry: LocaleRegistry | None = None) -> None:
        self._registry = registry if registry is not None else LocaleRegistry()
        self._invocation_key = KEY_SKILL_INVOCATION
        self._delegation = DelegationStrategy.ALWAYS
        self._intents: dict[str, IntentBuilder] = {}
        self._types: dict[str, TypeBuilder] = {}
        self._prompts: dict[str, PromptBuilder] = {}
        self._error: Exception | None = None

    @property
    def registry(self) -> LocaleRegistry:
        return self._registry

    @property
    def error(self) -> Exception | None:
        return self._error

    @property
    def intents(self) -> dict[str, IntentBuilder]:
        return dict(self._intents)

    @property
    def types(self) -> dict[str, TypeBuilder]:
        return dict(self._types)

    @property
    def prompts(self) -> dict[str, PromptBuilder]:
        return dict(self._prompts)

    def with_locale_registry(self, registry: LocaleRegistry) -> Self:
        """Switch to registry, including every intent, type and prompt already configured."""
        self._registry = registry
        for child in (*self._intents.values(), *self._types.values(), *self._prompts.values()):
            child.with_locale_registry(registry)
        return self

    def with_invocation(self, key: str) -> Self:
        """Rebind the translation key of the invocation name."""
        if self._error is None:
            self._invocation_key = key
        return self

    def with_delegation_strategy(self, strategy: DelegationStrategy | str) -> Self:
        if self._error is None:
            try:
                self._delegation = DelegationStrategy(strategy)
            except ValueError:
                self._record(ConfigurationError(f"unsupported 'delegation': {strategy}"))
        return self

    def with_locale(self, locale: str, invocation: str) -> Self:
        """Register a new locale and set its invocation name."""
        if self._error is not None:
            return self
        loc = Locale(locale)
        try:
            self._registry.register(loc)
        except ConfigurationError as err:
            self._record(err)
            return self
        loc.set(self._invocation_key, [invocation])
        return self

    def with_intent(self, name: str) -> Self:
        """Add an intent; an intent with the same name is replaced."""
        if self._error is None:
            self._intents[name] = IntentBuilder(name, self._registry)
        return self

    def with_type(self, name: str) -> Self:
        """Add a custom slot type; a type with the same name is replaced."""
        if self._error is None:
            self._types[name] = TypeBuilder(name, self._registry)
        return self

    def with_elicitation_slot_prompt(self, intent: str, slot: str) -> Self:
        if self._error is not None:
            return self
        slot_builder = self._find_slot(intent, slot)
        if slot_builder is None:
            self._record(NotFoundError(f"no matching intent slot: {intent}-{slot}"))
            return self
        prompt = PromptBuilder.elicitation(intent, slot, self._registry)
        self._prompts[prompt.id] = prompt
        slot_builder.with_elicitation_prompt(prompt.id)
        return self

    def with_confirmation_slot_prompt(self, intent: str, slot: str) -> Self:
        if self._error is not None:
            return self
        slot_builder = self._find_slot(intent, slot)
        if slot_builder is None:
            self._record(NotFoundError(f"no matching intent slot: {intent}-{slot}"))
            return self
        prompt = PromptBuilder.confirmation(intent, slot, self._registry)
        self._prompts[prompt.id] = prompt
        slot_builder.with_confirmation_prompt(prompt.id)
        return self

    def with_validation_slot_prompt(
        self,
        slot: str,
        validation_type: ValidationType | str,
        values_key: str | None = None,
    ) -> Self:
        """Add a validation prompt and rule to every intent slot named slot.

        The prompt's translation keys use the first intent declaring the slot.
        """
        if self._error is not None:
            return self
        slots = [builder for builder in self._iter_slots() if builder.name == slot]
        if not slots:
            self._record(NotFoundError(f"no matching intent slot: {slot}"))
            return self
        try:
            prompt = PromptBuilder.validation(slot, validation_type, slots[0].intent, self._registry)
        except ValueError:
            self._record(ConfigurationError(f"unsupported validation type: {validation_type}"))
            return self
        self._prompts[prompt.id] = prompt
        for slot_builder in slots:
            slot_builder.with_validation_rule(validation_type, prompt.id, values_key)
        return self

    def with_intent_confirmation_prompt(self, intent: str) -> Self:
        if self._error is not None:
            return self
        intent_builder = self._intents.get(intent)
        if intent_builder is None:
            self._record(NotFoundError(f"no matching intent: {intent}"))
            return self
        prompt = PromptBuilder.intent_confirmation(intent, self._registry)
        self._prompts[prompt.id] = prompt
        intent_builder.with_confirmation_prompt(prompt.id)
        return self

    def intent(self, name: str) -> IntentBuilder:
        try:
            return self._intents[name]
        except KeyError:
            raise NotFoundError(f"intent '{name}' not found") from None

    def slot_type(self, name: str) -> TypeBuilder:
        try:
            return self._types[name]
        except KeyError:
            raise NotFoundError(f"type '{name}' not found") from None

    def elicitation_prompt(self, intent: str, slot: str) -> PromptBuilder:
        return self._prompt(PromptBuilder.elicitation(intent, slot).id)

    def confirmation_prompt(self, intent: str, slot: str) -> PromptBuilder:
        return self._prompt(PromptBuilder.confirmation(intent, slot).id)

    def validation_prompt(self, slot: str, validation_type: ValidationType | str) -> PromptBuilder:
        return self._prompt(PromptBuilder.validation(slot, validation_type).id)

    def intent_confirmation_prompt(self, intent: str) -> PromptBuilder:
        return self._prompt(PromptBuilder.intent_confirmation(intent).id)

    def build(self) -> dict[str, Model]:
        """Build a Model for every registered locale, keyed by locale name."""
        if self._error is not None:
            raise self._error
        return {name: self.build_locale(name) for name in self._registry.locales}

    def build_locale(self, locale: str) -> Model:
        if self._error is not None:
            raise self._error
        loc = self._registry.resolve(locale)
        invocation = loc.get(self._invocation_key)

        types = [builder.build_locale(locale) for builder in self._types.values()]
        prompts = [builder.build_locale(locale) for builder in self._prompts.values()]

        intents = []
        dialog_intents = []
        for builder in self._intents.values():
            intents.append(builder.build_language_intent(locale))
            if builder.has_slots or builder.has_confirmation_prompt:
                dialog_intents.append(builder.build_dialog_intent(locale))

        logger.debug("Built interaction model for %s with %d intents", locale, len(intents))
        return Model(
            interaction_model=InteractionModel(
                language_model=LanguageModel(invocation_name=invocation, intents=intents, types=types or None),
                dialog=Dialog(delegation_strategy=self._delegation, intents=dialog_intents or None),
                prompts=prompts or None,
            )
        )

    def _iter_slots(self):
        for intent in self._intents.values():
            yield from intent.slots.values()

    def _find_slot(self, intent: str, slot: str) -> SlotBuilder | None:
        builder = self._intents.get(intent)
        if builder is None:
            return None
        return builder.slots.get(slot)

    def _prompt(self, prompt_id: str) -> PromptBuilder:
        try:
            return self._prompts[prompt_id]
        except KeyError:
            raise NotFoundError(f"prompt '{prompt_id}' not found") from None

    def _record(self, err: Exception) -> None:
        logger.debug("Model builder recorded error: %s", err)
        self._error = err
